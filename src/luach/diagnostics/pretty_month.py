from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import luach
from luach.core.types import NISSAN, ELUL, TISHREI

_MONTH_ABBR = ("Nis", "Iya", "Siv", "Tam", "Av", "Elu", "Tis", "Che", "Kis", "Tev", "She", "Ada", "Ad2")


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sh"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def build_weeks(first: date, labels: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.weekday() + 1) % 7  # Sunday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in labels:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def hebrew_month_calendar(Y: int, M: int, *, in_israel: bool = False) -> None:
    b = luach.month_bounds(Y, M)
    labels = []
    for row in luach.days_in_month(Y, M, in_israel=in_israel):
        d = row["date"]
        mark = "*" if row["yom_tov"] is not None else ""
        labels.append((f"{row['day']:2d}{mark}", f"{d.month:02d}-{d.day:02d}"))

    title = f"Hebrew month  Y={Y}  M={M}   ({b['first_date']} .. {b['last_date']})"
    print_grid(title, build_weeks(b["first_date"], labels))


def gregorian_month_calendar(gy: int, gm: int, *, in_israel: bool = False) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    labels = []
    d = first
    while d <= last:
        info = luach.day_info(d, in_israel=in_israel)
        labels.append((f"{d.day:2d}", f"{info.jewish_day:2d}{_MONTH_ABBR[info.jewish_month - 1]}"))
        d += timedelta(days=1)

    print_grid(f"Gregorian month  {gy}-{gm:02d}", build_weeks(first, labels))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Hebrew-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--hebrew", nargs=2, type=int, metavar=("Y", "M"),
                   help="Hebrew month to print: Y M, months counted from Nissan (e.g. 5786 7)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 9)")
    p.add_argument("--israel", action="store_true", help="Mark yom tov by the Israeli schedule")
    args = p.parse_args(argv)

    if not args.hebrew and not args.greg:
        # Elul 5785 into Tishrei 5786
        hebrew_month_calendar(5785, ELUL, in_israel=args.israel)
        hebrew_month_calendar(5786, TISHREI, in_israel=args.israel)
        gregorian_month_calendar(2025, 9, in_israel=args.israel)
        return 0

    if args.hebrew:
        Y, M = args.hebrew
        if M < NISSAN:
            raise SystemExit("Hebrew months are numbered from 1 (Nissan)")
        hebrew_month_calendar(Y, M, in_israel=args.israel)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm, in_israel=args.israel)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
