from __future__ import annotations

from datetime import date
import argparse

import luach
from luach.core.types import NISSAN

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Rosh Hashana / Pesach dates, year lengths and kviah for a range of Hebrew years."
    )
    p.add_argument("--from-year", type=int, default=5780)
    p.add_argument("--to-year", type=int, default=5800)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format in table columns (default: iso).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=10,
        help="After the table, list the Rosh Hashanas that fall in this Gregorian month (default: 10=October).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Rosh Hashana", "Day", "Pesach", "Len", "Kviah"]
    colw = [5, 12, 3, 10, 3, 9]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[date, int]] = []

    for Y in range(Y0, Y1 + 1):
        info = luach.year_info(Y)
        rh = info["rosh_hashana"]
        # Pesach of the year that this Rosh Hashana opens
        pesach = luach.to_gregorian(Y, NISSAN, 15)
        row = [
            str(Y),
            fmt(rh),
            WEEKDAYS[info["rosh_hashana_day_of_week"] - 1],
            fmt(pesach),
            str(info["length"]),
            info["kviah"],
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if rh.month == args.list_month:
            hits.append((rh, Y))

    print(f"\nRosh Hashana in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0

    for d, Y in sorted(hits):
        print(f"{d.isoformat()}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
