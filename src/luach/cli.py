from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect

from luach.core.errors import LuachError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_DIAG_TOOLS = {
    "new-years": "luach.diagnostics.new_years_table",
    "year-types": "luach.diagnostics.year_types",
    "rh-scatter": "luach.diagnostics.rosh_hashana_scatter",
    "round-trip": "luach.diagnostics.round_trip",
    "pretty-month": "luach.diagnostics.pretty_month",
}


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach day", description="Gregorian -> Hebrew day and occasions")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--israel", action="store_true", help="Israeli yom tov schedule")
    p.add_argument("--modern", action="store_true", help="Include modern Israeli holidays")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        info = luach.day_info(
            _parse_ymd(args.date),
            in_israel=args.israel,
            use_modern_holidays=args.modern,
            attributes=tuple(args.attr),
        )
    except KeyError as e:
        # unknown --attr name
        raise SystemExit(f"luach: {e.args[0]}") from e
    print(info)
    return 0


def cmd_hebrew(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach hebrew", description="Hebrew date -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1=Nissan .. 12=Adar, 13=Adar II")
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    print(luach.to_gregorian(args.year, args.month, args.day).isoformat())
    return 0


def cmd_year(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach year", description="Summary of a Hebrew year")
    p.add_argument("year", type=int)
    p.add_argument("--israel", action="store_true")
    args = p.parse_args(argv)

    for k, v in luach.year_info(args.year, in_israel=args.israel).items():
        print(f"{k:26s} {v}")
    return 0


def cmd_molad(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach molad", description="Molad of a Hebrew month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1=Nissan .. 12=Adar, 13=Adar II")
    args = p.parse_args(argv)

    m = luach.molad(args.year, args.month)
    print(f"molad {args.year}/{args.month}: {m['date'].isoformat()} "
          f"{m['hours']:02d}:{m['minutes']:02d} and {m['parts']} chalakim")
    print(f"  instant (Jerusalem standard time): {m['instant'].isoformat()}")
    return 0


def cmd_daf(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach daf", description="Daf Yomi Bavli and Yerushalmi for a date")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    res = luach.daf_yomi(_parse_ymd(args.date))
    bavli, yerushalmi = res["bavli"], res["yerushalmi"]
    print("Bavli:      " + (f"{bavli.masechta_transliterated()} {bavli.daf}" if bavli else "-"))
    print("Yerushalmi: " + (f"{yerushalmi.yerushalmi_masechta_transliterated()} {yerushalmi.daf}" if yerushalmi else "-"))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `luach YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        try:
            return cmd_day(argv)
        except LuachError as e:
            raise SystemExit(f"luach: {e}") from e

    p = argparse.ArgumentParser(prog="luach", description="Hebrew calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Hebrew day and occasions", add_help=False)
    sub.add_parser("hebrew", help="Hebrew -> Gregorian date", add_help=False)
    sub.add_parser("year", help="Summary of a Hebrew year", add_help=False)
    sub.add_parser("molad", help="Molad of a Hebrew month", add_help=False)
    sub.add_parser("daf", help="Daf Yomi Bavli and Yerushalmi", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=sorted(_DIAG_TOOLS), help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "day": cmd_day,
        "hebrew": cmd_hebrew,
        "year": cmd_year,
        "molad": cmd_molad,
        "daf": cmd_daf,
    }
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd == "diag":
            return _run_module_main(_DIAG_TOOLS[args.tool], rest)
    except LuachError as e:
        raise SystemExit(f"luach: {e}") from e

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
