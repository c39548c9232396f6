"""
luach.diagnostics.year_types
----------------------------
Frequency tables over a range of Hebrew years: year length, weekday of Rosh
Hashana and parsha year type. Only fourteen (length, weekday) combinations
can occur; anything else indicates broken arithmetic.
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from luach.engines import arithmetic as ar
from luach.engines.calendar import JewishCalendar
from luach.engines.parsha import year_type
from luach.core.types import TISHREI


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "luach[diagnostics]"') from e


def build_arrays(np, start_year: int, end_year: int, *, in_israel: bool = False):
    years = np.arange(start_year, end_year + 1, dtype=int)
    lengths = np.empty_like(years)
    weekdays = np.empty_like(years)
    types = np.empty_like(years)
    for i, Y in enumerate(years):
        Y = int(Y)
        lengths[i] = ar.days_in_jewish_year(Y)
        weekdays[i] = ar.rosh_hashana_day_of_week(Y)
        t = year_type(JewishCalendar.from_year_month_day(Y, TISHREI, 1, in_israel=in_israel))
        types[i] = -1 if t is None else t
    return years, lengths, weekdays, types


def tally(np, values) -> List[tuple]:
    keys, counts = np.unique(values, return_counts=True)
    return [(int(k), int(c)) for k, c in zip(keys, counts)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Tally Hebrew year lengths, Rosh Hashana weekdays and parsha year types.")
    p.add_argument("--from-year", type=int, default=5000)
    p.add_argument("--to-year", type=int, default=6000)
    p.add_argument("--israel", action="store_true", help="Use the Israeli parsha schedule")
    args = p.parse_args(argv)

    np = _need_numpy()
    years, lengths, weekdays, types = build_arrays(np, args.from_year, args.to_year, in_israel=args.israel)
    n = len(years)

    print(f"Years {args.from_year}..{args.to_year} (N={n})")
    print("\nYear length:")
    for k, c in tally(np, lengths):
        print(f"  {k:3d}  {c:6d}  {100.0 * c / n:6.2f}%")

    print("\nRosh Hashana weekday (1=Sunday):")
    for k, c in tally(np, weekdays):
        print(f"  {k:3d}  {c:6d}  {100.0 * c / n:6.2f}%")

    print("\n(length, weekday) combinations:")
    combos = np.stack([lengths, weekdays], axis=1)
    keys, counts = np.unique(combos, axis=0, return_counts=True)
    for (length, wd), c in zip(keys, counts):
        print(f"  ({int(length)}, {int(wd)})  {int(c):6d}")

    print("\nParsha year type:")
    for k, c in tally(np, types):
        print(f"  {k:3d}  {c:6d}")

    bad = int(np.sum(types < 0))
    if bad:
        print(f"\n{bad} years without a parsha year type")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
