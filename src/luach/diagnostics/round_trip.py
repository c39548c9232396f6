from __future__ import annotations

import argparse
import logging
import random
from datetime import date, timedelta

import luach
from luach.core.time import absolute_to_gregorian, gregorian_to_absolute
from luach.engines.jewish_date import JewishDate

logger = logging.getLogger(__name__)


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """Gregorian -> Hebrew -> Gregorian, plus the absolute-day round trip, for N random dates."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        jd = JewishDate.from_date(d0)

        back = luach.to_gregorian(jd.jewish_year, jd.jewish_month, jd.jewish_day_of_month)
        abs_day = gregorian_to_absolute(d0.year, d0.month, d0.day)
        back_abs = absolute_to_gregorian(abs_day)

        if back != d0 or back_abs != (d0.year, d0.month, d0.day) or jd.abs_date != abs_day:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("hebrew:", jd)
            print("back:", back)
            print("abs:", abs_day, "->", back_abs)
            if failures >= max_failures:
                return failures
        else:
            logger.debug("ok %s <-> %s", d0, jd)

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> hebrew -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start", type=str, default="0001-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    failures = roundtrip_test(
        args.N, parse_date(args.start), parse_date(args.end), args.seed, max_failures=args.max_failures
    )
    print(f"{args.N} trials, {failures} failures")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
