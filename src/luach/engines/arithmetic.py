"""
luach.engines.arithmetic
------------------------
Discrete arithmetic of the fixed Hebrew calendar: molad projection in
chalakim, the 19-year leap cycle, the dechiyos that fix 1 Tishrei, and the
year/month lengths that follow from them.

All functions are pure and operate on plain integers. Months are numbered
from Nissan (1) to Adar (12) / Adar II (13); years are Anno Mundi.
"""

from __future__ import annotations

from typing import Tuple

from luach.core.errors import CalendarArithmeticError
from luach.core.types import (
    ADAR, ADAR_II, CHESHVAN, ELUL, IYAR, KISLEV, NISSAN, TAMMUZ, TEVES, TISHREI, Kviah,
)

# Absolute day of the day before 1 Tishrei AM 1 (Rata Die count, 1/1/1 = 1).
JEWISH_EPOCH = -1373429

CHALAKIM_PER_MINUTE = 18
CHALAKIM_PER_HOUR = 1080
CHALAKIM_PER_DAY = 25920           # 24 * 1080
CHALAKIM_PER_MONTH = 765433        # (29 * 24 + 12) * 1080 + 793
# BeHaRaD: Monday, 5 hours, 204 chalakim, counted from the eve of day 0.
CHALAKIM_MOLAD_TOHU = 31524

VALID_YEAR_LENGTHS = (353, 354, 355, 383, 384, 385)


def is_jewish_leap_year(year: int) -> bool:
    """Years 3, 6, 8, 11, 14, 17 and 19 of the Metonic cycle."""
    return (7 * year + 1) % 19 < 7


def last_month_of_jewish_year(year: int) -> int:
    return ADAR_II if is_jewish_leap_year(year) else ADAR


def jewish_month_of_year(year: int, month: int) -> int:
    """Position of a Nissan-based month counted from Tishrei (Tishrei = 1)."""
    leap = is_jewish_leap_year(year)
    return ((month + (6 if leap else 5)) % (13 if leap else 12)) + 1


def months_elapsed(year: int, month: int = TISHREI) -> int:
    """Lunations from Molad Tohu to the molad of (year, month)."""
    cycle, in_cycle = divmod(year - 1, 19)
    return (
        235 * cycle                    # complete 19 year cycles
        + 12 * in_cycle                # regular months this cycle
        + (7 * in_cycle + 1) // 19     # leap months this cycle
        + (jewish_month_of_year(year, month) - 1)
    )


def chalakim_since_molad_tohu(year: int, month: int) -> int:
    return CHALAKIM_MOLAD_TOHU + CHALAKIM_PER_MONTH * months_elapsed(year, month)


def split_chalakim(chalakim: int) -> Tuple[int, int]:
    """(day, parts) of a molad expressed in chalakim."""
    return divmod(chalakim, CHALAKIM_PER_DAY)


def add_dechiyos(year: int, molad_day: int, molad_parts: int) -> int:
    """
    Apply the four postponements to the Tishrei molad of `year`.

    Molad Zaken, GaTRaD and BeTuTaKFoT are alternatives feeding one +1
    decision; Lo ADU Rosh is then tested against the postponed day and may
    add one more.
    """
    rosh_hashana_day = molad_day
    if (
        molad_parts >= 19440                    # Molad Zaken: at or after 18h (noon)
        or (
            molad_day % 7 == 2                  # GaTRaD: Tuesday,
            and molad_parts >= 9924             # 9h 204p or later,
            and not is_jewish_leap_year(year)   # in a common year
        )
        or (
            molad_day % 7 == 1                  # BeTuTaKFoT: Monday,
            and molad_parts >= 16789            # 15h 589p or later,
            and is_jewish_leap_year(year - 1)   # right after a leap year
        )
    ):
        rosh_hashana_day += 1

    # Lo ADU Rosh: never Sunday, Wednesday or Friday
    if rosh_hashana_day % 7 in (0, 3, 5):
        rosh_hashana_day += 1

    return rosh_hashana_day


def jewish_calendar_elapsed_days(year: int) -> int:
    """Days from the epoch to 1 Tishrei of `year`."""
    molad_day, molad_parts = split_chalakim(chalakim_since_molad_tohu(year, TISHREI))
    return add_dechiyos(year, molad_day, molad_parts)


def days_in_jewish_year(year: int) -> int:
    n = jewish_calendar_elapsed_days(year + 1) - jewish_calendar_elapsed_days(year)
    if n not in VALID_YEAR_LENGTHS:
        raise CalendarArithmeticError(f"Year {year} computed with {n} days; expected one of {VALID_YEAR_LENGTHS}.")
    return n


def is_cheshvan_long(year: int) -> bool:
    return days_in_jewish_year(year) % 10 == 5


def is_kislev_short(year: int) -> bool:
    return days_in_jewish_year(year) % 10 == 3


def cheshvan_kislev_kviah(year: int) -> Kviah:
    length = days_in_jewish_year(year)
    if length % 10 == 5:
        return Kviah.SHELAIMIM
    if length % 10 == 3:
        return Kviah.CHASERIM
    return Kviah.KESIDRAN


def days_in_jewish_month(month: int, year: int) -> int:
    if (
        month in (IYAR, TAMMUZ, ELUL, TEVES, ADAR_II)
        or (month == CHESHVAN and not is_cheshvan_long(year))
        or (month == KISLEV and is_kislev_short(year))
        or (month == ADAR and not is_jewish_leap_year(year))
    ):
        return 29
    return 30


def days_since_start_of_jewish_year(year: int, month: int, day: int) -> int:
    """Ordinal of the day within its year, 1 Tishrei = 1."""
    elapsed = day
    if month < TISHREI:
        # the whole Tishrei..Adar stretch, then Nissan up to the month
        for m in range(TISHREI, last_month_of_jewish_year(year) + 1):
            elapsed += days_in_jewish_month(m, year)
        for m in range(NISSAN, month):
            elapsed += days_in_jewish_month(m, year)
    else:
        for m in range(TISHREI, month):
            elapsed += days_in_jewish_month(m, year)
    return elapsed


def jewish_date_to_abs_date(year: int, month: int, day: int) -> int:
    return days_since_start_of_jewish_year(year, month, day) + jewish_calendar_elapsed_days(year) + JEWISH_EPOCH


def abs_date_to_jewish_date(abs_day: int) -> Tuple[int, int, int]:
    """
    Inverse of jewish_date_to_abs_date.

    The year approximation lies below the answer; the forward search takes
    at most two steps, the month search at most thirteen.
    """
    year = (abs_day - JEWISH_EPOCH) // 366
    while abs_day >= jewish_date_to_abs_date(year + 1, TISHREI, 1):
        year += 1

    month = TISHREI if abs_day < jewish_date_to_abs_date(year, NISSAN, 1) else NISSAN
    while abs_day > jewish_date_to_abs_date(year, month, days_in_jewish_month(month, year)):
        month += 1

    day = abs_day - jewish_date_to_abs_date(year, month, 1) + 1
    return year, month, day


def molad_to_abs_date(chalakim: int) -> int:
    return chalakim // CHALAKIM_PER_DAY + JEWISH_EPOCH


def rosh_hashana_day_of_week(year: int) -> int:
    """1=Sunday .. 7=Shabbos; elapsed days count from a Sunday."""
    return jewish_calendar_elapsed_days(year) % 7 + 1
