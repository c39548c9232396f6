from __future__ import annotations
from datetime import date
from typing import Tuple

from .errors import IllegalArgumentError


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def last_day_of_gregorian_month(month: int, year: int) -> int:
    """Number of days in a Gregorian month (1=January)."""
    if month == 2:
        return 29 if is_gregorian_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def gregorian_to_absolute(year: int, month: int, day: int) -> int:
    """
    Absolute day number of a proleptic Gregorian date, 1 January 1 = day 1.
    """
    if year < 1:
        raise IllegalArgumentError(f"Years < 1 can't be calculated. {year} is invalid.")
    abs_day = day
    for m in range(month - 1, 0, -1):
        abs_day += last_day_of_gregorian_month(m, year)
    y = year - 1
    return abs_day + 365 * y + y // 4 - y // 100 + y // 400


def absolute_to_gregorian(abs_day: int) -> Tuple[int, int, int]:
    """
    Inverse of gregorian_to_absolute.

    Starts from an approximate year below the answer and searches forward,
    first year by year, then month by month.
    """
    if abs_day < 1:
        raise IllegalArgumentError(f"Absolute day {abs_day} precedes 1 January 1.")
    year = abs_day // 366
    while abs_day >= gregorian_to_absolute(year + 1, 1, 1):
        year += 1
    month = 1
    while abs_day > gregorian_to_absolute(year, month, last_day_of_gregorian_month(month, year)):
        month += 1
    day = abs_day - gregorian_to_absolute(year, month, 1) + 1
    return year, month, day


def day_of_week(abs_day: int) -> int:
    """1=Sunday .. 7=Shabbos."""
    return abs(abs_day % 7) + 1


# JDN of absolute day 0 (31 December 1 BCE)
JDN_OF_ABS_EPOCH = 1721425


def absolute_to_jdn(abs_day: int) -> int:
    return abs_day + JDN_OF_ABS_EPOCH


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)
