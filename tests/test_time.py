# tests/test_time.py

import random
from datetime import date

import pytest

from luach.core.errors import IllegalArgumentError
from luach.core.time import (
    absolute_to_gregorian,
    day_of_week,
    absolute_to_jdn,
    from_jdn,
    gregorian_to_absolute,
    is_gregorian_leap_year,
    last_day_of_gregorian_month,
    to_jdn,
)


def test_epoch_is_day_one():
    assert gregorian_to_absolute(1, 1, 1) == 1
    assert absolute_to_gregorian(1) == (1, 1, 1)


@pytest.mark.parametrize("year, month, expected", [
    (2011, 2, 28),
    (2012, 2, 29),
    (2000, 2, 29),
    (2100, 2, 28),
    (2023, 4, 30),
    (2023, 12, 31),
])
def test_last_day_of_gregorian_month(year, month, expected):
    assert last_day_of_gregorian_month(month, year) == expected


def test_century_leap_rules():
    assert is_gregorian_leap_year(2000)
    assert not is_gregorian_leap_year(1900)
    assert is_gregorian_leap_year(2024)
    assert not is_gregorian_leap_year(2023)


def test_absolute_day_matches_proleptic_ordinal():
    random.seed(1)
    for _ in range(500):
        d = date.fromordinal(random.randint(1, date(2999, 12, 31).toordinal()))
        n = gregorian_to_absolute(d.year, d.month, d.day)
        assert n == d.toordinal()
        assert absolute_to_gregorian(n) == (d.year, d.month, d.day)


def test_day_of_week_sunday_is_one():
    random.seed(2)
    for _ in range(200):
        d = date.fromordinal(random.randint(1, 800000))
        assert day_of_week(d.toordinal()) == d.isoweekday() % 7 + 1
    # 1 January 1 was a Monday
    assert day_of_week(1) == 2


def test_years_before_one_are_rejected():
    with pytest.raises(IllegalArgumentError):
        gregorian_to_absolute(0, 12, 31)
    with pytest.raises(IllegalArgumentError):
        absolute_to_gregorian(0)


def test_jdn_round_trip():
    assert to_jdn(date(2000, 1, 1)) == 2451545
    random.seed(3)
    for _ in range(200):
        d = date.fromordinal(random.randint(1, 900000))
        assert from_jdn(to_jdn(d)) == d


def test_absolute_to_jdn_matches_civil_jdn():
    assert absolute_to_jdn(gregorian_to_absolute(2000, 1, 1)) == 2451545
    assert absolute_to_jdn(1) == to_jdn(date(1, 1, 1))
    random.seed(5)
    for _ in range(200):
        d = date.fromordinal(random.randint(1, 3652059))
        assert absolute_to_jdn(d.toordinal()) == to_jdn(d)
