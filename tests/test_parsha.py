# tests/test_parsha.py

from datetime import date

import pytest

from luach.core.types import ADAR, ADAR_II, TISHREI, Field, Parsha
from luach.engines import parsha as ps
from luach.engines.calendar import JewishCalendar


def shabbosos(year, in_israel=False):
    c = JewishCalendar.from_year_month_day(year, TISHREI, 1, in_israel=in_israel)
    while c.day_of_week != 7:
        c.forward(Field.DATE, 1)
    out = []
    while c.jewish_year == year:
        out.append(c.copy())
        c.forward(Field.DATE, 7)
    return out


@pytest.mark.parametrize("d, expected", [
    (date(2024, 10, 5), Parsha.HAAZINU),
    (date(2024, 10, 19), Parsha.NONE),    # Shabbos Chol Hamoed
    (date(2024, 10, 26), Parsha.BERESHIS),
    (date(2024, 11, 2), Parsha.NOACH),
    (date(2024, 10, 24), Parsha.NONE),    # Thursday
])
def test_parsha_5785(d, expected):
    assert ps.parsha(JewishCalendar.from_date(d)) is expected


def test_year_type_5785():
    c = JewishCalendar.from_year_month_day(5785, TISHREI, 1)
    assert ps.year_type(c) == 3


@pytest.mark.parametrize("in_israel", [False, True])
def test_every_year_has_a_schedule(in_israel):
    for year in range(5700, 5850):
        c = JewishCalendar.from_year_month_day(year, TISHREI, 1, in_israel=in_israel)
        assert ps.year_type(c) is not None


@pytest.mark.parametrize("in_israel", [False, True])
def test_bereshis_read_once_a_year(in_israel):
    for year in range(5770, 5800):
        readings = [ps.parsha(c) for c in shabbosos(year, in_israel)]
        assert readings.count(Parsha.BERESHIS) == 1
        assert all(isinstance(p, Parsha) for p in readings)


@pytest.mark.parametrize("day, expected", [
    (1, Parsha.SHKALIM),
    (8, Parsha.ZACHOR),
    (22, Parsha.PARA),
    (29, Parsha.HACHODESH),
    (15, Parsha.NONE),
])
def test_special_shabbos_common_year(day, expected):
    c = JewishCalendar.from_year_month_day(5785, ADAR, day)
    assert c.day_of_week == 7
    assert ps.special_shabbos(c) is expected


def test_special_shabbos_leap_year():
    assert ps.special_shabbos(JewishCalendar.from_year_month_day(5784, ADAR, 29)) is Parsha.SHKALIM
    assert ps.special_shabbos(JewishCalendar.from_year_month_day(5784, ADAR_II, 13)) is Parsha.ZACHOR
    assert ps.special_shabbos(JewishCalendar.from_year_month_day(5784, ADAR_II, 20)) is Parsha.PARA
    assert ps.special_shabbos(JewishCalendar.from_year_month_day(5784, ADAR_II, 27)) is Parsha.HACHODESH


def test_special_shabbos_only_on_shabbos():
    # 14 Adar 5785 is a Friday
    assert ps.special_shabbos(JewishCalendar.from_year_month_day(5785, ADAR, 14)) is Parsha.NONE
