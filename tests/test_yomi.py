# tests/test_yomi.py

import pytest

from luach.core.errors import IllegalArgumentError
from luach.core.names import MasechtaNames, BAVLI_TRANSLITERATED
from luach.core.types import AV, ELUL, KISLEV, SHEVAT, SIVAN, TISHREI, Daf
from luach.engines.calendar import JewishCalendar
from luach.engines.jewish_date import JewishDate
from luach.core.types import Field
from luach.yomi import bavli, yerushalmi


def cal(y, m, d):
    return JewishCalendar.from_year_month_day(y, m, d)


@pytest.mark.parametrize("y, m, d, masechta, daf", [
    (5685, KISLEV, 12, 5, 2),
    (5736, ELUL, 26, 4, 14),
    (5777, ELUL, 10, 23, 47),
])
def test_daf_yomi_bavli(y, m, d, masechta, daf):
    assert bavli.daf_yomi_bavli(cal(y, m, d)) == Daf(masechta, daf)


def test_bavli_before_first_cycle():
    with pytest.raises(IllegalArgumentError):
        bavli.daf_yomi_bavli(cal(5683, ELUL, 29))


def test_bavli_cycle_boundaries():
    start = JewishCalendar.from_date(bavli.DAF_YOMI_START)
    assert start.daf_yomi_bavli() == Daf(0, 2)
    change = JewishCalendar.from_date(bavli.SHEKALIM_CHANGE)
    assert bavli.cycle_and_day(bavli.SHEKALIM_CHANGE_JDN) == (8, 0)
    assert change.daf_yomi_bavli() == Daf(0, 2)


def test_bavli_folio_offsets_for_tamid():
    # Tamid is printed from folio 25b, so its first day is 26
    days_before = sum(n - 1 for n in bavli.BLATT_PER_MASECHTA[:37])
    c = JewishCalendar.from_date(bavli.SHEKALIM_CHANGE)
    c.forward(Field.DATE, days_before)
    assert c.daf_yomi_bavli() == Daf(37, 26)


def test_bavli_walks_whole_cycle():
    c = JewishCalendar.from_date(bavli.SHEKALIM_CHANGE)
    last = None
    for _ in range(bavli.CYCLE_DAYS):
        daf = c.daf_yomi_bavli()
        assert 0 <= daf.masechta_number < 40
        if last is not None:
            assert daf.masechta_number >= last.masechta_number
        last = daf
        c.forward(Field.DATE, 1)
    assert last == Daf(39, 73)
    assert c.daf_yomi_bavli() == Daf(0, 2)


@pytest.mark.parametrize("y, m, d, masechta, daf", [
    (5777, ELUL, 10, 29, 8),
    (5744, KISLEV, 1, 32, 26),
    (5782, SIVAN, 1, 33, 15),
])
def test_daf_yomi_yerushalmi(y, m, d, masechta, daf):
    assert yerushalmi.daf_yomi_yerushalmi(cal(y, m, d)) == Daf(masechta, daf)


@pytest.mark.parametrize("y, m, d", [
    (5775, TISHREI, 10),
    (5783, AV, 9),
    (5775, AV, 10),   # Tisha B'Av postponed from Shabbos
])
def test_no_yerushalmi_daf_on_fasts(y, m, d):
    assert yerushalmi.daf_yomi_yerushalmi(cal(y, m, d)) is None


def test_yerushalmi_before_first_cycle():
    with pytest.raises(IllegalArgumentError):
        yerushalmi.daf_yomi_yerushalmi(cal(5740, SHEVAT, 14))


def test_yerushalmi_first_day():
    assert JewishCalendar.from_date(yerushalmi.DAF_YOMI_START).daf_yomi_yerushalmi() == Daf(0, 1)


def test_special_days_interval_is_half_open():
    yk = JewishDate.from_year_month_day(5741, TISHREI, 10).abs_date
    assert yerushalmi.special_days_between(yk, yk + 1) == 1
    assert yerushalmi.special_days_between(yk + 1, yk + 2) == 0
    assert yerushalmi.special_days_between(yk - 1, yk) == 0
    # two per year
    start = JewishDate.from_year_month_day(5741, TISHREI, 1).abs_date
    end = JewishDate.from_year_month_day(5751, TISHREI, 1).abs_date
    assert yerushalmi.special_days_between(start, end) == 20


def test_masechta_names():
    d = Daf(23, 47)
    assert d.masechta_transliterated() == "Sanhedrin"
    assert d.masechta() == "\u05E1\u05E0\u05D4\u05D3\u05E8\u05D9\u05DF"
    assert Daf(29, 8).yerushalmi_masechta_transliterated() == "Kidushin"
    assert Daf(33, 1).yerushalmi_masechta_transliterated() == "Shevuos"

    custom = MasechtaNames(bavli_transliterated=tuple(n.upper() for n in BAVLI_TRANSLITERATED))
    assert d.masechta_transliterated(custom) == "SANHEDRIN"


def test_masechta_names_validate_lengths():
    with pytest.raises(ValueError):
        MasechtaNames(bavli=("Berachos",))


def test_bavli_past_gregorian_year_9999():
    c = JewishCalendar.from_year_month_day(13800, TISHREI, 1)
    assert c.date.gregorian_year > 9999
    first = c.daf_yomi_bavli()
    c.forward(Field.DATE, bavli.CYCLE_DAYS)
    assert c.daf_yomi_bavli() == first
