# tests/test_calendar.py

from datetime import date, datetime, timedelta, timezone

import pytest

from luach.core.errors import IllegalArgumentError
from luach.core.types import (
    ADAR, ADAR_II, AV, ELUL, IYAR, KISLEV, NISSAN, SIVAN, TAMMUZ, TEVES, TISHREI,
    Daf, YomTov,
)
from luach.engines.calendar import JewishCalendar


def cal(y, m, d, **kw):
    return JewishCalendar.from_year_month_day(y, m, d, **kw)


def test_composition_and_factories():
    c = JewishCalendar.from_gregorian(2024, 4, 23)
    assert (c.jewish_year, c.jewish_month, c.jewish_day_of_month) == (5784, NISSAN, 15)
    assert c.date.date() == date(2024, 4, 23)
    assert c.gregorian_date() == date(2024, 4, 23)
    assert c.day_of_week == 3
    assert JewishCalendar.from_date(date(2024, 4, 23)) == c
    assert JewishCalendar().abs_date == JewishCalendar.today().abs_date


@pytest.mark.parametrize("day, diaspora, israel", [
    (14, YomTov.EREV_PESACH, YomTov.EREV_PESACH),
    (15, YomTov.PESACH, YomTov.PESACH),
    (16, YomTov.PESACH, YomTov.CHOL_HAMOED_PESACH),
    (17, YomTov.CHOL_HAMOED_PESACH, YomTov.CHOL_HAMOED_PESACH),
    (21, YomTov.PESACH, YomTov.PESACH),
    (22, YomTov.PESACH, None),
])
def test_pesach(day, diaspora, israel):
    assert cal(5784, NISSAN, day).yom_tov_index() is diaspora
    assert cal(5784, NISSAN, day, in_israel=True).yom_tov_index() is israel


@pytest.mark.parametrize("day, diaspora, israel", [
    (1, YomTov.ROSH_HASHANA, YomTov.ROSH_HASHANA),
    (2, YomTov.ROSH_HASHANA, YomTov.ROSH_HASHANA),
    (9, YomTov.EREV_YOM_KIPPUR, YomTov.EREV_YOM_KIPPUR),
    (10, YomTov.YOM_KIPPUR, YomTov.YOM_KIPPUR),
    (14, YomTov.EREV_SUCCOS, YomTov.EREV_SUCCOS),
    (16, YomTov.SUCCOS, YomTov.CHOL_HAMOED_SUCCOS),
    (20, YomTov.CHOL_HAMOED_SUCCOS, YomTov.CHOL_HAMOED_SUCCOS),
    (21, YomTov.HOSHANA_RABBA, YomTov.HOSHANA_RABBA),
    (22, YomTov.SHEMINI_ATZERES, YomTov.SHEMINI_ATZERES),
    (23, YomTov.SIMCHAS_TORAH, None),
])
def test_tishrei(day, diaspora, israel):
    assert cal(5785, TISHREI, day).yom_tov_index() is diaspora
    assert cal(5785, TISHREI, day, in_israel=True).yom_tov_index() is israel


def test_shavuos():
    assert cal(5784, SIVAN, 5).yom_tov_index() is YomTov.EREV_SHAVUOS
    assert cal(5784, SIVAN, 6).yom_tov_index() is YomTov.SHAVUOS
    assert cal(5784, SIVAN, 7).yom_tov_index() is YomTov.SHAVUOS
    assert cal(5784, SIVAN, 7, in_israel=True).yom_tov_index() is None


def test_tisha_beav_moves_off_shabbos():
    assert cal(5782, AV, 9).day_of_week == 7
    assert cal(5782, AV, 9).yom_tov_index() is None
    tenth = cal(5782, AV, 10)
    assert tenth.yom_tov_index() is YomTov.TISHA_BEAV
    assert tenth.gregorian_date() == date(2022, 8, 7)
    assert cal(5785, AV, 9).gregorian_date() == date(2025, 8, 3)
    assert cal(5785, AV, 9).yom_tov_index() is YomTov.TISHA_BEAV
    assert cal(5785, AV, 15).yom_tov_index() is YomTov.TU_BEAV


def test_minor_fasts():
    # 3 Tishrei 5785 is Shabbos
    assert cal(5785, TISHREI, 3).yom_tov_index() is None
    assert cal(5785, TISHREI, 4).yom_tov_index() is YomTov.FAST_OF_GEDALYAH
    assert cal(5784, TISHREI, 3).yom_tov_index() is YomTov.FAST_OF_GEDALYAH
    assert cal(5785, TAMMUZ, 17).yom_tov_index() is YomTov.SEVENTEEN_OF_TAMMUZ
    assert cal(5785, TEVES, 10).yom_tov_index() is YomTov.TENTH_OF_TEVES


def test_purim_and_esther():
    # Purim 5784 fell on Sunday, so the fast moved back to Thursday
    assert cal(5784, ADAR_II, 14).gregorian_date() == date(2024, 3, 24)
    assert cal(5784, ADAR_II, 14).yom_tov_index() is YomTov.PURIM
    assert cal(5784, ADAR_II, 13).yom_tov_index() is None
    assert cal(5784, ADAR_II, 11).yom_tov_index() is YomTov.FAST_OF_ESTHER
    assert cal(5784, ADAR_II, 15).yom_tov_index() is YomTov.SHUSHAN_PURIM
    assert cal(5784, ADAR, 14).yom_tov_index() is YomTov.PURIM_KATAN

    assert cal(5785, ADAR, 13).yom_tov_index() is YomTov.FAST_OF_ESTHER
    assert cal(5785, ADAR, 14).gregorian_date() == date(2025, 3, 14)
    assert cal(5785, ADAR, 14).yom_tov_index() is YomTov.PURIM


def test_chanukah_long_and_short_kislev():
    # Kislev 5785 has 30 days
    assert cal(5785, KISLEV, 24).day_of_chanukah() is None
    assert cal(5785, KISLEV, 25).day_of_chanukah() == 1
    assert cal(5785, KISLEV, 30).day_of_chanukah() == 6
    assert cal(5785, TEVES, 2).day_of_chanukah() == 8
    assert not cal(5785, TEVES, 3).is_chanukah()
    # Kislev 5784 has 29 days
    assert cal(5784, TEVES, 2).day_of_chanukah() == 7
    assert cal(5784, TEVES, 3).day_of_chanukah() == 8


def test_modern_holidays_need_opt_in():
    # 5 Iyar 5784 was Monday: Yom HaZikaron stays, Yom HaAtzmaut moves to Tuesday
    assert cal(5784, IYAR, 5).day_of_week == 2
    assert cal(5784, IYAR, 5, use_modern_holidays=True).yom_tov_index() is YomTov.YOM_HAZIKARON
    assert cal(5784, IYAR, 6, use_modern_holidays=True).yom_tov_index() is YomTov.YOM_HAATZMAUT
    assert cal(5784, IYAR, 6).yom_tov_index() is None
    # 27 Nissan 5784 was Sunday
    assert cal(5784, NISSAN, 27, use_modern_holidays=True).yom_tov_index() is None
    assert cal(5784, NISSAN, 28, use_modern_holidays=True).yom_tov_index() is YomTov.YOM_HASHOAH
    assert cal(5784, IYAR, 28, use_modern_holidays=True).yom_tov_index() is YomTov.YOM_YERUSHALAYIM
    assert cal(5784, IYAR, 14, use_modern_holidays=True).yom_tov_index() is YomTov.PESACH_SHENI


def test_is_yom_tov():
    assert cal(5784, NISSAN, 15).is_yom_tov()
    assert cal(5784, NISSAN, 17).is_yom_tov()
    assert cal(5784, NISSAN, 20).is_yom_tov()
    assert cal(5784, NISSAN, 14).is_yom_tov()
    assert cal(5785, TISHREI, 21).is_yom_tov()
    assert cal(5785, TISHREI, 10).is_yom_tov()
    assert cal(5785, TISHREI, 9).is_yom_tov()
    assert not cal(5785, TISHREI, 4).is_yom_tov()
    assert not cal(5785, KISLEV, 25).is_yom_tov()
    assert cal(5785, ADAR, 14).is_yom_tov()
    assert not cal(5785, ELUL, 12).is_yom_tov()


@pytest.mark.parametrize("year, month, day", [
    (5784, NISSAN, 14),
    (5784, SIVAN, 5),
    (5784, ELUL, 29),
    (5785, TISHREI, 9),
    (5785, TISHREI, 14),
])
def test_erev_days_count_as_yom_tov(year, month, day):
    c = cal(year, month, day)
    assert c.is_erev_yom_tov()
    assert c.is_yom_tov()
    assert not c.is_yom_tov_assur_bemelacha()


def test_melacha():
    assert cal(5784, NISSAN, 16).is_yom_tov_assur_bemelacha()
    assert not cal(5784, NISSAN, 16, in_israel=True).is_yom_tov_assur_bemelacha()
    assert not cal(5784, NISSAN, 16, in_israel=True).is_assur_bemelacha()
    # Shabbos Chol Hamoed
    shabbos = JewishCalendar.from_gregorian(2024, 4, 27)
    assert shabbos.is_chol_hamoed_pesach()
    assert not shabbos.is_yom_tov_assur_bemelacha()
    assert shabbos.is_assur_bemelacha()


def test_candle_lighting():
    assert cal(5784, NISSAN, 14).has_candle_lighting()
    assert cal(5784, NISSAN, 15).is_erev_yom_tov_sheni()
    assert cal(5784, NISSAN, 15).has_candle_lighting()
    assert not cal(5784, NISSAN, 15, in_israel=True).has_candle_lighting()
    assert cal(5785, TISHREI, 1, in_israel=True).is_erev_yom_tov_sheni()
    assert JewishCalendar.from_gregorian(2024, 4, 26).is_tomorrow_shabbos_or_yom_tov()
    assert not JewishCalendar.from_gregorian(2024, 4, 25).has_candle_lighting()


def test_erev_predicates():
    assert cal(5784, NISSAN, 20).is_erev_yom_tov()
    assert cal(5785, TISHREI, 21).is_erev_yom_tov()
    assert not cal(5784, NISSAN, 19).is_erev_yom_tov()
    assert cal(5785, TISHREI, 29).is_erev_rosh_chodesh()
    assert not cal(5784, ELUL, 29).is_erev_rosh_chodesh()


def test_chol_hamoed():
    assert cal(5785, TISHREI, 16, in_israel=True).is_chol_hamoed_succos()
    assert not cal(5785, TISHREI, 16).is_chol_hamoed()
    assert cal(5784, NISSAN, 18).is_chol_hamoed()


def test_taanis():
    assert cal(5785, TISHREI, 10).is_taanis()
    assert cal(5782, AV, 10).is_taanis()
    assert not cal(5782, AV, 9).is_taanis()
    assert not cal(5785, ADAR, 14).is_taanis()


def test_rosh_chodesh_and_shabbos_predicates():
    assert not cal(5785, TISHREI, 1).is_rosh_chodesh()
    assert cal(5785, TISHREI, 30).is_rosh_chodesh()
    assert cal(5785, 8, 1).is_rosh_chodesh()
    assert cal(5785, TISHREI, 10).is_aseres_yemei_teshuva()
    assert not cal(5785, TISHREI, 11).is_aseres_yemei_teshuva()

    shabbos_29_adar = JewishCalendar.from_gregorian(2025, 3, 29)
    assert shabbos_29_adar.jewish_day_of_month == 29
    assert shabbos_29_adar.is_machar_chodesh()
    assert shabbos_29_adar.is_shabbos_mevorchim()
    assert not JewishCalendar.from_gregorian(2025, 3, 22).is_shabbos_mevorchim()


@pytest.mark.parametrize("month, day, omer", [
    (NISSAN, 15, None),
    (NISSAN, 16, 1),
    (NISSAN, 30, 15),
    (IYAR, 1, 16),
    (IYAR, 18, 33),
    (SIVAN, 5, 49),
    (SIVAN, 6, None),
])
def test_day_of_omer(month, day, omer):
    assert cal(5784, month, day).day_of_omer() == omer


def test_molad_instant():
    c = cal(5785, TISHREI, 1)
    jerusalem = timezone(timedelta(hours=2))
    expected = datetime(2024, 10, 3, 3, 0, 46, 837333, tzinfo=jerusalem)
    instant = c.molad_as_datetime()
    assert abs(instant - expected) < timedelta(milliseconds=1)
    assert instant.utcoffset() == timedelta(hours=2)


def test_kiddush_levana_windows():
    c = cal(5785, TISHREI, 1)
    molad = c.molad_as_datetime()
    assert c.tchilas_zman_kidush_levana_3_days() - molad == timedelta(hours=72)
    assert c.tchilas_zman_kidush_levana_7_days() - molad == timedelta(hours=168)
    assert c.sof_zman_kidush_levana_between_moldos() - molad == timedelta(
        days=14, hours=18, minutes=22, seconds=1, milliseconds=666
    )
    assert c.sof_zman_kidush_levana_15_days() - molad == timedelta(days=15)


def test_daf_delegation():
    c = cal(5777, ELUL, 10)
    assert c.daf_yomi_bavli() == Daf(23, 47)
    assert c.daf_yomi_yerushalmi() == Daf(29, 8)


def test_equality_includes_location():
    a = JewishCalendar.from_gregorian(2024, 4, 23)
    b = JewishCalendar.from_gregorian(2024, 4, 23, in_israel=True)
    assert a != b
    assert a == a.copy()
    assert len({a, b, a.copy()}) == 2


def test_far_future_calendar():
    c = cal(13800, TISHREI, 1)
    with pytest.raises(IllegalArgumentError):
        c.molad_as_datetime()
    with pytest.raises(TypeError):
        hash(c)
    assert c.yom_tov_index() is YomTov.ROSH_HASHANA
