"""
luach.engines.calendar
----------------------
The holiday / occasion engine. A JewishCalendar owns one JewishDate and
classifies it: yom tov index, fasts, Rosh Chodesh, Omer and Chanukah counts,
the civil instant of the month's molad, and the Daf Yomi of the day.
"""

from __future__ import annotations

from datetime import MAXYEAR, date, datetime, timedelta
from typing import Optional

from luach.core.errors import IllegalArgumentError
from luach.core.types import (
    ADAR, ADAR_II, AV, CHESHVAN, ELUL, IYAR, JERUSALEM, KISLEV, NISSAN, SHEVAT, SIVAN,
    TAMMUZ, TEVES, TISHREI,
    FRIDAY, MONDAY, SHABBOS, SUNDAY, THURSDAY, TUESDAY, WEDNESDAY,
    Daf, Field, Kviah, Location, YomTov,
)
from luach.engines.jewish_date import JewishDate

_ASSUR_BEMELACHA = frozenset({
    YomTov.PESACH, YomTov.SHAVUOS, YomTov.SUCCOS, YomTov.SHEMINI_ATZERES,
    YomTov.SIMCHAS_TORAH, YomTov.ROSH_HASHANA, YomTov.YOM_KIPPUR,
})

_FASTS = frozenset({
    YomTov.SEVENTEEN_OF_TAMMUZ, YomTov.TISHA_BEAV, YomTov.YOM_KIPPUR,
    YomTov.FAST_OF_GEDALYAH, YomTov.TENTH_OF_TEVES, YomTov.FAST_OF_ESTHER,
})

_EREV = frozenset({
    YomTov.EREV_PESACH, YomTov.EREV_SHAVUOS, YomTov.EREV_ROSH_HASHANA,
    YomTov.EREV_YOM_KIPPUR, YomTov.EREV_SUCCOS, YomTov.HOSHANA_RABBA,
})


def _adar_yom_tov(day: int, dow: int) -> Optional[YomTov]:
    """Adar of a common year, or Adar II of a leap year."""
    if ((day == 11 or day == 12) and dow == THURSDAY) or (day == 13 and dow not in (FRIDAY, SHABBOS)):
        return YomTov.FAST_OF_ESTHER
    if day == 14:
        return YomTov.PURIM
    if day == 15:
        return YomTov.SHUSHAN_PURIM
    return None


class JewishCalendar:
    """
    A Hebrew date together with the observance context it is read in.

    in_israel selects the Israeli yom tov schedule (no second festival day);
    use_modern_holidays turns on Yom HaShoah, Yom HaZikaron, Yom HaAtzmaut
    and Yom Yerushalayim. Like JewishDate it is mutable and so unhashable.
    """

    def __init__(
        self,
        jewish_date: Optional[JewishDate] = None,
        *,
        in_israel: bool = False,
        use_modern_holidays: bool = False,
    ):
        self.date = jewish_date if jewish_date is not None else JewishDate.today()
        self.in_israel = in_israel
        self.use_modern_holidays = use_modern_holidays

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def from_year_month_day(
        cls, year: int, month: int, day: int, *, in_israel: bool = False, use_modern_holidays: bool = False
    ) -> "JewishCalendar":
        return cls(
            JewishDate.from_year_month_day(year, month, day),
            in_israel=in_israel,
            use_modern_holidays=use_modern_holidays,
        )

    @classmethod
    def from_date(
        cls, d: date, *, in_israel: bool = False, use_modern_holidays: bool = False
    ) -> "JewishCalendar":
        return cls(JewishDate.from_date(d), in_israel=in_israel, use_modern_holidays=use_modern_holidays)

    @classmethod
    def from_gregorian(
        cls, year: int, month: int, day: int, *, in_israel: bool = False, use_modern_holidays: bool = False
    ) -> "JewishCalendar":
        return cls(
            JewishDate.from_gregorian(year, month, day),
            in_israel=in_israel,
            use_modern_holidays=use_modern_holidays,
        )

    @classmethod
    def today(cls, *, in_israel: bool = False, use_modern_holidays: bool = False) -> "JewishCalendar":
        return cls(JewishDate.today(), in_israel=in_israel, use_modern_holidays=use_modern_holidays)

    # ---------------------------------------------------------
    # Forwarded date accessors / mutators
    # ---------------------------------------------------------

    @property
    def jewish_year(self) -> int:
        return self.date.jewish_year

    @property
    def jewish_month(self) -> int:
        return self.date.jewish_month

    @property
    def jewish_day_of_month(self) -> int:
        return self.date.jewish_day_of_month

    @property
    def day_of_week(self) -> int:
        return self.date.day_of_week

    @property
    def abs_date(self) -> int:
        return self.date.abs_date

    def gregorian_date(self) -> date:
        return self.date.date()

    def is_jewish_leap_year(self) -> bool:
        return self.date.is_jewish_leap_year()

    def is_kislev_short(self) -> bool:
        return self.date.is_kislev_short()

    def cheshvan_kislev_kviah(self) -> Kviah:
        return self.date.cheshvan_kislev_kviah()

    def days_in_jewish_month(self) -> int:
        return self.date.days_in_jewish_month()

    def days_since_start_of_jewish_year(self) -> int:
        return self.date.days_since_start_of_jewish_year()

    def set_date(self, d: date) -> None:
        self.date.set_date(d)

    def set_jewish_date(self, year: int, month: int, day: int) -> None:
        self.date.set_jewish_date(year, month, day)

    def forward(self, field: Field, amount: int) -> None:
        self.date.forward(field, amount)

    def back(self) -> None:
        self.date.back()

    def copy(self) -> "JewishCalendar":
        return JewishCalendar(
            self.date.copy(), in_israel=self.in_israel, use_modern_holidays=self.use_modern_holidays
        )

    # ---------------------------------------------------------
    # Yom tov index
    # ---------------------------------------------------------

    def yom_tov_index(self) -> Optional[YomTov]:
        """The occasion falling on this day, or None."""
        day = self.jewish_day_of_month
        dow = self.day_of_week
        month = self.jewish_month

        if month == NISSAN:
            if day == 14:
                return YomTov.EREV_PESACH
            if day == 15 or day == 21 or (not self.in_israel and (day == 16 or day == 22)):
                return YomTov.PESACH
            if 17 <= day <= 20 or day == 16:
                return YomTov.CHOL_HAMOED_PESACH
            if self.use_modern_holidays and (
                (day == 26 and dow == THURSDAY)
                or (day == 28 and dow == MONDAY)
                or (day == 27 and dow not in (SUNDAY, FRIDAY))
            ):
                return YomTov.YOM_HASHOAH
            return None

        if month == IYAR:
            if self.use_modern_holidays:
                if (
                    (day == 4 and dow == TUESDAY)
                    or ((day == 3 or day == 2) and dow == WEDNESDAY)
                    or (day == 5 and dow == MONDAY)
                ):
                    return YomTov.YOM_HAZIKARON
                # if 5 Iyar falls on Wednesday Yom Haatzmaut is that day;
                # on Friday or Shabbos it moves back to Thursday; on Monday forward to Tuesday
                if (
                    (day == 5 and dow == WEDNESDAY)
                    or ((day == 4 or day == 3) and dow == THURSDAY)
                    or (day == 6 and dow == TUESDAY)
                ):
                    return YomTov.YOM_HAATZMAUT
            if day == 14:
                return YomTov.PESACH_SHENI
            if self.use_modern_holidays and day == 28:
                return YomTov.YOM_YERUSHALAYIM
            return None

        if month == SIVAN:
            if day == 5:
                return YomTov.EREV_SHAVUOS
            if day == 6 or (day == 7 and not self.in_israel):
                return YomTov.SHAVUOS
            return None

        if month == TAMMUZ:
            # postponed to Sunday when the 17th is Shabbos
            if (day == 17 and dow != SHABBOS) or (day == 18 and dow == SUNDAY):
                return YomTov.SEVENTEEN_OF_TAMMUZ
            return None

        if month == AV:
            if (dow == SUNDAY and day == 10) or (dow != SHABBOS and day == 9):
                return YomTov.TISHA_BEAV
            if day == 15:
                return YomTov.TU_BEAV
            return None

        if month == ELUL:
            if day == 29:
                return YomTov.EREV_ROSH_HASHANA
            return None

        if month == TISHREI:
            if day == 1 or day == 2:
                return YomTov.ROSH_HASHANA
            if (day == 3 and dow != SHABBOS) or (day == 4 and dow == SUNDAY):
                return YomTov.FAST_OF_GEDALYAH
            if day == 9:
                return YomTov.EREV_YOM_KIPPUR
            if day == 10:
                return YomTov.YOM_KIPPUR
            if day == 14:
                return YomTov.EREV_SUCCOS
            if day == 15 or (day == 16 and not self.in_israel):
                return YomTov.SUCCOS
            if 17 <= day <= 20 or (day == 16 and self.in_israel):
                return YomTov.CHOL_HAMOED_SUCCOS
            if day == 21:
                return YomTov.HOSHANA_RABBA
            if day == 22:
                return YomTov.SHEMINI_ATZERES
            if day == 23 and not self.in_israel:
                return YomTov.SIMCHAS_TORAH
            return None

        if month == CHESHVAN:
            return None

        if month == KISLEV:
            if day >= 25:
                return YomTov.CHANUKAH
            return None

        if month == TEVES:
            if day == 1 or day == 2 or (day == 3 and self.is_kislev_short()):
                return YomTov.CHANUKAH
            if day == 10:
                return YomTov.TENTH_OF_TEVES
            return None

        if month == SHEVAT:
            if day == 15:
                return YomTov.TU_BESHVAT
            return None

        if month == ADAR:
            if not self.is_jewish_leap_year():
                return _adar_yom_tov(day, dow)
            if day == 14:
                return YomTov.PURIM_KATAN
            return None

        if month == ADAR_II:
            return _adar_yom_tov(day, dow)

        return None

    # ---------------------------------------------------------
    # Predicates
    # ---------------------------------------------------------

    def is_yom_tov(self) -> bool:
        """
        True for any day with a yom tov index, erev days included, except
        Chanukah and the fasts other than Yom Kippur.
        """
        idx = self.yom_tov_index()
        if idx is None:
            return False
        if idx is YomTov.CHANUKAH or (self.is_taanis() and idx is not YomTov.YOM_KIPPUR):
            return False
        return True

    def is_yom_tov_assur_bemelacha(self) -> bool:
        return self.yom_tov_index() in _ASSUR_BEMELACHA

    def is_assur_bemelacha(self) -> bool:
        """Shabbos or a yom tov on which melacha is forbidden."""
        return self.day_of_week == SHABBOS or self.is_yom_tov_assur_bemelacha()

    def has_candle_lighting(self) -> bool:
        return self.is_tomorrow_shabbos_or_yom_tov()

    def is_tomorrow_shabbos_or_yom_tov(self) -> bool:
        return self.day_of_week == FRIDAY or self.is_erev_yom_tov() or self.is_erev_yom_tov_sheni()

    def is_erev_yom_tov_sheni(self) -> bool:
        """The first of two consecutive yom tov days."""
        month, day = self.jewish_month, self.jewish_day_of_month
        if month == TISHREI and day == 1:
            return True
        if self.in_israel:
            return False
        if month == NISSAN:
            return day == 15 or day == 21
        if month == TISHREI:
            return day == 15 or day == 22
        if month == SIVAN:
            return day == 6
        return False

    def is_aseres_yemei_teshuva(self) -> bool:
        return self.jewish_month == TISHREI and self.jewish_day_of_month <= 10

    def is_chol_hamoed(self) -> bool:
        return self.is_chol_hamoed_pesach() or self.is_chol_hamoed_succos()

    def is_chol_hamoed_pesach(self) -> bool:
        return self.yom_tov_index() is YomTov.CHOL_HAMOED_PESACH

    def is_chol_hamoed_succos(self) -> bool:
        return self.yom_tov_index() is YomTov.CHOL_HAMOED_SUCCOS

    def is_erev_yom_tov(self) -> bool:
        """Erev Pesach (both), Shavuos, Rosh Hashana, Yom Kippur, Succos and Hoshana Rabba."""
        idx = self.yom_tov_index()
        return idx in _EREV or (idx is YomTov.CHOL_HAMOED_PESACH and self.jewish_day_of_month == 20)

    def is_erev_rosh_chodesh(self) -> bool:
        # Erev Rosh Hashana is not Erev Rosh Chodesh
        return self.jewish_day_of_month == 29 and self.jewish_month != ELUL

    def is_taanis(self) -> bool:
        return self.yom_tov_index() in _FASTS

    def is_chanukah(self) -> bool:
        return self.yom_tov_index() is YomTov.CHANUKAH

    def day_of_chanukah(self) -> Optional[int]:
        if not self.is_chanukah():
            return None
        if self.jewish_month == KISLEV:
            return self.jewish_day_of_month - 24
        return self.jewish_day_of_month + (5 if self.is_kislev_short() else 6)

    def is_rosh_chodesh(self) -> bool:
        # Rosh Hashana is not Rosh Chodesh; Elul has no 30th
        day = self.jewish_day_of_month
        return (day == 1 and self.jewish_month != TISHREI) or day == 30

    def is_machar_chodesh(self) -> bool:
        return self.day_of_week == SHABBOS and self.jewish_day_of_month in (29, 30)

    def is_shabbos_mevorchim(self) -> bool:
        return self.day_of_week == SHABBOS and 23 <= self.jewish_day_of_month <= 29

    def day_of_omer(self) -> Optional[int]:
        month, day = self.jewish_month, self.jewish_day_of_month
        if month == NISSAN and day >= 16:
            return day - 15
        if month == IYAR:
            return day + 15
        if month == SIVAN and day < 6:
            return day + 44
        return None

    # ---------------------------------------------------------
    # Molad
    # ---------------------------------------------------------

    def molad(self) -> JewishDate:
        return self.date.get_molad()

    def molad_as_datetime(self, location: Location = JERUSALEM) -> datetime:
        """
        The molad of this month as an aware datetime in the location's
        standard time, with the location's local mean time offset removed.
        """
        m = self.date.get_molad()
        if m.gregorian_year > MAXYEAR:
            raise IllegalArgumentError(f"The molad falls in Gregorian year {m.gregorian_year}, past datetime's range.")
        micros = m.molad_chalakim * 10_000_000 // 3  # one chelek = 3 1/3 seconds
        seconds, micros = divmod(micros, 1_000_000)
        local = datetime(
            m.gregorian_year, m.gregorian_month, m.gregorian_day_of_month,
            m.molad_hours, m.molad_minutes, seconds, micros,
            tzinfo=location.standard_tz,
        )
        return local - location.local_mean_time_offset

    def tchilas_zman_kidush_levana_3_days(self, location: Location = JERUSALEM) -> datetime:
        return self.molad_as_datetime(location) + timedelta(hours=72)

    def tchilas_zman_kidush_levana_7_days(self, location: Location = JERUSALEM) -> datetime:
        return self.molad_as_datetime(location) + timedelta(hours=168)

    def sof_zman_kidush_levana_between_moldos(self, location: Location = JERUSALEM) -> datetime:
        """Half of a mean lunation after the molad: 14d 18h 22m 1 2/3s."""
        return self.molad_as_datetime(location) + timedelta(
            days=14, hours=18, minutes=22, seconds=1, milliseconds=666
        )

    def sof_zman_kidush_levana_15_days(self, location: Location = JERUSALEM) -> datetime:
        return self.molad_as_datetime(location) + timedelta(days=15)

    # ---------------------------------------------------------
    # Daf Yomi
    # ---------------------------------------------------------

    def daf_yomi_bavli(self) -> Daf:
        from luach.yomi.bavli import daf_yomi_bavli
        return daf_yomi_bavli(self)

    def daf_yomi_yerushalmi(self) -> Optional[Daf]:
        from luach.yomi.yerushalmi import daf_yomi_yerushalmi
        return daf_yomi_yerushalmi(self)

    # ---------------------------------------------------------
    # Value semantics
    # ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JewishCalendar):
            return NotImplemented
        return self.abs_date == other.abs_date and self.in_israel == other.in_israel

    def __str__(self) -> str:
        return str(self.date)

    def __repr__(self) -> str:
        return f"JewishCalendar({self.date!r}, in_israel={self.in_israel})"
