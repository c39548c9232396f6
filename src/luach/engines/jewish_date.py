"""
luach.engines.jewish_date
-------------------------
The JewishDate value type: one calendar day held simultaneously as a Hebrew
date, a proleptic Gregorian date, an absolute day number and a day of the
week. Every mutator validates first and then recomputes all representations
together, so an instance is never observed half-updated.

Dates before 18 Teves 3761 (1 January 1 CE) are not supported.
"""

from __future__ import annotations

from datetime import MAXYEAR, date
from functools import total_ordering
from typing import Tuple

from luach.core.errors import IllegalArgumentError, UnsupportedOperationError
from luach.core.time import (
    absolute_to_gregorian,
    day_of_week,
    gregorian_to_absolute,
    last_day_of_gregorian_month,
)
from luach.core.types import ADAR, ELUL, NISSAN, TEVES, TISHREI, Field, Kviah
from luach.engines import arithmetic as ar

_TRANSLITERATED_MONTHS = (
    "Nissan", "Iyar", "Sivan", "Tammuz", "Av", "Elul", "Tishrei", "Cheshvan",
    "Kislev", "Teves", "Shevat", "Adar", "Adar II",
)


def validate_jewish_date(year: int, month: int, day: int, hours: int = 0, minutes: int = 0, chalakim: int = 0) -> None:
    if month < NISSAN or month > ar.last_month_of_jewish_year(year):
        raise IllegalArgumentError(
            f"The Jewish month has to be between 1 and 12 (or 13 on a leap year). {month} is invalid for the year {year}."
        )
    if day < 1 or day > 30:
        raise IllegalArgumentError(f"The Jewish day of month can't be < 1 or > 30. {day} is invalid.")
    if (
        year < 3761
        or (year == 3761 and TISHREI <= month < TEVES)
        or (year == 3761 and month == TEVES and day < 18)
    ):
        raise IllegalArgumentError(
            f"A Jewish date earlier than 18 Teves, 3761 (1/1/1 Gregorian) can't be set. {year}, {month}, {day} is invalid."
        )
    validate_molad_time(hours, minutes, chalakim)


def validate_molad_time(hours: int, minutes: int, chalakim: int) -> None:
    if hours < 0 or hours > 23:
        raise IllegalArgumentError(f"Hours < 0 or > 23 can't be set. {hours} is invalid.")
    if minutes < 0 or minutes > 59:
        raise IllegalArgumentError(f"Minutes < 0 or > 59 can't be set. {minutes} is invalid.")
    if chalakim < 0 or chalakim > 17:
        raise IllegalArgumentError(
            f"Chalakim/parts < 0 or > 17 can't be set. {chalakim} is invalid. "
            "Break larger values into minutes (18 chalakim per minute)."
        )


def validate_gregorian_month(month: int) -> None:
    if month < 1 or month > 12:
        raise IllegalArgumentError(f"The Gregorian month has to be between 1 - 12. {month} is invalid.")


def validate_gregorian_day_of_month(day: int) -> None:
    if day <= 0:
        raise IllegalArgumentError(f"The day of month can't be less than 1. {day} is invalid.")


def validate_gregorian_year(year: int) -> None:
    if year < 1:
        raise IllegalArgumentError(f"Years < 1 can't be calculated. {year} is invalid.")


@total_ordering
class JewishDate:
    """
    Build instances through the named factories:

        JewishDate.from_year_month_day(5777, ELUL, 10)
        JewishDate.from_date(date(2017, 9, 1))
        JewishDate.from_molad(chalakim)

    A bare JewishDate() is today's date.

    Instances compare by absolute day but are mutable, so they are not
    hashable; key on abs_date or jewish_ymd() instead.
    """

    def __init__(self, *args) -> None:
        if args:
            raise UnsupportedOperationError(
                "Positional construction is no longer supported; use JewishDate.from_year_month_day(), "
                "JewishDate.from_molad() or JewishDate.from_date()."
            )
        self._molad_hours = 0
        self._molad_minutes = 0
        self._molad_chalakim = 0
        self.set_date(date.today())

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def _blank(cls) -> "JewishDate":
        obj = cls.__new__(cls)
        obj._molad_hours = 0
        obj._molad_minutes = 0
        obj._molad_chalakim = 0
        return obj

    @classmethod
    def from_year_month_day(cls, year: int, month: int, day: int) -> "JewishDate":
        obj = cls._blank()
        obj.set_jewish_date(year, month, day)
        return obj

    @classmethod
    def from_date(cls, d: date) -> "JewishDate":
        obj = cls._blank()
        obj.set_date(d)
        return obj

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int) -> "JewishDate":
        obj = cls._blank()
        obj.set_gregorian_date(year, month, day)
        return obj

    @classmethod
    def from_molad(cls, chalakim: int) -> "JewishDate":
        """The civil day of a molad, with its time of day kept as molad metadata."""
        obj = cls._blank()
        obj._set_absolute(ar.molad_to_abs_date(chalakim))
        _, parts = ar.split_chalakim(chalakim)
        obj._set_molad_time(parts)
        return obj

    @classmethod
    def today(cls) -> "JewishDate":
        return cls.from_date(date.today())

    # ---------------------------------------------------------
    # Internal commit helpers (callers validate first)
    # ---------------------------------------------------------

    def _set_absolute(self, abs_day: int) -> None:
        gy, gm, gd = absolute_to_gregorian(abs_day)
        jy, jm, jd = ar.abs_date_to_jewish_date(abs_day)
        self._gregorian_year, self._gregorian_month, self._gregorian_day = gy, gm, gd
        self._jewish_year, self._jewish_month, self._jewish_day = jy, jm, jd
        self._abs_date = abs_day
        self._day_of_week = day_of_week(abs_day)

    def _set_internal_gregorian_date(self, year: int, month: int, day: int) -> None:
        last = last_day_of_gregorian_month(month, year)
        if day > last:
            day = last
        self._set_absolute(gregorian_to_absolute(year, month, day))

    def _set_molad_time(self, chalakim: int) -> None:
        hours, rest = divmod(chalakim, ar.CHALAKIM_PER_HOUR)
        minutes, parts = divmod(rest, ar.CHALAKIM_PER_MINUTE)
        self._molad_hours, self._molad_minutes, self._molad_chalakim = hours, minutes, parts

    # ---------------------------------------------------------
    # Mutators
    # ---------------------------------------------------------

    def set_date(self, d: date) -> None:
        """Accepts a datetime.date or datetime.datetime; the time of day is ignored."""
        validate_gregorian_year(d.year)
        self._set_absolute(gregorian_to_absolute(d.year, d.month, d.day))

    def set_gregorian_date(self, year: int, month: int, day: int) -> None:
        """Month is 1-based. A day past the end of the month is clamped to its last day."""
        validate_gregorian_month(month)
        validate_gregorian_day_of_month(day)
        validate_gregorian_year(year)
        self._set_internal_gregorian_date(year, month, day)

    def set_gregorian_year(self, year: int) -> None:
        validate_gregorian_year(year)
        self._set_internal_gregorian_date(year, self._gregorian_month, self._gregorian_day)

    def set_gregorian_month(self, month: int) -> None:
        validate_gregorian_month(month)
        self._set_internal_gregorian_date(self._gregorian_year, month, self._gregorian_day)

    def set_gregorian_day_of_month(self, day: int) -> None:
        validate_gregorian_day_of_month(day)
        self._set_internal_gregorian_date(self._gregorian_year, self._gregorian_month, day)

    def set_jewish_date(
        self, year: int, month: int, day: int, hours: int = 0, minutes: int = 0, chalakim: int = 0
    ) -> None:
        """
        Day 30 of a 29-day month is clamped to the 29th, so rolling a month
        or a year never fails on month length alone.
        """
        validate_jewish_date(year, month, day, hours, minutes, chalakim)
        last = ar.days_in_jewish_month(month, year)
        if day > last:
            day = last
        abs_day = ar.jewish_date_to_abs_date(year, month, day)

        self._jewish_year, self._jewish_month, self._jewish_day = year, month, day
        self._molad_hours, self._molad_minutes, self._molad_chalakim = hours, minutes, chalakim
        self._gregorian_year, self._gregorian_month, self._gregorian_day = absolute_to_gregorian(abs_day)
        self._abs_date = abs_day
        self._day_of_week = day_of_week(abs_day)

    def set_jewish_year(self, year: int) -> None:
        self.set_jewish_date(year, self._jewish_month, self._jewish_day)

    def set_jewish_month(self, month: int) -> None:
        self.set_jewish_date(self._jewish_year, month, self._jewish_day)

    def set_jewish_day_of_month(self, day: int) -> None:
        self.set_jewish_date(self._jewish_year, self._jewish_month, day)

    def set_molad_hours(self, hours: int) -> None:
        validate_molad_time(hours, self._molad_minutes, self._molad_chalakim)
        self._molad_hours = hours

    def set_molad_minutes(self, minutes: int) -> None:
        validate_molad_time(self._molad_hours, minutes, self._molad_chalakim)
        self._molad_minutes = minutes

    def set_molad_chalakim(self, chalakim: int) -> None:
        validate_molad_time(self._molad_hours, self._molad_minutes, chalakim)
        self._molad_chalakim = chalakim

    # ---------------------------------------------------------
    # Stepping
    # ---------------------------------------------------------

    def forward(self, field: Field, amount: int) -> None:
        if field not in (Field.DATE, Field.MONTH, Field.YEAR):
            raise IllegalArgumentError(
                "Unsupported field was passed to forward(). Only Field.DATE, Field.MONTH or Field.YEAR are supported."
            )
        if amount < 1:
            raise IllegalArgumentError("forward() does not support amounts less than 1. See back().")

        if field is Field.DATE:
            for _ in range(amount):
                self._next_day()
        elif field is Field.MONTH:
            self._forward_jewish_month(amount)
        else:
            self.set_jewish_year(self._jewish_year + amount)

    def _next_day(self) -> None:
        if self._gregorian_day == last_day_of_gregorian_month(self._gregorian_month, self._gregorian_year):
            self._gregorian_day = 1
            if self._gregorian_month == 12:
                self._gregorian_year += 1
                self._gregorian_month = 1
            else:
                self._gregorian_month += 1
        else:
            self._gregorian_day += 1

        if self._jewish_day == self.days_in_jewish_month():
            if self._jewish_month == ELUL:
                # last day of the year
                self._jewish_year += 1
                self._jewish_month = TISHREI
            elif self._jewish_month == ar.last_month_of_jewish_year(self._jewish_year):
                self._jewish_month = NISSAN
            else:
                self._jewish_month += 1
            self._jewish_day = 1
        else:
            self._jewish_day += 1

        self._day_of_week = 1 if self._day_of_week == 7 else self._day_of_week + 1
        self._abs_date += 1

    def _forward_jewish_month(self, amount: int) -> None:
        for _ in range(amount):
            if self._jewish_month == ELUL:
                self.set_jewish_month(TISHREI)
                self.set_jewish_year(self._jewish_year + 1)
            elif self._jewish_month == ar.last_month_of_jewish_year(self._jewish_year):
                self.set_jewish_month(NISSAN)
            else:
                self.set_jewish_month(self._jewish_month + 1)

    def back(self) -> None:
        """Step back one day."""
        if self._abs_date <= 1:
            raise IllegalArgumentError("Can't step back before 1 January 1 (18 Teves 3761).")

        if self._gregorian_day == 1:
            if self._gregorian_month == 1:
                self._gregorian_month = 12
                self._gregorian_year -= 1
            else:
                self._gregorian_month -= 1
            self._gregorian_day = last_day_of_gregorian_month(self._gregorian_month, self._gregorian_year)
        else:
            self._gregorian_day -= 1

        if self._jewish_day == 1:
            if self._jewish_month == NISSAN:
                self._jewish_month = ar.last_month_of_jewish_year(self._jewish_year)
            elif self._jewish_month == TISHREI:
                # Rosh Hashana back into Elul of the previous year
                self._jewish_year -= 1
                self._jewish_month = ELUL
            else:
                self._jewish_month -= 1
            self._jewish_day = self.days_in_jewish_month()
        else:
            self._jewish_day -= 1

        self._day_of_week = 7 if self._day_of_week == 1 else self._day_of_week - 1
        self._abs_date -= 1

    # ---------------------------------------------------------
    # Molad
    # ---------------------------------------------------------

    def chalakim_since_molad_tohu(self) -> int:
        return ar.chalakim_since_molad_tohu(self._jewish_year, self._jewish_month)

    def get_molad(self) -> "JewishDate":
        """
        The molad of this date's month. Molad Tohu's hours are counted from
        18:00 of the previous evening, so hours >= 6 fall on the next civil day.
        """
        molad = JewishDate.from_molad(self.chalakim_since_molad_tohu())
        if molad._molad_hours >= 6:
            molad.forward(Field.DATE, 1)
        molad._molad_hours = (molad._molad_hours + 18) % 24
        return molad

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    @property
    def jewish_year(self) -> int:
        return self._jewish_year

    @property
    def jewish_month(self) -> int:
        return self._jewish_month

    @property
    def jewish_day_of_month(self) -> int:
        return self._jewish_day

    @property
    def gregorian_year(self) -> int:
        return self._gregorian_year

    @property
    def gregorian_month(self) -> int:
        """1=January."""
        return self._gregorian_month

    @property
    def gregorian_day_of_month(self) -> int:
        return self._gregorian_day

    @property
    def day_of_week(self) -> int:
        """1=Sunday .. 7=Shabbos."""
        return self._day_of_week

    @property
    def abs_date(self) -> int:
        return self._abs_date

    @property
    def molad_hours(self) -> int:
        return self._molad_hours

    @property
    def molad_minutes(self) -> int:
        return self._molad_minutes

    @property
    def molad_chalakim(self) -> int:
        return self._molad_chalakim

    def date(self) -> date:
        if self._gregorian_year > MAXYEAR:
            raise IllegalArgumentError(
                f"Gregorian year {self._gregorian_year} is past datetime.date's range; use abs_date or the gregorian_* fields."
            )
        return date(self._gregorian_year, self._gregorian_month, self._gregorian_day)

    def jewish_ymd(self) -> Tuple[int, int, int]:
        return self._jewish_year, self._jewish_month, self._jewish_day

    def is_jewish_leap_year(self) -> bool:
        return ar.is_jewish_leap_year(self._jewish_year)

    def days_in_jewish_year(self) -> int:
        return ar.days_in_jewish_year(self._jewish_year)

    def days_in_jewish_month(self) -> int:
        return ar.days_in_jewish_month(self._jewish_month, self._jewish_year)

    def is_cheshvan_long(self) -> bool:
        return ar.is_cheshvan_long(self._jewish_year)

    def is_kislev_short(self) -> bool:
        return ar.is_kislev_short(self._jewish_year)

    def cheshvan_kislev_kviah(self) -> Kviah:
        return ar.cheshvan_kislev_kviah(self._jewish_year)

    def days_since_start_of_jewish_year(self) -> int:
        return ar.days_since_start_of_jewish_year(self._jewish_year, self._jewish_month, self._jewish_day)

    def last_day_of_gregorian_month(self, month: int) -> int:
        return last_day_of_gregorian_month(month, self._gregorian_year)

    # ---------------------------------------------------------
    # Value semantics
    # ---------------------------------------------------------

    def copy(self) -> "JewishDate":
        clone = JewishDate.from_year_month_day(self._jewish_year, self._jewish_month, self._jewish_day)
        clone._molad_hours = self._molad_hours
        clone._molad_minutes = self._molad_minutes
        clone._molad_chalakim = self._molad_chalakim
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JewishDate):
            return NotImplemented
        return self._abs_date == other._abs_date

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, JewishDate):
            return NotImplemented
        return self._abs_date < other._abs_date

    def __str__(self) -> str:
        if self.is_jewish_leap_year() and self._jewish_month == ADAR:
            month_name = "Adar I"
        else:
            month_name = _TRANSLITERATED_MONTHS[self._jewish_month - 1]
        return f"{self._jewish_day} {month_name}, {self._jewish_year}"

    def __repr__(self) -> str:
        return (
            f"JewishDate({self._jewish_year}, {self._jewish_month}, {self._jewish_day}; "
            f"{self._gregorian_year:04d}-{self._gregorian_month:02d}-{self._gregorian_day:02d})"
        )
