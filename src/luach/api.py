from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

from .attributes import standard as _standard  # noqa: F401  (registers the built-in attributes)
from .attributes.registry import compute_attributes, list_attributes as _list_attributes
from .core.errors import IllegalArgumentError
from .core.time import day_of_week
from .core.types import TISHREI, Daf, DayInfo, JERUSALEM, Location
from .engines import arithmetic as ar
from .engines.calendar import JewishCalendar
from .engines.jewish_date import JewishDate
from .engines.parsha import year_type

logger = logging.getLogger(__name__)


def list_attributes() -> List[str]:
    return _list_attributes()

def day_info(
    d: date,
    *,
    in_israel: bool = False,
    use_modern_holidays: bool = False,
    attributes: Sequence[str] = (),
) -> DayInfo:
    cal = JewishCalendar.from_date(d, in_israel=in_israel, use_modern_holidays=use_modern_holidays)
    info = DayInfo(
        civil_date=cal.gregorian_date(),
        jewish_year=cal.jewish_year,
        jewish_month=cal.jewish_month,
        jewish_day=cal.jewish_day_of_month,
        day_of_week=cal.day_of_week,
        in_israel=in_israel,
        yom_tov=cal.yom_tov_index(),
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(cal, attributes))
    logger.debug("day_info %s -> %s", d, cal)
    return info

def to_gregorian(year: int, month: int, day: int) -> date:
    """Hebrew (year, month, day) -> civil date. Month 1 = Nissan."""
    return JewishDate.from_year_month_day(year, month, day).date()

def rosh_hashana(year: int) -> date:
    return to_gregorian(year, TISHREI, 1)

# ============================================================
# Year / month level
# ============================================================

def year_info(year: int, *, in_israel: bool = False) -> Dict[str, Any]:
    rh = JewishCalendar.from_year_month_day(year, TISHREI, 1, in_israel=in_israel)
    return {
        "year": year,
        "leap": ar.is_jewish_leap_year(year),
        "length": ar.days_in_jewish_year(year),
        "kviah": ar.cheshvan_kislev_kviah(year).name.lower(),
        "rosh_hashana": rh.gregorian_date(),
        "rosh_hashana_day_of_week": ar.rosh_hashana_day_of_week(year),
        "months": ar.last_month_of_jewish_year(year),
        "year_type": year_type(rh),
    }

def month_bounds(year: int, month: int) -> Dict[str, Any]:
    first = JewishDate.from_year_month_day(year, month, 1)
    n = first.days_in_jewish_month()
    last_abs = first.abs_date + n - 1
    return {
        "year": year,
        "month": month,
        "days": n,
        "first_abs": first.abs_date,
        "last_abs": last_abs,
        "first_date": first.date(),
        "last_date": JewishDate.from_year_month_day(year, month, n).date(),
    }

def days_in_month(year: int, month: int, *, in_israel: bool = False) -> List[Dict[str, Any]]:
    """One row per day of a Hebrew month."""
    cal = JewishCalendar.from_year_month_day(year, month, 1, in_israel=in_israel)
    rows = []
    for day in range(1, cal.days_in_jewish_month() + 1):
        cal.set_jewish_date(year, month, day)
        rows.append({
            "date": cal.gregorian_date(),
            "abs": cal.abs_date,
            "day": day,
            "day_of_week": day_of_week(cal.abs_date),
            "yom_tov": cal.yom_tov_index(),
        })
    return rows

def molad(year: int, month: int, *, location: Location = JERUSALEM) -> Dict[str, Any]:
    cal = JewishCalendar.from_year_month_day(year, month, 1)
    m = cal.molad()
    instant: datetime = cal.molad_as_datetime(location)
    return {
        "year": year,
        "month": month,
        "chalakim": cal.date.chalakim_since_molad_tohu(),
        "date": m.date(),
        "day_of_week": m.day_of_week,
        "hours": m.molad_hours,
        "minutes": m.molad_minutes,
        "parts": m.molad_chalakim,
        "instant": instant,
    }

# ============================================================
# Daf Yomi
# ============================================================

def daf_yomi(d: date) -> Dict[str, Optional[Daf]]:
    """Bavli and Yerushalmi daf for a civil date; None where no cycle applies."""
    cal = JewishCalendar.from_date(d)
    out: Dict[str, Optional[Daf]] = {}
    try:
        out["bavli"] = cal.daf_yomi_bavli()
    except IllegalArgumentError:
        logger.info("no Daf Yomi Bavli before the first cycle: %s", d)
        out["bavli"] = None
    try:
        out["yerushalmi"] = cal.daf_yomi_yerushalmi()
    except IllegalArgumentError:
        logger.info("no Daf Yomi Yerushalmi before the first cycle: %s", d)
        out["yerushalmi"] = None
    return out
