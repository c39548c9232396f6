from __future__ import annotations
from typing import Any, Dict

from ..core.errors import IllegalArgumentError
from ..engines import parsha as _parsha
from .registry import register_attribute

def kviah(cal) -> Dict[str, Any]:
    return {
        "leap_year": cal.is_jewish_leap_year(),
        "kviah": cal.cheshvan_kislev_kviah().name.lower(),
        "year_length": cal.date.days_in_jewish_year(),
    }

def occasions(cal) -> Dict[str, Any]:
    return {
        "rosh_chodesh": cal.is_rosh_chodesh(),
        "erev_rosh_chodesh": cal.is_erev_rosh_chodesh(),
        "taanis": cal.is_taanis(),
        "chol_hamoed": cal.is_chol_hamoed(),
        "assur_bemelacha": cal.is_assur_bemelacha(),
        "candle_lighting": cal.has_candle_lighting(),
    }

def omer(cal) -> Dict[str, Any]:
    return {"omer": cal.day_of_omer()}

def chanukah(cal) -> Dict[str, Any]:
    return {"chanukah": cal.day_of_chanukah()}

def parsha(cal) -> Dict[str, Any]:
    p = _parsha.parsha(cal)
    s = _parsha.special_shabbos(cal)
    return {
        "parsha": p.name if p is not _parsha.P.NONE else None,
        "special_shabbos": s.name if s is not _parsha.P.NONE else None,
    }

def molad(cal) -> Dict[str, Any]:
    return {"molad": cal.molad_as_datetime().isoformat()}

def daf_bavli(cal) -> Dict[str, Any]:
    # None before the first cycle
    try:
        d = cal.daf_yomi_bavli()
    except IllegalArgumentError:
        return {"daf_bavli": None}
    return {"daf_bavli": (d.masechta_transliterated(), d.daf)}

def daf_yerushalmi(cal) -> Dict[str, Any]:
    try:
        d = cal.daf_yomi_yerushalmi()
    except IllegalArgumentError:
        return {"daf_yerushalmi": None}
    if d is None:
        return {"daf_yerushalmi": None}
    return {"daf_yerushalmi": (d.yerushalmi_masechta_transliterated(), d.daf)}

register_attribute("kviah", kviah)
register_attribute("occasions", occasions)
register_attribute("omer", omer)
register_attribute("chanukah", chanukah)
register_attribute("parsha", parsha)
register_attribute("molad", molad)
register_attribute("daf_bavli", daf_bavli)
register_attribute("daf_yerushalmi", daf_yerushalmi)
