"""
luach.yomi.bavli
----------------
Daf Yomi Bavli: one folio of the Babylonian Talmud per day, in a fixed
order, since 11 September 1923.

The first seven cycles used the 13-folio Vilna Shekalim and ran 2702 days.
From 24 June 1975 (the start of cycle 8) Shekalim is learned as 22 folios
and a cycle runs 2711 days.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Tuple

from luach.core.errors import IllegalArgumentError
from luach.core.time import absolute_to_jdn, from_jdn, to_jdn
from luach.core.types import Daf

logger = logging.getLogger(__name__)

DAF_YOMI_START = date(1923, 9, 11)
SHEKALIM_CHANGE = date(1975, 6, 24)

DAF_YOMI_START_JDN = to_jdn(DAF_YOMI_START)
SHEKALIM_CHANGE_JDN = to_jdn(SHEKALIM_CHANGE)

CYCLE_DAYS_BEFORE_CHANGE = 2702
CYCLE_DAYS = 2711

# Folios per tractate in learning order, with the 22-folio Shekalim.
BLATT_PER_MASECHTA: Tuple[int, ...] = (
    64, 157, 105, 121, 22, 88, 56, 40, 35, 31, 32, 29, 27, 122, 112, 91, 66, 49, 90, 82,
    119, 119, 176, 113, 24, 49, 76, 14, 120, 110, 142, 61, 34, 34, 28, 22, 4, 10, 4, 73,
)
SHEKALIM = 4

# Kinnim, Tamid and Midos are printed on continuing folio numbers
_FOLIO_OFFSET = {36: 21, 37: 24, 38: 33}


def cycle_and_day(jdn: int) -> Tuple[int, int]:
    """(cycle number, 0-based day within the cycle) for a Julian Day Number."""
    if jdn < DAF_YOMI_START_JDN:
        raise IllegalArgumentError(
            f"{from_jdn(jdn).isoformat()} is prior to organized Daf Yomi Bavli cycles that started on {DAF_YOMI_START.isoformat()}"
        )
    if jdn >= SHEKALIM_CHANGE_JDN:
        cycle, day = divmod(jdn - SHEKALIM_CHANGE_JDN, CYCLE_DAYS)
        return 8 + cycle, day
    cycle, day = divmod(jdn - DAF_YOMI_START_JDN, CYCLE_DAYS_BEFORE_CHANGE)
    return 1 + cycle, day


def daf_yomi_bavli(calendar) -> Daf:
    """The Bavli daf learned on the calendar's civil date."""
    jdn = absolute_to_jdn(calendar.abs_date)
    cycle, daf_no = cycle_and_day(jdn)

    blatt = list(BLATT_PER_MASECHTA)
    if cycle <= 7:
        blatt[SHEKALIM] = 13

    total = 0
    for masechta, pages in enumerate(blatt):
        total += pages - 1
        if daf_no < total:
            page = 1 + pages - (total - daf_no)
            page += _FOLIO_OFFSET.get(masechta, 0)
            logger.debug("bavli jdn %s: cycle %s day %s -> masechta %s daf %s", jdn, cycle, daf_no, masechta, page)
            return Daf(masechta, page)

    raise AssertionError(f"day {daf_no} of cycle {cycle} is past the end of Shas")
