"""
luach.yomi.yerushalmi
---------------------
Daf Yomi Yerushalmi (Vilna edition, 1554 folios), started 2 February 1980.

No daf is learned on Yom Kippur or Tisha B'Av, so those days are skipped
when counting both the length of a cycle and the position within it.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Tuple

from luach.core.errors import IllegalArgumentError
from luach.core.time import gregorian_to_absolute
from luach.core.types import AV, TISHREI, Daf, YomTov
from luach.engines import arithmetic as ar

logger = logging.getLogger(__name__)

DAF_YOMI_START = date(1980, 2, 2)
DAF_YOMI_START_ABS = gregorian_to_absolute(DAF_YOMI_START.year, DAF_YOMI_START.month, DAF_YOMI_START.day)

WHOLE_SHAS_DAFS = 1554

BLATT_PER_MASECHTA: Tuple[int, ...] = (
    68, 37, 34, 44, 31, 59, 26, 33, 28, 20, 13, 92, 65, 71, 22, 22, 42, 26, 26, 33,
    34, 22, 19, 85, 72, 47, 40, 47, 54, 48, 44, 37, 34, 44, 9, 57, 37, 19, 13,
)


def special_days_between(start_abs: int, end_abs: int) -> int:
    """
    Count 10 Tishrei and 9 Av dates in [start_abs, end_abs).

    The calendar dates are counted, not the observed fast, so a Tisha B'Av
    postponed to 10 Av still skips 9 Av.
    """
    first_year = ar.abs_date_to_jewish_date(start_abs)[0]
    last_year = ar.abs_date_to_jewish_date(end_abs)[0]
    count = 0
    for year in range(first_year, last_year + 1):
        for month, day in ((TISHREI, 10), (AV, 9)):
            if start_abs <= ar.jewish_date_to_abs_date(year, month, day) < end_abs:
                count += 1
    return count


def daf_yomi_yerushalmi(calendar) -> Optional[Daf]:
    """The Yerushalmi daf for the calendar's date, or None on Yom Kippur and Tisha B'Av."""
    if calendar.yom_tov_index() in (YomTov.YOM_KIPPUR, YomTov.TISHA_BEAV):
        return None

    requested = calendar.abs_date
    if requested < DAF_YOMI_START_ABS:
        raise IllegalArgumentError(
            f"{calendar.gregorian_date().isoformat()} is prior to organized Daf Yomi Yerushalmi cycles "
            f"that started on {DAF_YOMI_START.isoformat()}"
        )

    prev_cycle = next_cycle = DAF_YOMI_START_ABS
    while requested > next_cycle:
        prev_cycle = next_cycle
        next_cycle += WHOLE_SHAS_DAFS
        # separate step: the skipped days are counted over the unextended span
        next_cycle += special_days_between(prev_cycle, next_cycle)

    total = requested - prev_cycle - special_days_between(prev_cycle, requested)
    logger.debug("yerushalmi abs %s: cycle start abs %s, day %s", requested, prev_cycle, total)

    for masechta, pages in enumerate(BLATT_PER_MASECHTA):
        if total <= pages:
            return Daf(masechta, total + 1)
        total -= pages

    raise AssertionError(f"day {total} is past the end of the Yerushalmi")
