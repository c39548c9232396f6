"""luach public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    day_info,
    to_gregorian,
    rosh_hashana,
    year_info,
    month_bounds,
    days_in_month,
    molad,
    daf_yomi,
    list_attributes,
)
from .core.errors import (
    LuachError,
    IllegalArgumentError,
    UnsupportedOperationError,
    CalendarArithmeticError,
)
from .core.types import Daf, DayInfo, Field, Kviah, Location, Parsha, YomTov
from .engines.calendar import JewishCalendar
from .engines.jewish_date import JewishDate

__all__ = [
    "day_info",
    "to_gregorian",
    "rosh_hashana",
    "year_info",
    "month_bounds",
    "days_in_month",
    "molad",
    "daf_yomi",
    "list_attributes",
    "LuachError",
    "IllegalArgumentError",
    "UnsupportedOperationError",
    "CalendarArithmeticError",
    "Daf",
    "DayInfo",
    "Field",
    "Kviah",
    "Location",
    "Parsha",
    "YomTov",
    "JewishCalendar",
    "JewishDate",
]
