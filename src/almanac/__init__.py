"""almanac public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    get_calendar,
    calendar_info,
    register_calendar,
    make_date,
    convert,
    convert_all,
    from_julian_day,
    from_date,
    to_date,
    today,
)
from .calendars.base import Almanac, YearMonthDay
from .calendars.gregorian import GregorianDate
from .calendars.hebrew import HebrewDate
from .calendars.islamic import IslamicDate
from .calendars.julian import JulianDate
from .calendars.maya import MayaDate
from .calendars.persian import PersianDate
from .core.errors import AlmanacError, OutOfRangeError, UnknownCalendarError
from .core.types import JulianDay

__all__ = [
    "list_calendars",
    "get_calendar",
    "calendar_info",
    "register_calendar",
    "make_date",
    "convert",
    "convert_all",
    "from_julian_day",
    "from_date",
    "to_date",
    "today",
    "Almanac",
    "YearMonthDay",
    "GregorianDate",
    "JulianDate",
    "HebrewDate",
    "IslamicDate",
    "PersianDate",
    "MayaDate",
    "AlmanacError",
    "OutOfRangeError",
    "UnknownCalendarError",
    "JulianDay",
]
