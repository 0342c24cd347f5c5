"""
almanac.calendars.julian
------------------------
Julian calendar. Historical year numbering: there is no year 0, 1 BC is year -1.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.types import JulianDay
from .base import YearMonthDay, check_month
from .gregorian import MONTH_DAYS

EPOCH = JulianDay(1721423.5)  # 1 January 1, midnight


def is_leap_year(year: int) -> bool:
    return year % 4 == (0 if year > 0 else 3)


def months_in_year(year: int) -> int:
    return 12


def month_length(year: int, month: int) -> int:
    check_month(month, 12)
    if month == 2 and is_leap_year(year):
        return 29
    return MONTH_DAYS[month - 1]


def year_length(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def to_julian_day(year: int, month: int, day: int) -> JulianDay:
    if year < 1:
        year += 1
    if month <= 2:
        year -= 1
        month += 12
    return JulianDay(
        math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day - 1524.5
    )


def from_julian_day(jd: JulianDay) -> Tuple[int, int, int]:
    z = jd.at_midnight().jdn
    b = z + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    day = b - d - math.floor(30.6001 * e)
    if year < 1:
        year -= 1
    return year, month, day


class JulianDate(YearMonthDay):
    KEY = "julian"
    CALENDAR_NAME = "Julian Calendar"
    EPOCH = EPOCH

    is_leap_year = staticmethod(is_leap_year)
    month_length = staticmethod(month_length)
    month_count = staticmethod(months_in_year)
    year_length = staticmethod(year_length)
    _compose = staticmethod(to_julian_day)
    _decompose = staticmethod(from_julian_day)

    def _next_month(self) -> None:
        super()._next_month()
        if self.year == 0:
            self.year = 1
