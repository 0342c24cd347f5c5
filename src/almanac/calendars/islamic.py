"""
almanac.calendars.islamic
-------------------------
Arithmetic (tabular) Islamic calendar: 30-year cycle with 11 leap years,
alternating 30/29-day months and a 30-day Dhu al-Hijjah in leap years.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.types import JulianDay
from .base import YearMonthDay, check_month

EPOCH = JulianDay(1948439.5)  # 1 Muharram 1 AH


def is_leap_year(year: int) -> bool:
    return ((year * 11) + 14) % 30 < 11


def months_in_year(year: int) -> int:
    return 12


def month_length(year: int, month: int) -> int:
    check_month(month, 12)
    if month % 2 == 1 or (month == 12 and is_leap_year(year)):
        return 30
    return 29


def year_length(year: int) -> int:
    return 355 if is_leap_year(year) else 354


def to_julian_day(year: int, month: int, day: int) -> JulianDay:
    return JulianDay(
        day
        + math.ceil(29.5 * (month - 1))
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + EPOCH.value - 1
    )


def from_julian_day(jd: JulianDay) -> Tuple[int, int, int]:
    jd = jd.at_midnight()
    year = (30 * (jd - EPOCH) + 10646) // 10631
    month = min(12, math.ceil((jd - to_julian_day(year, 1, 1) - 29) / 29.5) + 1)
    day = jd - to_julian_day(year, month, 1) + 1
    return year, month, day


class IslamicDate(YearMonthDay):
    KEY = "islamic"
    CALENDAR_NAME = "Islamic Calendar"
    EPOCH = EPOCH

    is_leap_year = staticmethod(is_leap_year)
    month_length = staticmethod(month_length)
    month_count = staticmethod(months_in_year)
    year_length = staticmethod(year_length)
    _compose = staticmethod(to_julian_day)
    _decompose = staticmethod(from_julian_day)
