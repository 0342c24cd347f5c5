"""
almanac.calendars.persian
-------------------------
Arithmetic Persian (Solar Hijri) calendar using the 2820-year grand cycle.
There is no year 0.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.types import JulianDay
from .base import YearMonthDay, check_month

EPOCH = JulianDay(1948320.5)  # 1 Farvardin 1 AP

_CYCLE_YEARS = 2820
_CYCLE_DAYS = 1029983


def is_leap_year(year: int) -> bool:
    epbase = year - (474 if year > 0 else 473)
    return ((((epbase % _CYCLE_YEARS) + 474) + 38) * 682) % 2816 < 682


def months_in_year(year: int) -> int:
    return 12


def month_length(year: int, month: int) -> int:
    check_month(month, 12)
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_year(year) else 29


def year_length(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def to_julian_day(year: int, month: int, day: int) -> JulianDay:
    epbase = year - (474 if year >= 0 else 473)
    epyear = 474 + epbase % _CYCLE_YEARS
    if month <= 7:
        mdays = (month - 1) * 31
    else:
        mdays = (month - 1) * 30 + 6
    return JulianDay(
        day
        + mdays
        + (epyear * 682 - 110) // 2816
        + (epyear - 1) * 365
        + (epbase // _CYCLE_YEARS) * _CYCLE_DAYS
        + EPOCH.value - 1
    )


def from_julian_day(jd: JulianDay) -> Tuple[int, int, int]:
    jd = jd.at_midnight()
    depoch = jd - to_julian_day(475, 1, 1)
    cycle, cyear = divmod(depoch, _CYCLE_DAYS)
    if cyear == _CYCLE_DAYS - 1:
        ycycle = _CYCLE_YEARS
    else:
        aux1, aux2 = divmod(cyear, 366)
        ycycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1 + 1

    year = ycycle + _CYCLE_YEARS * cycle + 474
    if year <= 0:
        year -= 1

    yday = jd - to_julian_day(year, 1, 1) + 1
    if yday <= 186:
        month = math.ceil(yday / 31)
    else:
        month = math.ceil((yday - 6) / 30)
    day = jd - to_julian_day(year, month, 1) + 1
    return year, month, day


class PersianDate(YearMonthDay):
    KEY = "persian"
    CALENDAR_NAME = "Persian Calendar"
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
