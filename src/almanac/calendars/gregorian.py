"""
almanac.calendars.gregorian
---------------------------
Proleptic Gregorian calendar (astronomical year numbering, year 0 exists).
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import JulianDay
from .base import YearMonthDay, check_month

EPOCH = JulianDay(1721425.5)  # 1 January 1, midnight

MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0) and not ((year % 100 == 0) and (year % 400 != 0))


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
    y1 = year - 1
    if month <= 2:
        adj = 0
    else:
        adj = -1 if is_leap_year(year) else -2
    return JulianDay(
        EPOCH.value - 1
        + 365 * y1 + y1 // 4 - y1 // 100 + y1 // 400
        + (367 * month - 362) // 12 + adj + day
    )


def from_julian_day(jd: JulianDay) -> Tuple[int, int, int]:
    wjd = jd.at_midnight()
    depoch = wjd - EPOCH

    quadricent, dqc = divmod(depoch, 146097)
    cent, dcent = divmod(dqc, 36524)
    quad, dquad = divmod(dcent, 1461)
    yindex = dquad // 365

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    # Last day of a 4- or 400-year cycle belongs to the year being counted.
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = wjd - to_julian_day(year, 1, 1)
    if wjd < to_julian_day(year, 3, 1):
        leapadj = 0
    else:
        leapadj = 1 if is_leap_year(year) else 2
    month = ((yearday + leapadj) * 12 + 373) // 367
    day = wjd - to_julian_day(year, month, 1) + 1
    return year, month, day


class GregorianDate(YearMonthDay):
    KEY = "gregorian"
    CALENDAR_NAME = "Gregorian Calendar"
    EPOCH = EPOCH

    is_leap_year = staticmethod(is_leap_year)
    month_length = staticmethod(month_length)
    month_count = staticmethod(months_in_year)
    year_length = staticmethod(year_length)
    _compose = staticmethod(to_julian_day)
    _decompose = staticmethod(from_julian_day)
