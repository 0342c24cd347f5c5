"""
almanac.calendars.hebrew
------------------------
Hebrew (Jewish) lunisolar calendar.

Months are numbered from Nisan (1) but the year number changes at Tishri (7).
Leap years follow the 19-year Metonic cycle and insert a 13th month (Veadar).
The year length (353-355 or 383-385 days) is measured by differencing the JulianDay
of two consecutive 1 Tishri anchors; Heshvan (8) and Kislev (9) gain or lose a day
depending on that length.
"""

from __future__ import annotations

import functools
import math
from typing import Tuple

from ..core.types import JulianDay
from .base import YearMonthDay, check_month

EPOCH = JulianDay(347995.5)

# Mean year length in days, as the ratio 35975351 / 98496 (235 lunations per 19 years).
_MEAN_YEAR_NUM = 98496
_MEAN_YEAR_DEN = 35975351

# Parts ("halakim") per day and the molad arithmetic constants.
_PARTS_PER_DAY = 25920
_MOLAD_BASE_PARTS = 12084
_PARTS_PER_MONTH_REM = 13753

_FIXED_29 = (2, 4, 6, 10, 13)


def is_leap_year(year: int) -> bool:
    return ((7 * year) + 1) % 19 < 7


def months_in_year(year: int) -> int:
    return 13 if is_leap_year(year) else 12


def _elapsed_days(year: int) -> int:
    """Days from the epoch to the molad of Tishri of `year`, with the weekday postponement."""
    months = (235 * year - 234) // 19
    parts = _MOLAD_BASE_PARTS + _PARTS_PER_MONTH_REM * months
    day = months * 29 + parts // _PARTS_PER_DAY
    if (3 * (day + 1)) % 7 < 3:
        day += 1
    return day


def _year_delay(year: int) -> int:
    """Extra postponement keeping neighbouring year lengths in range."""
    last = _elapsed_days(year - 1)
    present = _elapsed_days(year)
    nxt = _elapsed_days(year + 1)
    if nxt - present == 356:
        return 2
    if present - last == 382:
        return 1
    return 0


@functools.lru_cache(maxsize=1024)
def year_length(year: int) -> int:
    """
    Number of days in `year`, measured between 1 Tishri of `year` and of `year + 1`.
    Composing month 7 sums no month lengths, so this never recurses into itself.
    """
    return to_julian_day(year + 1, 7, 1) - to_julian_day(year, 7, 1)


def month_length(year: int, month: int) -> int:
    check_month(month, 13)

    if month in _FIXED_29:
        return 29
    # Adar has 29 days in common years.
    if month == 12 and not is_leap_year(year):
        return 29
    # Heshvan and Kislev depend on the length of the year.
    if month == 8 and year_length(year) % 10 != 5:
        return 29
    if month == 9 and year_length(year) % 10 == 3:
        return 29
    return 30


def to_julian_day(year: int, month: int, day: int) -> JulianDay:
    jd = EPOCH.value + _elapsed_days(year) + _year_delay(year) + day + 1
    if month < 7:
        for m in range(7, months_in_year(year) + 1):
            jd += month_length(year, m)
        for m in range(1, month):
            jd += month_length(year, m)
    else:
        for m in range(7, month):
            jd += month_length(year, m)
    return JulianDay(jd)


def from_julian_day(jd: JulianDay) -> Tuple[int, int, int]:
    jd = jd.at_midnight()

    count = math.floor(((jd.value - EPOCH.value) * _MEAN_YEAR_NUM) / _MEAN_YEAR_DEN)
    year = count - 1
    i = count
    while jd >= to_julian_day(i, 7, 1):
        i += 1
        year += 1

    month = 7 if jd < to_julian_day(year, 1, 1) else 1
    while jd > to_julian_day(year, month, month_length(year, month)):
        month += 1

    day = jd - to_julian_day(year, month, 1) + 1
    return year, month, day


class HebrewDate(YearMonthDay):
    KEY = "hebrew"
    CALENDAR_NAME = "Hebrew Calendar"
    EPOCH = EPOCH

    is_leap_year = staticmethod(is_leap_year)
    month_length = staticmethod(month_length)
    month_count = staticmethod(months_in_year)
    year_length = staticmethod(year_length)
    _compose = staticmethod(to_julian_day)
    _decompose = staticmethod(from_julian_day)

    def _next_month(self) -> None:
        # The last month rolls back to Nisan within the same year; the year turns at Tishri.
        if self.month == self.months_in_year():
            self.month = 1
        else:
            self.month += 1
            if self.month == 7:
                self.year += 1
