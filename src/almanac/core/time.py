from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Callable, Optional

from .types import JulianDay

# JD at 1970-01-01 00:00:00 UTC
_JD_UNIX_EPOCH = 2440587.5

Clock = Callable[[], date]


def date_to_jdn(d: date) -> int:
    """Convert a host (proleptic Gregorian) date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def jdn_to_date(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of date_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def julian_day_from_date(d: date) -> JulianDay:
    """Julian Day at the midnight that starts the given civil date."""
    return JulianDay(date_to_jdn(d) - 0.5)

def date_from_julian_day(jd: JulianDay) -> date:
    return jdn_to_date(jd.jdn)

def julian_day_from_datetime(dt: datetime) -> JulianDay:
    """
    Julian Day of an aware datetime (naive values are taken as UTC).
    Only the civil day matters to the calendars; the fraction is kept for completeness.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return JulianDay(_JD_UNIX_EPOCH + dt.timestamp() / 86400.0)

def system_clock() -> date:
    return date.today()

def julian_day_now(clock: Optional[Clock] = None) -> JulianDay:
    """
    Midnight of the current civil day as reported by the clock collaborator.
    The core never reads the clock except through this hook.
    """
    today = (clock or system_clock)()
    return julian_day_from_date(today)
