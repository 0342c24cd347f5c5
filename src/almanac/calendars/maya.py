"""
almanac.calendars.maya
----------------------
Maya Long Count with the Haab' and Tzolk'in cycles.

The Long Count is a mixed-radix day count from the Maya epoch (GMT correlation,
JD 584282.5 = 13 August 3114 BC, proleptic Gregorian):

    Unit      Radix   Days
    k'in        -        1
    uinal      20       20
    tun        18      360
    k'atun     20    7,200
    b'ak'tun   20  144,000

There are no years or months. For the shared date interface the Haab' month plays
the role of the month and the 20-day Tzolk'in name cycle plays the role of the week.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import JulianDay
from .base import Almanac, check_month

EPOCH = JulianDay(584282.5)

# Place values, most significant first: b'ak'tun, k'atun, tun, uinal, k'in.
PLACE_VALUES = (144000, 7200, 360, 20, 1)
# Radix of each place below b'ak'tun, least significant first: k'in, uinal, tun, k'atun.
_CARRY_RADICES = (20, 18, 20, 20)

HAAB_MONTHS = 19
HAAB_YEAR = 365
TZOLKIN_NAMES = 20
TZOLKIN_NUMBERS = 13


def day_count(jd: JulianDay) -> int:
    """Whole days elapsed since the Maya epoch."""
    return jd.at_midnight() - EPOCH


def from_julian_day(jd: JulianDay) -> Tuple[int, int, int, int, int]:
    d = day_count(jd)
    digits = []
    for place in PLACE_VALUES:
        q, d = divmod(d, place)
        digits.append(q)
    return tuple(digits)


def to_julian_day(baktun: int, katun: int, tun: int, uinal: int, kin: int) -> JulianDay:
    days = sum(v * p for v, p in zip((baktun, katun, tun, uinal, kin), PLACE_VALUES))
    return EPOCH + days


def haab(jd: JulianDay) -> Tuple[int, int]:
    """(month 1..19, day 0..19) in the 365-day Haab'. The epoch is 8 Kumk'u."""
    d = (day_count(jd) + 8 + (18 - 1) * 20) % HAAB_YEAR
    return d // 20 + 1, d % 20


def tzolkin(jd: JulianDay) -> Tuple[int, int]:
    """(day name 1..20, number 1..13) in the 260-day Tzolk'in. The epoch is 4 Ajaw."""
    d = day_count(jd)
    return (d + 19) % TZOLKIN_NAMES + 1, (d + 3) % TZOLKIN_NUMBERS + 1


def haab_month_length(month: int) -> int:
    check_month(month, HAAB_MONTHS)
    return 5 if month == HAAB_MONTHS else 20


class MayaDate(Almanac):
    KEY = "maya"
    CALENDAR_NAME = "Maya Calendar"
    EPOCH = EPOCH

    def __init__(self, baktun: int, katun: int, tun: int, uinal: int, kin: int):
        self.baktun = baktun
        self.katun = katun
        self.tun = tun
        self.uinal = uinal
        self.kin = kin

    @classmethod
    def from_julian_day(cls, jd: JulianDay) -> "MayaDate":
        return cls(*from_julian_day(jd))

    def to_julian_day(self) -> JulianDay:
        return to_julian_day(*self._key())

    def _key(self) -> Tuple[int, int, int, int, int]:
        return (self.baktun, self.katun, self.tun, self.uinal, self.kin)

    def set(self, baktun: int, katun: int, tun: int, uinal: int, kin: int) -> None:
        self.baktun, self.katun, self.tun, self.uinal, self.kin = baktun, katun, tun, uinal, kin

    def set_from(self, other: Almanac) -> None:
        self.set(*from_julian_day(other.to_julian_day()))

    def next_day(self) -> None:
        digits = [self.kin, self.uinal, self.tun, self.katun]
        carry = 1
        for i, radix in enumerate(_CARRY_RADICES):
            carry, digits[i] = divmod(digits[i] + carry, radix)
            if not carry:
                break
        self.kin, self.uinal, self.tun, self.katun = digits
        self.baktun += carry

    def label(self) -> str:
        return ".".join(str(x) for x in self._key())

    # ---------------------------------------------------------
    # Haab' / Tzolk'in
    # ---------------------------------------------------------

    def haab(self) -> Tuple[int, int]:
        return haab(self.to_julian_day())

    def tzolkin(self) -> Tuple[int, int]:
        return tzolkin(self.to_julian_day())

    def haab_label(self) -> str:
        month, day = self.haab()
        return f"{day} {self.month_name_of(month)}"

    def tzolkin_label(self) -> str:
        name, number = self.tzolkin()
        return f"{number} {self.weekday_name_of(name)}"

    def calendar_round(self) -> str:
        return f"{self.tzolkin_label()} {self.haab_label()}"

    def month_name(self) -> str:
        return self.month_name_of(self.haab()[0])

    def weekday(self) -> int:
        return self.tzolkin()[0] - 1

    def days_in_week(self) -> int:
        return TZOLKIN_NAMES

    def days_in_month(self) -> int:
        return haab_month_length(self.haab()[0])

    def months_in_year(self) -> int:
        return HAAB_MONTHS
