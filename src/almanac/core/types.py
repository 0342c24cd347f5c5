from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]

@dataclass(frozen=True, order=True)
class JulianDay:
    """
    Continuous day count shared by every calendar system.

    `value` is an astronomical Julian Date: days elapsed since noon, 1 January 4713 BC
    (proleptic Julian). Civil midnights therefore fall on `.5` values.
    """
    value: float

    @property
    def jdn(self) -> int:
        """Integer Julian Day Number of the civil day containing this instant."""
        return int(math.floor(self.value + 0.5))

    def at_midnight(self) -> "JulianDay":
        """Start (midnight) of the civil day containing this instant."""
        return JulianDay(math.floor(self.value - 0.5) + 0.5)

    def at_noon(self) -> "JulianDay":
        return JulianDay(float(self.jdn))

    def weekday(self) -> int:
        """Day of week, 0 = Sunday ... 6 = Saturday."""
        return int(math.floor(self.value + 1.5)) % 7

    def __add__(self, days: Number) -> "JulianDay":
        if isinstance(days, JulianDay):
            return NotImplemented
        return JulianDay(self.value + days)

    def __radd__(self, days: Number) -> "JulianDay":
        return self.__add__(days)

    def __sub__(self, other):
        if isinstance(other, JulianDay):
            return self.jdn - other.jdn
        return JulianDay(self.value - other)

    def __float__(self) -> float:
        return float(self.value)

@dataclass(frozen=True)
class CalendarInfo:
    """Static description of a registered calendar system."""
    key: str
    name: str
    epoch: JulianDay
    days_in_week: int
    month_names: tuple
    weekday_names: tuple
