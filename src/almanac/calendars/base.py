"""
almanac.calendars.base
----------------------
Shared behaviour of every calendar date.

A date value converts to and from the continuous JulianDay axis, reports its month and
weekday names, and can step forward one civil day in place. Equality and hashing use
the numeric components only; ordering goes through the JulianDay so that it stays
chronological for calendars whose month numbering does not start the year.
"""

from __future__ import annotations

import functools
from datetime import date
from typing import Optional, Tuple, Type, TypeVar

from ..core.errors import OutOfRangeError
from ..core.time import Clock, julian_day_from_date, julian_day_now
from ..core.types import CalendarInfo, JulianDay
from .names import NameTable, lookup, name_table

A = TypeVar("A", bound="Almanac")


def check_month(month: int, count: int) -> None:
    if not (1 <= month <= count):
        raise OutOfRangeError(f"month {month} out of range 1..{count}")


@functools.total_ordering
class Almanac:
    """A date in some calendar system. Not safe for concurrent `next_day` on one instance."""

    KEY: str = ""
    CALENDAR_NAME: str = ""
    EPOCH: JulianDay = JulianDay(0.0)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def from_julian_day(cls: Type[A], jd: JulianDay) -> A:
        raise NotImplementedError

    @classmethod
    def from_almanac(cls: Type[A], other: "Almanac") -> A:
        return cls.from_julian_day(other.to_julian_day())

    @classmethod
    def from_date(cls: Type[A], d: date) -> A:
        """From a host (proleptic Gregorian) `datetime.date`."""
        return cls.from_julian_day(julian_day_from_date(d))

    @classmethod
    def today(cls: Type[A], clock: Optional[Clock] = None) -> A:
        return cls.from_julian_day(julian_day_now(clock))

    def to_julian_day(self) -> JulianDay:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Names
    # ---------------------------------------------------------

    @classmethod
    def names(cls) -> NameTable:
        return name_table(cls.KEY)

    @classmethod
    def months(cls) -> Tuple[str, ...]:
        return cls.names().months

    @classmethod
    def month_name_of(cls, month: int) -> str:
        return lookup(cls.names().months, month, what="month")

    @classmethod
    def weekday_name_of(cls, weekday: int) -> str:
        """Weekday name for a 1-based weekday index (1 = first day of the week)."""
        return lookup(cls.names().weekdays, weekday, what="weekday")

    def weekday(self) -> int:
        """0-based day of week; 0 = Sunday for seven-day weeks."""
        return self.to_julian_day().weekday()

    def weekday_name(self) -> str:
        return self.weekday_name_of(self.weekday() + 1)

    def days_in_week(self) -> int:
        return 7

    # ---------------------------------------------------------
    # Subclass hooks
    # ---------------------------------------------------------

    def _key(self) -> Tuple[int, ...]:
        raise NotImplementedError

    def month_name(self) -> str:
        raise NotImplementedError

    def days_in_month(self) -> int:
        raise NotImplementedError

    def months_in_year(self) -> int:
        raise NotImplementedError

    def next_day(self) -> None:
        raise NotImplementedError

    def label(self) -> str:
        raise NotImplementedError

    @classmethod
    def info(cls) -> CalendarInfo:
        t = cls.names()
        return CalendarInfo(
            key=cls.KEY,
            name=cls.CALENDAR_NAME,
            epoch=cls.EPOCH,
            days_in_week=len(t.weekdays),
            month_names=t.months,
            weekday_names=t.weekdays,
        )

    # ---------------------------------------------------------
    # Value semantics
    # ---------------------------------------------------------

    def copy(self: A) -> A:
        return type(self)(*self._key())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Almanac") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_julian_day() < other.to_julian_day()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"{self.CALENDAR_NAME}: {self.label()}"

    def __repr__(self) -> str:
        args = ", ".join(str(x) for x in self._key())
        return f"{type(self).__name__}({args})"


class YearMonthDay(Almanac):
    """
    Base for calendars addressed by (year, month, day).

    Subclasses bind their pure rule functions as static methods:
    `is_leap_year(year)`, `month_length(year, month)`, `month_count(year)`,
    `year_length(year)`, `_compose(year, month, day) -> JulianDay` and
    `_decompose(jd) -> (year, month, day)`.
    """

    def __init__(self, year: int, month: int, day: int):
        self.year = year
        self.month = month
        self.day = day

    @staticmethod
    def is_leap_year(year: int) -> bool:
        raise NotImplementedError

    @staticmethod
    def month_length(year: int, month: int) -> int:
        raise NotImplementedError

    @staticmethod
    def month_count(year: int) -> int:
        return 12

    @staticmethod
    def year_length(year: int) -> int:
        raise NotImplementedError

    @staticmethod
    def _compose(year: int, month: int, day: int) -> JulianDay:
        raise NotImplementedError

    @staticmethod
    def _decompose(jd: JulianDay) -> Tuple[int, int, int]:
        raise NotImplementedError

    @classmethod
    def from_julian_day(cls, jd: JulianDay):
        return cls(*cls._decompose(jd))

    @classmethod
    def month_lengths(cls, year: int) -> Tuple[int, ...]:
        """Lengths of every month of `year`, in month-number order."""
        return tuple(cls.month_length(year, m) for m in range(1, cls.month_count(year) + 1))

    def to_julian_day(self) -> JulianDay:
        return self._compose(self.year, self.month, self.day)

    def _key(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def is_leap(self) -> bool:
        return self.is_leap_year(self.year)

    def days_in_month(self) -> int:
        return self.month_length(self.year, self.month)

    def months_in_year(self) -> int:
        return self.month_count(self.year)

    def days_in_year(self) -> int:
        return self.year_length(self.year)

    def days_per_month(self) -> Tuple[int, ...]:
        return self.month_lengths(self.year)

    def month_name(self) -> str:
        return self.month_name_of(self.month)

    def label(self) -> str:
        return f"{self.day} {self.month_name()}, {self.year}"

    def set(self, year: int, month: int, day: int) -> None:
        self.year = year
        self.month = month
        self.day = day

    def set_from(self, other: Almanac) -> None:
        conv = type(self).from_almanac(other)
        self.set(conv.year, conv.month, conv.day)

    def next_day(self) -> None:
        if self.day < self.days_in_month():
            self.day += 1
            return
        self.day = 1
        self._next_month()

    def _next_month(self) -> None:
        """Month rollover; calendars whose year starts mid-sequence override this."""
        if self.month < self.months_in_year():
            self.month += 1
        else:
            self.month = 1
            self.year += 1
