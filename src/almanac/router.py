"""
almanac.router
--------------
Conversion between calendar systems. The JulianDay is the only path between two
systems: `convert(d, B)` is `B.from_julian_day(d.to_julian_day())`.
"""

from __future__ import annotations

from typing import Type, TypeVar, Union

from .calendars.base import Almanac
from .core.types import JulianDay

B = TypeVar("B", bound=Almanac)


def to_julian_day(d: Almanac) -> JulianDay:
    return d.to_julian_day()


def from_julian_day(jd: Union[JulianDay, float], target: Type[B]) -> B:
    if not isinstance(jd, JulianDay):
        jd = JulianDay(float(jd))
    return target.from_julian_day(jd)


def convert(d: Almanac, target: Type[B]) -> B:
    return from_julian_day(to_julian_day(d), target)
