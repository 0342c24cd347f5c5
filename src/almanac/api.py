from __future__ import annotations

from datetime import date
from typing import List, Optional, Type, Union

from . import router
from .calendars.base import Almanac
from .core.engine import CalendarRegistry
from .core.time import Clock, date_from_julian_day, julian_day_from_date, julian_day_now
from .core.types import CalendarInfo, JulianDay

Target = Union[str, Type[Almanac]]
_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def _resolve(target: Target) -> Type[Almanac]:
    if isinstance(target, str):
        return _reg().get(target)
    return target

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(key: str) -> Type[Almanac]:
    return _reg().get(key)

def calendar_info(key: str) -> CalendarInfo:
    return _reg().get(key).info()

def register_calendar(key: str, system: Type[Almanac], *, overwrite: bool = False) -> None:
    _reg().register(key, system, overwrite=overwrite)

def make_date(key: str, *components: int) -> Almanac:
    """`make_date("hebrew", 5784, 7, 1)`; Maya takes its five Long Count digits."""
    return _reg().get(key)(*components)

def convert(d: Almanac, target: Target) -> Almanac:
    return router.convert(d, _resolve(target))

def convert_all(d: Almanac) -> List[Almanac]:
    """`d` expressed in every registered calendar, in registry order."""
    jd = d.to_julian_day()
    return [router.from_julian_day(jd, _reg().get(k)) for k in _reg().list()]

def from_julian_day(jd: Union[JulianDay, float], target: Target = "gregorian") -> Almanac:
    return router.from_julian_day(jd, _resolve(target))

def from_date(d: date, target: Target = "gregorian") -> Almanac:
    return router.from_julian_day(julian_day_from_date(d), _resolve(target))

def to_date(d: Almanac) -> date:
    """Host (proleptic Gregorian) `datetime.date` for any calendar date."""
    return date_from_julian_day(d.to_julian_day())

def today(target: Target = "gregorian", *, clock: Optional[Clock] = None) -> Almanac:
    return router.from_julian_day(julian_day_now(clock), _resolve(target))
