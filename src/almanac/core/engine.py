from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Protocol

from .errors import UnknownCalendarError
from .types import CalendarInfo, JulianDay

class CalendarSystem(Protocol):
    """What the router and registry need from a calendar date class."""
    KEY: str
    CALENDAR_NAME: str
    EPOCH: JulianDay

    @classmethod
    def from_julian_day(cls, jd: JulianDay) -> "CalendarSystem": ...
    def to_julian_day(self) -> JulianDay: ...
    @classmethod
    def info(cls) -> CalendarInfo: ...

@dataclass
class CalendarRegistry:
    _systems: Dict[str, CalendarSystem]

    def get(self, key: str) -> CalendarSystem:
        if key not in self._systems:
            raise UnknownCalendarError(f"Unknown calendar '{key}'. Available: {sorted(self._systems)}")
        return self._systems[key]

    def list(self) -> List[str]:
        return sorted(self._systems.keys())

    def register(self, key: str, system: CalendarSystem, *, overwrite: bool = False) -> None:
        if (not overwrite) and (key in self._systems):
            raise KeyError(f"Calendar '{key}' already exists. Use overwrite=True to replace.")
        self._systems[key] = system
