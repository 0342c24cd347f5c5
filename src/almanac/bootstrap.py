from __future__ import annotations
from almanac.core.engine import CalendarRegistry
from almanac.calendars.systems import ALL_SYSTEMS

def build_registry() -> CalendarRegistry:
    return CalendarRegistry(dict(ALL_SYSTEMS))
