from __future__ import annotations

from typing import Dict, Type

from .base import Almanac
from .gregorian import GregorianDate
from .hebrew import HebrewDate
from .islamic import IslamicDate
from .julian import JulianDate
from .maya import MayaDate
from .persian import PersianDate

ALL_SYSTEMS: Dict[str, Type[Almanac]] = {
    cls.KEY: cls
    for cls in (GregorianDate, JulianDate, HebrewDate, IslamicDate, PersianDate, MayaDate)
}
