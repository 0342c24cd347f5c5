"""
almanac.calendars.names
-----------------------
Month and weekday name tables, keyed by calendar system.

Tables are 0-based internally and addressed 1-based externally: `lookup(months, 1)`
is the first month. They are loaded once at import and treated as read-only;
`set_name_table` is the seam for swapping in localized tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..core.errors import OutOfRangeError


@dataclass(frozen=True)
class NameTable:
    months: Tuple[str, ...]
    weekdays: Tuple[str, ...]


ENGLISH_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
ENGLISH_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

HEBREW_MONTHS = (
    "Nisan", "Iyyar", "Sivan", "Tammuz", "Av", "Elul",
    "Tishri", "Heshvan", "Kislev", "Teveth", "Shevat", "Adar", "Veadar",
)
HEBREW_WEEKDAYS = (
    "Yom Rishon", "Yom Sheni", "Yom Shlishi", "Yom Revi'i", "Yom Chamishi", "Yom Shishi", "Shabbat",
)

ISLAMIC_MONTHS = (
    "Muharram", "Safar", "Rabi' al-Awwal", "Rabi' al-Thani", "Jumada al-Ula", "Jumada al-Akhirah",
    "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qa'dah", "Dhu al-Hijjah",
)
ISLAMIC_WEEKDAYS = ("al-Ahad", "al-Ithnayn", "al-Thulatha'", "al-Arba'a", "al-Khamis", "al-Jumu'a", "al-Sabt")

PERSIAN_MONTHS = (
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
)
PERSIAN_WEEKDAYS = ("Yekshanbeh", "Doshanbeh", "Seshanbeh", "Chaharshanbeh", "Panjshanbeh", "Jomeh", "Shanbeh")

# Haab' months (18 x 20 days + Wayeb) and Tzolk'in day names.
MAYA_HAAB_MONTHS = (
    "Pop", "Wo'", "Sip", "Sotz'", "Sek", "Xul", "Yaxk'in'", "Mol", "Ch'en", "Yax",
    "Sak'", "Keh", "Mak", "K'ank'in", "Muwan'", "Pax", "K'ayab", "Kumk'u", "Wayeb",
)
MAYA_TZOLKIN_DAYS = (
    "Imix'", "Ik'", "Ak'b'al", "K'an", "Chikchan", "Kimi", "Manik'", "Lamat", "Muluk", "Ok",
    "Chuwen", "Eb'", "B'en", "Ix", "Men", "Kib'", "Kab'an", "Etz'nab'", "Kawak", "Ajaw",
)

_TABLES: Dict[str, NameTable] = {
    "gregorian": NameTable(ENGLISH_MONTHS, ENGLISH_WEEKDAYS),
    "julian": NameTable(ENGLISH_MONTHS, ENGLISH_WEEKDAYS),
    "hebrew": NameTable(HEBREW_MONTHS, HEBREW_WEEKDAYS),
    "islamic": NameTable(ISLAMIC_MONTHS, ISLAMIC_WEEKDAYS),
    "persian": NameTable(PERSIAN_MONTHS, PERSIAN_WEEKDAYS),
    "maya": NameTable(MAYA_HAAB_MONTHS, MAYA_TZOLKIN_DAYS),
}


def name_table(key: str) -> NameTable:
    if key not in _TABLES:
        raise KeyError(f"No name table for '{key}'. Available: {sorted(_TABLES)}")
    return _TABLES[key]


def set_name_table(key: str, table: NameTable) -> Optional[NameTable]:
    """Replace the table for `key`; returns the previous one (if any)."""
    prev = _TABLES.get(key)
    _TABLES[key] = table
    return prev


def lookup(names: Tuple[str, ...], index: int, *, what: str = "index") -> str:
    """1-based lookup that never wraps: index 0 or negative indices are errors too."""
    if not (1 <= index <= len(names)):
        raise OutOfRangeError(f"{what} {index} out of range 1..{len(names)}")
    return names[index - 1]
