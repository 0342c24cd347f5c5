class AlmanacError(Exception):
    """Base error."""

class OutOfRangeError(AlmanacError, IndexError):
    """Raised when a month or weekday index falls outside a calendar's valid range."""

class UnknownCalendarError(AlmanacError, KeyError):
    """Raised when a calendar key is not present in the registry."""
