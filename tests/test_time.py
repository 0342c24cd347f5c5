# tests/test_time.py

import random
from datetime import date, datetime, timezone
from unittest.mock import patch

from almanac.core import time as tm
from almanac.core.types import JulianDay


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(5000):
        jdn_in = random.randint(1721426, 5373484)
        d = tm.jdn_to_date(jdn_in)
        assert tm.date_to_jdn(d) == jdn_in


def test_known_epochs():
    assert tm.date_to_jdn(date(2000, 1, 1)) == 2451545
    assert tm.julian_day_from_date(date(2000, 1, 1)) == JulianDay(2451544.5)
    assert tm.date_from_julian_day(JulianDay(2451545.0)) == date(2000, 1, 1)

    unix_dt = datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert tm.julian_day_from_datetime(unix_dt) == JulianDay(2440587.5)
    # naive datetimes are taken as UTC
    assert tm.julian_day_from_datetime(datetime(1970, 1, 1, 12)) == JulianDay(2440588.0)


def test_clock_collaborator_is_injected():
    assert tm.julian_day_now(lambda: date(2024, 10, 3)) == JulianDay(2460586.5)


def test_default_clock_can_be_patched():
    with patch("almanac.core.time.system_clock") as mock:
        mock.return_value = date(2000, 1, 1)
        assert tm.julian_day_now() == JulianDay(2451544.5)
        mock.assert_called_once()
