# tests/test_api.py

from datetime import date

import pytest

import almanac
from almanac.core.errors import UnknownCalendarError
from almanac.core.types import JulianDay


def test_list_and_info():
    assert almanac.list_calendars() == ["gregorian", "hebrew", "islamic", "julian", "maya", "persian"]
    info = almanac.calendar_info("hebrew")
    assert info.name == "Hebrew Calendar"
    assert info.epoch == JulianDay(347995.5)
    assert info.days_in_week == 7
    assert len(info.month_names) == 13
    assert almanac.calendar_info("maya").days_in_week == 20


def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError, match="Available"):
        almanac.get_calendar("coptic")
    with pytest.raises(KeyError):
        almanac.convert(almanac.GregorianDate(2000, 1, 1), "coptic")


@pytest.fixture
def fresh_registry(monkeypatch):
    from almanac import api
    from almanac.bootstrap import build_registry

    monkeypatch.setattr(api, "_registry", build_registry())


def test_register_calendar(fresh_registry):
    class ProlepticGregorian(almanac.GregorianDate):
        KEY = "gregorian"
        CALENDAR_NAME = "Proleptic Gregorian"

    with pytest.raises(KeyError, match="already exists"):
        almanac.register_calendar("gregorian", ProlepticGregorian)

    almanac.register_calendar("iso", ProlepticGregorian)
    d = almanac.convert(almanac.HebrewDate(5760, 10, 23), "iso")
    assert str(d) == "Proleptic Gregorian: 1 January, 2000"
    assert "iso" in almanac.list_calendars()


def test_make_date_and_host_dates():
    d = almanac.make_date("hebrew", 5785, 7, 1)
    assert almanac.to_date(d) == date(2024, 10, 3)
    assert almanac.from_date(date(2024, 10, 3), "maya") == almanac.MayaDate(13, 0, 11, 17, 4)
    assert almanac.from_julian_day(2451544.5) == almanac.GregorianDate(2000, 1, 1)


def test_convert_all():
    out = almanac.convert_all(almanac.GregorianDate(2000, 1, 1))
    assert [str(x) for x in out] == [
        "Gregorian Calendar: 1 January, 2000",
        "Hebrew Calendar: 23 Teveth, 5760",
        "Islamic Calendar: 24 Ramadan, 1420",
        "Julian Calendar: 19 December, 1999",
        "Maya Calendar: 12.19.6.15.2",
        "Persian Calendar: 11 Dey, 1378",
    ]


def test_today_uses_clock_collaborator():
    clock = lambda: date(2024, 10, 3)  # noqa: E731
    assert almanac.today("hebrew", clock=clock) == almanac.HebrewDate(5785, 7, 1)
    assert almanac.HebrewDate.today(clock) == almanac.HebrewDate(5785, 7, 1)
    assert almanac.GregorianDate.from_date(date(2024, 10, 3)).weekday_name() == "Thursday"
