# tests/test_gregorian_julian.py

import pytest

from almanac import GregorianDate, JulianDate, JulianDay, OutOfRangeError
from almanac.calendars import gregorian, julian


@pytest.mark.parametrize("year,leap", [(1900, False), (2000, True), (2023, False), (2024, True), (2100, False), (0, True)])
def test_gregorian_leap_years(year, leap):
    assert gregorian.is_leap_year(year) is leap
    assert gregorian.year_length(year) == (366 if leap else 365)


@pytest.mark.parametrize("year,leap", [(1900, True), (2023, False), (4, True), (-1, True), (-5, True), (-2, False)])
def test_julian_leap_years(year, leap):
    assert julian.is_leap_year(year) is leap


def test_gregorian_epoch_and_j2000():
    assert GregorianDate(1, 1, 1).to_julian_day() == gregorian.EPOCH
    assert GregorianDate(2000, 1, 1).to_julian_day() == JulianDay(2451544.5)
    assert GregorianDate.from_julian_day(JulianDay(2451545.0)) == GregorianDate(2000, 1, 1)


def test_julian_epoch():
    assert JulianDate(1, 1, 1).to_julian_day() == julian.EPOCH


def test_gregorian_reform_boundary():
    # Thursday 4 October 1582 (Julian) was followed by Friday 15 October 1582 (Gregorian)
    last_julian = JulianDate(1582, 10, 4).to_julian_day()
    first_gregorian = GregorianDate(1582, 10, 15).to_julian_day()
    assert first_gregorian - last_julian == 1
    assert JulianDate.from_julian_day(first_gregorian) == JulianDate(1582, 10, 5)


def test_month_lengths():
    assert GregorianDate.month_lengths(2024) == (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    assert sum(GregorianDate.month_lengths(2023)) == 365
    assert JulianDate(1900, 2, 1).days_in_month() == 29
    assert GregorianDate(1900, 2, 1).days_in_month() == 28


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_length_out_of_range(month):
    with pytest.raises(OutOfRangeError):
        gregorian.month_length(2000, month)
    with pytest.raises(IndexError):
        julian.month_length(2000, month)


def test_next_day_rollover():
    d = GregorianDate(2023, 12, 31)
    d.next_day()
    assert d == GregorianDate(2024, 1, 1)

    d = GregorianDate(2024, 2, 28)
    d.next_day()
    assert d == GregorianDate(2024, 2, 29)
    d.next_day()
    assert d == GregorianDate(2024, 3, 1)


def test_julian_next_day_skips_year_zero():
    d = JulianDate(-1, 12, 31)
    d.next_day()
    assert d == JulianDate(1, 1, 1)
    assert d.to_julian_day() - JulianDate(-1, 12, 31).to_julian_day() == 1


def test_next_day_agrees_with_julian_day():
    for cls in (GregorianDate, JulianDate):
        d = cls.from_julian_day(JulianDay(2451000.5))
        for k in range(1, 800):
            d.next_day()
            assert d == cls.from_julian_day(JulianDay(2451000.5 + k))


def test_labels_and_names():
    d = GregorianDate(2000, 1, 1)
    assert d.label() == "1 January, 2000"
    assert str(d) == "Gregorian Calendar: 1 January, 2000"
    assert d.weekday_name() == "Saturday"
    assert d.month_name() == "January"
    assert d.days_in_week() == 7
    assert repr(JulianDate(1999, 12, 19)) == "JulianDate(1999, 12, 19)"
