# tests/test_diagnostics.py

from datetime import date

import pytest

from almanac.diagnostics import new_years_table, round_trip


def test_round_trip_diagnostic_passes(capsys):
    assert round_trip.main(["--N", "100", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "hebrew" in out and "failures=0" in out


def test_new_years_in_gregorian_year():
    assert new_years_table.new_years_in("hebrew", 2024) == [(5785, date(2024, 10, 3))]
    assert new_years_table.new_years_in("persian", 2024) == [(1403, date(2024, 3, 20))]
    # the shorter Islamic year can start twice in one Gregorian year
    assert new_years_table.new_years_in("islamic", 2008) == [
        (1429, date(2008, 1, 10)),
        (1430, date(2008, 12, 29)),
    ]


def test_new_years_table_prints(capsys):
    assert new_years_table.main(["--from-year", "2024", "--to-year", "2024", "--dates", "iso"]) == 0
    out = capsys.readouterr().out
    assert "2024-10-03 (5785)" in out
    assert "2024-03-20 (1403)" in out


def test_year_lengths_histogram(capsys):
    pytest.importorskip("numpy")
    from almanac.diagnostics import year_lengths

    assert year_lengths.main(["--start-year", "5700", "--end-year", "5799"]) == 0
    out = capsys.readouterr().out
    assert "n=100" in out
    for length in year_lengths.HEBREW_YEAR_LENGTHS:
        assert str(length) in out
