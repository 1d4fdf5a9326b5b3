from datetime import date, timedelta

import pytest

from calendar_logic import (
    MONDAY,
    SUNDAY,
    day_of_year,
    days_in_month,
    from_julian_day_number,
    is_leap_year,
    iso_weekday,
    julian_day_number,
    shift_month,
    shifted_weekday,
    weekday,
)


def _days(start: date, end: date):
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def test_weekday_pivots():
    assert weekday(2023, 1, 1) == SUNDAY
    assert weekday(2024, 1, 1) == MONDAY
    assert weekday(2000, 2, 29) == 2


@pytest.mark.parametrize("start,end", [
    (date(1999, 12, 1), date(2001, 3, 31)),
    (date(1600, 2, 20), date(1600, 3, 10)),
    (date(1900, 2, 20), date(1900, 3, 10)),
    (date(2100, 2, 20), date(2100, 3, 10)),
    (date(1, 1, 1), date(1, 3, 1)),
])
def test_weekday_matches_datetime(start, end):
    for d in _days(start, end):
        assert weekday(d.year, d.month, d.day) == (d.weekday() + 1) % 7
        assert iso_weekday(d.year, d.month, d.day) == d.isoweekday()


def test_shifted_weekday_rebases_on_first_weekday():
    # 2024-01-01 is a Monday
    assert shifted_weekday(2024, 1, 1, MONDAY) == 0
    assert shifted_weekday(2024, 1, 1, SUNDAY) == 1
    assert shifted_weekday(2024, 1, 7, MONDAY) == 6
    for first in range(7):
        assert shifted_weekday(2024, 1, 1, first) == (MONDAY - first) % 7


@pytest.mark.parametrize("year,leap", [
    (2000, True), (1900, False), (2024, True), (2023, False), (1600, True), (2100, False),
])
def test_is_leap_year(year, leap):
    assert is_leap_year(year) is leap


def test_days_in_month():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2023, 4) == 30
    assert days_in_month(2023, 12) == 31


def test_day_of_year():
    assert day_of_year(2023, 1, 1) == 1
    assert day_of_year(2023, 3, 1) == 60
    assert day_of_year(2024, 3, 1) == 61
    assert day_of_year(2024, 12, 31) == 366


def test_julian_day_number_known_values():
    assert julian_day_number(2000, 1, 1) == 2451545
    assert julian_day_number(1582, 10, 15) == 2299161
    assert julian_day_number(2024, 3, 1) - julian_day_number(2024, 2, 28) == 2


def test_julian_day_number_round_trip():
    for d in _days(date(2023, 12, 25), date(2024, 3, 5)):
        jdn = julian_day_number(d.year, d.month, d.day)
        assert from_julian_day_number(jdn) == (d.year, d.month, d.day)
        assert jdn - julian_day_number(2000, 1, 1) == (d - date(2000, 1, 1)).days


@pytest.mark.parametrize("start,months,expected", [
    ((2024, 1), -1, (2023, 12)),
    ((2024, 5), -1, (2024, 4)),
    ((2024, 12), 1, (2025, 1)),
    ((2024, 5), 1, (2024, 6)),
    ((2024, 5), 0, (2024, 5)),
    ((2024, 1), -13, (2022, 12)),
    ((2024, 11), 26, (2027, 1)),
])
def test_shift_month_rolls_the_year(start, months, expected):
    assert shift_month(*start, months) == expected
