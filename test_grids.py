import calendar

import pytest

from calendar_date import Date, ValidationError
from calendar_logic import MONDAY, SATURDAY, SUNDAY
from grids import month_grid, range_of_days, week_grid, weekday_header, year_grid


def _days(row):
    return [d.day if d is not None else None for d in row]


def test_february_leap_year_six_weeks_without_adjacent_days():
    grid = month_grid(2024, 2, include_adjacent_days=False, force_six_weeks=True,
                      first_weekday=MONDAY)
    assert len(grid) == 6
    assert all(len(row) == 7 for row in grid)
    assert _days(grid[0]) == [None, None, None, 1, 2, 3, 4]
    assert grid[0][3] == Date(2024, 2, 1)
    assert _days(grid[4]) == [26, 27, 28, 29, None, None, None]
    assert grid[5] == [None] * 7


def test_february_with_adjacent_days():
    grid = month_grid(2024, 2, include_adjacent_days=True, first_weekday=MONDAY)
    assert len(grid) == 5
    assert grid[0][0] == Date(2024, 1, 29)
    assert grid[-1] == [Date(2024, 2, d) for d in (26, 27, 28, 29)] + [
        Date(2024, 3, d) for d in (1, 2, 3)
    ]


def test_four_row_month_and_padding():
    # 2021-02-01 is a Monday and February 2021 has 28 days
    grid = month_grid(2021, 2, first_weekday=MONDAY)
    assert len(grid) == 4
    padded = month_grid(2021, 2, force_six_weeks=True, first_weekday=MONDAY)
    assert len(padded) == 6
    assert padded[5] == [Date(2021, 3, d) for d in range(8, 15)]


def test_sunday_first_grid():
    # 2023-12-01 is a Friday
    grid = month_grid(2023, 12, first_weekday=SUNDAY)
    assert grid[0][0] == Date(2023, 11, 26)
    assert grid[0][5] == Date(2023, 12, 1)
    assert grid[-1][0] == Date(2023, 12, 31)
    assert grid[-1][6] == Date(2024, 1, 6)


@pytest.mark.parametrize("first_weekday", range(7))
def test_month_grid_matches_stdlib_calendar(first_weekday):
    # calendar.Calendar counts weekdays from Monday=0
    cal = calendar.Calendar(firstweekday=(first_weekday - 1) % 7)
    for year in (2023, 2024, 2025):
        for month in range(1, 13):
            grid = month_grid(year, month, first_weekday=first_weekday)
            expected = cal.monthdatescalendar(year, month)
            assert [[d.to_pydate() for d in row] for row in grid] == expected


def test_every_month_day_appears_once():
    for month in range(1, 13):
        grid = month_grid(2024, month, include_adjacent_days=False, first_weekday=SATURDAY)
        days = [d for row in grid for d in row if d is not None]
        assert days == [Date(2024, month, 1).add_days(i)
                        for i in range(Date(2024, month, 1).days_in_month())]


def test_invalid_month_raises():
    with pytest.raises(ValidationError):
        month_grid(2024, 13)


def test_year_grid():
    grids = year_grid(2024, include_adjacent_days=False, force_six_weeks=True)
    assert len(grids) == 12
    assert all(len(g) == 6 for g in grids)
    assert grids[1][0][3] == Date(2024, 2, 1)
    assert grids[11][0][6] == Date(2024, 12, 1)


def test_week_grid():
    # 2024-01-03 is a Wednesday
    assert week_grid(2024, 1, 3, first_weekday=MONDAY) == [
        Date(2024, 1, d) for d in range(1, 8)
    ]
    sunday_week = week_grid(2024, 1, 3, first_weekday=SUNDAY)
    assert sunday_week[0] == Date(2023, 12, 31)
    assert sunday_week[-1] == Date(2024, 1, 6)
    assert len(week_grid(2024, 1, 3, days_in_week=5)) == 5


def test_week_grid_rolls_over_year_end():
    assert week_grid(2023, 12, 30, first_weekday=MONDAY) == [
        Date(2023, 12, d) for d in range(25, 32)
    ]
    assert week_grid(2023, 12, 31, first_weekday=SUNDAY) == [Date(2023, 12, 31)] + [
        Date(2024, 1, d) for d in range(1, 7)
    ]


def test_range_of_days():
    assert range_of_days(3, 2024, 2, 28) == [
        Date(2024, 2, 28), Date(2024, 2, 29), Date(2024, 3, 1),
    ]
    assert range_of_days(3, 2024, 2, 28, exclusive=True) == [
        Date(2024, 2, 28), Date(2024, 2, 29),
    ]
    assert range_of_days(0, 2024, 2, 28) == []
    assert range_of_days(1, 2024, 2, 28, exclusive=True) == []
    assert range_of_days(3, 2023, 12, 31)[-1] == Date(2024, 1, 2)


def test_weekday_header():
    assert weekday_header(MONDAY) == [1, 2, 3, 4, 5, 6, 0]
    assert weekday_header(SUNDAY) == [0, 1, 2, 3, 4, 5, 6]
