"""Month, year, week and range grids of Dates for calendar views."""

from __future__ import annotations

from calendar_date import Date
from calendar_logic import MONDAY, shift_month, shifted_weekday

#: One row of a grid: seven slots, None where a day is not shown.
Week = list[Date | None]
Grid = list[Week]


def weekday_header(first_weekday: int = MONDAY) -> list[int]:
    """Return the weekday indices (Sunday=0) of the seven grid columns."""
    return [(first_weekday + col) % 7 for col in range(7)]


def month_grid(year: int, month: int, include_adjacent_days: bool = True,
               force_six_weeks: bool = False,
               first_weekday: int = MONDAY) -> Grid:
    """Return the weeks of a month as rows of seven slots.

    Slots outside the month hold the neighbouring month's Date when
    ``include_adjacent_days`` is set, otherwise None.  With
    ``force_six_weeks`` the grid always has 6 rows so a calendar view keeps
    a constant height.
    """
    first = Date(year, month, 1)
    last = first.last_of_month()
    current = first.subtract_days(shifted_weekday(year, month, 1, first_weekday))

    grid: Grid = []
    while current <= last or (force_six_weeks and len(grid) < 6):
        row: Week = []
        for _ in range(7):
            in_month = current.month == month and current.year == year
            row.append(current if in_month or include_adjacent_days else None)
            current = current.add_days(1)
        grid.append(row)
    return grid


def year_grid(year: int, include_adjacent_days: bool = True,
              force_six_weeks: bool = False,
              first_weekday: int = MONDAY) -> list[Grid]:
    """Return the twelve month grids of ``year``."""
    return [
        month_grid(year, month, include_adjacent_days, force_six_weeks, first_weekday)
        for month in range(1, 13)
    ]


def week_grid(year: int, month: int, day: int, days_in_week: int = 7,
              first_weekday: int = MONDAY) -> list[Date]:
    """Return ``days_in_week`` consecutive days from the start of the week
    containing the given date."""
    start = Date(year, month, day).subtract_days(
        shifted_weekday(year, month, day, first_weekday))
    return [start.add_days(offset) for offset in range(days_in_week)]


def range_of_days(count: int, year: int, month: int, day: int,
                  exclusive: bool = False) -> list[Date]:
    """Return ``count`` consecutive days starting at the given date.

    With ``exclusive`` the last day is dropped, giving ``count - 1`` days.
    """
    start = Date(year, month, day)
    if exclusive:
        count -= 1
    return [start.add_days(offset) for offset in range(max(count, 0))]


def month_sequence(year: int, month: int, count: int, before: int = 0) -> list[tuple[int, int]]:
    """Return ``count`` consecutive (year, month) pairs for a multi-month view,
    starting ``before`` months earlier than the given month."""
    return [shift_month(year, month, offset - before) for offset in range(max(count, 0))]
