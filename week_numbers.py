"""Week numbers under the four-day (ISO-style) and traditional policies."""

from __future__ import annotations

import enum

from calendar_date import Date
from calendar_logic import MONDAY, days_in_year, shifted_weekday

#: Column of the majority day in a week, counted from the first weekday.
MAJORITY_OFFSET = 3


class WeekNumberSystem(enum.Enum):
    """How week 1 of a year is chosen."""

    #: Week 1 is the first week with at least four days of the new year.
    #: With weeks starting on Monday this is ISO-8601.
    FOUR_DAY = "four_day"
    #: Week 1 is the week containing January 1st.
    TRADITIONAL = "traditional"


def _column(date: Date, first_weekday: int) -> int:
    return shifted_weekday(date.year, date.month, date.day, first_weekday)


def four_day_week_number(date: Date, first_weekday: int = MONDAY) -> int:
    """Return the week number of ``date`` under the four-day rule.

    A week belongs to the year holding its majority day, so late-December
    dates can be week 1 and early-January dates can be the previous year's
    week 52 or 53.
    """
    majority = date.add_days(MAJORITY_OFFSET - _column(date, first_weekday))
    return (majority.day_of_year() - 1) // 7 + 1


def traditional_week_number(date: Date, first_weekday: int = MONDAY) -> int:
    """Return the week number of ``date`` with week 1 anchored on January 1st.

    A December week that runs into January already counts as week 1.
    """
    column = _column(date, first_weekday)
    days_left = days_in_year(date.year) - date.day_of_year()
    if 6 - column > days_left:
        return 1
    jan1_column = shifted_weekday(date.year, 1, 1, first_weekday)
    return (date.day_of_year() - 1 + jan1_column) // 7 + 1


def week_number(date: Date, first_weekday: int = MONDAY,
                system: WeekNumberSystem = WeekNumberSystem.FOUR_DAY) -> int:
    if system is WeekNumberSystem.TRADITIONAL:
        return traditional_week_number(date, first_weekday)
    return four_day_week_number(date, first_weekday)


def weeks_of_month(year: int, month: int, force_six_weeks: bool = False,
                   first_weekday: int = MONDAY,
                   system: WeekNumberSystem = WeekNumberSystem.FOUR_DAY) -> list[int]:
    """Return the distinct week numbers of a month's grid rows, in order.

    Steps through the month a week at a time from day 1 and adds the last
    day's week.  With ``force_six_weeks`` it keeps stepping into the
    following month until six numbers are collected.
    """
    weeks: list[int] = []

    def collect(d: Date) -> None:
        number = week_number(d, first_weekday, system)
        if number not in weeks:
            weeks.append(number)

    current = Date(year, month, 1)
    while current.month == month:
        collect(current)
        current = current.add_days(7)
    collect(current.subtract_days(current.day))  # last day of the month

    if force_six_weeks:
        while len(weeks) < 6:
            collect(current)
            current = current.add_days(7)
    return weeks
