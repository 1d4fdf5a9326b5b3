"""Pure calendar calculations on plain integers, no Date objects and no UI."""

from __future__ import annotations

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

_DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day-of-year for the given date."""
    return sum(days_in_month(year, m) for m in range(1, month)) + day


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Move (year, month) by ``months``, rolling the year on over/underflow."""
    total = month - 1 + months
    return year + total // 12, total % 12 + 1


# --- weekday math -----------------------------------------------------------

def _zeller(year: int, month: int, day: int) -> int:
    # January and February count as months 13 and 14 of the previous year
    if month < 3:
        month += 12
        year -= 1
    k = year % 100
    j = year // 100
    return day + (13 * (month + 1)) // 5 + k + k // 4 + j // 4 - 2 * j


def weekday(year: int, month: int, day: int) -> int:
    """Return the weekday via Zeller's congruence, Sunday=0 .. Saturday=6."""
    return (_zeller(year, month, day) + 6) % 7


def shifted_weekday(year: int, month: int, day: int, first_weekday: int) -> int:
    """Return the weekday re-based so that ``first_weekday`` maps to 0.

    This is the column a day occupies in a week starting on
    ``first_weekday``; week numbering uses it to find a week's majority day.
    """
    return (_zeller(year, month, day) + 6 - first_weekday) % 7


def iso_weekday(year: int, month: int, day: int) -> int:
    """Return the ISO weekday, Monday=1 .. Sunday=7."""
    return weekday(year, month, day) or 7


# --- julian day numbers -----------------------------------------------------

def julian_day_number(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to its Julian Day Number.

    Matches the historical JDN from 1582-10-15 onwards.  Earlier dates are
    counted on the proleptic Gregorian calendar, so differences between them
    are exact day counts but not the dates a Julian-calendar source would give.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def from_julian_day_number(jdn: int) -> tuple[int, int, int]:
    """Return (year, month, day) for a Julian Day Number."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day
