"""Date value type for the proleptic Gregorian calendar (no time component)."""

from __future__ import annotations

import datetime
import enum
from collections.abc import Callable, Mapping
from typing import Any

from calendar_logic import (
    day_of_year,
    days_in_month,
    days_in_year,
    from_julian_day_number,
    is_leap_year,
    iso_weekday,
    julian_day_number,
    shift_month,
    weekday,
)

#: Anything returning a ``{"year", "month", "day"}`` record for the current day.
Clock = Callable[[], Mapping[str, int]]


class ValidationError(ValueError):
    """Raised when year/month/day do not name an existing date."""


class Comparison(enum.Enum):
    BEFORE = -1
    EQUAL = 0
    AFTER = 1


def system_clock() -> dict[str, int]:
    """Return today's date from the host clock as a date record."""
    today = datetime.date.today()
    return {"year": today.year, "month": today.month, "day": today.day}


def _check_parts(year: Any, month: Any, day: Any) -> None:
    for name, value in (("year", year), ("month", month), ("day", day)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(f"{name} must be an integer, got {value!r}")
    if not 1 <= month <= 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")
    max_day = days_in_month(year, month)
    if not 1 <= day <= max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def is_valid_date(year: Any, month: Any, day: Any) -> bool:
    """Return True if the components name an existing date."""
    try:
        _check_parts(year, month, day)
    except ValidationError:
        return False
    return True


class Date:
    """A calendar day: year, month (1-12) and day of month.

    Dates are immutable.  Arithmetic returns a new, always valid Date:
    day arithmetic rolls through the real month lengths, while month and
    year arithmetic clamp the day to the target month (Jan 31 + 1 month is
    Feb 28 or 29).  Anything else that would produce a non-existent date
    raises :class:`ValidationError`.
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        _check_parts(year, month, day)
        self._year = year
        self._month = month
        self._day = day

    # ------------------------------------------------------------------
    # Alternate constructors / interop
    # ------------------------------------------------------------------
    @classmethod
    def today(cls, clock: Clock | None = None) -> Date:
        """Return the current date as reported by ``clock``."""
        return cls.from_dict((clock or system_clock)())

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> Date:
        """Build a Date from a ``{"year", "month", "day"}`` record."""
        try:
            return cls(record["year"], record["month"], record["day"])
        except KeyError as exc:
            raise ValidationError(f"date record is missing {exc.args[0]!r}") from exc

    @classmethod
    def from_pydate(cls, value: datetime.date) -> Date:
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_julian_day_number(cls, jdn: int) -> Date:
        return cls(*from_julian_day_number(jdn))

    def to_dict(self) -> dict[str, int]:
        return {"year": self._year, "month": self._month, "day": self._day}

    def to_pydate(self) -> datetime.date:
        """Return the equivalent :class:`datetime.date` (years 1-9999 only)."""
        return datetime.date(self._year, self._month, self._day)

    def replace(self, year: int | None = None, month: int | None = None,
                day: int | None = None) -> Date:
        """Return a copy with the given fields changed; never clamps."""
        return type(self)(
            self._year if year is None else year,
            self._month if month is None else month,
            self._day if day is None else day,
        )

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def as_tuple(self) -> tuple[int, int, int]:
        return self._year, self._month, self._day

    # ------------------------------------------------------------------
    # Calendar queries
    # ------------------------------------------------------------------
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def days_in_month(self) -> int:
        return days_in_month(self._year, self._month)

    def days_in_year(self) -> int:
        return days_in_year(self._year)

    def day_of_year(self) -> int:
        """Return the 1-based ordinal day within the year."""
        return day_of_year(self._year, self._month, self._day)

    def weekday(self) -> int:
        """Return the weekday, Sunday=0 .. Saturday=6."""
        return weekday(self._year, self._month, self._day)

    def weekday_iso(self) -> int:
        """Return the ISO weekday, Monday=1 .. Sunday=7."""
        return iso_weekday(self._year, self._month, self._day)

    def first_of_month(self) -> Date:
        return type(self)(self._year, self._month, 1)

    def last_of_month(self) -> Date:
        return type(self)(self._year, self._month, self.days_in_month())

    def to_julian_day_number(self) -> int:
        return julian_day_number(self._year, self._month, self._day)

    def days_between(self, other: Date) -> int:
        """Return ``self - other`` in days; negative when ``self`` is earlier."""
        return self.to_julian_day_number() - other.to_julian_day_number()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add_days(self, days: int) -> Date:
        return type(self).from_julian_day_number(self.to_julian_day_number() + days)

    def subtract_days(self, days: int) -> Date:
        return self.add_days(-days)

    def add_months(self, months: int) -> Date:
        year, month = shift_month(self._year, self._month, months)
        # Clamp to the target month, e.g. Jan 31 -> Feb 28/29
        day = min(self._day, days_in_month(year, month))
        return type(self)(year, month, day)

    def subtract_months(self, months: int) -> Date:
        return self.add_months(-months)

    def add_years(self, years: int) -> Date:
        year = self._year + years
        day = self._day
        if self._month == 2 and day == 29 and not is_leap_year(year):
            day = 28
        return type(self)(year, self._month, day)

    def subtract_years(self, years: int) -> Date:
        return self.add_years(-years)

    def __add__(self, days: object) -> Date:
        if not isinstance(days, int) or isinstance(days, bool):
            return NotImplemented
        return self.add_days(days)

    __radd__ = __add__

    def __sub__(self, other: object) -> Any:
        if isinstance(other, Date):
            return self.days_between(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.subtract_days(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def compare(self, other: Date) -> Comparison:
        """Order two dates lexicographically on (year, month, day)."""
        mine, theirs = self.as_tuple(), other.as_tuple()
        if mine < theirs:
            return Comparison.BEFORE
        if mine > theirs:
            return Comparison.AFTER
        return Comparison.EQUAL

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_tuple() >= other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def isoformat(self) -> str:
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    __str__ = isoformat

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"
