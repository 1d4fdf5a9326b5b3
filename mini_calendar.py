"""Calendar facade: one configured entry point for dates, weeks, grids and text."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import date_format
import grids
import week_numbers
from calendar_date import Clock, Date
from calendar_logic import MONDAY, days_in_month, is_leap_year, iso_weekday, weekday
from locales import Locale, NameForm
from week_numbers import WeekNumberSystem

logger = logging.getLogger(__name__)


class Calendar:
    """Holds the first weekday, week-number policy and locale for a view.

    Every operation reads the configuration once when it starts, so a
    setting changed between calls applies to the next call only.
    """

    def __init__(self, first_weekday: int = MONDAY,
                 week_number_system: WeekNumberSystem = WeekNumberSystem.FOUR_DAY,
                 locale: Locale | None = None,
                 clock: Clock | None = None) -> None:
        self.first_weekday = first_weekday
        self.week_number_system = week_number_system
        self.locale = locale or Locale.english()
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any], clock: Clock | None = None) -> Calendar:
        """Build a calendar from a dict as returned by ``settings.load_settings``."""
        locale_overrides = settings.get("locale") or {}
        return cls(
            first_weekday=settings.get("first_weekday", MONDAY),
            week_number_system=WeekNumberSystem(
                settings.get("week_number_system", WeekNumberSystem.FOUR_DAY.value)),
            locale=Locale.from_mapping(locale_overrides) if locale_overrides else None,
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def first_weekday(self) -> int:
        return self._first_weekday

    @first_weekday.setter
    def first_weekday(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 6:
            raise ValueError(f"first_weekday must be between 0 (Sunday) and 6, got {value!r}")
        self._first_weekday = value
        logger.debug("first_weekday set to %d", value)

    @property
    def week_number_system(self) -> WeekNumberSystem:
        return self._week_number_system

    @week_number_system.setter
    def week_number_system(self, value: WeekNumberSystem) -> None:
        self._week_number_system = WeekNumberSystem(value)
        logger.debug("week_number_system set to %s", self._week_number_system.value)

    @property
    def locale(self) -> Locale:
        return self._locale

    @locale.setter
    def locale(self, value: Locale) -> None:
        self._locale = value
        logger.debug("locale set to %s", value.code)

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------
    def today(self) -> Date:
        return Date.today(self.clock)

    @staticmethod
    def date(year: int, month: int, day: int) -> Date:
        return Date(year, month, day)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return is_leap_year(year)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        return days_in_month(year, month)

    @staticmethod
    def weekday(year: int, month: int, day: int) -> int:
        """Sunday=0 .. Saturday=6."""
        return weekday(year, month, day)

    @staticmethod
    def weekday_iso(year: int, month: int, day: int) -> int:
        """Monday=1 .. Sunday=7."""
        return iso_weekday(year, month, day)

    # ------------------------------------------------------------------
    # Weeks
    # ------------------------------------------------------------------
    def week_number(self, year: int, month: int, day: int) -> int:
        return week_numbers.week_number(
            Date(year, month, day), self.first_weekday, self.week_number_system)

    def weeks_of_month(self, year: int, month: int, force_six_weeks: bool = False) -> list[int]:
        return week_numbers.weeks_of_month(
            year, month, force_six_weeks, self.first_weekday, self.week_number_system)

    # ------------------------------------------------------------------
    # Grids
    # ------------------------------------------------------------------
    def month_grid(self, year: int, month: int, include_adjacent_days: bool = True,
                   force_six_weeks: bool = False) -> grids.Grid:
        return grids.month_grid(
            year, month, include_adjacent_days, force_six_weeks, self.first_weekday)

    def year_grid(self, year: int, include_adjacent_days: bool = True,
                  force_six_weeks: bool = False) -> list[grids.Grid]:
        return grids.year_grid(year, include_adjacent_days, force_six_weeks, self.first_weekday)

    def week_grid(self, year: int, month: int, day: int, days_in_week: int = 7) -> list[Date]:
        return grids.week_grid(year, month, day, days_in_week, self.first_weekday)

    @staticmethod
    def visible_months(year: int, month: int, count: int = 1,
                       before: int | None = None) -> list[tuple[int, int]]:
        """Months for a multi-month view; centred on ``month`` unless
        ``before`` says how many earlier months to show."""
        if before is None:
            before = (count - 1) // 2
        return grids.month_sequence(year, month, count, before)

    @staticmethod
    def range_of_days(count: int, year: int, month: int, day: int,
                      exclusive: bool = False) -> list[Date]:
        return grids.range_of_days(count, year, month, day, exclusive)

    # ------------------------------------------------------------------
    # Names and text
    # ------------------------------------------------------------------
    def weekday_name(self, weekday_index: int, form: NameForm = NameForm.FULL) -> str:
        """Name of a weekday, Sunday=0 .. Saturday=6."""
        return self.locale.weekday_name(weekday_index, form)

    def weekday_names(self, form: NameForm = NameForm.FULL) -> list[str]:
        """The seven weekday names in column order, starting at first_weekday."""
        locale = self.locale
        return [locale.weekday_name(i, form) for i in grids.weekday_header(self.first_weekday)]

    def month_name(self, month: int, form: NameForm = NameForm.FULL) -> str:
        return self.locale.month_name(month, form)

    def format_date(self, year: int, month: int, day: int, pattern: str,
                    strict: bool = False) -> str:
        return date_format.format_date(Date(year, month, day), pattern, self.locale, strict)

    get_date_formatted = format_date

    def locale_default_format(self, year: int, month: int, day: int,
                              four_digit_year: bool = True) -> str:
        return date_format.locale_default_format(
            Date(year, month, day), self.locale, four_digit_year)
