"""Locale tables for weekday and month names and the default date layout."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Semantic key stems, Sunday first / January first
WEEKDAY_KEYS = (
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
)
MONTH_KEYS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)


class NameForm(enum.Enum):
    """Length of a weekday or month name; the value is its key prefix."""

    FULL = ""
    ABBREVIATION = "abbr_"
    SHORT = "short_"


class DateFieldOrder(enum.Enum):
    YMD = "YMD"
    DMY = "DMY"
    MDY = "MDY"
    YDM = "YDM"


_ENGLISH_WEEKDAYS = {
    NameForm.FULL: ("Sunday", "Monday", "Tuesday", "Wednesday",
                    "Thursday", "Friday", "Saturday"),
    NameForm.ABBREVIATION: ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    NameForm.SHORT: ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
}

_ENGLISH_MONTHS = {
    NameForm.FULL: ("January", "February", "March", "April", "May", "June", "July",
                    "August", "September", "October", "November", "December"),
    NameForm.ABBREVIATION: ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    NameForm.SHORT: ("J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"),
}


@dataclass(frozen=True)
class Locale:
    """Display strings for one language.

    ``weekdays`` and ``months`` map each :class:`NameForm` to a tuple of
    7 names (Sunday first) or 12 names (January first).
    """

    code: str
    weekdays: Mapping[NameForm, tuple[str, ...]]
    months: Mapping[NameForm, tuple[str, ...]]
    date_field_order: DateFieldOrder = DateFieldOrder.YMD
    divider: str = "-"

    def __post_init__(self) -> None:
        for form in NameForm:
            if len(self.weekdays.get(form, ())) != 7:
                raise ValueError(f"locale {self.code!r} needs 7 {form.name} weekday names")
            if len(self.months.get(form, ())) != 12:
                raise ValueError(f"locale {self.code!r} needs 12 {form.name} month names")

    @classmethod
    def english(cls) -> Locale:
        return cls(
            code="en",
            weekdays=dict(_ENGLISH_WEEKDAYS),
            months=dict(_ENGLISH_MONTHS),
            date_field_order=DateFieldOrder.MDY,
            divider="/",
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], base: Locale | None = None) -> Locale:
        """Build a locale from semantic keys such as ``"abbr_monday"``.

        Keys missing from ``mapping`` are taken from ``base`` (English when
        not given).  ``date_field_order``, ``divider`` and ``code`` are
        optional too.
        """
        base = base or cls.english()
        weekdays = {
            form: tuple(mapping.get(form.value + key, base.weekdays[form][i])
                        for i, key in enumerate(WEEKDAY_KEYS))
            for form in NameForm
        }
        months = {
            form: tuple(mapping.get(form.value + key, base.months[form][i])
                        for i, key in enumerate(MONTH_KEYS))
            for form in NameForm
        }
        order = mapping.get("date_field_order", base.date_field_order)
        return cls(
            code=mapping.get("code", base.code),
            weekdays=weekdays,
            months=months,
            date_field_order=DateFieldOrder(order),
            divider=mapping.get("divider", base.divider),
        )

    def weekday_name(self, weekday: int, form: NameForm = NameForm.FULL) -> str:
        """Return the name of ``weekday`` (Sunday=0 .. Saturday=6)."""
        return self.weekdays[form][weekday % 7]

    def month_name(self, month: int, form: NameForm = NameForm.FULL) -> str:
        """Return the name of ``month`` (1-12)."""
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        return self.months[form][month - 1]

    def lookup(self, key: str) -> str:
        """Return the display string for a semantic key like ``"abbr_june"``."""
        for form in (NameForm.ABBREVIATION, NameForm.SHORT, NameForm.FULL):
            if not key.startswith(form.value):
                continue
            stem = key[len(form.value):]
            if stem in WEEKDAY_KEYS:
                return self.weekdays[form][WEEKDAY_KEYS.index(stem)]
            if stem in MONTH_KEYS:
                return self.months[form][MONTH_KEYS.index(stem)]
        raise KeyError(key)

    def to_mapping(self) -> dict[str, str]:
        """Return every semantic key with its display string."""
        result: dict[str, str] = {"code": self.code}
        for form in NameForm:
            for i, key in enumerate(WEEKDAY_KEYS):
                result[form.value + key] = self.weekdays[form][i]
            for i, key in enumerate(MONTH_KEYS):
                result[form.value + key] = self.months[form][i]
        result["date_field_order"] = self.date_field_order.value
        result["divider"] = self.divider
        return result
