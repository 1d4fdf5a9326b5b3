"""POSIX-style ``%`` placeholder formatting of Dates."""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Callable

from calendar_date import Date
from locales import DateFieldOrder, Locale, NameForm

logger = logging.getLogger(__name__)

# "%%" or a single letter, optionally with the "-" (no padding) flag.  The
# flagged form is tried first so "%-y" is never read as "%" + "-y".
_TOKEN_RE = re.compile(r"%%|%-[A-Za-z]|%[A-Za-z]")


class UnknownPlaceholderError(ValueError):
    """Raised in strict mode for a ``%`` token with no known meaning."""


class Placeholder(enum.Enum):
    """Recognized tokens.  ``%%`` is an addition to the date fields that
    renders a literal ``%``, as in POSIX ``strftime``."""

    PERCENT = "%%"
    ISO_DATE = "%F"
    YEAR = "%Y"
    YEAR_2 = "%y"
    YEAR_2_UNPADDED = "%-y"
    MONTH = "%m"
    MONTH_UNPADDED = "%-m"
    DAY = "%d"
    DAY_UNPADDED = "%-d"
    MONTH_NAME = "%B"
    MONTH_ABBR = "%b"
    MONTH_SHORT = "%-b"
    WEEKDAY_NAME = "%A"
    WEEKDAY_ABBR = "%a"
    WEEKDAY_SHORT = "%-a"
    DAY_OF_YEAR = "%j"
    DAY_OF_YEAR_UNPADDED = "%-j"
    WEEKDAY_ISO = "%u"
    WEEKDAY = "%w"


_RENDERERS: dict[Placeholder, Callable[[Date, Locale], str]] = {
    Placeholder.PERCENT: lambda d, loc: "%",
    Placeholder.ISO_DATE: lambda d, loc: d.isoformat(),
    Placeholder.YEAR: lambda d, loc: str(d.year),
    Placeholder.YEAR_2: lambda d, loc: f"{d.year % 100:02d}",
    Placeholder.YEAR_2_UNPADDED: lambda d, loc: str(d.year % 100),
    Placeholder.MONTH: lambda d, loc: f"{d.month:02d}",
    Placeholder.MONTH_UNPADDED: lambda d, loc: str(d.month),
    Placeholder.DAY: lambda d, loc: f"{d.day:02d}",
    Placeholder.DAY_UNPADDED: lambda d, loc: str(d.day),
    Placeholder.MONTH_NAME: lambda d, loc: loc.month_name(d.month, NameForm.FULL),
    Placeholder.MONTH_ABBR: lambda d, loc: loc.month_name(d.month, NameForm.ABBREVIATION),
    Placeholder.MONTH_SHORT: lambda d, loc: loc.month_name(d.month, NameForm.SHORT),
    Placeholder.WEEKDAY_NAME: lambda d, loc: loc.weekday_name(d.weekday(), NameForm.FULL),
    Placeholder.WEEKDAY_ABBR: lambda d, loc: loc.weekday_name(d.weekday(), NameForm.ABBREVIATION),
    Placeholder.WEEKDAY_SHORT: lambda d, loc: loc.weekday_name(d.weekday(), NameForm.SHORT),
    Placeholder.DAY_OF_YEAR: lambda d, loc: f"{d.day_of_year():03d}",
    Placeholder.DAY_OF_YEAR_UNPADDED: lambda d, loc: str(d.day_of_year()),
    Placeholder.WEEKDAY_ISO: lambda d, loc: str(d.weekday_iso()),
    Placeholder.WEEKDAY: lambda d, loc: str(d.weekday()),
}

_BY_TOKEN = {p.value: p for p in Placeholder}

_FIELD_PATTERNS = {
    DateFieldOrder.YMD: ("{year}", "%m", "%d"),
    DateFieldOrder.DMY: ("%d", "%m", "{year}"),
    DateFieldOrder.MDY: ("%m", "%d", "{year}"),
    DateFieldOrder.YDM: ("{year}", "%d", "%m"),
}


def format_date(date: Date, pattern: str, locale: Locale | None = None,
                strict: bool = False) -> str:
    """Substitute every placeholder in ``pattern`` with a field of ``date``.

    The pattern is scanned once, left to right, and each token is replaced
    on its own, so text produced by one substitution is never re-read as a
    placeholder.  Unknown tokens are kept as written unless ``strict`` is
    set, in which case :class:`UnknownPlaceholderError` is raised.
    """
    locale = locale or Locale.english()

    def substitute(match: re.Match[str]) -> str:
        token = match.group(0)
        placeholder = _BY_TOKEN.get(token)
        if placeholder is None:
            if strict:
                raise UnknownPlaceholderError(
                    f"unknown placeholder {token!r} at position {match.start()}"
                )
            logger.debug("Leaving unknown placeholder %r in %r", token, pattern)
            return token
        return _RENDERERS[placeholder](date, locale)

    return _TOKEN_RE.sub(substitute, pattern)


def locale_default_pattern(locale: Locale, four_digit_year: bool = True) -> str:
    """Return the numeric date pattern for ``locale``, e.g. ``%m/%d/%Y``."""
    year = "%Y" if four_digit_year else "%y"
    fields = _FIELD_PATTERNS[locale.date_field_order]
    divider = locale.divider.replace("%", "%%")
    return divider.join(field.format(year=year) for field in fields)


def locale_default_format(date: Date, locale: Locale | None = None,
                          four_digit_year: bool = True) -> str:
    """Format ``date`` numerically in the locale's field order and divider."""
    locale = locale or Locale.english()
    return format_date(date, locale_default_pattern(locale, four_digit_year), locale)
