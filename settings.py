"""JSON-based settings persistence for the calendar configuration."""

from __future__ import annotations

import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-calendar-core.json")

_DEFAULTS = {
    "first_weekday": 1,  # Monday
    "week_number_system": "four_day",
    "locale": {},
}

_WEEK_NUMBER_SYSTEMS = ("four_day", "traditional")
_DATE_FIELD_ORDERS = ("YMD", "DMY", "MDY", "YDM")


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    path = path or _SETTINGS_PATH
    settings = dict(_DEFAULTS)
    settings["locale"] = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", path)
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.debug("Unreadable settings file %s (%s), using defaults", path, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return settings

    first_weekday = stored.get("first_weekday")
    if isinstance(first_weekday, int) and not isinstance(first_weekday, bool) \
            and 0 <= first_weekday <= 6:
        settings["first_weekday"] = first_weekday
    elif "first_weekday" in stored:
        logger.warning("Ignoring invalid first_weekday %r", first_weekday)

    system = stored.get("week_number_system")
    if system in _WEEK_NUMBER_SYSTEMS:
        settings["week_number_system"] = system
    elif "week_number_system" in stored:
        logger.warning("Ignoring invalid week_number_system %r", system)

    locale = stored.get("locale")
    if isinstance(locale, dict):
        overrides = {k: v for k, v in locale.items()
                     if isinstance(k, str) and isinstance(v, str)}
        order = overrides.get("date_field_order")
        if order is not None and order not in _DATE_FIELD_ORDERS:
            logger.warning("Ignoring invalid locale date_field_order %r", order)
            del overrides["date_field_order"]
        settings["locale"] = overrides
    elif "locale" in stored:
        logger.warning("Ignoring locale settings of type %s", type(locale).__name__)
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
