"""JSON-based settings persistence for the date & time selector."""

import calendar
import json
import logging
import os

from configuration import Components, SelectorConfiguration
from data_source import DataSource

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".date-time-selector-settings.json")

_DEFAULTS = {
    "dark_mode": False,
    "first_weekday": "sunday",
    "full_day_count": 10,
    "components": Components.DATE_AND_TIME.value,
    "expanded": False,
    "dismiss_on_selection": False,
    "fixed_height_grid": False,
}

_WEEKDAY_NAMES = {
    "monday": calendar.MONDAY,
    "tuesday": calendar.TUESDAY,
    "wednesday": calendar.WEDNESDAY,
    "thursday": calendar.THURSDAY,
    "friday": calendar.FRIDAY,
    "saturday": calendar.SATURDAY,
    "sunday": calendar.SUNDAY,
}


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    path = path or _SETTINGS_PATH
    settings = dict(_DEFAULTS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: expected an object", path)
        return settings

    for key in ("dark_mode", "expanded", "dismiss_on_selection", "fixed_height_grid"):
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    count = stored.get("full_day_count")
    if isinstance(count, int) and not isinstance(count, bool) and count > 0:
        settings["full_day_count"] = count
    weekday = stored.get("first_weekday")
    if isinstance(weekday, str) and weekday.lower() in _WEEKDAY_NAMES:
        settings["first_weekday"] = weekday.lower()
    components = stored.get("components")
    if isinstance(components, str) and components in {c.value for c in Components}:
        settings["components"] = components
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def weekday_from_name(name: str) -> int:
    """"sunday" -> calendar.SUNDAY. Raises ValueError for unknown names."""
    try:
        return _WEEKDAY_NAMES[name.lower()]
    except KeyError:
        raise ValueError(f"unknown weekday name {name!r}") from None


def configuration_from_settings(
    settings: dict, data_source: DataSource | None = None,
) -> SelectorConfiguration:
    """Build the selector configuration described by a settings dict."""
    return SelectorConfiguration(
        components=Components(settings["components"]),
        is_expanded=settings["expanded"],
        data_source=data_source,
        full_day_count=settings["full_day_count"],
        should_dismiss_on_selection=settings["dismiss_on_selection"],
        first_weekday=weekday_from_name(settings["first_weekday"]),
        fixed_height_grid=settings["fixed_height_grid"],
    )
