"""JSON-based settings for the month calendar.

The application only reads this file. Nothing it does at runtime is
written back, the selected day included.
"""

import json
import os

import structlog

log = structlog.get_logger("month_calendar.settings")

SETTINGS_ENV = "MONTH_CALENDAR_SETTINGS"
_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".month-calendar-settings.json")

_DEFAULTS = {
    "dark_mode": False,
    "window_width": None,
    "window_height": None,
    "verbose": False,
    "log_json": False,
}


def settings_path() -> str:
    """Return the settings file location, honouring ``MONTH_CALENDAR_SETTINGS``."""
    return os.environ.get(SETTINGS_ENV) or _SETTINGS_PATH


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    path = path or settings_path()
    settings = dict(_DEFAULTS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        log.warning("settings_unreadable", path=path, error=str(exc))
        return settings

    if not isinstance(stored, dict):
        log.warning("settings_not_an_object", path=path)
        return settings
    for key in ("dark_mode", "verbose", "log_json"):
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    for key in ("window_width", "window_height"):
        # bool is an int subclass; reject it explicitly
        value = stored.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            settings[key] = value
    return settings

