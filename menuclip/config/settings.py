"""In-process settings store for application configuration.

The program takes no external configuration: values come from
DEFAULT_SETTINGS and can only be overridden in-process.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_BOX_WIDTH = 31
DEFAULT_STARTUP_DELAY = 0.1
DEFAULT_FAREWELL_MESSAGE = "Exiting program..."
DEFAULT_LOG_DIR = Path.home() / ".local" / "state" / "menuclip" / "logs"

DEFAULT_SETTINGS: dict[str, Any] = {
    "box_width": DEFAULT_BOX_WIDTH,
    "startup_delay": DEFAULT_STARTUP_DELAY,
    "farewell_message": DEFAULT_FAREWELL_MESSAGE,
    "log_dir": DEFAULT_LOG_DIR,
}


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)


settings_store = SettingsStore()


def reset_settings() -> None:
    settings_store.values = dict(DEFAULT_SETTINGS)


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any) -> None:
    settings_store.values[key] = value


def get_int(key: str, default: int = 0) -> int:
    return int(get_setting(key, default))


def get_float(key: str, default: float = 0.0) -> float:
    return float(get_setting(key, default))


reset_settings()
