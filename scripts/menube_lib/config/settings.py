"""
Settings for the menube navigator and front end.

Settings are resolved from, highest priority first: explicit overrides
(command line), environment variables, the settings file, then defaults.
"""

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from menube_lib.common.logging import get_logger

from .constants import DEFAULT_MORE_LABEL, DEFAULT_SETTINGS_FILE, ENV_PREFIX


logger = get_logger(__name__)

# camelCase keys accepted in settings files
CAMEL_CASE_KEYS = {
    "displayLines": "display_lines",
    "moreUpLabel": "more_up_label",
    "moreDownLabel": "more_down_label",
    "commandTimeout": "command_timeout",
    "logLevel": "log_level",
}


@dataclass
class MenuSettings:
    """Navigator display settings plus front end options."""
    display_lines: int = 0  # 0 = no trimming
    more_up_label: str = DEFAULT_MORE_LABEL
    more_down_label: str = DEFAULT_MORE_LABEL
    command_timeout: Optional[float] = None
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MenuSettings":
        """Build settings from a dict using camelCase or snake_case keys."""
        return cls().merged(data)

    def merged(self, data: Mapping[str, Any]) -> "MenuSettings":
        """Return a copy with any recognized, non-None keys from data applied."""
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in data.items():
            name = CAMEL_CASE_KEYS.get(key, key)
            if name not in known or value is None:
                continue
            changes[name] = _coerce(name, value)
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Serialize using camelCase keys."""
        reverse = {v: k for k, v in CAMEL_CASE_KEYS.items()}
        return {reverse[f.name]: getattr(self, f.name) for f in fields(self)}


def _coerce(name: str, value: Any) -> Any:
    """Convert string values (environment, CLI) to the field's type."""
    if name == "display_lines":
        lines = int(value)
        if lines < 0:
            raise ValueError(f"display_lines must be >= 0, got {lines}")
        return lines
    if name == "command_timeout":
        timeout = float(value)
        return timeout if timeout > 0 else None
    return str(value)


def load_settings_file(path: Optional[Path] = None) -> dict:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file (default: DEFAULT_SETTINGS_FILE)

    Returns:
        Settings dict, or an empty dict if the file is missing or unreadable
    """
    path = Path(path) if path else DEFAULT_SETTINGS_FILE
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected an object", path)
        return {}
    return data


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> dict:
    """Collect MENUBE_* environment variables as snake_case settings."""
    environ = os.environ if environ is None else environ
    result = {}
    for f in fields(MenuSettings):
        value = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
        if value:
            result[f.name] = value
    return result


def load_settings(
    path: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> MenuSettings:
    """
    Resolve settings from overrides, environment, settings file and defaults.

    Args:
        path: Settings file (default: DEFAULT_SETTINGS_FILE)
        overrides: Highest priority values, e.g. parsed command line args
        environ: Environment mapping (default: os.environ)

    Returns:
        The resolved MenuSettings
    """
    settings = MenuSettings()
    settings = settings.merged(load_settings_file(path))
    settings = settings.merged(settings_from_env(environ))
    if overrides:
        settings = settings.merged(overrides)
    return settings
