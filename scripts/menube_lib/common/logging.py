"""
Logging setup for menube.

Library modules get their logger with get_logger(__name__) and never
print. init_logging() is called once by the front end and is safe to call
again; it only reconfigures the root logger when the settings change.
"""

import logging
from typing import Optional, Union


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_configured: Optional[tuple] = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name (normally the calling module's __name__)."""
    return logging.getLogger(name)


def coerce_level(level: Union[int, str, None]) -> int:
    """Convert a level name or number to a logging level, defaulting to WARNING."""
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = level.strip().upper()
        if value.isdigit():
            return int(value)
        resolved = logging.getLevelName(value)
        if isinstance(resolved, int):
            return resolved
    return logging.WARNING


def init_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> None:
    """
    Configure root logging for the menube front end.

    Args:
        level: Level name or number (default: WARNING)
        log_file: Optional file to log to instead of stderr
    """
    global _configured

    resolved = coerce_level(level)
    signature = (resolved, log_file)
    if _configured == signature:
        return

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATEFMT))
    root.addHandler(handler)
    root.setLevel(resolved)

    _configured = signature


def _reset_logging_for_tests() -> None:
    """Forget the configured signature so init_logging() runs again."""
    global _configured
    _configured = None
