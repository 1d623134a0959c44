"""
menube_lib.common - Shared utilities for menube

This module provides:
- colors: ANSI color codes and console message functions
- logging: Logger setup for library modules
"""

from .colors import Colors, log, warn, error, info, event_log
from .logging import get_logger, init_logging

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'event_log',
    'get_logger', 'init_logging',
]
