"""
menube_lib.config - Settings for the menu navigator and front end.

This package contains:
- constants: Default values and lookup locations
- settings: MenuSettings dataclass and layered settings loading
"""

from .constants import (
    DEFAULT_MORE_LABEL,
    DEFAULT_SETTINGS_FILE,
    ENV_PREFIX,
    HISTORY_FILE,
)

from .settings import (
    MenuSettings,
    load_settings_file,
    load_settings,
)

__all__ = [
    # Constants
    'DEFAULT_MORE_LABEL',
    'DEFAULT_SETTINGS_FILE',
    'ENV_PREFIX',
    'HISTORY_FILE',
    # Settings
    'MenuSettings',
    'load_settings_file',
    'load_settings',
]
