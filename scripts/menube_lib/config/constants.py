"""
Configuration constants for menube.

Default values and file locations used across the settings system.
"""

from pathlib import Path


# Sentinel label shown for hidden items above/below the visible window
DEFAULT_MORE_LABEL = "..."

# Settings and history locations
DEFAULT_SETTINGS_FILE = Path.home() / ".config" / "menube" / "settings.json"
HISTORY_FILE = Path.home() / ".menube_history"

# Environment variables are MENUBE_<SETTING>, e.g. MENUBE_DISPLAY_LINES
ENV_PREFIX = "MENUBE_"
