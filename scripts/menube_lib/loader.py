"""
Menu definition loader for menube.

Menu files are JSON (.json) or YAML (.yaml/.yml) lists of item dicts. An
item with a 'menuFile' key gets its 'menu' from that file, so large menus
can be split across files.
"""

import json
from pathlib import Path
from typing import List, Optional, Union

import yaml

from menube_lib.common.logging import get_logger
from menube_lib.menu.items import MenuItem, parse_menu


logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class MenuLoadError(Exception):
    """A menu definition file could not be loaded."""


def read_menu_file(menu_file: Path) -> list:
    """
    Read one menu file without resolving nested menu files.

    Args:
        menu_file: Path to a .json, .yaml or .yml file

    Returns:
        The file's list of item dicts
    """
    try:
        with open(menu_file) as f:
            if menu_file.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise MenuLoadError(f"Cannot read menu file {menu_file}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise MenuLoadError(f"Invalid menu file {menu_file}: {e}") from e

    if not isinstance(data, list):
        raise MenuLoadError(f"Menu file {menu_file} must contain a list of items")
    return data


def resolve_menu_path(menu_file: Union[str, Path], base_dir: Optional[Path] = None) -> Path:
    """
    Locate a menu file.

    Absolute paths are used as given. Relative paths are looked up in the
    current directory first, then next to the file that referenced them.
    """
    path = Path(menu_file).expanduser()
    if path.is_absolute():
        return path
    if not path.exists() and base_dir is not None and (base_dir / path).exists():
        return base_dir / path
    return path


def load_menu_data(menu_file: Union[str, Path], _stack: Optional[List[Path]] = None) -> list:
    """
    Load a menu file and every menu file it references.

    Args:
        menu_file: Path to the top-level menu file

    Returns:
        List of item dicts with every 'menuFile' replaced by a 'menu' list
    """
    path = Path(menu_file)
    stack = _stack or []
    real = path.resolve()
    if real in stack:
        chain = " -> ".join(str(p) for p in stack + [real])
        raise MenuLoadError(f"Menu file reference cycle: {chain}")

    data = read_menu_file(path)
    logger.debug("loaded menu file %s (%d items)", path, len(data))
    _resolve_menu_files(data, path.parent, stack + [real])
    return data


def _resolve_menu_files(items: list, base_dir: Path, stack: List[Path]) -> None:
    for item in items:
        if not isinstance(item, dict):
            continue
        if item.get("menuFile"):
            nested = resolve_menu_path(item["menuFile"], base_dir)
            item["menu"] = load_menu_data(nested, stack)
        elif isinstance(item.get("menu"), list):
            _resolve_menu_files(item["menu"], base_dir, stack)


def load_menu(menu_file: Union[str, Path]) -> List[MenuItem]:
    """Load a menu file into MenuItem objects."""
    return parse_menu(load_menu_data(menu_file))
