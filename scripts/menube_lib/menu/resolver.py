"""
Branch resolution for menube.

The selection path is a list of indices, one per menu level entered. Every
index but the last picks the submenu to descend into; the last index is the
highlighted item in the deepest (active) branch.
"""

from typing import List, Optional, Sequence

from .items import MenuItem, Submenu


class MenuPathError(LookupError):
    """A selection path does not address an item in the menu tree."""


def _walk(tree: List[MenuItem], indices: Sequence[int]) -> List[MenuItem]:
    """Follow indices through nested submenus and return the branch reached."""
    branch = tree
    for depth, index in enumerate(indices):
        if index < 0 or index >= len(branch):
            raise MenuPathError(f"Index {index} out of range at depth {depth}")
        item = branch[index]
        if not isinstance(item, Submenu):
            raise MenuPathError(f"Item {item.label!r} at depth {depth} is not a submenu")
        branch = item.menu
    return branch


def resolve_active_branch(tree: List[MenuItem], path: Sequence[int]) -> List[MenuItem]:
    """
    Return the branch the path's last index points into.

    Args:
        tree: Root menu branch
        path: Selection path (length >= 1)

    Returns:
        The live list of sibling items at the deepest level (not a copy)
    """
    if not path:
        raise MenuPathError("Selection path is empty")
    return _walk(tree, path[:-1])


def resolve_current_item(tree: List[MenuItem], path: Sequence[int]) -> MenuItem:
    """Return the highlighted item in the active branch."""
    branch = resolve_active_branch(tree, path)
    index = path[-1]
    if index < 0 or index >= len(branch):
        raise MenuPathError(f"Index {index} out of range at depth {len(path) - 1}")
    return branch[index]


def resolve_parent_item(tree: List[MenuItem], path: Sequence[int]) -> Optional[Submenu]:
    """
    Return the submenu whose 'menu' is the active branch.

    Returns None at the root level, which has no parent.
    """
    if len(path) <= 1:
        return None
    holder = _walk(tree, path[:-2])
    index = path[-2]
    if index < 0 or index >= len(holder):
        raise MenuPathError(f"Index {index} out of range at depth {len(path) - 2}")
    parent = holder[index]
    if not isinstance(parent, Submenu):
        raise MenuPathError(f"Item {parent.label!r} at depth {len(path) - 2} is not a submenu")
    return parent
