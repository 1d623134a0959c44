"""
Window trimming for menube.

Fits a menu branch into a fixed number of display lines while keeping the
selected item on screen. Hidden items are signalled with MoreMarker
entries, which count against the line budget.
"""

from typing import List, Optional

from menube_lib.config.constants import DEFAULT_MORE_LABEL

from .items import MenuItem, MoreMarker


def trim_branch(
    branch: List[MenuItem],
    selected_index: int,
    max_visible: Optional[int],
    more_up_label: str = DEFAULT_MORE_LABEL,
    more_down_label: str = DEFAULT_MORE_LABEL,
) -> List[MenuItem]:
    """
    Return at most max_visible entries of branch around selected_index.

    The window starts at the selected item once it is past the second
    line, and never starts so late that lines are left empty. A leading
    marker replaces hidden items above; the last line is replaced by a
    marker when items are hidden below.

    Args:
        branch: Items of the active branch
        selected_index: Index of the highlighted item in branch
        max_visible: Line budget; None or 0 disables trimming
        more_up_label: Label of the "more above" marker
        more_down_label: Label of the "more below" marker

    Returns:
        A new list (or branch itself when it already fits)
    """
    if max_visible is None or max_visible == 0:
        return branch
    if max_visible < 0:
        raise ValueError(f"max_visible must be >= 0, got {max_visible}")

    length = len(branch)
    if length <= max_visible:
        return branch

    if max_visible < 3:
        return _trim_narrow(branch, selected_index, max_visible, more_up_label, more_down_label)

    start = selected_index if selected_index > 1 else 0
    if start + max_visible - 1 > length:
        start = length - max_visible + 1

    window: List[MenuItem] = []
    if start > 1:
        window.append(MoreMarker(label=more_up_label))

    visible = branch[start:start + max_visible - len(window)]
    window.extend(visible)

    if start + len(visible) < length:
        window[-1] = MoreMarker(label=more_down_label)

    return window


def _trim_narrow(
    branch: List[MenuItem],
    selected_index: int,
    max_visible: int,
    more_up_label: str,
    more_down_label: str,
) -> List[MenuItem]:
    """
    Windows of one or two lines.

    The selected item always gets a line. With two lines the other one is a
    "more below" marker, or "more above" when the selection is the last item.
    """
    selected = branch[selected_index]
    if max_visible == 1:
        return [selected]
    if selected_index < len(branch) - 1:
        return [selected, MoreMarker(label=more_down_label)]
    return [MoreMarker(label=more_up_label), selected]
