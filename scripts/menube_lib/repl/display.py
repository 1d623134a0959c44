"""
Menu rendering for the menube REPL.

Draws the navigator's active menu view with rich. Items are numbered by
their position in the active branch so the number can be typed to jump
straight to an item.
"""

from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from menube_lib.menu import (
    CommandItem,
    EmitItem,
    MenuItem,
    MenuNavigator,
    MoreMarker,
    OptionsItem,
    Submenu,
)


console = Console()


def item_suffix(item: MenuItem) -> str:
    """Short hint for what activating an item does."""
    if isinstance(item, Submenu):
        return ">"
    if isinstance(item, OptionsItem):
        return "..."
    if isinstance(item, CommandItem):
        return "$"
    if isinstance(item, EmitItem):
        return "!"
    return ""


def number_view(view: List[MenuItem], selected_index: int) -> List[Tuple[Optional[int], MenuItem]]:
    """
    Pair each entry of a (possibly trimmed) view with its 1-based branch position.

    Markers get None. The trimmed window is contiguous apart from the
    markers, so the selected entry fixes the offset of all the others.
    """
    view_selected = next((i for i, item in enumerate(view) if item.selected), 0)
    offset = selected_index - view_selected
    numbered = []
    for i, item in enumerate(view):
        if isinstance(item, MoreMarker):
            numbered.append((None, item))
        else:
            numbered.append((offset + i + 1, item))
    return numbered


def menu_title(navigator: MenuNavigator) -> str:
    return " > ".join(["menu"] + navigator.breadcrumb())


def build_menu_table(navigator: MenuNavigator) -> Table:
    """Build a rich Table for the navigator's active menu."""
    table = Table(title=menu_title(navigator), title_justify="left", show_header=False, box=None)
    table.add_column(justify="right", style="dim")
    table.add_column()
    table.add_column(style="dim")

    view = navigator.get_active_menu()
    if not view:
        table.add_row("", Text("(empty)", style="dim"), "")
        return table

    for number, item in number_view(view, navigator.path[-1]):
        if number is None:
            table.add_row("", Text(item.label, style="dim"), "")
            continue
        style = "reverse bold" if item.selected else ""
        table.add_row(str(number), Text(item.label, style=style), item_suffix(item))
    return table


def render_menu(navigator: MenuNavigator, out: Optional[Console] = None) -> None:
    """Print the active menu."""
    (out or console).print(build_menu_table(navigator))
