"""
menube_lib.menu - Menu tree model and navigation.

This package contains:
- items: MenuItem dataclasses and definition parsing
- resolver: Active branch / current item / parent item lookup by path
- trimmer: Fitting a branch into a bounded number of display lines
- events: EventEmitter and structural notification names
- navigator: MenuNavigator state machine
"""

from .items import (
    EmitSpec,
    MenuItem,
    Submenu,
    DynamicSubmenu,
    CommandItem,
    EmitItem,
    OptionsItem,
    OptionLeaf,
    MoreMarker,
    parse_menu_item,
    parse_menu,
    menu_to_dicts,
)

from .resolver import (
    MenuPathError,
    resolve_active_branch,
    resolve_current_item,
    resolve_parent_item,
)

from .trimmer import trim_branch

from .events import (
    EventEmitter,
    MENU_CHANGED,
    MENU_COMMAND,
    MENU_EMIT,
    STRUCTURAL_EVENTS,
)

from .navigator import MenuNavigator, build_option_leaves

__all__ = [
    # Items
    'EmitSpec',
    'MenuItem',
    'Submenu',
    'DynamicSubmenu',
    'CommandItem',
    'EmitItem',
    'OptionsItem',
    'OptionLeaf',
    'MoreMarker',
    'parse_menu_item',
    'parse_menu',
    'menu_to_dicts',
    # Resolver
    'MenuPathError',
    'resolve_active_branch',
    'resolve_current_item',
    'resolve_parent_item',
    # Trimmer
    'trim_branch',
    # Events
    'EventEmitter',
    'MENU_CHANGED',
    'MENU_COMMAND',
    'MENU_EMIT',
    'STRUCTURAL_EVENTS',
    # Navigator
    'MenuNavigator',
    'build_option_leaves',
]
