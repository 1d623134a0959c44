"""
Menu item dataclasses for menube.

A menu tree is a list of MenuItem. Each activation shape is its own class:
a Submenu holds a child list, a CommandItem runs a shell command, an
EmitItem raises an application event and an OptionsItem fetches a dynamic
submenu. DynamicSubmenu, OptionLeaf and MoreMarker only ever exist at
runtime; they are created by the navigator and the window trimmer.

Menu definition files use the camelCase dict shape produced by to_dict()
and read by parse_menu_item().
"""

import copy
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union


# =============================================================================
# Emit specification
# =============================================================================

@dataclass
class EmitSpec:
    """An application event raised by a menu item."""
    name: str
    arguments: List[Any] = field(default_factory=list)
    structured: bool = False  # written as {name, arguments} rather than a string

    @classmethod
    def parse(cls, value: Union[str, Mapping, "EmitSpec", None]) -> Optional["EmitSpec"]:
        """Parse an emit value: a plain event name or {name, arguments}."""
        if value is None or value == "":
            return None
        if isinstance(value, EmitSpec):
            return value
        if isinstance(value, str):
            return cls(name=value)
        if isinstance(value, Mapping) and value.get("name"):
            return cls(
                name=str(value["name"]),
                arguments=list(value.get("arguments") or []),
                structured=True,
            )
        return None

    def to_value(self) -> Union[str, dict]:
        """Serialize back to the definition file shape."""
        if not self.structured:
            return self.name
        data: dict = {"name": self.name}
        if self.arguments:
            data["arguments"] = list(self.arguments)
        return data


# =============================================================================
# Menu items
# =============================================================================

@dataclass
class MenuItem:
    """
    A menu entry with no activation behavior.

    Also the base class of every other item. 'selected' is only ever set
    on the copies returned by MenuNavigator.get_active_menu().
    """
    label: str = ""
    selected: bool = False

    def to_dict(self) -> dict:
        data: dict = {"label": self.label}
        if self.selected:
            data["selected"] = True
        return data

    def view(self, selected: bool = False) -> "MenuItem":
        """Return a deep copy for display, flagged as selected if asked."""
        item = copy.deepcopy(self)
        item.selected = selected
        return item


@dataclass
class Submenu(MenuItem):
    """A branch node; activating it descends into 'menu'."""
    menu: List[MenuItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["menu"] = [item.to_dict() for item in self.menu]
        return data


@dataclass
class DynamicSubmenu(Submenu):
    """
    A submenu built from an OptionsItem's command output.

    Owned by the navigator: it is inserted in front of its OptionsItem when
    the options are fetched and removed again when the user backs out.
    """
    select_script: Optional[str] = None
    emit: Optional[EmitSpec] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.select_script:
            data["selectScript"] = self.select_script
        if self.emit:
            data["emit"] = self.emit.to_value()
        data["optionsMenu"] = True
        return data


@dataclass
class CommandItem(MenuItem):
    """Runs a shell command; 'emit' is raised with (error, stdout, stderr)."""
    command: str = ""
    emit: Optional[EmitSpec] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["command"] = self.command
        if self.emit:
            data["emit"] = self.emit.to_value()
        return data


@dataclass
class EmitItem(MenuItem):
    """Raises an application event."""
    emit: Optional[EmitSpec] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.emit:
            data["emit"] = self.emit.to_value()
        return data


@dataclass
class OptionsItem(MenuItem):
    """
    Fetches a submenu from a shell command.

    Each non-empty output line of 'options' becomes an OptionLeaf. Choosing
    a leaf runs 'select_script <leaf label>' and raises 'select_emit'.
    """
    options: str = ""
    select_script: Optional[str] = None
    select_emit: Optional[EmitSpec] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["options"] = self.options
        if self.select_script:
            data["selectScript"] = self.select_script
        if self.select_emit:
            data["selectEmit"] = self.select_emit.to_value()
        return data


@dataclass
class OptionLeaf(MenuItem):
    """One line of options output inside a DynamicSubmenu."""

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["optionsItem"] = True
        return data


@dataclass
class MoreMarker(MenuItem):
    """Display-only marker for items hidden above or below the window."""

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["menuMore"] = True
        return data


# =============================================================================
# Parsing
# =============================================================================

def parse_menu_item(data: Union[Mapping, MenuItem]) -> MenuItem:
    """
    Build a MenuItem from its definition dict.

    Shapes are checked in order menu, command, emit, options; the first one
    present decides the item's class. Runtime flags (optionsMenu,
    optionsItem, menuMore) are honored so to_dict() output parses back.
    """
    if isinstance(data, MenuItem):
        return data
    if not isinstance(data, Mapping):
        raise TypeError(f"Menu item must be a mapping, got {type(data).__name__}")

    label = str(data.get("label", ""))
    selected = bool(data.get("selected", False))

    if isinstance(data.get("menu"), list):
        children = parse_menu(data["menu"])
        if data.get("optionsMenu"):
            return DynamicSubmenu(
                label=label,
                selected=selected,
                menu=children,
                select_script=data.get("selectScript"),
                emit=EmitSpec.parse(data.get("emit")),
            )
        return Submenu(label=label, selected=selected, menu=children)

    if data.get("command"):
        return CommandItem(
            label=label,
            selected=selected,
            command=str(data["command"]),
            emit=EmitSpec.parse(data.get("emit")),
        )

    emit = EmitSpec.parse(data.get("emit"))
    if emit:
        return EmitItem(label=label, selected=selected, emit=emit)

    if data.get("options"):
        return OptionsItem(
            label=label,
            selected=selected,
            options=str(data["options"]),
            select_script=data.get("selectScript"),
            select_emit=EmitSpec.parse(data.get("selectEmit")),
        )

    if data.get("optionsItem"):
        return OptionLeaf(label=label, selected=selected)

    if data.get("menuMore"):
        return MoreMarker(label=label, selected=selected)

    return MenuItem(label=label, selected=selected)


def parse_menu(data: List[Union[Mapping, MenuItem]]) -> List[MenuItem]:
    """Build a menu branch (and everything below it) from definition dicts."""
    return [parse_menu_item(entry) for entry in data]


def menu_to_dicts(menu: List[MenuItem]) -> List[dict]:
    """Serialize a menu branch back to definition dicts."""
    return [item.to_dict() for item in menu]
