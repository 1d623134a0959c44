"""Tests for loading menu definition files."""

import json

import pytest

from menube_lib.loader import MenuLoadError, load_menu, load_menu_data
from menube_lib.menu import CommandItem, MenuNavigator, Submenu


def write_json(path, data):
    path.write_text(json.dumps(data))
    return path


def test_load_json(tmp_path):
    menu_file = write_json(tmp_path / "menu.json", [
        {"label": "Date", "command": "date"},
        {"label": "Sub", "menu": [{"label": "x"}]},
    ])

    menu = load_menu(menu_file)

    assert isinstance(menu[0], CommandItem)
    assert isinstance(menu[1], Submenu)
    assert menu[1].menu[0].label == "x"


def test_load_yaml(tmp_path):
    menu_file = tmp_path / "menu.yaml"
    menu_file.write_text(
        "- label: Run\n"
        "  emit:\n"
        "    name: run\n"
        "    arguments: [a, b]\n"
        "- label: Pick\n"
        "  options: ls\n"
        "  selectScript: cat\n"
    )

    menu = load_menu(menu_file)

    assert menu[0].emit.name == "run"
    assert menu[0].emit.arguments == ["a", "b"]
    assert menu[1].options == "ls"


def test_menu_file_reference_is_resolved(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_json(tmp_path / "child.json", [{"label": "Child", "emit": "child"}])
    menu_file = write_json(tmp_path / "root.json", [{"label": "Sub", "menuFile": "child.json"}])

    data = load_menu_data(menu_file)

    assert data[0]["menu"] == [{"label": "Child", "emit": "child"}]


def test_nested_menu_file_found_next_to_parent(tmp_path, monkeypatch):
    other = tmp_path / "elsewhere"
    other.mkdir()
    monkeypatch.chdir(other)
    menus = tmp_path / "menus"
    menus.mkdir()
    write_json(menus / "leaf.json", [{"label": "Leaf"}])
    write_json(menus / "child.json", [{"label": "Deeper", "menu": [{"label": "More", "menuFile": "leaf.json"}]}])
    menu_file = write_json(menus / "root.json", [{"label": "Sub", "menuFile": "child.json"}])

    menu = load_menu(menu_file)

    assert menu[0].menu[0].menu[0].menu[0].label == "Leaf"


def test_menu_file_cycle_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_json(tmp_path / "a.json", [{"label": "B", "menuFile": "b.json"}])
    write_json(tmp_path / "b.json", [{"label": "A", "menuFile": "a.json"}])

    with pytest.raises(MenuLoadError, match="cycle"):
        load_menu(tmp_path / "a.json")


def test_non_list_file_raises(tmp_path):
    menu_file = write_json(tmp_path / "menu.json", {"label": "not a list"})

    with pytest.raises(MenuLoadError):
        load_menu(menu_file)


def test_invalid_json_raises(tmp_path):
    menu_file = tmp_path / "menu.json"
    menu_file.write_text("[{")

    with pytest.raises(MenuLoadError):
        load_menu(menu_file)


def test_missing_file_raises(tmp_path):
    with pytest.raises(MenuLoadError):
        load_menu(tmp_path / "missing.yaml")


def test_navigator_from_file(tmp_path, executor):
    menu_file = write_json(tmp_path / "menu.json", [{"label": "Ping", "emit": "ping"}])

    navigator = MenuNavigator.from_file(menu_file, executor=executor)

    assert navigator.get_current_select().label == "Ping"
