"""
Command dispatch and main loop for the menube REPL.

Each line typed at the prompt is a navigation verb, an item number, or an
item label. Numbers and labels jump to that item in the active branch and
activate it.
"""

from pathlib import Path
from typing import Iterator, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.styles import Style

from menube_lib.common import Colors, error, event_log, info, init_logging, log, warn
from menube_lib.config import HISTORY_FILE, MenuSettings
from menube_lib.execution import Executor, ShellExecutor
from menube_lib.loader import MenuLoadError
from menube_lib.menu import (
    CommandItem,
    DynamicSubmenu,
    EmitItem,
    MENU_CHANGED,
    MENU_COMMAND,
    MenuItem,
    MenuNavigator,
    OptionsItem,
    Submenu,
)

from .completer import MenuCompleter
from .display import render_menu


MENUBE_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
    'completion-menu': 'bg:#333333 #ffffff',
})

HELP_TEXT = f"""
{Colors.BOLD}Navigation{Colors.NC}
  up, k            Highlight the previous item
  down, j          Highlight the next item
  select, <enter>  Activate the highlighted item
  back, ..         Return to the parent menu
  top              Return to the root menu
  <number>         Jump to item <number> and activate it
  <label>          Jump to the item with that label and activate it

{Colors.BOLD}Other{Colors.NC}
  show, ls         Redraw the menu
  help, ?          Show this help
  exit, quit       Leave menube
"""


def get_prompt_text(navigator: MenuNavigator) -> str:
    """Generate the prompt string from the submenus entered."""
    crumbs = navigator.breadcrumb()
    if crumbs:
        return f"menube.{'.'.join(crumbs)}> "
    return "menube> "


def iter_event_names(menu: List[MenuItem]) -> Iterator[str]:
    """Yield every application event name a menu tree can raise."""
    for item in menu:
        if isinstance(item, (CommandItem, EmitItem, DynamicSubmenu)) and item.emit:
            yield item.emit.name
        if isinstance(item, OptionsItem) and item.select_emit:
            yield item.select_emit.name
        if isinstance(item, Submenu):
            yield from iter_event_names(item.menu)


def find_item(navigator: MenuNavigator, target: str) -> Optional[int]:
    """
    Find an item in the active branch by 1-based number or label.

    Returns:
        The item's 0-based index, or None if nothing matches
    """
    branch = navigator.get_active_branch()
    if target.isdigit():
        index = int(target) - 1
        return index if 0 <= index < len(branch) else None

    lowered = target.lower()
    for index, item in enumerate(branch):
        if item.label.lower() == lowered:
            return index
    return None


def handle_command(cmd: str, navigator: MenuNavigator) -> bool:
    """
    Handle one line of input.

    Returns:
        False when the REPL should exit, True otherwise
    """
    cmd = cmd.strip()
    command = cmd.lower()

    if command in ("", "select", "enter"):
        navigator.activate()
        return True

    if command in ("exit", "quit"):
        return False

    if command in ("up", "k"):
        navigator.move_up()
        return True

    if command in ("down", "j"):
        navigator.move_down()
        return True

    if command in ("back", ".."):
        if not navigator.back():
            info("Already at the top menu")
        return True

    if command == "top":
        while navigator.back():
            pass
        return True

    if command in ("show", "ls"):
        render_menu(navigator)
        return True

    if command in ("help", "?"):
        print(HELP_TEXT)
        return True

    index = find_item(navigator, cmd)
    if index is None:
        warn(f"Unknown command: {cmd}")
        print("Type 'help' for available commands")
        return True

    navigator.select(index)
    navigator.activate()
    return True


def attach_output(navigator: MenuNavigator) -> None:
    """Redraw on navigation and print application events as they fire."""
    navigator.on(MENU_CHANGED, lambda: render_menu(navigator))

    for name in sorted(set(iter_event_names(navigator.menu))):
        navigator.on(name, lambda *args, name=name: event_log(name, args))


def report_command(err=None, stdout: str = "", stderr: str = "") -> None:
    """Print the outcome of a finished command."""
    if err is None:
        log("Command finished")
        return
    warn(f"{err}")
    if stderr.strip():
        print(f"  {stderr.strip()}")


def run_repl(
    menu_file: Path,
    settings: Optional[MenuSettings] = None,
    executor: Optional[Executor] = None,
) -> int:
    """Main REPL entry point."""
    settings = settings or MenuSettings()
    init_logging(settings.log_level)

    executor = executor or ShellExecutor(timeout=settings.command_timeout)
    try:
        navigator = MenuNavigator.from_file(menu_file, settings=settings, executor=executor)
    except MenuLoadError as e:
        error(str(e))
        return 1

    print()
    print(f"{Colors.BOLD}menube{Colors.NC} - {menu_file}")
    print("Type 'help' for commands, 'exit' to quit")
    print()

    attach_output(navigator)
    navigator.on(MENU_COMMAND, report_command)

    session = PromptSession(
        history=FileHistory(str(HISTORY_FILE)),
        completer=MenuCompleter(navigator),
        style=MENUBE_STYLE,
    )

    with patch_stdout():
        render_menu(navigator)
        while True:
            try:
                cmd = session.prompt(get_prompt_text(navigator))
                if not handle_command(cmd, navigator):
                    break
            except KeyboardInterrupt:
                print()
                continue
            except EOFError:
                print()
                break

    print("Goodbye!")
    return 0
