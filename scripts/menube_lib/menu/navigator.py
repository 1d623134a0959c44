"""
Menu navigation state machine for menube.

MenuNavigator keeps a selection path into a menu tree and exposes the
operations a terminal front end needs: move the cursor, enter and leave
submenus, activate the highlighted item, and fetch a display-ready view of
the active branch.

Notes on the selection path:
    The path holds one index per menu level entered. path[0] is the
    highlighted item in the root menu; activating a submenu pushes a new 0
    and backing out pops it. The last index is always the highlighted item
    of the active (deepest) branch.

Command, options and option-leaf activations run a shell command through
the executor and finish in a callback, possibly on another thread. All
state changes, including those callbacks, happen under one reentrant lock.
"""

import shlex
import threading
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Union

from menube_lib.common.logging import get_logger
from menube_lib.config.settings import MenuSettings
from menube_lib.execution import Executor, ShellExecutor

from .events import EventEmitter, MENU_CHANGED, MENU_COMMAND, MENU_EMIT
from .items import (
    CommandItem,
    DynamicSubmenu,
    EmitItem,
    EmitSpec,
    MenuItem,
    OptionLeaf,
    OptionsItem,
    Submenu,
    parse_menu,
)
from .resolver import (
    MenuPathError,
    resolve_active_branch,
    resolve_current_item,
    resolve_parent_item,
)
from .trimmer import trim_branch


logger = get_logger(__name__)


def build_option_leaves(output: str) -> List[OptionLeaf]:
    """Turn options command output into leaves, one per non-empty line."""
    return [OptionLeaf(label=line) for line in output.split("\n") if line]


class MenuNavigator(EventEmitter):
    """
    Cursor and activation state for one menu tree.

    Args:
        menu: Root branch, as MenuItem objects or definition dicts
        settings: Display settings (default: MenuSettings())
        executor: Command runner (default: ShellExecutor)
    """

    def __init__(
        self,
        menu: Sequence[Union[MenuItem, Mapping]],
        settings: Optional[MenuSettings] = None,
        executor: Optional[Executor] = None,
    ):
        super().__init__()
        self.settings = settings or MenuSettings()
        self.menu: List[MenuItem] = parse_menu(list(menu))
        self._executor = executor or ShellExecutor(timeout=self.settings.command_timeout)
        self._path: List[int] = [0]
        self._state_lock = threading.RLock()

    @classmethod
    def from_file(
        cls,
        menu_file: Union[str, Path],
        settings: Optional[MenuSettings] = None,
        executor: Optional[Executor] = None,
    ) -> "MenuNavigator":
        """Load a menu definition file and build a navigator for it."""
        from menube_lib.loader import load_menu

        return cls(load_menu(menu_file), settings=settings, executor=executor)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def path(self) -> List[int]:
        """A copy of the selection path."""
        with self._state_lock:
            return list(self._path)

    @property
    def depth(self) -> int:
        with self._state_lock:
            return len(self._path)

    def get_active_branch(self) -> List[MenuItem]:
        """Return the live list of items at the current depth."""
        with self._state_lock:
            return resolve_active_branch(self.menu, self._path)

    def get_current_select(self) -> Optional[MenuItem]:
        """Return the highlighted item, or None if the active branch is empty."""
        with self._state_lock:
            try:
                return resolve_current_item(self.menu, self._path)
            except MenuPathError:
                return None

    def get_parent_select(self) -> Optional[Submenu]:
        """Return the submenu holding the active branch, or None at the root."""
        with self._state_lock:
            return resolve_parent_item(self.menu, self._path)

    def get_active_menu(self, max_visible: Optional[int] = None) -> List[MenuItem]:
        """
        Return a display copy of the active branch.

        The highlighted item is flagged 'selected'. The list is trimmed to
        max_visible lines, or to settings.display_lines when max_visible is
        not given; 0 means no limit.
        """
        with self._state_lock:
            selected = self._path[-1]
            view = [
                item.view(selected=(index == selected))
                for index, item in enumerate(self.get_active_branch())
            ]

        limit = self.settings.display_lines if max_visible is None else max_visible
        if not view:
            return view
        return trim_branch(
            view,
            selected,
            limit,
            more_up_label=self.settings.more_up_label,
            more_down_label=self.settings.more_down_label,
        )

    def breadcrumb(self) -> List[str]:
        """Labels of the submenus entered to reach the active branch."""
        with self._state_lock:
            return [
                resolve_current_item(self.menu, self._path[:depth + 1]).label
                for depth in range(len(self._path) - 1)
            ]

    # =========================================================================
    # Cursor movement
    # =========================================================================

    def move_up(self) -> bool:
        """Highlight the previous item. Returns False at the top of the branch."""
        with self._state_lock:
            index = self._path[-1] - 1
            if index < 0:
                return False
            self._path[-1] = index
            self.emit(MENU_CHANGED)
            return True

    def move_down(self) -> bool:
        """Highlight the next item. Returns False at the bottom of the branch."""
        with self._state_lock:
            index = self._path[-1] + 1
            if index >= len(self.get_active_branch()):
                return False
            self._path[-1] = index
            self.emit(MENU_CHANGED)
            return True

    def select(self, index: int) -> bool:
        """Highlight the item at index in the active branch."""
        with self._state_lock:
            if index < 0 or index >= len(self.get_active_branch()):
                return False
            if index != self._path[-1]:
                self._path[-1] = index
                self.emit(MENU_CHANGED)
            return True

    def back(self) -> bool:
        """Leave the active branch for its parent. Returns False at the root."""
        with self._state_lock:
            if len(self._path) <= 1:
                return False
            self._leave_branch()
            self.emit(MENU_CHANGED)
            return True

    def _leave_branch(self) -> None:
        """Pop the path, removing the branch's submenu if it was fetched at runtime."""
        parent = self.get_parent_select()
        self._path.pop()
        if isinstance(parent, DynamicSubmenu):
            branch = self.get_active_branch()
            index = self._path[-1]
            if index < len(branch) and branch[index] is parent:
                del branch[index]
                logger.debug("removed options menu %r", parent.label)

    # =========================================================================
    # Activation
    # =========================================================================

    def activate(self) -> None:
        """
        Activate the highlighted item.

        Submenus are entered, command items run their command, emit items
        raise their event and options items fetch and enter a dynamic
        submenu. Items with no activation shape are ignored.
        """
        with self._state_lock:
            item = self.get_current_select()
            if item is None:
                return

            if isinstance(item, Submenu):
                self._enter_submenu(item)
            elif isinstance(item, CommandItem) and item.command:
                self._run_command(item.command, item.emit)
            elif isinstance(item, EmitItem) and item.emit:
                self._raise_emit(item.emit)
            elif isinstance(item, OptionsItem) and item.options:
                self._fetch_options(item)
            elif isinstance(item, OptionLeaf):
                self._choose_option(item)

    def _enter_submenu(self, item: Submenu) -> None:
        if not item.menu:
            logger.debug("submenu %r is empty, not entering", item.label)
            return
        self._path.append(0)
        self.emit(MENU_CHANGED)

    def _raise_emit(self, spec: EmitSpec) -> None:
        self.emit(spec.name, *spec.arguments)
        self.emit(MENU_EMIT)

    def _run_command(self, command: str, emit: Optional[EmitSpec]) -> None:
        """Dispatch command; on completion raise emit (if any), then MENU_COMMAND."""
        def done(err, stdout, stderr):
            with self._state_lock:
                if err is not None:
                    logger.warning("command %r failed: %s", command, err)
                if emit:
                    self.emit(emit.name, err, stdout, stderr)
                self.emit(MENU_COMMAND)

        logger.info("running command %r", command)
        self._executor(command, done)

    def _fetch_options(self, item: OptionsItem) -> None:
        """
        Run the options command and enter the submenu built from its output.

        The submenu is inserted in front of the options item, at the
        highlighted index, and then activated. If the cursor moved while
        the command was running the result is dropped. A failed command
        still yields a submenu when it printed any lines; its error is
        passed to MENU_COMMAND as (error, stdout, stderr).
        """
        target_path = list(self._path)
        target_branch = self.get_active_branch()

        def done(err, stdout, stderr):
            with self._state_lock:
                if not self._is_current(target_path, target_branch, item):
                    logger.warning("ignoring stale options for %r", item.label)
                    return

                if err is not None:
                    logger.warning("options command for %r failed: %s", item.label, err)

                leaves = build_option_leaves(stdout)
                if not leaves:
                    logger.warning("options for %r produced no menu", item.label)
                    self.emit(MENU_COMMAND, err, stdout, stderr)
                    return

                submenu = DynamicSubmenu(
                    label=item.label,
                    menu=leaves,
                    select_script=item.select_script,
                    emit=item.select_emit,
                )
                target_branch.insert(target_path[-1], submenu)
                self.activate()
                if err is not None:
                    self.emit(MENU_COMMAND, err, stdout, stderr)

        logger.info("fetching options %r", item.options)
        self._executor(item.options, done)

    def _is_current(self, path: List[int], branch: List[MenuItem], item: MenuItem) -> bool:
        """True if path is still the selection and still highlights item in branch."""
        if self._path != path:
            return False
        try:
            return (
                self.get_active_branch() is branch
                and resolve_current_item(self.menu, self._path) is item
            )
        except MenuPathError:
            return False

    def _choose_option(self, leaf: OptionLeaf) -> None:
        """Leave the options menu, then run its select script with the leaf's label."""
        parent = self.get_parent_select()
        if not isinstance(parent, DynamicSubmenu):
            return
        self.back()
        if not parent.select_script:
            logger.warning("options menu %r has no select script", parent.label)
            return
        command = f"{parent.select_script} {shlex.quote(leaf.label)}"
        self._run_command(command, parent.emit)

    # Aliases for the menuUp/menuDown/menuBack/activateSelect API
    menu_up = move_up
    menu_down = move_down
    menu_back = back
    activate_select = activate
