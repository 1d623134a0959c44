"""
Notification delivery for menube.

The navigator raises three structural notifications (MENU_CHANGED,
MENU_COMMAND, MENU_EMIT) plus any application event named by a menu
item's 'emit'. Listeners are plain callables receiving the event's
positional arguments.
"""

import threading
from typing import Any, Callable, Dict, List

from menube_lib.common.logging import get_logger


logger = get_logger(__name__)

# Cursor or depth changed; the view should be re-rendered
MENU_CHANGED = "menu_changed"
# The external process started by a command or option item finished
MENU_COMMAND = "menu_command"
# An emit item raised its application event
MENU_EMIT = "menu_emit"

STRUCTURAL_EVENTS = (MENU_CHANGED, MENU_COMMAND, MENU_EMIT)

Listener = Callable[..., Any]


class EventEmitter:
    """Named-event listener registry."""

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}
        self._lock = threading.Lock()

    def on(self, name: str, listener: Listener) -> Listener:
        """Register listener for name. Returns listener for a later off()."""
        with self._lock:
            self._listeners.setdefault(name, []).append(listener)
        return listener

    def once(self, name: str, listener: Listener) -> Listener:
        """Register listener for a single delivery of name."""
        def wrapper(*args):
            self.off(name, wrapper)
            return listener(*args)
        wrapper.listener = listener
        return self.on(name, wrapper)

    def off(self, name: str, listener: Listener) -> None:
        """Remove listener from name. Unknown listeners are ignored."""
        with self._lock:
            listeners = self._listeners.get(name, [])
            for registered in list(listeners):
                if registered is listener or getattr(registered, "listener", None) is listener:
                    listeners.remove(registered)
                    break

    def listener_count(self, name: str) -> int:
        with self._lock:
            return len(self._listeners.get(name, []))

    def emit(self, name: str, *args: Any) -> bool:
        """
        Deliver an event to every listener registered for name.

        A listener that raises is logged and skipped; the remaining
        listeners still run and the exception never reaches the caller.

        Returns:
            True if the event had any listeners
        """
        with self._lock:
            listeners = list(self._listeners.get(name, []))

        logger.debug("event %s args=%r listeners=%d", name, args, len(listeners))
        for listener in listeners:
            try:
                listener(*args)
            except Exception:
                logger.exception("Listener for %r failed", name)
        return bool(listeners)
