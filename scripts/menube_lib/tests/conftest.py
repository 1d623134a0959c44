"""
Shared fixtures for menube tests.

Commands never reach a shell here: RecordingExecutor keeps each dispatched
command and its callback so a test decides when (and how) it completes.
"""

import copy

import pytest

from menube_lib.config import MenuSettings
from menube_lib.menu import MenuNavigator


SAMPLE_MENU = [
    {"label": "Files", "menu": [
        {"label": "List", "command": "ls", "emit": "listed"},
        {"label": "Pick", "options": "list-things", "selectScript": "open.sh", "selectEmit": "opened"},
        {"label": "Nested", "menu": [
            {"label": "Deep", "emit": "deep"},
            {"label": "Deeper", "emit": "deeper"},
        ]},
    ]},
    {"label": "Run", "emit": {"name": "run", "arguments": ["a", "b"]}},
    {"label": "Ping", "emit": "ping"},
    {"label": "Plain"},
]


class RecordingExecutor:
    """Executor that holds commands until the test completes them."""

    def __init__(self):
        self.calls = []

    def __call__(self, command, callback):
        self.calls.append((command, callback))

    @property
    def commands(self):
        return [command for command, _ in self.calls]

    def complete(self, err=None, stdout="", stderr="", index=0):
        command, callback = self.calls.pop(index)
        callback(err, stdout, stderr)
        return command


class EventLog:
    """Collects (name, args) for every event it is subscribed to."""

    def __init__(self, navigator, *names):
        self.events = []
        for name in names:
            navigator.on(name, lambda *args, name=name: self.events.append((name, args)))

    @property
    def names(self):
        return [name for name, _ in self.events]


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def navigator(executor):
    return MenuNavigator(SAMPLE_MENU, settings=MenuSettings(), executor=executor)


@pytest.fixture
def event_log():
    return EventLog


@pytest.fixture
def sample_menu():
    return copy.deepcopy(SAMPLE_MENU)
