"""
Shell command execution for menube.

Command items, options items and option leaves all run a shell command
and get back (error, stdout, stderr) through a callback. error is None on
success, a CommandError for a non-zero exit or timeout, or the OSError
raised when the shell could not be started. Nothing is raised to the
caller.
"""

import subprocess
import threading
from typing import Callable, List, Optional, Protocol, Tuple

from menube_lib.common.logging import get_logger


logger = get_logger(__name__)

CommandCallback = Callable[[Optional[Exception], str, str], None]
CommandResult = Tuple[Optional[Exception], str, str]


class CommandError(Exception):
    """A shell command exited non-zero or timed out."""

    def __init__(self, command: str, returncode: Optional[int], stderr: str = "", timed_out: bool = False):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        self.timed_out = timed_out
        if timed_out:
            message = f"Command timed out: {command}"
        else:
            message = f"Command failed with exit code {returncode}: {command}"
        super().__init__(message)


class Executor(Protocol):
    """Runs a command and eventually calls callback(error, stdout, stderr)."""

    def __call__(self, command: str, callback: CommandCallback) -> None: ...


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    return value


def run_command(command: str, timeout: Optional[float] = None) -> CommandResult:
    """
    Run a shell command and capture its output.

    Args:
        command: Shell command line
        timeout: Seconds before the command is killed (default: no limit)

    Returns:
        Tuple of (error, stdout, stderr)
    """
    logger.debug("running %r", command)
    try:
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        return CommandError(command, None, _text(e.stderr), timed_out=True), _text(e.stdout), _text(e.stderr)
    except OSError as e:
        return e, "", ""

    if result.returncode != 0:
        return CommandError(command, result.returncode, result.stderr), result.stdout, result.stderr
    return None, result.stdout, result.stderr


def _deliver(callback: CommandCallback, result: CommandResult) -> None:
    try:
        callback(*result)
    except Exception:
        logger.exception("Command completion callback failed")


class ShellExecutor:
    """Runs each command on its own daemon thread."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        self._threads: List[threading.Thread] = []
        self._lock = threading.Lock()

    def __call__(self, command: str, callback: CommandCallback) -> None:
        thread = threading.Thread(
            target=self._run,
            args=(command, callback),
            name=f"menube-exec-{command[:20]}",
            daemon=True,
        )
        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            self._threads.append(thread)
        thread.start()

    def _run(self, command: str, callback: CommandCallback) -> None:
        _deliver(callback, run_command(command, self.timeout))

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for in-flight commands (and their callbacks) to finish.

        Returns:
            True if nothing is still running
        """
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout)
        return not any(t.is_alive() for t in threads)


class SyncExecutor:
    """Runs commands inline; the callback fires before __call__ returns."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def __call__(self, command: str, callback: CommandCallback) -> None:
        _deliver(callback, run_command(command, self.timeout))
