"""
ANSI color codes and console message helpers for the menube front end.

Library code logs through the logging module; these helpers are only for
output the user is meant to read in the terminal.
"""


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    MAGENTA = "\033[0;35m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # No Color / Reset


def log(msg: str) -> None:
    """Print a success message in green."""
    print(f"{Colors.GREEN}[+]{Colors.NC} {msg}")


def warn(msg: str) -> None:
    """Print a warning message in yellow."""
    print(f"{Colors.YELLOW}[!]{Colors.NC} {msg}")


def error(msg: str) -> None:
    """Print an error message in red."""
    print(f"{Colors.RED}[ERROR]{Colors.NC} {msg}")


def info(msg: str) -> None:
    """Print an informational message in cyan."""
    print(f"{Colors.CYAN}[i]{Colors.NC} {msg}")


def event_log(name: str, args: tuple = ()) -> None:
    """Print an application event raised by a menu item in magenta."""
    print(f"{Colors.MAGENTA}[Event: {name}]{Colors.NC}")
    for value in args:
        if value is None or value == "":
            continue
        text = str(value).rstrip("\n")
        for line in text.splitlines():
            print(f"  {line}")
