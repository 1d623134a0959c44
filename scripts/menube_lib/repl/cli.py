"""
Command line entry point for menube.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from menube_lib import __version__
from menube_lib.common import error
from menube_lib.config import load_settings

from .dispatcher import run_repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="menube",
        description="Navigate a JSON/YAML menu tree in the terminal",
    )
    parser.add_argument("menu_file", type=Path, help="Menu definition file (.json, .yaml)")
    parser.add_argument("--display-lines", type=int, help="Maximum menu lines shown (0 = all)")
    parser.add_argument("--more-up-label", help="Label for hidden items above")
    parser.add_argument("--more-down-label", help="Label for hidden items below")
    parser.add_argument("--command-timeout", type=float, help="Seconds before a menu command is killed")
    parser.add_argument("--settings", type=Path, help="Settings file (JSON)")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {
        "display_lines": args.display_lines,
        "more_up_label": args.more_up_label,
        "more_down_label": args.more_down_label,
        "command_timeout": args.command_timeout,
        "log_level": args.log_level,
    }
    try:
        settings = load_settings(args.settings, overrides)
    except ValueError as e:
        error(f"Invalid setting: {e}")
        return 2

    return run_repl(args.menu_file, settings)


if __name__ == "__main__":
    sys.exit(main())
