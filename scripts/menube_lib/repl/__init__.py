"""
menube_lib.repl - Interactive terminal front end for menube

This package contains:
- display: Rendering the active menu with rich
- completer: Tab completion
- dispatcher: Command handling and the main REPL loop
- cli: Command line entry point
"""

from .display import render_menu, build_menu_table
from .completer import MenuCompleter
from .dispatcher import get_prompt_text, handle_command, run_repl

__all__ = [
    'render_menu',
    'build_menu_table',
    'MenuCompleter',
    'get_prompt_text',
    'handle_command',
    'run_repl',
]
