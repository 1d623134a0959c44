#!/usr/bin/env python3
"""
menube_repl.py - Interactive terminal navigator for menube menu files

Loads a JSON or YAML menu tree and lets the user move through it, run the
commands it defines and pick from dynamically fetched option lists.
"""

import sys

from menube_lib.repl.cli import main


if __name__ == "__main__":
    sys.exit(main())
