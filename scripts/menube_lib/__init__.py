"""
menube_lib - Navigation engine for tree-structured terminal menus

This package contains:
- menu: Menu item model, branch resolver, window trimmer and navigator
- execution: Shell command execution for command and options items
- loader: Menu definition loading (JSON/YAML, nested menu files)
- config: Navigator and front end settings
- common: Console output and logging helpers
- repl: Interactive terminal front end
"""

__version__ = "1.0.0"
