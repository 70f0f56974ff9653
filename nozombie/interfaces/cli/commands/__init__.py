"""
Commands package.
"""

from .list_cli import cmd_list
from .sweep_cli import cmd_sweep

__all__ = [
    "cmd_list",
    "cmd_sweep",
]
