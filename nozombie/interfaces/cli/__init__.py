"""
Cli package.
"""

from .cli_ui import (
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_SUCCESS,
    COLOR_WARNING,
    RichConfirmer,
    RichProgressReporter,
    TableDisplay,
    print_error,
    print_info,
    print_success,
    print_warning,
    show_component_content,
    show_deletion_summary,
)

__all__ = [
    "COLOR_ERROR",
    "COLOR_INFO",
    "COLOR_SUCCESS",
    "COLOR_WARNING",
    "RichConfirmer",
    "RichProgressReporter",
    "TableDisplay",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "show_component_content",
    "show_deletion_summary",
]
