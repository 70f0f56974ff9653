"""
Helpers package.
"""

from .dto import Component, Confirmer, DeletionSummary, FileSystem, ProgressReporter, RunConfig, UsageReport
from .exceptions import ComponentDeleteError, ComponentParseError, ConfigError, FilesystemReadError
from .files_helper import VENDOR_DIR_MARKER, is_component_file, is_vendor_dir, normalize_extensions
from .logging_helper import configure_logging

__all__ = [
    "VENDOR_DIR_MARKER",
    "Component",
    "ComponentDeleteError",
    "ComponentParseError",
    "ConfigError",
    "Confirmer",
    "DeletionSummary",
    "FileSystem",
    "FilesystemReadError",
    "ProgressReporter",
    "RunConfig",
    "UsageReport",
    "configure_logging",
    "is_component_file",
    "is_vendor_dir",
    "normalize_extensions",
]
