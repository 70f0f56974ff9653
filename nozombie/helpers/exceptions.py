"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class ComponentParseError(Exception):
    """Raised when a source file has no single, nameable exported component."""


class FilesystemReadError(Exception):
    """Raised when the source tree cannot be listed, inspected or read.

    Aborts the whole scan; partial trees are never reported.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class ComponentDeleteError(Exception):
    """Raised when a component file cannot be removed."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or resolved."""
