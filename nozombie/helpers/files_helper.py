"""
File-type rules for component discovery.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from nozombie.helpers.dto.config_dto import DEFAULT_EXTENSIONS

# Directory-name marker for dependency vendor trees
VENDOR_DIR_MARKER = "node_modules"


def is_component_file(path: str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
    """
    Check if a file may declare a component.

    Args:
        path: File name or path
        extensions: Eligible extensions, with leading dot

    Returns:
        True if the file extension is eligible, False otherwise.
    """
    return Path(path).suffix.lower() in {ext.lower() for ext in extensions}


def is_vendor_dir(name: str) -> bool:
    """True for directory names that contain the vendor marker (``node_modules``, ``old_node_modules``...)."""
    return VENDOR_DIR_MARKER in name


def normalize_extensions(extensions: Iterable[str] | str) -> tuple[str, ...]:
    """
    Normalize an extension list from config.

    Accepts a list or a comma-separated string; adds missing leading dots and
    drops blanks and duplicates (first occurrence wins).

    Examples:
        >>> normalize_extensions("tsx, .jsx,,js")
        ('.tsx', '.jsx', '.js')
    """
    if isinstance(extensions, str):
        extensions = extensions.split(",")
    result: list[str] = []
    for ext in extensions:
        ext = str(ext).strip()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in result:
            result.append(ext)
    return tuple(result)
