"""Recursive component discovery.

Walks a directory tree, reads every eligible file and keeps the ones that
declare a component. Any filesystem error aborts the walk.
"""

from __future__ import annotations

import logging
import os

from nozombie.components.discovery.component_name_comp import dialect_for_path, extract_component_name
from nozombie.helpers.dto.capabilities_dto import FileSystem
from nozombie.helpers.dto.component_dto import Component
from nozombie.helpers.dto.config_dto import RunConfig
from nozombie.helpers.exceptions import ComponentParseError, FilesystemReadError
from nozombie.helpers.files_helper import is_component_file, is_vendor_dir

logger = logging.getLogger(__name__)


def read_component(path: str, fs: FileSystem) -> Component | None:
    """
    Build a Component from one file, or None if it declares none.

    Raises:
        FilesystemReadError: If the file cannot be read
    """
    try:
        content = fs.read_text(path)
    except OSError as e:
        raise FilesystemReadError(path, e.strerror or str(e)) from e

    def _log_parse_error(error: ComponentParseError) -> None:
        logger.debug("No component in %s: %s", path, error)

    name = extract_component_name(content, on_error=_log_parse_error, dialect=dialect_for_path(path))
    if not name:
        return None
    return Component(name=name, path=path, content=content)


def walk_components(directory: str, config: RunConfig, fs: FileSystem) -> list[Component]:
    """
    All components under ``directory``, in listing order.

    Args:
        directory: Root to walk (already resolved, used as-is)
        config: Run configuration (extensions, vendor exclusion)
        fs: Filesystem capability

    Raises:
        FilesystemReadError: On the first listing, stat or read failure
    """
    found: list[Component] = []
    _walk_into(directory, config, fs, found)
    return found


def _walk_into(directory: str, config: RunConfig, fs: FileSystem, found: list[Component]) -> None:
    try:
        entries = fs.list_entries(directory)
    except OSError as e:
        raise FilesystemReadError(directory, e.strerror or str(e)) from e

    for entry in entries:
        path = os.path.join(directory, entry)
        try:
            is_dir = fs.is_directory(path)
        except OSError as e:
            raise FilesystemReadError(path, e.strerror or str(e)) from e

        if is_dir:
            if config.ignore_node_modules and is_vendor_dir(entry):
                logger.debug("Skipping vendor directory %s", path)
                continue
            _walk_into(path, config, fs, found)
        elif is_component_file(entry, config.extensions):
            component = read_component(path, fs)
            if component is not None:
                found.append(component)
