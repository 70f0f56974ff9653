"""Component file deletion."""

from __future__ import annotations

import logging

from nozombie.helpers.dto.capabilities_dto import FileSystem
from nozombie.helpers.dto.component_dto import Component
from nozombie.helpers.exceptions import ComponentDeleteError

logger = logging.getLogger(__name__)


def delete_component_file(component: Component, fs: FileSystem) -> None:
    """
    Remove the file a component was discovered in.

    Raises:
        ComponentDeleteError: If the filesystem refuses the delete
    """
    try:
        fs.delete_file(component.path)
    except OSError as e:
        raise ComponentDeleteError(component.path, e.strerror or str(e)) from e
    logger.info("Deleted %s (%s)", component.path, component.name)
