"""
Delete components workflow.

Forced mode removes every unused component file. Interactive mode walks the
list in order and asks before each delete:

    Pending -> prompt -> Confirmed -> Deleted
                      -> Declined  -> Skipped

A failed delete is recorded and the batch continues in both modes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from nozombie.components.infrastructure.file_delete_comp import delete_component_file
from nozombie.helpers.dto.capabilities_dto import Confirmer, FileSystem
from nozombie.helpers.dto.component_dto import Component, DeletionSummary
from nozombie.helpers.dto.config_dto import RunConfig
from nozombie.helpers.exceptions import ComponentDeleteError

logger = logging.getLogger(__name__)


def confirmation_message(component: Component) -> str:
    return f"Do you want to delete {component.path} ?"


def _delete(component: Component, fs: FileSystem, summary: DeletionSummary) -> None:
    try:
        delete_component_file(component, fs)
    except ComponentDeleteError as e:
        logger.error("Failed to delete %s: %s", component.path, e)
        summary.failed.append((component.path, str(e)))
        return
    summary.deleted.append(component.path)


def delete_components_workflow(
    unused: list[Component],
    config: RunConfig,
    fs: FileSystem,
    confirmer: Confirmer,
    show_content: Callable[[Component], None] | None = None,
) -> DeletionSummary:
    """
    Delete unused component files.

    Args:
        unused: Components to delete, processed in order
        config: ``force`` skips prompts, ``verbose`` shows content first
        fs: Filesystem capability used for deletes
        confirmer: Yes/no prompt (never called in forced mode)
        show_content: Renders a component before its prompt when verbose

    Returns:
        DeletionSummary with deleted, skipped and failed paths
    """
    summary = DeletionSummary()

    if config.force:
        for component in unused:
            _delete(component, fs, summary)
        return summary

    for component in unused:
        if config.verbose and show_content is not None:
            show_content(component)
        if confirmer.ask(confirmation_message(component)):
            _delete(component, fs, summary)
        else:
            logger.debug("Kept %s", component.path)
            summary.skipped.append(component.path)

    return summary
