"""
Find unused components workflow.

Resolves the scan root, walks the tree for components and partitions them
into used and unused. Read-only: nothing on disk is modified.
"""

from __future__ import annotations

import logging

from nozombie.components.discovery.scan_root_comp import resolve_scan_root
from nozombie.components.discovery.tree_walk_comp import walk_components
from nozombie.components.usage.usage_resolver_comp import resolve_usage_report
from nozombie.helpers.dto.capabilities_dto import FileSystem, ProgressReporter
from nozombie.helpers.dto.component_dto import UsageReport
from nozombie.helpers.dto.config_dto import RunConfig

logger = logging.getLogger(__name__)

SEARCH_MESSAGE = "Searching zombie components"


def find_unused_components_workflow(
    config: RunConfig,
    fs: FileSystem,
    progress: ProgressReporter,
    cwd: str,
) -> UsageReport:
    """
    Discover components and classify them.

    Args:
        config: Run configuration
        fs: Filesystem capability used for the walk
        progress: Spinner and count lines
        cwd: Working directory (default root, base for absolute imports)

    Returns:
        UsageReport with every discovered component and the unused subset

    Raises:
        ConfigError: If absolute imports are requested without a base URL
        FilesystemReadError: If any part of the tree cannot be read
    """
    root = resolve_scan_root(config, cwd)
    logger.debug("Scanning from %s", root)

    progress.start(SEARCH_MESSAGE)
    try:
        components = walk_components(root, config, fs)
        progress.log(f"{len(components)} components found!")
        report = resolve_usage_report(components)
    finally:
        progress.stop()

    progress.log(f"{len(report.unused)} unused components found!")
    return report
