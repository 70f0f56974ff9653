"""Zombie scan service - entry point for commands that scan a project.

Wires the filesystem capability and working directory into the find and
delete workflows so interfaces only deal with a RunConfig and the UI-side
capabilities (progress, prompting).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from nozombie.components.discovery.scan_root_comp import describe_root_choice
from nozombie.components.infrastructure.filesystem_comp import LocalFileSystem
from nozombie.helpers.dto.capabilities_dto import Confirmer, FileSystem, ProgressReporter
from nozombie.helpers.dto.component_dto import Component, DeletionSummary, UsageReport
from nozombie.helpers.dto.config_dto import RunConfig
from nozombie.workflows.delete_components_wf import delete_components_workflow
from nozombie.workflows.find_unused_components_wf import find_unused_components_workflow

logger = logging.getLogger(__name__)


class ZombieScanService:
    """Service for finding and removing unused components under one project."""

    def __init__(self, config: RunConfig, fs: FileSystem | None = None, cwd: str | None = None):
        """Initialize scan service.

        Args:
            config: Run configuration
            fs: Filesystem capability (local filesystem by default)
            cwd: Project directory (process working directory by default)
        """
        self.config = config
        self.fs = fs or LocalFileSystem()
        self.cwd = cwd or os.getcwd()

    def root_advisory(self) -> str | None:
        """Message explaining the scan root choice, or None."""
        return describe_root_choice(self.config, self.cwd)

    def find_unused(self, progress: ProgressReporter) -> UsageReport:
        """Discover components and report the unused ones."""
        report = find_unused_components_workflow(self.config, self.fs, progress, self.cwd)
        logger.info("%d of %d components unused", len(report.unused), len(report.components))
        return report

    def delete_unused(
        self,
        unused: list[Component],
        confirmer: Confirmer,
        show_content: Callable[[Component], None] | None = None,
    ) -> DeletionSummary:
        """Delete unused components, prompting unless the config forces it."""
        return delete_components_workflow(unused, self.config, self.fs, confirmer, show_content)
