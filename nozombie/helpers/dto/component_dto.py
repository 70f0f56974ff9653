"""
Component domain DTOs.

Data transfer objects shared by the discovery, usage and deletion stages.

Rules:
- Import only stdlib and typing (no nozombie.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Component:
    """A component declared in a single source file.

    Attributes:
        name: Declared display name (never empty)
        path: File the component was extracted from (one component per file)
        content: Full file text at discovery time, used as a search corpus
    """

    name: str
    path: str
    content: str


@dataclass
class UsageReport:
    """Result of find_unused_components_workflow."""

    components: list[Component]
    unused: list[Component]

    @property
    def used(self) -> list[Component]:
        """Components that are referenced, in discovery order."""
        unused_paths = {c.path for c in self.unused}
        return [c for c in self.components if c.path not in unused_paths]


@dataclass
class DeletionSummary:
    """Outcome of delete_components_workflow."""

    deleted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)  # (path, reason)

    @property
    def ok(self) -> bool:
        return not self.failed
