"""
Capability protocols consumed by the scan pipeline.

The pipeline only depends on these shapes; concrete implementations live in
components/infrastructure (filesystem) and interfaces/cli (prompting, progress).

Rules:
- Import only stdlib and typing (no nozombie.* imports)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Filesystem access used by the tree walk and the deletion workflow.

    Implementations raise OSError on failure.
    """

    def list_entries(self, directory: str) -> list[str]:
        """Names of the immediate entries of ``directory``."""
        ...

    def is_directory(self, path: str) -> bool: ...

    def read_text(self, path: str) -> str: ...

    def delete_file(self, path: str) -> None: ...


@runtime_checkable
class Confirmer(Protocol):
    """Blocking yes/no question."""

    def ask(self, message: str) -> bool: ...


@runtime_checkable
class ProgressReporter(Protocol):
    """Textual progress indicator plus plain log lines."""

    def start(self, text: str) -> None: ...

    def stop(self) -> None: ...

    def log(self, text: str) -> None: ...
