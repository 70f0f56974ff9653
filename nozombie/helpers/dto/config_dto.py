"""
Config domain DTOs.

Rules:
- Import only stdlib and typing (no nozombie.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")


@dataclass(frozen=True)
class RunConfig:
    """
    Resolved, read-only configuration for one run.

    Built once by ConfigService and passed explicitly to every stage.
    """

    # Explicit scan directory, used verbatim when set
    path: str | None = None

    # Start the scan at <cwd>/<base_url> (ignored when path is set)
    absolute_imports: bool = False

    # Absolute-import base; None means "read it from tsconfig/jsconfig"
    base_url: str | None = None

    # Skip directories whose name contains the vendor marker
    ignore_node_modules: bool = False

    # Delete without confirmation
    force: bool = False

    # Echo content before prompts, advisory messages, debug logs
    verbose: bool = False

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
