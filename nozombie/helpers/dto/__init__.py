"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Rules for DTO modules:
- Import only stdlib and typing (no nozombie.* imports)
- Contain ONLY dataclass/type definitions, protocols and simple type aliases
- No I/O, no business logic
"""

from .capabilities_dto import Confirmer, FileSystem, ProgressReporter
from .component_dto import Component, DeletionSummary, UsageReport
from .config_dto import DEFAULT_EXTENSIONS, RunConfig

__all__ = [
    "DEFAULT_EXTENSIONS",
    "Component",
    "Confirmer",
    "DeletionSummary",
    "FileSystem",
    "ProgressReporter",
    "RunConfig",
    "UsageReport",
]
