"""
Workflows package.
"""

from .delete_components_wf import delete_components_workflow
from .find_unused_components_wf import find_unused_components_workflow

__all__ = [
    "delete_components_workflow",
    "find_unused_components_workflow",
]
