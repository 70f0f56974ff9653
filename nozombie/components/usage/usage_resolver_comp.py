"""Usage resolution over discovered components.

Every component is checked against the content of every discovered
component, its own file included. A file that renders or imports its own
name (recursive components, self re-exports) therefore marks itself used.
Files that were not discovered as components are never searched.
"""

from __future__ import annotations

import logging

from nozombie.components.usage.reference_comp import is_imported
from nozombie.helpers.dto.component_dto import Component, UsageReport

logger = logging.getLogger(__name__)


def find_reference(component: Component, components: list[Component]) -> Component | None:
    """First component whose content references ``component``, or None."""
    for candidate in components:
        if is_imported(component.name, candidate.content):
            return candidate
    return None


def resolve_usage(components: list[Component]) -> list[Component]:
    """
    Unused subset of ``components``, in input order.

    O(n^2) over the in-memory contents; never touches the filesystem.
    """
    unused: list[Component] = []
    for component in components:
        referrer = find_reference(component, components)
        if referrer is None:
            unused.append(component)
        else:
            logger.debug("%s (%s) referenced by %s", component.name, component.path, referrer.path)
    return unused


def resolve_usage_report(components: list[Component]) -> UsageReport:
    """Partition ``components`` into a UsageReport."""
    return UsageReport(components=list(components), unused=resolve_usage(components))
