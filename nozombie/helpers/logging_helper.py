"""
Logging setup for the nozombie process.

Modules log through ``logging.getLogger(__name__)``; this module only
configures the root logger once, from the CLI entry point.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> int:
    """
    Configure process-wide logging.

    Args:
        verbose: DEBUG level when True, WARNING otherwise

    Returns:
        The level that was applied
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist; keep the level in sync anyway
    logging.getLogger().setLevel(level)
    logger.debug("Logging configured at %s", logging.getLevelName(level))
    return level
