"""
Shared utility functions for CLI commands.
Helper functions used across multiple command modules.
"""

from __future__ import annotations

import argparse
from typing import Any

from nozombie.helpers.dto.config_dto import RunConfig
from nozombie.services.config_svc import ConfigService

__all__ = [
    "SCAN_OPTION_KEYS",
    "load_run_config",
    "scan_overrides",
]

# Namespace attributes that map one-to-one onto config keys
SCAN_OPTION_KEYS = ("path", "absolute_imports", "base_url", "ignore_node_modules", "force", "verbose", "extensions")


def scan_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Config overrides for the flags actually given (unset flags stay None)."""
    return {key: getattr(args, key, None) for key in SCAN_OPTION_KEYS}


def load_run_config(args: argparse.Namespace) -> RunConfig:
    """
    Compose the RunConfig for a command.

    Raises:
        ConfigError: If any config source is invalid
    """
    return ConfigService().get_run_config(config_file=getattr(args, "config", None), overrides=scan_overrides(args))
