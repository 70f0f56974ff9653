"""Scan root resolution.

Decides where the tree walk starts and where the absolute-import base comes
from when it is not configured explicitly.
"""

from __future__ import annotations

import json
import logging
import os

from nozombie.helpers.dto.config_dto import RunConfig
from nozombie.helpers.exceptions import ConfigError
from nozombie.helpers.jsonc_helper import load_jsonc

logger = logging.getLogger(__name__)

# Project files that may declare compilerOptions.baseUrl, in lookup order
BASE_URL_SOURCES = ("tsconfig.json", "jsconfig.json")


def load_base_url(cwd: str) -> str | None:
    """
    Read ``compilerOptions.baseUrl`` from tsconfig.json, then jsconfig.json.

    Args:
        cwd: Project directory holding the config files

    Returns:
        The first baseUrl found, or None when neither file declares one

    Raises:
        ConfigError: If a config file exists but cannot be read or parsed
    """
    for filename in BASE_URL_SOURCES:
        config_path = os.path.join(cwd, filename)
        if not os.path.isfile(config_path):
            continue
        try:
            with open(config_path, encoding="utf-8") as f:
                data = load_jsonc(f.read())
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        options = data.get("compilerOptions") if isinstance(data, dict) else None
        base_url = options.get("baseUrl") if isinstance(options, dict) else None
        if isinstance(base_url, str) and base_url:
            logger.debug("baseUrl '%s' read from %s", base_url, config_path)
            return base_url
    return None


def resolve_base_url(config: RunConfig, cwd: str) -> str:
    """
    Effective absolute-import base for ``config``.

    Raises:
        ConfigError: If no base URL is configured or declared by the project
    """
    if config.base_url:
        return config.base_url
    base_url = load_base_url(cwd)
    if base_url is None:
        raise ConfigError(
            f"--absolute-imports needs a base URL: set base_url or compilerOptions.baseUrl "
            f"in {' or '.join(BASE_URL_SOURCES)}"
        )
    return base_url


def resolve_scan_root(config: RunConfig, cwd: str) -> str:
    """
    Directory the tree walk starts from.

    - explicit ``path``: used verbatim
    - ``absolute_imports``: ``<cwd>/<base_url>``
    - otherwise: ``cwd``

    Only the top of the walk goes through here; nested directories are
    walked with their plain paths.
    """
    if config.path:
        return config.path
    if config.absolute_imports:
        return f"{cwd}/{resolve_base_url(config, cwd)}"
    return cwd


def describe_root_choice(config: RunConfig, cwd: str) -> str | None:
    """
    Advisory message about how the root was chosen, for verbose runs.

    Only absolute-import runs get a message; an explicit path silently wins
    over them otherwise.
    """
    if not config.absolute_imports:
        return None
    if config.path:
        return f"--absolute-imports AND --path conflict.\t Will use path: '{config.path}' instead of absolute imports"
    return f"--absolute-imports. \tWill use baseUrl: '{resolve_base_url(config, cwd)}'"
