#!/usr/bin/env python3
# ======================================================================
#  Config Service - Run configuration composition
#  - Loads defaults, YAML files, env vars and CLI overrides
#  - Produces the immutable RunConfig threaded through the pipeline
# ======================================================================

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml

from nozombie.helpers.dto.config_dto import DEFAULT_EXTENSIONS, RunConfig
from nozombie.helpers.exceptions import ConfigError
from nozombie.helpers.files_helper import normalize_extensions

# Repo-local config file, looked up in the working directory
LOCAL_CONFIG_FILE = ".nozombie.yaml"

# Env var naming an extra config file
CONFIG_PATH_ENV = "NOZOMBIE_CONFIG"

# Prefix for per-key env overrides (NOZOMBIE_FORCE=true, ...)
ENV_PREFIX = "NOZOMBIE_"

BOOL_KEYS = {"absolute_imports", "ignore_node_modules", "force", "verbose"}
STR_KEYS = {"path", "base_url"}
ALLOWED_KEYS = BOOL_KEYS | STR_KEYS | {"extensions"}

# Spellings accepted in YAML files, as used by the JS tooling flags
KEY_ALIASES = {
    "absoluteImports": "absolute_imports",
    "baseUrl": "base_url",
    "ignoreNodeModules": "ignore_node_modules",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class ConfigService:
    """
    Service for composing run configuration.

    Sources, later ones winning:
      1) Built-in defaults
      2) ./.nozombie.yaml in the working directory (if present)
      3) $NOZOMBIE_CONFIG (if set)
      4) config_file passed by the caller (--config)
      5) Environment variables (NOZOMBIE_<KEY>)
      6) overrides passed by the caller (CLI flags actually given)
    """

    def __init__(self, cwd: str | None = None, environ: Mapping[str, str] | None = None) -> None:
        self._cwd = cwd or os.getcwd()
        self._environ = os.environ if environ is None else environ
        self._logger = logging.getLogger(__name__)

    def compose(
        self,
        config_file: str | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Merge all sources into a plain dict of user-facing keys.

        Raises:
            ConfigError: If a YAML file exists but is invalid, or a value has the wrong type
        """
        cfg = self._default_config()

        self._merge(cfg, self._load_yaml(os.path.join(self._cwd, LOCAL_CONFIG_FILE)), LOCAL_CONFIG_FILE)

        env_path = self._environ.get(CONFIG_PATH_ENV)
        if env_path:
            self._merge(cfg, self._load_yaml(env_path, required=True), env_path)

        if config_file:
            self._merge(cfg, self._load_yaml(config_file, required=True), config_file)

        self._apply_env_overrides(cfg)

        if overrides:
            self._merge(cfg, {k: v for k, v in overrides.items() if v is not None}, "command line")

        self._logger.debug("Composed config: %s", cfg)
        return cfg

    def get_run_config(
        self,
        config_file: str | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> RunConfig:
        """Compose and freeze the configuration for one run."""
        cfg = self.compose(config_file, overrides)
        extensions = normalize_extensions(cfg["extensions"])
        if not extensions:
            raise ConfigError("extensions must name at least one file extension")
        return RunConfig(
            path=cfg["path"],
            absolute_imports=cfg["absolute_imports"],
            base_url=cfg["base_url"],
            ignore_node_modules=cfg["ignore_node_modules"],
            force=cfg["force"],
            verbose=cfg["verbose"],
            extensions=extensions,
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _default_config(self) -> dict[str, Any]:
        return {
            "path": None,
            "absolute_imports": False,
            "base_url": None,
            "ignore_node_modules": False,
            "force": False,
            "verbose": False,
            "extensions": list(DEFAULT_EXTENSIONS),
        }

    def _merge(self, cfg: dict[str, Any], values: Mapping[str, Any], source: str) -> None:
        for raw_key, value in values.items():
            key = KEY_ALIASES.get(raw_key, raw_key)
            if key not in ALLOWED_KEYS:
                self._logger.debug("Ignoring unknown config key '%s' from %s", raw_key, source)
                continue
            cfg[key] = self._coerce(key, value, source)

    def _coerce(self, key: str, value: Any, source: str) -> Any:
        if key in BOOL_KEYS:
            if isinstance(value, bool):
                return value
            if isinstance(value, str) and value.strip().lower() in _TRUE | _FALSE:
                return value.strip().lower() in _TRUE
            raise ConfigError(f"{source}: '{key}' must be a boolean, got {value!r}")
        if key in STR_KEYS:
            if value is None or isinstance(value, str):
                return value or None
            raise ConfigError(f"{source}: '{key}' must be a string, got {value!r}")
        # extensions
        if isinstance(value, str):
            return value
        if isinstance(value, list | tuple) and all(isinstance(v, str) for v in value):
            return list(value)
        raise ConfigError(f"{source}: 'extensions' must be a list or comma-separated string, got {value!r}")

    def _load_yaml(self, path: str, required: bool = False) -> dict[str, Any]:
        """
        Load a YAML mapping; returns {} if the file is absent and not required.
        """
        if not os.path.exists(path):
            if required:
                raise ConfigError(f"Config file not found: {path}")
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load config file {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        self._logger.debug("Loaded config file %s", path)
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Environment overrides for user-facing keys only.

        Supported:
          NOZOMBIE_PATH=./src
          NOZOMBIE_ABSOLUTE_IMPORTS=true
          NOZOMBIE_BASE_URL=src
          NOZOMBIE_IGNORE_NODE_MODULES=true
          NOZOMBIE_FORCE=false
          NOZOMBIE_VERBOSE=1
          NOZOMBIE_EXTENSIONS=.tsx,.jsx
        """
        env_values = {}
        for key in ALLOWED_KEYS:
            value = self._environ.get(f"{ENV_PREFIX}{key.upper()}")
            if value is not None:
                env_values[key] = value
        if env_values:
            self._merge(cfg, env_values, "environment")
