#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML, overrides, env vars
#  - Caches composed config
#  - Builds default AnalyticsParams from the composed config
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from analytics_client.analytics.params import AnalyticsParams
from analytics_client.helpers.exceptions import InvalidArgumentError

CONFIG_PATH_ENV = "ANALYTICS_CLIENT_CONFIG"
CONTEXT_ID_ENV = "ANALYTICS_CLIENT_CONTEXT_ID"
RAW_PARAM_ENV_PREFIX = "ANALYTICS_RAW_"


class ConfigService:
    """
    Service for loading and caching analytics client configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache."""
        self._overrides = overrides
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose(self._overrides)
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("analytics.client_context_id")
            'batch-job'
            >>> service.get("analytics.missing", 5)
            5
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_analytics_params(self) -> AnalyticsParams:
        """
        Build AnalyticsParams pre-populated from the analytics config section.

        Returns:
            New AnalyticsParams; callers may keep chaining on it

        Raises:
            InvalidArgumentError: If a configured raw param is not a JSON value
        """
        params = AnalyticsParams.build().with_context_id(self.get("analytics.client_context_id"))
        raw_params = self.get("analytics.raw_params") or {}
        if not isinstance(raw_params, dict):
            raise InvalidArgumentError(
                f"analytics.raw_params must be a mapping, got {type(raw_params).__name__}"
            )
        for name, value in raw_params.items():
            params.raw_param(str(name), value)
        return params

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) $ANALYTICS_CLIENT_CONFIG YAML file (if set)
          3) overrides dict passed in
          4) Environment variables (ANALYTICS_CLIENT_CONTEXT_ID / ANALYTICS_RAW_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if overrides:
            self._deep_merge(cfg, overrides)

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            "analytics": {
                "client_context_id": None,
                "raw_params": {},
            },
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            self._logger.debug("YAML config skipped: %s does not exist", path)
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Failed to load YAML config {path} (using defaults): {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring YAML config {path}: top level is {type(data).__name__}, expected mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          ANALYTICS_CLIENT_CONTEXT_ID=batch-job
          ANALYTICS_RAW_TIMEOUT=10s
          ANALYTICS_RAW_MAX_WARNINGS=5
        """
        if not isinstance(cfg.get("analytics"), dict):
            cfg["analytics"] = {"client_context_id": None, "raw_params": {}}
        section = cfg["analytics"]

        context_id = os.getenv(CONTEXT_ID_ENV)
        if context_id is not None:
            section["client_context_id"] = context_id

        for k, v in os.environ.items():
            if not k.startswith(RAW_PARAM_ENV_PREFIX):
                continue
            name = k[len(RAW_PARAM_ENV_PREFIX) :].lower()
            if not name:
                continue
            if not isinstance(section.get("raw_params"), dict):
                section["raw_params"] = {}
            section["raw_params"][name] = self._parse_env_value(v)

    def _parse_env_value(self, v: str) -> Any:
        """Parse bool/int env strings; everything else stays a string."""
        if v.lower() in ("true", "false"):
            return v.lower() == "true"
        if v.isdecimal():
            return int(v)
        return v
