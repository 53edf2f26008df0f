#!/usr/bin/env python3
"""
Configuration loader with multi-layer merging for the controller.

Layers (low to high priority):
1. System defaults (built-in presets)
2. User file (JSON or YAML)
3. Environment variables (ELASTICJOB_*)
4. Explicit overrides passed by the caller

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import json
import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from elasticjob.core.errors import ConfigurationError, create_error_context


logger = logging.getLogger(__name__)

ENV_PREFIX = "ELASTICJOB_"


class ConfigLoader:
    """Configuration loader with preset support."""

    PRESET_DIR = Path(__file__).parent / "presets"

    # Environment variable -> config key
    ENV_KEYS = {
        "RDZV_BACKEND": "rdzv_backend",
        "LAUNCH_SENTINEL": "launch_sentinel",
        "GROUP_NAME": "group_name",
        "CONTROLLER_NAME": "controller_name",
        "EVENT_COMPONENT": "event_component",
        "KUBECONFIG": "kubeconfig",
        "LOG_LEVEL": "log_level",
    }

    @classmethod
    def load_preset(cls, preset_path: str) -> Dict[str, Any]:
        """
        Built-in preset under PRESET_DIR, {} when there is no such file.

        Presets ship inside the package: one that exists but does not parse
        means a broken install and raises ConfigurationError.
        """
        path = cls.PRESET_DIR / preset_path
        try:
            text = path.read_text()
        except FileNotFoundError:
            logger.debug("No preset %s in %s", preset_path, cls.PRESET_DIR)
            return {}

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Preset {preset_path} is not valid JSON: {e}",
                context=create_error_context(
                    "load_preset",
                    component="ConfigLoader",
                    additional_info={"preset": str(path)},
                ),
                recoverable=False,
                cause=e,
            ) from e

    @classmethod
    def deep_merge(
        cls, base: Mapping[str, Any], override: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """
        New dict with override layered onto base; neither input is modified.

        A key holding a dict on both sides is merged recursively. Otherwise
        the override value (list, scalar or None) is taken as is.
        """
        merged: Dict[str, Any] = {}
        for key in {**base, **override}:
            if key not in override:
                merged[key] = deepcopy(base[key])
            elif isinstance(base.get(key), dict) and isinstance(override[key], dict):
                merged[key] = cls.deep_merge(base[key], override[key])
            else:
                merged[key] = deepcopy(override[key])
        return merged

    @classmethod
    def load_file(cls, config_file: str) -> Dict[str, Any]:
        """
        Load a user configuration file.

        YAML is used for .yaml/.yml files, JSON otherwise.

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        path = Path(config_file)
        context = create_error_context(
            "load_file",
            component="ConfigLoader",
            additional_info={"config_file": str(path)},
        )
        if not path.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}",
                context=context,
                suggestions=["Check the config file path or ELASTICJOB_CONFIG"],
            )

        try:
            with open(path, "r") as f:
                if path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Could not parse config file {config_file}: {e}",
                context=context,
                cause=e,
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a mapping, got {type(data).__name__}",
                context=context,
            )
        return data

    @classmethod
    def apply_env_overrides(
        cls, config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
    ) -> Dict[str, Any]:
        """Overlay ELASTICJOB_* environment variables onto config."""
        environ = os.environ if environ is None else environ

        overrides = {}
        for env_suffix, key in cls.ENV_KEYS.items():
            value = environ.get(ENV_PREFIX + env_suffix)
            if value:
                overrides[key] = value

        return cls.deep_merge(config, overrides)

    @classmethod
    def load_controller_config(
        cls,
        user_config: Optional[Dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Load complete controller configuration.

        Args:
            user_config: User-provided configuration (from file)
            environ: Environment mapping, defaults to os.environ

        Returns:
            Complete configuration with all defaults applied
        """
        config = cls.load_preset("defaults.json")
        config = cls.deep_merge(config, user_config or {})
        return cls.apply_env_overrides(config, environ)
