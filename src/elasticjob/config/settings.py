#!/usr/bin/env python3
"""
Typed controller settings.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from elasticjob.config.config_loader import ENV_PREFIX, ConfigLoader
from elasticjob.core.errors import ConfigurationError, create_error_context


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ControllerSettings:
    """
    Settings for pod configuration and lifecycle.

    Attributes:
        rdzv_backend: Rendezvous backend passed to the launcher
        launch_sentinel: Argument marking the distributed launch module
        group_name: Value of the group-name label on managed pods
        controller_name: Value of the controller-name label on managed pods
        event_component: Source component reported on recorded events
        kubeconfig: Explicit kubeconfig path, None for in-cluster/default
        log_level: Root log level
    """

    rdzv_backend: str = "etcd"
    launch_sentinel: str = "torchelastic.distributed.launch"
    group_name: str = "elastic.pytorch.org"
    controller_name: str = "elastic-job-controller"
    event_component: str = "elastic-job-controller"
    kubeconfig: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "ControllerSettings":
        """Build settings from a merged config dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        settings = cls(**{k: v for k, v in config.items() if k in known})
        settings.validate()
        return settings

    def validate(self) -> None:
        """
        Validate settings.

        Raises:
            ConfigurationError: If a setting is empty or out of range
        """
        context = create_error_context("validate", component="ControllerSettings")
        for name in (
            "rdzv_backend",
            "launch_sentinel",
            "group_name",
            "controller_name",
            "event_component",
        ):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} must not be empty", context=context)

        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log_level: {self.log_level}",
                context=context,
                suggestions=[f"Use one of: {', '.join(_LOG_LEVELS)}"],
            )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_settings(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ControllerSettings:
    """
    Load controller settings from defaults, file, environment and overrides.

    Args:
        config_file: JSON/YAML file; falls back to $ELASTICJOB_CONFIG
        overrides: Highest priority values
        environ: Environment mapping, defaults to os.environ

    Returns:
        Validated ControllerSettings
    """
    environ = os.environ if environ is None else environ
    config_file = config_file or environ.get(ENV_PREFIX + "CONFIG")

    user_config = ConfigLoader.load_file(config_file) if config_file else {}
    config = ConfigLoader.load_controller_config(user_config, environ)
    if overrides:
        config = ConfigLoader.deep_merge(config, overrides)

    return ControllerSettings.from_dict(config)
