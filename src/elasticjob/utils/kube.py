#!/usr/bin/env python3
"""
Kubernetes client wiring.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
from typing import Optional

from kubernetes import client
from kubernetes import config as k8s_config

from elasticjob.config.settings import ControllerSettings
from elasticjob.core.errors import ConfigurationError, create_error_context


logger = logging.getLogger(__name__)


def load_cluster_config(kubeconfig: Optional[str] = None) -> None:
    """
    Load cluster credentials into the kubernetes client.

    Uses the explicit kubeconfig when given, otherwise in-cluster config,
    falling back to the default kubeconfig (~/.kube/config).

    Raises:
        ConfigurationError: If no usable configuration is found
    """
    try:
        if kubeconfig:
            k8s_config.load_kube_config(config_file=kubeconfig)
            logger.info("Loaded kubeconfig from %s", kubeconfig)
            return

        try:
            k8s_config.load_incluster_config()
            logger.info("Loaded in-cluster Kubernetes configuration")
        except k8s_config.ConfigException:
            k8s_config.load_kube_config()
            logger.info("Loaded default kubeconfig")
    except (k8s_config.ConfigException, FileNotFoundError) as e:
        raise ConfigurationError(
            f"Failed to load Kubernetes config: {e}",
            context=create_error_context(
                "load_cluster_config",
                component="kube",
                additional_info={"kubeconfig": kubeconfig},
            ),
            suggestions=[
                "Run inside a cluster with a service account",
                "Or set ELASTICJOB_KUBECONFIG to a valid kubeconfig",
            ],
            cause=e,
        ) from e


def create_core_v1_api(settings: ControllerSettings) -> client.CoreV1Api:
    """Load credentials and return a CoreV1Api client."""
    load_cluster_config(settings.kubeconfig)
    return client.CoreV1Api()
