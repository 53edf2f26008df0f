"""
Core building blocks shared across the elastic job controller.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from elasticjob.core.errors import (
    ConfigurationError,
    ElasticJobError,
    ErrorCategory,
    ErrorContext,
    InvalidJobTypeError,
    InvalidPodError,
    InvalidPodTemplateError,
    ReplicaComputationError,
    create_error_context,
)

__all__ = [
    "ConfigurationError",
    "ElasticJobError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidJobTypeError",
    "InvalidPodError",
    "InvalidPodTemplateError",
    "ReplicaComputationError",
    "create_error_context",
]
