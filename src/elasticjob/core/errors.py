#!/usr/bin/env python3
"""
Unified error types for the elastic job controller.

Every error raised by this package derives from ElasticJobError and carries
a category plus optional context so callers (the reconcile loop) can decide
how to report it. Cluster API failures are NOT wrapped: they surface as
kubernetes.client.rest.ApiException so the caller can apply its own backoff.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCategory(Enum):
    """Error category enumeration."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    RUNTIME = "runtime"
    CONNECTION = "connection"


@dataclass
class ErrorContext:
    """Where an error happened."""

    operation: str
    component: Optional[str] = None
    job_name: Optional[str] = None
    namespace: Optional[str] = None
    additional_info: Optional[Dict[str, Any]] = None


def create_error_context(operation: str, **kwargs) -> ErrorContext:
    """Convenience constructor for ErrorContext."""
    return ErrorContext(operation=operation, **kwargs)


class ElasticJobError(Exception):
    """Base error for the elastic job controller."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        context: Optional[ErrorContext] = None,
        recoverable: bool = False,
        suggestions: Optional[List[str]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.context = context
        self.recoverable = recoverable
        self.suggestions = suggestions or []
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class InvalidJobTypeError(ElasticJobError):
    """The job argument is not an ElasticJob."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.VALIDATION, **kwargs)


class InvalidPodTemplateError(ElasticJobError):
    """The pod template cannot be configured (e.g. it has no containers)."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.VALIDATION, **kwargs)


class InvalidPodError(ElasticJobError):
    """The pod cannot be acted on (e.g. it has no name)."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.VALIDATION, **kwargs)


class ConfigurationError(ElasticJobError):
    """Controller configuration is missing or invalid."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("recoverable", True)
        super().__init__(message, ErrorCategory.CONFIGURATION, **kwargs)


class ReplicaComputationError(ElasticJobError):
    """The desired replica count for a job could not be computed."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.RUNTIME, **kwargs)
