#!/usr/bin/env python3
"""
ElasticJob API types.

ElasticJob objects are owned by the cluster object store and are read-only
here. The controller only needs a narrow view of them (identity, rendezvous
endpoint and replica bounds), described by the ElasticJobLike protocol, so any
object exposing those attributes is accepted in place of the dataclass.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from elasticjob.core.errors import InvalidJobTypeError, create_error_context


GROUP = "elastic.pytorch.org"
VERSION = "v1alpha1"
KIND = "ElasticJob"
API_VERSION = f"{GROUP}/{VERSION}"

REPLICA_TYPE_WORKER = "Worker"


@runtime_checkable
class ElasticJobLike(Protocol):
    """The fields of an elastic job that pod configuration depends on."""

    name: str
    namespace: str
    rdzv_endpoint: str
    min_replicas: Optional[int]
    max_replicas: Optional[int]


@dataclass
class ReplicaSpec:
    """Replica specification for one replica type (e.g. Worker)."""

    replicas: Optional[int] = None
    template: Optional[Any] = None
    restart_policy: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReplicaSpec":
        return cls(
            replicas=data.get("replicas"),
            template=data.get("template"),
            restart_policy=data.get("restartPolicy"),
        )


@dataclass
class ElasticJob:
    """
    An ElasticJob custom resource.

    Attributes:
        name: Job name
        namespace: Job namespace
        rdzv_endpoint: Rendezvous (etcd) endpoint, host:port
        min_replicas: Explicit lower replica bound, None if unset
        max_replicas: Explicit upper replica bound, None if unset
        replica_specs: Replica specs keyed by replica type
        uid: Object UID assigned by the API server
    """

    name: str
    namespace: str = "default"
    rdzv_endpoint: str = ""
    min_replicas: Optional[int] = None
    max_replicas: Optional[int] = None
    replica_specs: Dict[str, ReplicaSpec] = field(default_factory=dict)
    uid: Optional[str] = None

    @property
    def key(self) -> str:
        """Namespaced key, the unit the reconcile loop serialises on."""
        return f"{self.namespace}/{self.name}"

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "ElasticJob":
        """
        Build an ElasticJob from the dict returned by CustomObjectsApi.

        Args:
            obj: Custom object with apiVersion, kind, metadata and spec

        Returns:
            ElasticJob instance

        Raises:
            InvalidJobTypeError: If the object is not an ElasticJob
        """
        kind = obj.get("kind")
        if kind != KIND:
            raise InvalidJobTypeError(
                f"{kind or type(obj).__name__} is not a type of {KIND}",
                context=create_error_context("from_dict", component="ElasticJob"),
            )

        metadata = obj.get("metadata") or {}
        spec = obj.get("spec") or {}
        if not metadata.get("name"):
            raise InvalidJobTypeError(
                f"{KIND} object has no metadata.name",
                context=create_error_context("from_dict", component="ElasticJob"),
            )

        replica_specs = {
            replica_type: ReplicaSpec.from_dict(replica_spec or {})
            for replica_type, replica_spec in (spec.get("replicaSpecs") or {}).items()
        }

        return cls(
            name=metadata["name"],
            namespace=metadata.get("namespace") or "default",
            rdzv_endpoint=spec.get("rdzvEndpoint", ""),
            min_replicas=spec.get("minReplicas"),
            max_replicas=spec.get("maxReplicas"),
            replica_specs=replica_specs,
            uid=metadata.get("uid"),
        )


def as_elastic_job(obj: Any) -> ElasticJobLike:
    """
    Narrow a generic job handle to an ElasticJob.

    Accepts anything satisfying ElasticJobLike, or an ElasticJob custom
    object dict as returned by the API server.

    Raises:
        InvalidJobTypeError: If obj does not provide the ElasticJob fields
    """
    if isinstance(obj, dict):
        return ElasticJob.from_dict(obj)
    if isinstance(obj, ElasticJobLike):
        return obj
    raise InvalidJobTypeError(
        f"{obj!r} is not a type of {KIND}",
        context=create_error_context("as_elastic_job", component="ElasticJob"),
    )
