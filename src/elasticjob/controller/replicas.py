#!/usr/bin/env python3
"""
Replica range resolution for elastic jobs.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from typing import Any, Callable, NamedTuple, Optional

from elasticjob.api.types import REPLICA_TYPE_WORKER, ElasticJobLike, as_elastic_job
from elasticjob.core.errors import ReplicaComputationError, create_error_context


DesiredReplicasOracle = Callable[[ElasticJobLike], int]


class ReplicaRange(NamedTuple):
    """Effective (min, max) replica bounds of a job."""

    min_replicas: int
    max_replicas: int

    def __str__(self) -> str:
        return f"{self.min_replicas}:{self.max_replicas}"


def compute_desired_replicas(job: ElasticJobLike) -> int:
    """
    Desired replica count of a job: the replicas of its Worker spec.

    Raises:
        ReplicaComputationError: If the job has no Worker replica count
    """
    replica_specs = getattr(job, "replica_specs", None) or {}
    worker = replica_specs.get(REPLICA_TYPE_WORKER)
    if worker is None or worker.replicas is None:
        raise ReplicaComputationError(
            f"cannot find replicas for {REPLICA_TYPE_WORKER} in job {job.name}",
            context=create_error_context(
                "compute_desired_replicas",
                component="ReplicaRangeResolver",
                job_name=job.name,
                namespace=job.namespace,
            ),
            suggestions=[f"Set spec.replicaSpecs.{REPLICA_TYPE_WORKER}.replicas"],
        )
    return int(worker.replicas)


class ReplicaRangeResolver:
    """
    Derives the replica bounds used for --nnodes.

    Explicit job bounds win; a missing bound falls back to the desired
    replica count, so a job without bounds runs at a fixed size.
    """

    def __init__(self, oracle: Optional[DesiredReplicasOracle] = None):
        self.oracle = oracle or compute_desired_replicas

    def resolve(self, job: Any) -> ReplicaRange:
        """
        Resolve (min, max) for job.

        Raises:
            InvalidJobTypeError: If job is not an ElasticJob
            Exception: Whatever the oracle raises, unchanged
        """
        job = as_elastic_job(job)
        desired_replicas = self.oracle(job)

        min_replicas = job.min_replicas if job.min_replicas is not None else desired_replicas
        max_replicas = job.max_replicas if job.max_replicas is not None else desired_replicas

        return ReplicaRange(min_replicas, max_replicas)
