"""
ElasticJob API types.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from elasticjob.api.types import (
    API_VERSION,
    GROUP,
    KIND,
    REPLICA_TYPE_WORKER,
    VERSION,
    ElasticJob,
    ElasticJobLike,
    ReplicaSpec,
    as_elastic_job,
)

__all__ = [
    "API_VERSION",
    "GROUP",
    "KIND",
    "REPLICA_TYPE_WORKER",
    "VERSION",
    "ElasticJob",
    "ElasticJobLike",
    "ReplicaSpec",
    "as_elastic_job",
]
