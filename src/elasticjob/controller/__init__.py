"""
Pod template configuration and pod lifecycle for ElasticJobs.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from elasticjob.controller.args import (
    LAUNCH_SENTINEL,
    build_launch_args,
    find_insertion_index,
    insert_launch_args,
)
from elasticjob.controller.cluster_spec import (
    CONFIGURED_ANNOTATION,
    REPLICA_INDEX_ANNOTATION,
    configured_index,
    is_configured,
    set_cluster_spec_for_pod,
)
from elasticjob.controller.events import EventRecorder, KubernetesEventRecorder
from elasticjob.controller.job_controller import ElasticJobController
from elasticjob.controller.labels import LabelGenerator, format_label_selector, gen_labels
from elasticjob.controller.pods import PodLifecycle
from elasticjob.controller.replicas import (
    ReplicaRange,
    ReplicaRangeResolver,
    compute_desired_replicas,
)
from elasticjob.controller.volumes import reindex_claim_name, reindex_claims

__all__ = [
    "CONFIGURED_ANNOTATION",
    "LAUNCH_SENTINEL",
    "REPLICA_INDEX_ANNOTATION",
    "ElasticJobController",
    "EventRecorder",
    "KubernetesEventRecorder",
    "LabelGenerator",
    "PodLifecycle",
    "ReplicaRange",
    "ReplicaRangeResolver",
    "build_launch_args",
    "compute_desired_replicas",
    "configured_index",
    "find_insertion_index",
    "format_label_selector",
    "gen_labels",
    "insert_launch_args",
    "is_configured",
    "reindex_claim_name",
    "reindex_claims",
    "set_cluster_spec_for_pod",
]
