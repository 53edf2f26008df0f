#!/usr/bin/env python3
"""
ElasticJob pod controller.

The surface the reconcile loop calls: configure a replica's pod template,
then create, delete and list the job's pods.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
from typing import Any, List, Optional, Union

from kubernetes import client

from elasticjob.config.settings import ControllerSettings
from elasticjob.controller.cluster_spec import set_cluster_spec_for_pod
from elasticjob.controller.events import EventRecorder, KubernetesEventRecorder
from elasticjob.controller.labels import LabelGenerator
from elasticjob.controller.pods import PodLifecycle
from elasticjob.controller.replicas import ReplicaRangeResolver
from elasticjob.utils.kube import create_core_v1_api


logger = logging.getLogger(__name__)


class ElasticJobController:
    """
    Pod-level operations for ElasticJobs.

    Holds no per-job state; callers must serialise operations on the
    same job.
    """

    def __init__(
        self,
        core_v1: client.CoreV1Api,
        recorder: Optional[EventRecorder] = None,
        settings: Optional[ControllerSettings] = None,
        resolver: Optional[ReplicaRangeResolver] = None,
    ):
        self.settings = settings or ControllerSettings()
        self.core_v1 = core_v1
        self.recorder = recorder or KubernetesEventRecorder(
            core_v1, self.settings.event_component
        )
        self.resolver = resolver or ReplicaRangeResolver()
        self.gen_labels = LabelGenerator(
            self.settings.group_name, self.settings.controller_name
        )
        self.pods = PodLifecycle(core_v1, self.recorder, self.gen_labels)

    @classmethod
    def from_settings(cls, settings: ControllerSettings) -> "ElasticJobController":
        """Build a controller talking to the cluster configured in settings."""
        core_v1 = create_core_v1_api(settings)
        logger.info(
            "ElasticJob controller initialized (rdzv backend: %s)", settings.rdzv_backend
        )
        return cls(core_v1, settings=settings)

    def set_cluster_spec_for_pod(
        self, job: Any, pod_template: client.V1PodTemplateSpec, index: Union[int, str]
    ) -> client.V1PodTemplateSpec:
        return set_cluster_spec_for_pod(
            job, pod_template, index, resolver=self.resolver, settings=self.settings
        )

    def create_pod(self, job: Any, pod: client.V1Pod) -> client.V1Pod:
        return self.pods.create_pod(job, pod)

    def delete_pod(self, job: Any, pod: client.V1Pod) -> None:
        self.pods.delete_pod(job, pod)

    def get_pods_for_job(self, job: Any) -> List[client.V1Pod]:
        return self.pods.get_pods_for_job(job)
