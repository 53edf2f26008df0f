#!/usr/bin/env python3
"""
Pod lifecycle operations for ElasticJobs.

Thin layer over CoreV1Api used by the reconcile loop with already
configured pods. Each call is a single attempt: ApiException from the
cluster is re-raised unchanged and retries are left to the caller.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from kubernetes import client
from kubernetes.client.rest import ApiException

from elasticjob.api.types import as_elastic_job
from elasticjob.controller.events import (
    EVENT_TYPE_NORMAL,
    EVENT_TYPE_WARNING,
    REASON_FAILED_DELETE_POD,
    REASON_SUCCESSFUL_DELETE_POD,
    EventRecorder,
)
from elasticjob.controller.labels import format_label_selector, gen_labels
from elasticjob.core.errors import InvalidPodError, create_error_context
from elasticjob.utils.log import logger_for_job


LabelGeneratorFn = Callable[[str], Dict[str, str]]


def _pod_location(job, pod: client.V1Pod) -> Tuple[str, Optional[str]]:
    """(namespace, name) of pod; the namespace defaults to the job's."""
    metadata = pod.metadata
    if metadata is None:
        return job.namespace, None
    return metadata.namespace or job.namespace, metadata.name


class PodLifecycle:
    """Create, delete and list the pods of an ElasticJob."""

    def __init__(
        self,
        core_v1: client.CoreV1Api,
        recorder: EventRecorder,
        label_generator: Optional[LabelGeneratorFn] = None,
    ):
        """
        Args:
            core_v1: CoreV1Api client
            recorder: Event sink for delete notifications
            label_generator: job name -> pod labels, defaults to gen_labels
        """
        self.core_v1 = core_v1
        self.recorder = recorder
        self.label_generator = label_generator or gen_labels

    def create_pod(self, job: Any, pod: client.V1Pod) -> client.V1Pod:
        """
        Create pod for job.

        Raises:
            InvalidJobTypeError: If job is not an ElasticJob
            ApiException: If the API server rejects the request
        """
        job = as_elastic_job(job)
        log = logger_for_job(job)
        namespace, name = _pod_location(job, pod)

        log.info("Creating pod %s/%s, Job name: %s.", namespace, name, job.name)
        try:
            return self.core_v1.create_namespaced_pod(namespace=namespace, body=pod)
        except ApiException as e:
            log.info("Error building a pod via Elastic operator: %s", e.reason)
            raise

    def delete_pod(self, job: Any, pod: client.V1Pod) -> None:
        """
        Delete pod of job and record an event for the outcome.

        Raises:
            InvalidJobTypeError: If job is not an ElasticJob
            InvalidPodError: If pod has no name
            ApiException: If the API server rejects the request
        """
        job = as_elastic_job(job)
        log = logger_for_job(job)
        namespace, name = _pod_location(job, pod)
        if not name:
            raise InvalidPodError(
                f"Cannot delete a pod without a name for job {job.name}",
                context=create_error_context(
                    "delete_pod",
                    component="PodLifecycle",
                    job_name=job.name,
                    namespace=namespace,
                ),
            )

        log.info("Deleting pod %s/%s, Job name: %s", namespace, name, job.name)
        try:
            self.core_v1.delete_namespaced_pod(name=name, namespace=namespace)
        except ApiException as e:
            self.recorder.event(
                job, EVENT_TYPE_WARNING, REASON_FAILED_DELETE_POD, f"Error deleting: {e}"
            )
            raise

        self.recorder.event(
            job, EVENT_TYPE_NORMAL, REASON_SUCCESSFUL_DELETE_POD, f"Deleted pod: {name}"
        )

    def get_pods_for_job(self, job: Any) -> List[client.V1Pod]:
        """
        Pods managed by job, selected by the job's labels.

        Only the label selector is used; pods that lost their labels are
        not adopted through owner references.

        Returns:
            Pods in list order, empty when none match

        Raises:
            InvalidJobTypeError: If job is not an ElasticJob
            ApiException: If the list call fails
        """
        job = as_elastic_job(job)
        selector = format_label_selector(self.label_generator(job.name))

        pod_list = self.core_v1.list_namespaced_pod(
            namespace=job.namespace, label_selector=selector
        )
        return list(pod_list.items or [])
