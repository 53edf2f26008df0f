"""
Pytest configuration and shared fixtures for elasticjob tests.

Provides ElasticJob objects, pod templates built from kubernetes client
models, and a mocked CoreV1Api / event recorder.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from unittest.mock import MagicMock

import pytest
from kubernetes import client

from elasticjob.api.types import ElasticJob, ReplicaSpec


# ============================================================================
# Job Fixtures
# ============================================================================

def make_job(min_replicas=None, max_replicas=None, worker_replicas=4, **kwargs):
    """Build an ElasticJob with a Worker replica spec."""
    replica_specs = {}
    if worker_replicas is not None:
        replica_specs["Worker"] = ReplicaSpec(replicas=worker_replicas)
    defaults = dict(
        name="imagenet",
        namespace="elastic-job",
        rdzv_endpoint="etcd-service:2379",
        uid="1234-abcd",
    )
    defaults.update(kwargs)
    return ElasticJob(
        min_replicas=min_replicas,
        max_replicas=max_replicas,
        replica_specs=replica_specs,
        **defaults,
    )


@pytest.fixture
def elastic_job():
    """ElasticJob without explicit bounds and 4 workers."""
    return make_job()


@pytest.fixture
def elastic_job_dict():
    """ElasticJob as returned by CustomObjectsApi."""
    return {
        "apiVersion": "elastic.pytorch.org/v1alpha1",
        "kind": "ElasticJob",
        "metadata": {"name": "imagenet", "namespace": "elastic-job", "uid": "1234-abcd"},
        "spec": {
            "rdzvEndpoint": "etcd-service:2379",
            "minReplicas": 1,
            "maxReplicas": 3,
            "replicaSpecs": {
                "Worker": {
                    "replicas": 2,
                    "restartPolicy": "ExitCode",
                    "template": {"spec": {"containers": [{"name": "elasticjob-worker"}]}},
                }
            },
        },
    }


# ============================================================================
# Pod Fixtures
# ============================================================================

def make_pod_template(args=None, volumes=None, sidecar_args=None):
    """Pod template with a main container and a sidecar."""
    return client.V1PodTemplateSpec(
        metadata=client.V1ObjectMeta(labels={"app": "imagenet"}),
        spec=client.V1PodSpec(
            containers=[
                client.V1Container(
                    name="elasticjob-worker",
                    image="torchelastic/examples:0.2.0",
                    args=args,
                ),
                client.V1Container(
                    name="log-shipper",
                    image="fluent/fluent-bit:1.9",
                    args=sidecar_args,
                ),
            ],
            volumes=volumes,
        ),
    )


def pvc_volume(name, claim_name):
    return client.V1Volume(
        name=name,
        persistent_volume_claim=client.V1PersistentVolumeClaimVolumeSource(
            claim_name=claim_name
        ),
    )


@pytest.fixture
def pod_template():
    """Pod template with a launcher invocation and mixed volumes."""
    return make_pod_template(
        args=[
            "-m",
            "torchelastic.distributed.launch",
            "--nproc_per_node=1",
            "/workspace/examples/imagenet/main.py",
            "--epochs=10",
        ],
        volumes=[
            pvc_volume("data", "model-data-0"),
            pvc_volume("shared", "shared"),
            client.V1Volume(name="dshm", empty_dir=client.V1EmptyDirVolumeSource(medium="Memory")),
        ],
        sidecar_args=["-c", "/fluent-bit/etc/fluent-bit.conf"],
    )


@pytest.fixture
def pod():
    return client.V1Pod(
        metadata=client.V1ObjectMeta(name="imagenet-worker-0", namespace="elastic-job"),
        spec=client.V1PodSpec(containers=[client.V1Container(name="elasticjob-worker")]),
    )


# ============================================================================
# Cluster Fixtures
# ============================================================================

@pytest.fixture
def core_v1():
    """Mocked CoreV1Api."""
    api = MagicMock(spec=client.CoreV1Api)
    api.list_namespaced_pod.return_value = client.V1PodList(items=[])
    return api


@pytest.fixture
def recorder():
    """Mocked event recorder."""
    return MagicMock()


@pytest.fixture
def job_factory():
    """Factory for ElasticJobs with custom bounds."""
    return make_job


@pytest.fixture
def template_factory():
    """Factory for pod templates with custom args/volumes."""
    return make_pod_template


@pytest.fixture
def pvc_volume_factory():
    return pvc_volume
