#!/usr/bin/env python3
"""
Event recording against ElasticJob objects.

Events are operator-facing notifications. Recording is best effort: a
failure to write an event is logged and never fails the calling operation.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Protocol

from kubernetes import client
from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from elasticjob.api.types import API_VERSION, KIND


logger = logging.getLogger(__name__)

EVENT_TYPE_NORMAL = "Normal"
EVENT_TYPE_WARNING = "Warning"

REASON_SUCCESSFUL_DELETE_POD = "SuccessfulDeletePod"
REASON_FAILED_DELETE_POD = "FailedDeletePod"


class EventRecorder(Protocol):
    """Anything that can record an event against an object."""

    def event(self, obj: Any, event_type: str, reason: str, message: str) -> None:
        ...


class KubernetesEventRecorder:
    """Records events as core/v1 Event objects in the job's namespace."""

    def __init__(self, core_v1: client.CoreV1Api, component: str):
        self.core_v1 = core_v1
        self.component = component

    def _build_event(self, obj: Any, event_type: str, reason: str, message: str) -> client.CoreV1Event:
        namespace = getattr(obj, "namespace", None) or "default"
        name = getattr(obj, "name", None)
        now = datetime.now(timezone.utc)

        return client.CoreV1Event(
            metadata=client.V1ObjectMeta(
                name=f"{name}.{uuid.uuid4().hex[:16]}",
                namespace=namespace,
            ),
            involved_object=client.V1ObjectReference(
                api_version=API_VERSION,
                kind=KIND,
                name=name,
                namespace=namespace,
                uid=getattr(obj, "uid", None),
            ),
            type=event_type,
            reason=reason,
            message=message,
            source=client.V1EventSource(component=self.component),
            first_timestamp=now,
            last_timestamp=now,
            count=1,
        )

    def event(self, obj: Any, event_type: str, reason: str, message: str) -> None:
        """Record an event; API and transport failures are logged, not raised."""
        body = self._build_event(obj, event_type, reason, message)
        try:
            self.core_v1.create_namespaced_event(
                namespace=body.metadata.namespace, body=body
            )
        except (ApiException, HTTPError, OSError) as e:
            logger.warning(
                "Could not record event %s/%s (%s): %s",
                body.metadata.namespace,
                body.involved_object.name,
                reason,
                getattr(e, "reason", None) or e,
            )
