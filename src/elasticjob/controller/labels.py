#!/usr/bin/env python3
"""
Labels identifying the pods owned by a job.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from typing import Dict, Mapping

from elasticjob.api.types import GROUP


LABEL_GROUP_NAME = "group-name"
LABEL_JOB_NAME = "job-name"
LABEL_CONTROLLER_NAME = "controller-name"

DEFAULT_CONTROLLER_NAME = "elastic-job-controller"


def gen_labels(
    job_name: str,
    group_name: str = GROUP,
    controller_name: str = DEFAULT_CONTROLLER_NAME,
) -> Dict[str, str]:
    """Labels set on, and used to select, every pod of job_name."""
    return {
        LABEL_GROUP_NAME: group_name,
        LABEL_JOB_NAME: job_name.replace("/", "-"),
        LABEL_CONTROLLER_NAME: controller_name,
    }


def format_label_selector(labels: Mapping[str, str]) -> str:
    """Exact-match label selector string, e.g. "a=1,b=2"."""
    return ",".join(f"{key}={labels[key]}" for key in sorted(labels))


class LabelGenerator:
    """gen_labels bound to a group and controller name."""

    def __init__(self, group_name: str = GROUP, controller_name: str = DEFAULT_CONTROLLER_NAME):
        self.group_name = group_name
        self.controller_name = controller_name

    def __call__(self, job_name: str) -> Dict[str, str]:
        return gen_labels(job_name, self.group_name, self.controller_name)
