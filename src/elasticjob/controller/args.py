#!/usr/bin/env python3
"""
Rendezvous launch-argument injection.

The launch block has to sit between the elastic launch module and the user's
training script. When the launch module is named in the container's args we
insert right after its last occurrence; otherwise the launcher is assumed to
live in the container command and the whole arg list is the user's script,
so the block goes in front.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from typing import List, Optional, Sequence

from elasticjob.api.types import ElasticJobLike


LAUNCH_SENTINEL = "torchelastic.distributed.launch"
DEFAULT_RDZV_BACKEND = "etcd"


def find_insertion_index(args: Sequence[str], sentinel: str = LAUNCH_SENTINEL) -> int:
    """Index just after the rightmost sentinel in args, or 0 if absent."""
    for i in range(len(args) - 1, -1, -1):
        if args[i] == sentinel:
            return i + 1
    return 0


def insert_launch_args(
    args: Optional[Sequence[str]],
    launch_args: Sequence[str],
    sentinel: str = LAUNCH_SENTINEL,
) -> List[str]:
    """
    Return a new argument list with launch_args inserted.

    Neither input is modified. The block is inserted as-is (no reordering,
    no deduplication), so calling this twice inserts it twice.

    Args:
        args: Container args, None is treated as empty
        launch_args: Launch block to insert
        sentinel: Argument identifying the distributed launch module

    Returns:
        New list of args
    """
    args = list(args or [])
    insert_index = find_insertion_index(args, sentinel)
    return args[:insert_index] + list(launch_args) + args[insert_index:]


def build_launch_args(
    job: ElasticJobLike,
    min_replicas: int,
    max_replicas: int,
    rdzv_backend: str = DEFAULT_RDZV_BACKEND,
) -> List[str]:
    """Rendezvous arguments for one job, in launcher order."""
    return [
        f"--rdzv_backend={rdzv_backend}",
        f"--rdzv_endpoint={job.rdzv_endpoint}",
        f"--rdzv_id={job.name}",
        f"--nnodes={min_replicas}:{max_replicas}",
    ]
