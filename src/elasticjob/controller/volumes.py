#!/usr/bin/env python3
"""
Per-replica persistent volume claim naming.

Replica templates are generated with claims named <base>-0; each replica
must mount its own claim <base>-<index>. Only the last hyphen-delimited
segment is the ordinal, so bases containing hyphens are kept intact.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
from typing import List, Optional, Union

from kubernetes.client import V1Volume


logger = logging.getLogger(__name__)

CLAIM_INDEX_SEPARATOR = "-"


def reindex_claim_name(claim_name: str, index: Union[int, str]) -> str:
    """Replace the ordinal suffix of claim_name with index."""
    if CLAIM_INDEX_SEPARATOR not in claim_name:
        return claim_name
    base, _ = claim_name.rsplit(CLAIM_INDEX_SEPARATOR, 1)
    return f"{base}{CLAIM_INDEX_SEPARATOR}{index}"


def reindex_claims(
    volumes: Optional[List[V1Volume]], index: Union[int, str]
) -> Optional[List[V1Volume]]:
    """
    Point every PVC-backed volume at the claim for replica index.

    Volumes are modified in place; other volume sources and claim names
    without a separator are left untouched.

    Args:
        volumes: Pod spec volumes (may be None)
        index: Replica index

    Returns:
        The same volume list
    """
    for volume in volumes or []:
        pvc = volume.persistent_volume_claim
        if pvc is None or not pvc.claim_name:
            continue

        claim_name = reindex_claim_name(pvc.claim_name, index)
        if claim_name != pvc.claim_name:
            logger.debug(
                "Volume %s: claim %s -> %s", volume.name, pvc.claim_name, claim_name
            )
            pvc.claim_name = claim_name

    return volumes
