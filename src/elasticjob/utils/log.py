#!/usr/bin/env python3
"""
Logging helpers.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
from typing import Any, MutableMapping, Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler


# Shared Rich console
console = Console()

logger = logging.getLogger("elasticjob")


def setup_logging(verbose: bool = False, level: Optional[int] = None) -> None:
    """Setup Rich logging configuration."""
    if level is None:
        level = logging.DEBUG if verbose else logging.INFO

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )


class JobLoggerAdapter(logging.LoggerAdapter):
    """Prefixes every message with the job it concerns."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = self.extra or {}
        prefix = f"[job={extra.get('job')}"
        if extra.get("uid"):
            prefix += f" uid={extra['uid']}"
        prefix += "]"
        kwargs.setdefault("extra", {}).update(extra)
        return f"{prefix} {msg}", kwargs


def logger_for_job(job: Any, base: Optional[logging.Logger] = None) -> JobLoggerAdapter:
    """Return a logger that tags records with the job's namespace/name and uid."""
    namespace = getattr(job, "namespace", None) or "default"
    name = getattr(job, "name", None)
    return JobLoggerAdapter(
        base or logger,
        {"job": f"{namespace}.{name}", "uid": getattr(job, "uid", None)},
    )
