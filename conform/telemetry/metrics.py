# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for conform."""

from __future__ import annotations

import logging
import time
from typing import Optional

from .runtime import meter

logger = logging.getLogger(__name__)

validation_total = meter.create_counter(
    name="conform.validation.total",
    description="Counts interface validations partitioned by outcome.",
    unit="1",
)

validation_failure_total = meter.create_counter(
    name="conform.validation.failure.total",
    description="Counts failed interface validations partitioned by error kind.",
    unit="1",
)

validation_cache_hit_total = meter.create_counter(
    name="conform.validation.cache_hit.total",
    description="Counts validations answered from the validator's cache.",
    unit="1",
)

validation_latency_ms = meter.create_histogram(
    name="conform.validation.latency.ms",
    description="Time taken to cross-check an implementation against its interface.",
    unit="ms",
)


def record_validation_metrics(
    interface: Optional[str],
    outcome: str,
    started_at: float,
    *,
    kind: Optional[str] = None,
) -> None:
    """Record latency and outcome for one validation.

    Args:
        interface: Interface name, or None when the spec itself was missing
        outcome: "success" or "failure"
        started_at: Timestamp from time.perf_counter() when validation started
        kind: ErrorKind value for failures
    """
    duration_ms = (time.perf_counter() - started_at) * 1000.0
    attributes = {"interface": interface or "unknown", "outcome": outcome}
    try:
        validation_latency_ms.record(duration_ms, attributes)
        validation_total.add(1, attributes)
        if kind is not None:
            validation_failure_total.add(1, {"interface": attributes["interface"], "kind": kind})
    except Exception:
        # Telemetry must never interfere with validation results
        logger.debug("Failed to record validation metrics", exc_info=True)


def record_cache_hit(interface: str) -> None:
    """Count a validation answered from a validator's cache."""
    try:
        validation_cache_hit_total.add(1, {"interface": interface})
    except Exception:
        logger.debug("Failed to record cache hit", exc_info=True)


__all__ = [
    "record_cache_hit",
    "validation_total",
    "validation_failure_total",
    "validation_cache_hit_total",
    "validation_latency_ms",
    "record_validation_metrics",
]
