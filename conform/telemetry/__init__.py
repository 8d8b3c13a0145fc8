"""Telemetry package - OpenTelemetry metrics and tracing for validations."""

from .metrics import (
    record_cache_hit,
    record_validation_metrics,
    validation_cache_hit_total,
    validation_failure_total,
    validation_latency_ms,
    validation_total,
)
from .runtime import get_tracer, meter

__all__ = [
    "get_tracer",
    "meter",
    "record_cache_hit",
    "record_validation_metrics",
    "validation_cache_hit_total",
    "validation_failure_total",
    "validation_latency_ms",
    "validation_total",
]
