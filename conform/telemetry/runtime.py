# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles shared by the package.

Only the API package is required. Without an SDK configured by the host
application the global providers are no-ops.
"""

from __future__ import annotations

from opentelemetry import metrics, trace

meter = metrics.get_meter("conform")


def get_tracer(name: str = "conform"):
    """Return a tracer from the globally configured provider."""

    return trace.get_tracer(name)


__all__ = ["meter", "get_tracer"]
