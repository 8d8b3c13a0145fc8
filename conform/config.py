# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

``CONFORM_PRIVATE_PREFIX``  marker for implementation entries exempt from the
                            undeclared-member check (default ``_``).
``CONFORM_CACHE``           remember successful validations (default off).
``CONFORM_CACHE_SIZE``      most recent validations kept when caching (default 256).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_PRIVATE_PREFIX = "_"
DEFAULT_CACHE_SIZE = 256

_FALSEY = ("", "0", "false", "no")


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() not in _FALSEY


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    private_prefix: str = DEFAULT_PRIVATE_PREFIX
    cache: bool = False
    cache_size: int = DEFAULT_CACHE_SIZE


def get_settings() -> Settings:
    """Read settings from the environment; called on every validator construction."""

    return Settings(
        private_prefix=os.getenv("CONFORM_PRIVATE_PREFIX", DEFAULT_PRIVATE_PREFIX),
        cache=_env_flag("CONFORM_CACHE"),
        cache_size=_env_int("CONFORM_CACHE_SIZE", DEFAULT_CACHE_SIZE),
    )


__all__ = ["DEFAULT_CACHE_SIZE", "DEFAULT_PRIVATE_PREFIX", "Settings", "get_settings"]
