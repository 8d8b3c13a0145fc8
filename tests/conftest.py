"""Pytest fixtures for the conform test-suite.

Every test starts from a clean environment: conform settings are read from
``CONFORM_*`` variables, and the process-wide validator caches whatever it
read on first use.
"""
from __future__ import annotations

import pytest

from conform import InterfaceSpec
from conform.validator import reset_validator


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):  # noqa: D401
    """Drop CONFORM_* overrides and the cached process-wide validator."""
    monkeypatch.delenv("CONFORM_PRIVATE_PREFIX", raising=False)
    monkeypatch.delenv("CONFORM_CACHE", raising=False)
    monkeypatch.delenv("CONFORM_CACHE_SIZE", raising=False)
    reset_validator()
    yield
    reset_validator()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def shape_spec() -> InterfaceSpec:  # noqa: D401
    """Return a two-member interface used across tests."""
    return InterfaceSpec("Shape", {"area": 2, "perimeter": 2})


@pytest.fixture()
def shape_impl():  # noqa: D401
    """Return an implementation that satisfies ``shape_spec``."""
    return {
        "area": lambda width, height: width * height,
        "perimeter": lambda width, height: 2 * (width + height),
    }
