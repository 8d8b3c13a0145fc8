# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Cross-checking of implementations against interface specs."""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from typing import Any, Dict, FrozenSet, Hashable, Mapping, Optional, Tuple

from .arity import arity_of
from .capability import ValidatedCapability
from .config import get_settings
from .exceptions import (
    ArityMismatchError,
    ConfigurationError,
    MissingArgumentsError,
    MissingImplementationError,
    MissingNameError,
    NotAFunctionError,
    NotImplementedMemberError,
    UndeclaredMemberError,
    ValidationError,
)
from .spec import InterfaceSpec
from .telemetry import get_tracer, record_cache_hit, record_validation_metrics

logger = logging.getLogger(__name__)

_CacheKey = Tuple[InterfaceSpec, FrozenSet[Tuple[Any, Hashable]]]

# Keys of the call-style argument mapping that never declare members. ``name``
# is only reserved when ``type`` is absent and it carries the interface name.
RESERVED_KEYS = ("type", "implementation")


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _identity(value: Any) -> Hashable:
    # getattr() builds a new bound method on every read; identify it by the
    # function and instance it binds instead.
    func = getattr(value, "__func__", None)
    bound_to = getattr(value, "__self__", None)
    if func is not None and bound_to is not None:
        return (id(func), id(bound_to))
    return id(value)


def implementation_entries(implementation: Any) -> Dict[str, Any]:
    """Read *implementation* as a name -> value mapping.

    Mappings are copied as-is. Any other object contributes its attributes,
    dunder names excluded.
    """

    if isinstance(implementation, Mapping):
        return dict(implementation)
    return {
        name: getattr(implementation, name)
        for name in dir(implementation)
        if not _is_dunder(name)
    }


class InterfaceValidator:
    """Validate implementations and produce :class:`ValidatedCapability` results.

    :param private_prefix: Implementation entries starting with this marker may
                           be left undeclared. Defaults to ``CONFORM_PRIVATE_PREFIX``.
    :param cache: Remember successful validations per spec and implementation
                  entries. Defaults to ``CONFORM_CACHE``.
    :param cache_size: Most recent validations kept; older ones are evicted.
                       Defaults to ``CONFORM_CACHE_SIZE``.
    """

    def __init__(
        self,
        *,
        private_prefix: Optional[str] = None,
        cache: Optional[bool] = None,
        cache_size: Optional[int] = None,
    ):
        settings = get_settings()
        self.private_prefix = settings.private_prefix if private_prefix is None else private_prefix
        if not self.private_prefix:
            raise ConfigurationError("The private member prefix must not be empty")
        self.cache_enabled = settings.cache if cache is None else cache
        self.cache_size = settings.cache_size if cache_size is None else cache_size
        if self.cache_size < 1:
            raise ConfigurationError(f"The cache size must be positive, got {self.cache_size}")
        self._cache: "OrderedDict[_CacheKey, ValidatedCapability]" = OrderedDict()
        self._lock = threading.Lock()

    @property
    def cache_len(self) -> int:
        """Number of validations currently cached."""

        with self._lock:
            return len(self._cache)

    def validate(self, spec: Optional[InterfaceSpec], implementation: Any) -> ValidatedCapability:
        """Return the capability for *implementation* or raise a ValidationError."""

        name = getattr(spec, "name", None)
        started_at = time.perf_counter()
        with get_tracer("conform.validator").start_as_current_span(
            f"conform.validate:{name or 'unknown'}",
            attributes={"conform.interface": name or "unknown"},
        ) as span:
            try:
                capability = self._validate(spec, implementation)
            except ValidationError as error:
                span.set_attribute("conform.error_kind", error.kind.value)
                record_validation_metrics(name, "failure", started_at, kind=error.kind.value)
                raise
            record_validation_metrics(name, "success", started_at)
            return capability

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def _validate(self, spec: Optional[InterfaceSpec], implementation: Any) -> ValidatedCapability:
        if spec is None:
            raise MissingArgumentsError()
        if not getattr(spec, "name", None):
            raise MissingNameError()
        if implementation is None:
            raise MissingImplementationError(interface=spec.name)

        entries = implementation_entries(implementation)

        key: Optional[_CacheKey] = None
        if self.cache_enabled:
            key = (spec, frozenset((entry, _identity(value)) for entry, value in entries.items()))
            with self._lock:
                cached = self._cache.get(key)
                if cached is not None:
                    self._cache.move_to_end(key)
            if cached is not None:
                record_cache_hit(spec.name)
                logger.debug("Using cached validation of %s", spec.name)
                return cached

        capability = self._cross_check(spec, entries)

        if key is not None:
            with self._lock:
                self._cache[key] = capability
                while len(self._cache) > self.cache_size:
                    self._cache.popitem(last=False)
        return capability

    def _cross_check(self, spec: InterfaceSpec, entries: Dict[str, Any]) -> ValidatedCapability:
        name = spec.name
        declared = spec.members

        for member in declared:
            if member not in entries:
                raise NotImplementedMemberError(interface=name, member=member)

        bound: Dict[str, Any] = {}
        for entry, value in entries.items():
            if entry not in declared:
                if isinstance(entry, str) and entry.startswith(self.private_prefix):
                    logger.debug("Skipping private member %s of %s implementation", entry, name)
                    continue
                raise UndeclaredMemberError(interface=name, member=entry)

            if not callable(value):
                raise NotAFunctionError(interface=name, member=entry)

            expected = declared[entry]
            actual = arity_of(value)
            if actual != expected:
                raise ArityMismatchError(
                    interface=name, member=entry, expected=expected, actual=actual
                )
            bound[entry] = value

        logger.debug("Validated %s implementation with members %s", name, sorted(bound))
        return ValidatedCapability(name, bound)


_VALIDATOR: Optional[InterfaceValidator] = None
_VALIDATOR_LOCK = threading.Lock()


def get_validator() -> InterfaceValidator:
    """Return the process-wide validator, created from settings on first use."""

    global _VALIDATOR
    with _VALIDATOR_LOCK:
        if _VALIDATOR is None:
            _VALIDATOR = InterfaceValidator()
        return _VALIDATOR


def reset_validator() -> None:
    """Drop the process-wide validator so the next call re-reads settings."""

    global _VALIDATOR
    with _VALIDATOR_LOCK:
        _VALIDATOR = None


def validate(spec: Optional[InterfaceSpec], implementation: Any) -> ValidatedCapability:
    """Validate *implementation* against *spec* using the process-wide validator."""

    return get_validator().validate(spec, implementation)


def interface(args: Optional[Mapping[str, Any]] = None, /, **fields: Any) -> ValidatedCapability:
    """Declare and validate an interface in one call.

    Accepts a single mapping (or keyword arguments) holding the interface name
    under ``type`` (or ``name``), the candidate under ``implementation``, and
    one placeholder function per member::

        shape = interface(
            type="Shape",
            area=lambda width, height: None,
            implementation={"area": lambda w, h: w * h},
        )
    """

    if args is None and not fields:
        raise MissingArgumentsError()

    merged: Dict[str, Any] = dict(args or {})
    merged.update(fields)

    name = merged.get("type") if "type" in merged else merged.get("name")
    if not name:
        raise MissingNameError()
    implementation = merged.get("implementation")
    if implementation is None:
        raise MissingImplementationError(interface=name)

    reserved = RESERVED_KEYS if "type" in merged else RESERVED_KEYS + ("name",)
    signatures = {key: value for key, value in merged.items() if key not in reserved}
    spec = InterfaceSpec.from_signatures(name, **signatures)
    return validate(spec, implementation)


__all__ = [
    "InterfaceValidator",
    "RESERVED_KEYS",
    "get_validator",
    "implementation_entries",
    "interface",
    "reset_validator",
    "validate",
]
