# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# conform/decorator.py

import functools
import inspect
import logging
from typing import Any, Callable, Optional

from .exceptions import ValidationError
from .spec import InterfaceSpec
from .validator import InterfaceValidator, get_validator

logger = logging.getLogger(__name__)

# Sentinel object to detect if a parameter was provided by the user
_sentinel = object()


def provides(
    spec: InterfaceSpec,
    *,
    validator: Optional[InterfaceValidator] = None,
    on_violation: Any = _sentinel,
):
    """
    Validate whatever the decorated factory returns against *spec*.

    The wrapped factory returns a :class:`ValidatedCapability` instead of the
    raw implementation. Both sync and async factories are supported.

    :param spec: The interface the factory's result must satisfy.
    :param validator: Optional. The validator to use. Defaults to the
                      process-wide validator.
    :param on_violation: Optional. Determines the behavior when validation
                         fails. If it is a callable, it is invoked and its
                         result returned; the ``ValidationError`` is passed
                         as an argument if the callable accepts it. Any other
                         value is returned directly. If not provided, the
                         error is raised.

    .. code-block:: python

        from conform import InterfaceSpec, provides

        Storage = InterfaceSpec("Storage", {"get": 1, "put": 2})

        @provides(Storage)
        def memory_storage():
            data = {}
            return {"get": data.get, "put": data.__setitem__}

        # Fall back to a null implementation instead of raising
        @provides(Storage, on_violation=lambda error: NULL_STORAGE)
        def plugin_storage(): ...
    """

    if not isinstance(spec, InterfaceSpec):
        raise TypeError(f"provides() expects an InterfaceSpec, got {type(spec).__name__}")

    def decorator(func: Callable):
        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous factories."""
            implementation = func(*args, **kwargs)
            try:
                return (validator or get_validator()).validate(spec, implementation)
            except ValidationError as error:
                return _handle_violation(error)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            """Wrapper for asynchronous factories."""
            implementation = await func(*args, **kwargs)
            try:
                return (validator or get_validator()).validate(spec, implementation)
            except ValidationError as error:
                result = _handle_violation(error)
                if inspect.isawaitable(result):
                    result = await result
                return result

        def _handle_violation(error: ValidationError):
            """Executes the user-supplied `on_violation` handler or raises by default."""

            logger.debug("Factory %s produced a non-conforming %s: %s", func.__qualname__, spec.name, error)

            if on_violation is _sentinel:
                raise error

            # Static fallback value (e.g. None)
            if not callable(on_violation):
                return on_violation

            # Handlers may accept the error or take no arguments at all.
            try:
                inspect.signature(on_violation).bind(error)
            except TypeError:
                return on_violation()
            except ValueError:
                pass
            return on_violation(error)

        if inspect.iscoroutinefunction(func):
            wrapper = async_wrapper
        else:
            wrapper = sync_wrapper

        # Attach the spec for introspection
        wrapper.__conform_interface__ = spec
        return wrapper

    return decorator


__all__ = ["provides"]
