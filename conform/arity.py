# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Parameter counting for signature placeholders and implementations."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Optional


def is_signature(value: Any) -> bool:
    """Return True if *value* is function-shaped and can declare a member."""

    return inspect.isroutine(value)


def arity_of(func: Callable[..., Any]) -> Optional[int]:
    """Return the number of formal parameters *func* declares.

    Every entry of the signature counts once, including ``*args``,
    ``**kwargs``, keyword-only parameters and parameters with defaults. Bound
    methods do not count ``self``. Returns ``None`` when the signature cannot
    be introspected (some builtins and C extensions).
    """

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    return len(signature.parameters)


__all__ = ["arity_of", "is_signature"]
