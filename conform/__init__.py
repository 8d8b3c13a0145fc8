# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""conform - runtime interface conformance checking.

Declare an interface as member names and parameter counts, hand in an
implementation, and get back a read-only capability exposing exactly the
declared members, or a typed :class:`ValidationError` naming what is wrong.
"""

from .capability import ValidatedCapability
from .decorator import provides
from .exceptions import (
    ArityMismatchError,
    ConfigurationError,
    ConformError,
    ErrorKind,
    MissingArgumentsError,
    MissingImplementationError,
    MissingNameError,
    NotAFunctionError,
    NotImplementedMemberError,
    UndeclaredMemberError,
    ValidationError,
)
from .spec import InterfaceSpec, InterfaceSpecBuilder
from .validator import InterfaceValidator, get_validator, interface, validate

__version__ = "0.1.0"

__all__ = [
    "ArityMismatchError",
    "ConfigurationError",
    "ConformError",
    "ErrorKind",
    "InterfaceSpec",
    "InterfaceSpecBuilder",
    "InterfaceValidator",
    "MissingArgumentsError",
    "MissingImplementationError",
    "MissingNameError",
    "NotAFunctionError",
    "NotImplementedMemberError",
    "UndeclaredMemberError",
    "ValidatedCapability",
    "ValidationError",
    "get_validator",
    "interface",
    "provides",
    "validate",
]
