# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for the conform package.

Every conformance failure is a :class:`ValidationError` subclass carrying an
:class:`ErrorKind` together with the interface and member it concerns, so
callers can branch on structured fields instead of parsing messages::

    try:
        shape = validate(shape_spec, impl)
    except ArityMismatchError as error:
        print(error.kind, error.interface, error.member)
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ConformError(Exception):
    """Base class for all errors raised by conform."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(ConformError):
    """Raised when a spec or validator is configured with invalid values."""


class ErrorKind(str, Enum):
    MISSING_ARGUMENTS = "missing_arguments"
    MISSING_NAME = "missing_name"
    MISSING_IMPLEMENTATION = "missing_implementation"
    NOT_IMPLEMENTED = "not_implemented"
    UNDECLARED_MEMBER = "undeclared_member"
    NOT_A_FUNCTION = "not_a_function"
    ARITY_MISMATCH = "arity_mismatch"


class ValidationError(ConformError):
    """An implementation does not conform to its interface.

    Subclasses set ``kind`` and a ``template`` that is formatted with the
    interface and member names to build the message.
    """

    kind: ErrorKind
    template: str = "{interface} failed validation."

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        interface: Optional[str] = None,
        member: Optional[str] = None,
    ):
        self.interface = interface
        self.member = member
        if message is None:
            message = self.template.format(interface=interface, member=member)
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"interface={self.interface!r}, member={self.member!r})"
        )


class MissingArgumentsError(ValidationError):
    kind = ErrorKind.MISSING_ARGUMENTS
    template = "No arguments supplied to an instance of Interface constructor."


class MissingNameError(ValidationError):
    kind = ErrorKind.MISSING_NAME
    template = "Interface.type not defined."


class MissingImplementationError(ValidationError):
    kind = ErrorKind.MISSING_IMPLEMENTATION
    template = "The interface {interface} has not been implemented."


class NotImplementedMemberError(ValidationError):
    kind = ErrorKind.NOT_IMPLEMENTED
    template = "{interface}.{member} has not been implemented."


class UndeclaredMemberError(ValidationError):
    kind = ErrorKind.UNDECLARED_MEMBER
    template = "{member} is not a defined member of {interface}."


class NotAFunctionError(ValidationError):
    kind = ErrorKind.NOT_A_FUNCTION
    template = "{interface}.{member} has not been implemented as a function."


class ArityMismatchError(ValidationError):
    """The implementation's parameter count differs from the declared arity."""

    kind = ErrorKind.ARITY_MISMATCH
    template = (
        "An implementation of {interface}.{member} does not have the correct number of arguments."
    )

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        interface: Optional[str] = None,
        member: Optional[str] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(message, interface=interface, member=member)


__all__ = [
    "ConformError",
    "ConfigurationError",
    "ErrorKind",
    "ValidationError",
    "MissingArgumentsError",
    "MissingNameError",
    "MissingImplementationError",
    "NotImplementedMemberError",
    "UndeclaredMemberError",
    "NotAFunctionError",
    "ArityMismatchError",
]
