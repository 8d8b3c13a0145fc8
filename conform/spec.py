# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Interface specification data structures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping

from .arity import arity_of, is_signature
from .exceptions import ConfigurationError, MissingNameError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class InterfaceSpec:
    """A named contract: member name -> declared number of parameters."""

    name: str
    members: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name:
            raise MissingNameError()
        if not isinstance(self.name, str):
            raise ConfigurationError(f"Interface name must be a string, got {type(self.name).__name__}")

        members: Dict[str, int] = {}
        for member, arity in dict(self.members).items():
            if not isinstance(member, str) or not member:
                raise ConfigurationError(f"Interface {self.name} declares an invalid member name: {member!r}")
            if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
                raise ConfigurationError(
                    f"Interface {self.name} declares {member!r} with invalid arity {arity!r}"
                )
            members[member] = arity

        # Frozen dataclass: bypass __setattr__ to store the read-only view.
        object.__setattr__(self, "members", MappingProxyType(members))
        logger.debug("Declared interface %s with members %s", self.name, members)

    @classmethod
    def from_signatures(cls, name: str, /, **signatures: Any) -> "InterfaceSpec":
        """Build a spec from placeholder functions.

        Each function-shaped value declares a member whose arity is the
        placeholder's parameter count. Other values are ignored::

            Shape = InterfaceSpec.from_signatures("Shape", area=lambda w, h: None)
        """

        members: Dict[str, int] = {}
        for member, signature in signatures.items():
            if not is_signature(signature):
                logger.debug("Ignoring non-function entry %r of interface %s", member, name)
                continue
            arity = arity_of(signature)
            if arity is None:
                raise ConfigurationError(
                    f"Cannot read the signature declared for {name}.{member}"
                )
            members[member] = arity
        return cls(name, members)

    def __contains__(self, member: object) -> bool:
        return member in self.members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterfaceSpec):
            return NotImplemented
        return self.name == other.name and dict(self.members) == dict(other.members)

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self.members.items())))

    def __repr__(self) -> str:
        return f"InterfaceSpec(name={self.name!r}, members={dict(self.members)!r})"


class InterfaceSpecBuilder:
    """Register members one at a time, then :meth:`build` the spec.

    .. code-block:: python

        Repository = (
            InterfaceSpecBuilder("Repository")
            .member("load", 1)
            .signature("save", lambda key, value: None)
            .build()
        )
    """

    def __init__(self, name: str):
        self._name = name
        self._members: Dict[str, int] = {}

    def member(self, name: str, arity: int) -> "InterfaceSpecBuilder":
        if name in self._members:
            raise ConfigurationError(f"{self._name}.{name} is already declared")
        self._members[name] = arity
        return self

    def signature(self, name: str, placeholder: Callable[..., Any]) -> "InterfaceSpecBuilder":
        if not is_signature(placeholder):
            raise ConfigurationError(f"The signature for {self._name}.{name} must be a function")
        arity = arity_of(placeholder)
        if arity is None:
            raise ConfigurationError(f"Cannot read the signature declared for {self._name}.{name}")
        return self.member(name, arity)

    def build(self) -> InterfaceSpec:
        return InterfaceSpec(self._name, dict(self._members))


__all__ = ["InterfaceSpec", "InterfaceSpecBuilder"]
