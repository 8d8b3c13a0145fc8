# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The validated result handed back to callers."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator


class ValidatedCapability(Mapping):
    """Read-only mapping of declared member name -> implementation callable.

    Members are also stored as instance attributes, so a capability can stand
    in for the object it was validated from::

        storage = validate(Storage, {"get": lambda key: ..., "put": ...})
        storage.get("a")
        storage["get"]("a")

    Instance attributes take precedence over the inherited ``Mapping``
    methods, so a member named ``get``, ``keys``, ``items`` or ``values``
    resolves to the implementation. The interface name is always available as
    ``__interface__`` and as ``interface`` unless a member uses that name.
    ``__members__`` is a read-only view that never collides with members.
    """

    def __init__(self, interface: str, members: Dict[str, Callable[..., Any]]):
        state = vars(self)
        if "interface" not in members:
            state["interface"] = interface
        state.update(members)
        state["__interface__"] = interface
        state["__members__"] = MappingProxyType(dict(members))

    def __getitem__(self, member: str) -> Callable[..., Any]:
        return self.__members__[member]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__members__)

    def __len__(self) -> int:
        return len(self.__members__)

    def __contains__(self, member: object) -> bool:
        return member in self.__members__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValidatedCapability):
            return dict(self.__members__) == dict(other.__members__)
        if isinstance(other, Mapping):
            return dict(self.__members__) == {key: other[key] for key in other}
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __getattr__(self, member: str) -> Callable[..., Any]:
        # Only reached when normal lookup fails.
        if member.startswith("__"):
            raise AttributeError(member)
        raise AttributeError(f"{self.__interface__} has no member {member!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"ValidatedCapability({self.__interface__!r}, members={sorted(self.__members__)})"


__all__ = ["ValidatedCapability"]
