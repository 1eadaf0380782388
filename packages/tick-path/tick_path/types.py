"""Shared type aliases, errors and protocols for tick-path."""
from __future__ import annotations

from typing import Any, Generator, Protocol

Vec = tuple[float, ...]
Quat = tuple[float, float, float, float]
EntityId = int


class PathError(ValueError):
    """Raised when a path or follower is used in a state it can never be in.

    Empty segment lists, curves placed before the start point and follower
    indices outside the path all end up here. These are bugs in the calling
    code, so nothing in tick-path catches it.
    """


class WorldLike(Protocol):
    """The part of a tick ``World`` the follow-path systems rely on."""

    def query(
        self, *args: type
    ) -> Generator[tuple[EntityId, tuple[Any, ...]], None, None]: ...

    def detach(self, entity_id: EntityId, component_type: type) -> None: ...
