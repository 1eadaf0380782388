"""Transform and path-follower components."""
from __future__ import annotations

from dataclasses import dataclass

from tick_path.orient import IDENTITY
from tick_path.path import Path


@dataclass
class Transform2D:
    """2D placement. angle is the heading in radians, counter-clockwise from +X."""

    position: tuple[float, ...]
    angle: float = 0.0


@dataclass
class Transform3D:
    """3D placement. rotation is an (x, y, z, w) quaternion; forward is -Z."""

    position: tuple[float, ...]
    rotation: tuple[float, float, float, float] = IDENTITY


@dataclass
class FollowPath:
    """Moves a 2D entity along a path at a fixed distance per tick.

    cur_target is the index of the point the entity is heading to. A point
    counts as reached once the entity is within epsilon of it.
    """

    path: Path
    speed: float
    epsilon: float = 0.01
    cur_target: int = 0


@dataclass
class FollowPath3(FollowPath):
    """3D variant of FollowPath. up_axis orients the entity while it turns."""

    up_axis: tuple[float, ...] = (0.0, 1.0, 0.0)
