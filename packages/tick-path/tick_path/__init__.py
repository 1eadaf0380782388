"""tick-path - Bezier-built paths and per-tick path following for the tick engine."""
from __future__ import annotations

from tick_path import bezier, orient, vec
from tick_path.components import FollowPath, FollowPath3, Transform2D, Transform3D
from tick_path.config import FlattenConfig
from tick_path.follow import Advance, advance, advance_2d, advance_3d
from tick_path.path import (
    CubicBezierSegment,
    Path,
    PathBuilder,
    PathSegment,
    PointSegment,
    QuadraticBezierSegment,
)
from tick_path.systems import make_follow_path3_system, make_follow_path_system
from tick_path.types import PathError, WorldLike

__all__ = [
    "Advance",
    "CubicBezierSegment",
    "FlattenConfig",
    "FollowPath",
    "FollowPath3",
    "Path",
    "PathBuilder",
    "PathError",
    "PathSegment",
    "PointSegment",
    "QuadraticBezierSegment",
    "Transform2D",
    "Transform3D",
    "WorldLike",
    "advance",
    "advance_2d",
    "advance_3d",
    "bezier",
    "make_follow_path3_system",
    "make_follow_path_system",
    "orient",
    "vec",
]
