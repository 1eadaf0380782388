"""Paths and the builder that flattens line and bezier segments into them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from tick_path import bezier, vec
from tick_path.config import FlattenConfig
from tick_path.types import PathError, Vec


@dataclass(frozen=True)
class Path:
    """A flattened polyline to follow.

    Consecutive points are the ends of straight lines, visited in order.
    When is_loop is set the follower returns to the first point after the
    last one instead of stopping. Paths are never mutated, so one instance
    can be shared by any number of followers.
    """

    points: tuple[Vec, ...]
    is_loop: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Vec]:
        return iter(self.points)

    def length(self) -> float:
        """Total length of the polyline, closing edge included for loops."""
        total = sum(
            vec.distance(a, b) for a, b in zip(self.points, self.points[1:])
        )
        if self.is_loop and len(self.points) > 1:
            total += vec.distance(self.points[-1], self.points[0])
        return total

    def line_strip(self) -> list[Vec]:
        """Points as a line strip for drawing; loops repeat the first point."""
        strip = list(self.points)
        if self.is_loop and strip:
            strip.append(strip[0])
        return strip


@dataclass(frozen=True)
class PointSegment:
    """Straight line from the previous point to ``to``. Also the start point."""

    to: Vec


@dataclass(frozen=True)
class QuadraticBezierSegment:
    """Curve from the previous point to ``to`` with one control point."""

    to: Vec
    ctrl: Vec
    straightness: float


@dataclass(frozen=True)
class CubicBezierSegment:
    """Curve from the previous point to ``to`` with two control points."""

    to: Vec
    ctrl1: Vec
    ctrl2: Vec
    straightness: float


PathSegment = Union[PointSegment, QuadraticBezierSegment, CubicBezierSegment]


class PathBuilder:
    """Builds paths from segments that each continue where the last one ended."""

    def __init__(self, start: Vec, config: FlattenConfig | None = None) -> None:
        self._segments: list[PathSegment] = [PointSegment(start)]
        self._config = config if config is not None else FlattenConfig()

    @classmethod
    def from_segments(
        cls,
        segments: Sequence[PathSegment],
        config: FlattenConfig | None = None,
    ) -> PathBuilder:
        """Builder from a ready-made segment list. The first must be a point."""
        _check_segments(segments)
        builder = cls(segments[0].to, config)
        builder._segments.extend(segments[1:])
        return builder

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return tuple(self._segments)

    @property
    def cursor(self) -> Vec:
        return self._segments[-1].to

    @property
    def config(self) -> FlattenConfig:
        return self._config

    def add_line_to(self, point: Vec) -> PathBuilder:
        self._segments.append(PointSegment(point))
        return self

    def add_quadratic_bezier_to(
        self, to: Vec, ctrl: Vec, straightness: float
    ) -> PathBuilder:
        self._segments.append(QuadraticBezierSegment(to, ctrl, straightness))
        return self

    def add_cubic_bezier_to(
        self, to: Vec, ctrl1: Vec, ctrl2: Vec, straightness: float
    ) -> PathBuilder:
        self._segments.append(CubicBezierSegment(to, ctrl1, ctrl2, straightness))
        return self

    def build_points(self) -> list[Vec]:
        """Flatten all segments into the list of points to visit.

        The start point is not part of the result: it is where the follower
        is expected to begin. Curves start from the previous segment's end.
        """
        _check_segments(self._segments)
        points: list[Vec] = []
        last = self._segments[0].to
        for segment in self._segments[1:]:
            if isinstance(segment, PointSegment):
                points.append(segment.to)
            elif isinstance(segment, QuadraticBezierSegment):
                points.extend(
                    bezier.quadratic_points(
                        last,
                        segment.ctrl,
                        segment.to,
                        segment.straightness,
                        self._config,
                    )
                )
            else:
                points.extend(
                    bezier.cubic_points(
                        last,
                        segment.ctrl1,
                        segment.ctrl2,
                        segment.to,
                        segment.straightness,
                        self._config,
                    )
                )
            last = segment.to
        return points

    def build_path(self) -> Path:
        return Path(tuple(self.build_points()), is_loop=False)

    def build_looping_path(self) -> Path:
        return Path(tuple(self.build_points()), is_loop=True)


def _check_segments(segments: Sequence[PathSegment]) -> None:
    if not segments:
        raise PathError("Path has no segments")
    first = segments[0]
    if not isinstance(first, PointSegment):
        raise PathError(
            f"Path has to start with a PointSegment, got {type(first).__name__}"
        )
