"""Bezier curve evaluation and flattening. N-dimensional.

A curve is given by its control polygon: the start point, any number of
inner control points and the end point. Quadratic curves have one inner
point, cubic curves two.
"""
from __future__ import annotations

from typing import Sequence

from tick_path import vec
from tick_path.config import FlattenConfig
from tick_path.types import Vec


def evaluate(ctrl: Sequence[Vec], t: float) -> Vec:
    """Point on the curve at parameter t (de Casteljau)."""
    if not ctrl:
        raise ValueError("evaluate() needs at least one control point")
    pts = list(ctrl)
    while len(pts) > 1:
        pts = [vec.lerp(a, b, t) for a, b in zip(pts, pts[1:])]
    return pts[0]


def split(ctrl: Sequence[Vec], t: float) -> tuple[tuple[Vec, ...], tuple[Vec, ...]]:
    """Split a curve at t. Returns the control polygons of both halves.

    The first half starts at ctrl[0] and the second half ends at ctrl[-1];
    both endpoints are carried over exactly, not recomputed.
    """
    left = [ctrl[0]]
    right = [ctrl[-1]]
    pts = list(ctrl)
    while len(pts) > 1:
        pts = [vec.lerp(a, b, t) for a, b in zip(pts, pts[1:])]
        left.append(pts[0])
        right.append(pts[-1])
    right.reverse()
    return tuple(left), tuple(right)


def is_straight(ctrl: Sequence[Vec], straightness: float) -> bool:
    """True if every inner control point lies within straightness of the chord."""
    if len(ctrl) <= 2:
        return True
    start, end = ctrl[0], ctrl[-1]
    return all(
        vec.distance_to_segment(p, start, end) <= straightness for p in ctrl[1:-1]
    )


def flatten(
    ctrl: Sequence[Vec],
    straightness: float,
    config: FlattenConfig | None = None,
) -> list[Vec]:
    """Approximate a curve by the end points of consecutive line segments.

    The start point is not included; the exact end point is always last.
    Pieces are halved until straight, so a large straightness yields just
    [end] and a small one follows the curve closely. Consecutive duplicates
    are dropped.
    """
    cfg = config if config is not None else FlattenConfig()
    out: list[Vec] = []
    _flatten_into(tuple(ctrl), straightness, cfg.max_depth, out)
    return out


def _flatten_into(
    ctrl: tuple[Vec, ...],
    straightness: float,
    depth: int,
    out: list[Vec],
) -> None:
    if depth == 0 or is_straight(ctrl, straightness):
        end = ctrl[-1]
        if not out or out[-1] != end:
            out.append(end)
        return
    left, right = split(ctrl, 0.5)
    _flatten_into(left, straightness, depth - 1, out)
    _flatten_into(right, straightness, depth - 1, out)


def quadratic_points(
    start: Vec,
    ctrl: Vec,
    end: Vec,
    straightness: float,
    config: FlattenConfig | None = None,
) -> list[Vec]:
    return flatten((start, ctrl, end), straightness, config)


def cubic_points(
    start: Vec,
    ctrl1: Vec,
    ctrl2: Vec,
    end: Vec,
    straightness: float,
    config: FlattenConfig | None = None,
) -> list[Vec]:
    return flatten((start, ctrl1, ctrl2, end), straightness, config)
