"""N-dimensional vector math helpers operating on tuple[float, ...]."""
from __future__ import annotations

import math

from tick_path.types import Vec


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def sub(a: Vec, b: Vec) -> Vec:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def lerp(a: Vec, b: Vec, t: float) -> Vec:
    """Point at fraction t of the way from a to b."""
    return tuple(ai + (bi - ai) * t for ai, bi in zip(a, b, strict=True))


def dot(a: Vec, b: Vec) -> float:
    return sum(ai * bi for ai, bi in zip(a, b, strict=True))


def cross(a: Vec, b: Vec) -> Vec:
    """3D cross product. Both operands must have three components."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError(f"cross() needs 3D vectors, got {len(a)}D and {len(b)}D")
    ax, ay, az = a
    bx, by, bz = b
    return (ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def magnitude_sq(v: Vec) -> float:
    return sum(vi * vi for vi in v)


def magnitude(v: Vec) -> float:
    return math.sqrt(magnitude_sq(v))


def normalize(v: Vec) -> Vec:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def is_zero(v: Vec) -> bool:
    return all(vi == 0.0 for vi in v)


def distance_sq(a: Vec, b: Vec) -> float:
    return magnitude_sq(sub(a, b))


def distance(a: Vec, b: Vec) -> float:
    return math.sqrt(distance_sq(a, b))


def distance_to_segment(p: Vec, a: Vec, b: Vec) -> float:
    """Distance from p to the closed segment a-b."""
    ab = sub(b, a)
    length_sq = magnitude_sq(ab)
    if length_sq == 0.0:
        return distance(p, a)
    t = dot(sub(p, a), ab) / length_sq
    t = max(0.0, min(1.0, t))
    return distance(p, lerp(a, b, t))
