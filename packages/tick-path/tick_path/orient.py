"""Orientation helpers: 2D heading angles and 3D look-at quaternions.

Quaternions are (x, y, z, w) tuples. A 3D entity's forward axis is local -Z
and its up axis local +Y.
"""
from __future__ import annotations

import math

from tick_path import vec
from tick_path.types import Quat, Vec

IDENTITY: Quat = (0.0, 0.0, 0.0, 1.0)

FORWARD: Vec = (0.0, 0.0, -1.0)

_PARALLEL_EPS = 1e-12


def heading(direction: Vec) -> float:
    """Angle of a 2D direction in radians, counter-clockwise from +X."""
    return math.atan2(direction[1], direction[0])


def look_rotation(direction: Vec, up: Vec) -> Quat | None:
    """Rotation that points -Z along direction, keeping +Y close to up.

    Returns None when direction is zero or parallel to up; there is no
    unique answer then and the caller keeps its current rotation.
    """
    if vec.is_zero(direction) or vec.is_zero(up):
        return None
    back = vec.normalize(vec.scale(direction, -1.0))
    right = vec.cross(vec.normalize(up), back)
    if vec.magnitude_sq(right) <= _PARALLEL_EPS:
        return None
    right = vec.normalize(right)
    true_up = vec.cross(back, right)
    return _from_basis(right, true_up, back)


def _from_basis(x_axis: Vec, y_axis: Vec, z_axis: Vec) -> Quat:
    """Quaternion for the rotation matrix whose columns are the given axes."""
    m00, m10, m20 = x_axis
    m01, m11, m21 = y_axis
    m02, m12, m22 = z_axis
    trace = m00 + m11 + m22
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        return ((m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s, 0.25 * s)
    if m00 > m11 and m00 > m22:
        s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
        return (0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
    if m11 > m22:
        s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
        return ((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
    s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
    return ((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)


def rotate(q: Quat, v: Vec) -> Vec:
    """Rotate a 3D vector by a unit quaternion."""
    x, y, z, w = q
    u = (x, y, z)
    uv = vec.cross(u, v)
    uuv = vec.cross(u, uv)
    return vec.add(v, vec.add(vec.scale(uv, 2.0 * w), vec.scale(uuv, 2.0)))
