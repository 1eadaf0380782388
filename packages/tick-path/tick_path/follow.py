"""Per-tick path advancing. Pure functions over follower state and a transform.

Each call moves one entity one tick along its path:

1. Measure the distance to the current target point.
2. If within epsilon, the target counts as reached: move on to the next
   point, wrap to the first one on a looping path, or report that the
   path is finished. At most one point is passed per tick.
3. Step toward the (possibly new) target by speed, never past it.

A finished follower does not move on the tick it finishes; detaching it is
the caller's job.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from tick_path import orient, vec
from tick_path.components import FollowPath, FollowPath3, Transform2D, Transform3D
from tick_path.types import PathError, Vec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Advance:
    """Outcome of one tick.

    direction is the unit vector toward the target the step was taken
    toward, or None when no step was taken.
    """

    position: Vec
    direction: Vec | None
    finished: bool = False


def _check_target(follower: FollowPath) -> None:
    points = follower.path.points
    if not points:
        raise PathError("Cannot follow an empty path")
    if not 0 <= follower.cur_target < len(points):
        raise PathError(
            f"cur_target {follower.cur_target} out of range for path with "
            f"{len(points)} points"
        )


def advance(follower: FollowPath, position: Vec) -> Advance:
    """Advance follower by one tick from position.

    Updates follower.cur_target in place. Dimension-agnostic: works for any
    point size as long as position and the path agree.
    """
    _check_target(follower)
    points = follower.path.points
    target = points[follower.cur_target]
    dist = vec.distance(position, target)

    if dist <= follower.epsilon:
        next_target = follower.cur_target + 1
        if next_target < len(points):
            follower.cur_target = next_target
        elif follower.path.is_loop:
            logger.debug("Looping path wrapped to its first point")
            follower.cur_target = 0
        else:
            return Advance(position, None, finished=True)
        target = points[follower.cur_target]
        dist = vec.distance(position, target)

    offset = vec.sub(target, position)
    if vec.is_zero(offset):
        return Advance(position, None)
    direction = vec.normalize(offset)
    step = min(follower.speed, dist)
    return Advance(vec.add(position, vec.scale(direction, step)), direction)


def advance_2d(follower: FollowPath, transform: Transform2D) -> bool:
    """Move a 2D transform one tick along its path and face the way it moves.

    Returns True when the path is finished and the follower should be removed.
    """
    result = advance(follower, transform.position)
    if result.finished:
        return True
    if result.direction is not None:
        transform.angle = orient.heading(result.direction)
    transform.position = result.position
    return False


def advance_3d(follower: FollowPath3, transform: Transform3D) -> bool:
    """Move a 3D transform one tick along its path, looking at the target.

    Returns True when the path is finished and the follower should be removed.
    """
    result = advance(follower, transform.position)
    if result.finished:
        return True
    if result.direction is not None:
        rotation = orient.look_rotation(result.direction, follower.up_axis)
        if rotation is not None:
            transform.rotation = rotation
    transform.position = result.position
    return False
