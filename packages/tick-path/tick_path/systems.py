"""System factories for path following."""
from __future__ import annotations

import logging
from typing import Any, Callable

from tick_path.components import FollowPath, FollowPath3, Transform2D, Transform3D
from tick_path.follow import advance_2d, advance_3d
from tick_path.types import EntityId, WorldLike

logger = logging.getLogger(__name__)

OnComplete = Callable[[WorldLike, Any, EntityId, FollowPath], None]


def _make_system(
    transform_type: type,
    follower_type: type,
    step: Callable[[Any, Any], bool],
    on_complete: OnComplete | None,
) -> Callable[[WorldLike, Any], None]:
    def follow_path_system(world: WorldLike, ctx: Any) -> None:
        for eid, (transform, follower) in list(
            world.query(transform_type, follower_type)
        ):
            if not step(follower, transform):
                continue
            world.detach(eid, follower_type)
            logger.debug("Entity %d finished its path", eid)
            if on_complete is not None:
                on_complete(world, ctx, eid, follower)

    return follow_path_system


def make_follow_path_system(
    on_complete: OnComplete | None = None,
) -> Callable[[WorldLike, Any], None]:
    """Advance every entity with Transform2D and FollowPath by one tick.

    Followers whose non-looping path is done are detached, then on_complete
    fires with the detached follower.
    """
    return _make_system(Transform2D, FollowPath, advance_2d, on_complete)


def make_follow_path3_system(
    on_complete: OnComplete | None = None,
) -> Callable[[WorldLike, Any], None]:
    """3D counterpart of make_follow_path_system for Transform3D + FollowPath3."""
    return _make_system(Transform3D, FollowPath3, advance_3d, on_complete)
