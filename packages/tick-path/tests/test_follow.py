"""Tests for the per-tick advance functions."""
from __future__ import annotations

import math

import pytest

from tick_path import orient
from tick_path.components import FollowPath, FollowPath3, Transform2D, Transform3D
from tick_path.follow import advance, advance_2d, advance_3d
from tick_path.path import Path
from tick_path.types import PathError

L_POINTS = ((0.0, 0.0), (10.0, 0.0), (10.0, 10.0))


def _close(a: tuple[float, ...], b: tuple[float, ...]) -> bool:
    return all(math.isclose(x, y, abs_tol=1e-9) for x, y in zip(a, b, strict=True))


def _l_follower(is_loop: bool = False) -> FollowPath:
    return FollowPath(Path(L_POINTS, is_loop=is_loop), speed=5.0, epsilon=0.01)


# ── advance (dimension-generic) ───────────────────────────────────


class TestAdvance:
    def test_moves_toward_target(self) -> None:
        follower = FollowPath(Path(((10.0, 0.0),)), speed=2.0)
        result = advance(follower, (0.0, 0.0))
        assert _close(result.position, (2.0, 0.0))
        assert result.direction is not None
        assert _close(result.direction, (1.0, 0.0))
        assert not result.finished
        assert follower.cur_target == 0

    def test_step_clamped_to_remaining_distance(self) -> None:
        follower = FollowPath(Path(((3.0, 4.0), (9.0, 9.0))), speed=100.0)
        result = advance(follower, (0.0, 0.0))
        assert _close(result.position, (3.0, 4.0))
        assert follower.cur_target == 0

    def test_arrival_within_epsilon(self) -> None:
        follower = FollowPath(Path(((1.0, 0.0), (1.0, 5.0))), speed=1.0, epsilon=0.1)
        result = advance(follower, (1.05, 0.0))
        assert follower.cur_target == 1
        assert result.direction is not None
        assert result.position[1] > 0.0

    def test_outside_epsilon_is_not_arrival(self) -> None:
        follower = FollowPath(Path(((1.0, 0.0), (1.0, 5.0))), speed=0.1, epsilon=0.01)
        advance(follower, (1.05, 0.0))
        assert follower.cur_target == 0

    def test_only_one_waypoint_per_tick(self) -> None:
        follower = FollowPath(Path(((0.0, 0.0), (1.0, 0.0), (2.0, 0.0))), speed=100.0)
        result = advance(follower, (0.0, 0.0))
        assert follower.cur_target == 1
        assert _close(result.position, (1.0, 0.0))

    def test_finish_does_not_move(self) -> None:
        follower = FollowPath(Path(((4.0, 4.0),)), speed=1.0)
        result = advance(follower, (4.0, 4.0))
        assert result.finished
        assert result.position == (4.0, 4.0)
        assert result.direction is None

    def test_loop_wraps_to_first_point(self) -> None:
        follower = FollowPath(Path(((0.0, 0.0), (4.0, 0.0)), is_loop=True), speed=1.0)
        follower.cur_target = 1
        result = advance(follower, (4.0, 0.0))
        assert not result.finished
        assert follower.cur_target == 0
        assert _close(result.position, (3.0, 0.0))

    def test_single_point_loop_never_finishes(self) -> None:
        follower = FollowPath(Path(((2.0, 2.0),), is_loop=True), speed=1.0)
        for _ in range(3):
            result = advance(follower, (2.0, 2.0))
            assert not result.finished
            assert result.direction is None
            assert result.position == (2.0, 2.0)

    def test_duplicate_point_with_zero_epsilon_does_not_nan(self) -> None:
        path = Path(((0.0, 0.0), (0.0, 0.0), (5.0, 0.0)))
        follower = FollowPath(path, speed=1.0, epsilon=0.0)
        result = advance(follower, (0.0, 0.0))
        assert follower.cur_target == 1
        assert result.direction is None
        assert result.position == (0.0, 0.0)
        result = advance(follower, result.position)
        assert follower.cur_target == 2
        assert _close(result.position, (1.0, 0.0))

    def test_3d(self) -> None:
        follower = FollowPath(Path(((0.0, 3.0, 4.0),)), speed=1.0)
        result = advance(follower, (0.0, 0.0, 0.0))
        assert _close(result.position, (0.0, 0.6, 0.8))


class TestPreconditions:
    def test_empty_path_raises(self) -> None:
        with pytest.raises(PathError, match="empty path"):
            advance(FollowPath(Path(()), speed=1.0), (0.0, 0.0))

    def test_target_past_end_raises(self) -> None:
        follower = _l_follower()
        follower.cur_target = 3
        with pytest.raises(PathError, match="out of range"):
            advance(follower, (0.0, 0.0))

    def test_negative_target_raises(self) -> None:
        follower = _l_follower()
        follower.cur_target = -1
        with pytest.raises(PathError):
            advance(follower, (0.0, 0.0))

    def test_dimension_mismatch_raises(self) -> None:
        with pytest.raises(ValueError):
            advance(_l_follower(), (0.0, 0.0, 0.0))


# ── advance_2d ────────────────────────────────────────────────────


class TestAdvance2D:
    def test_l_path_tick_by_tick(self) -> None:
        follower = _l_follower()
        transform = Transform2D(position=(0.0, 0.0))

        assert advance_2d(follower, transform) is False
        assert _close(transform.position, (5.0, 0.0))
        assert follower.cur_target == 1
        assert transform.angle == 0.0

        assert advance_2d(follower, transform) is False
        assert _close(transform.position, (10.0, 0.0))
        assert follower.cur_target == 1

        # Arrival and the first step toward the next point share a tick.
        assert advance_2d(follower, transform) is False
        assert follower.cur_target == 2
        assert _close(transform.position, (10.0, 5.0))
        assert math.isclose(transform.angle, math.pi / 2)

        assert advance_2d(follower, transform) is False
        assert _close(transform.position, (10.0, 10.0))

        assert advance_2d(follower, transform) is True
        assert _close(transform.position, (10.0, 10.0))
        assert math.isclose(transform.angle, math.pi / 2)

    def test_l_path_looping(self) -> None:
        follower = _l_follower(is_loop=True)
        transform = Transform2D(position=(0.0, 0.0))
        for _ in range(4):
            advance_2d(follower, transform)
        assert _close(transform.position, (10.0, 10.0))

        assert advance_2d(follower, transform) is False
        assert follower.cur_target == 0
        step = 5.0 / math.sqrt(2.0)
        assert _close(transform.position, (10.0 - step, 10.0 - step))
        assert math.isclose(transform.angle, -3 * math.pi / 4)

    def test_looping_never_finishes(self) -> None:
        follower = _l_follower(is_loop=True)
        transform = Transform2D(position=(0.0, 0.0))
        targets = set()
        for _ in range(200):
            assert advance_2d(follower, transform) is False
            targets.add(follower.cur_target)
        assert targets == {0, 1, 2}

    def test_zero_step_keeps_angle(self) -> None:
        follower = FollowPath(Path(((1.0, 1.0), (1.0, 1.0), (2.0, 1.0))), speed=1.0, epsilon=0.0)
        transform = Transform2D(position=(1.0, 1.0), angle=1.25)
        advance_2d(follower, transform)
        assert transform.angle == 1.25
        assert transform.position == (1.0, 1.0)


# ── advance_3d ────────────────────────────────────────────────────


class TestAdvance3D:
    def test_moves_and_looks_at_target(self) -> None:
        follower = FollowPath3(Path(((10.0, 0.0, 0.0),)), speed=2.0)
        transform = Transform3D(position=(0.0, 0.0, 0.0))
        assert advance_3d(follower, transform) is False
        assert _close(transform.position, (2.0, 0.0, 0.0))
        assert _close(orient.rotate(transform.rotation, orient.FORWARD), (1.0, 0.0, 0.0))

    def test_target_along_up_axis_keeps_rotation(self) -> None:
        follower = FollowPath3(Path(((0.0, 10.0, 0.0),)), speed=2.0)
        transform = Transform3D(position=(0.0, 0.0, 0.0))
        advance_3d(follower, transform)
        assert transform.rotation == orient.IDENTITY
        assert _close(transform.position, (0.0, 2.0, 0.0))

    def test_custom_up_axis(self) -> None:
        follower = FollowPath3(
            Path(((0.0, 10.0, 0.0),)), speed=2.0, up_axis=(0.0, 0.0, 1.0)
        )
        transform = Transform3D(position=(0.0, 0.0, 0.0))
        advance_3d(follower, transform)
        assert _close(orient.rotate(transform.rotation, orient.FORWARD), (0.0, 1.0, 0.0))

    def test_finishes_at_last_point(self) -> None:
        points = ((0.0, 0.0, -4.0), (4.0, 0.0, -4.0))
        follower = FollowPath3(Path(points), speed=4.0)
        transform = Transform3D(position=(0.0, 0.0, 0.0))
        finished = [advance_3d(follower, transform) for _ in range(3)]
        assert finished == [False, False, True]
        assert _close(transform.position, (4.0, 0.0, -4.0))
