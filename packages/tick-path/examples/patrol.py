"""Patrol demo -- a guard walks a rounded route, one tick at a time.

Demonstrates:
- Building a path from lines and bezier curves with PathBuilder
- Flattening control with straightness
- Driving advance_2d by hand, the way a host system would
- Looping vs. one-shot paths

Run: python -m examples.patrol [--loop] [--speed 1.5] [--ticks 40]
"""
from __future__ import annotations

import argparse
import math

from tick_path import FollowPath, PathBuilder, Transform2D, advance_2d


def build_route(loop: bool):
    builder = PathBuilder((0.0, 0.0))
    builder.add_line_to((8.0, 0.0))
    builder.add_quadratic_bezier_to((12.0, 4.0), (12.0, 0.0), 0.25)
    builder.add_line_to((12.0, 8.0))
    builder.add_cubic_bezier_to((0.0, 8.0), (12.0, 14.0), (0.0, 14.0), 0.25)
    builder.add_line_to((0.0, 0.0))
    return builder.build_looping_path() if loop else builder.build_path()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--loop", action="store_true", help="loop the route")
    parser.add_argument("--speed", type=float, default=1.5)
    parser.add_argument("--ticks", type=int, default=40)
    args = parser.parse_args()

    path = build_route(args.loop)
    print(f"=== Patrol: {len(path)} waypoints, {path.length():.1f} units ===\n")

    guard = Transform2D(position=(0.0, 0.0))
    follower = FollowPath(path, speed=args.speed)

    for tick in range(1, args.ticks + 1):
        if advance_2d(follower, guard):
            print(f"tick {tick}: route finished")
            break
        x, y = guard.position
        print(
            f"tick {tick:3d}: ({x:6.2f}, {y:6.2f})  "
            f"heading {math.degrees(guard.angle):7.1f}  -> waypoint {follower.cur_target}"
        )


if __name__ == "__main__":
    main()
