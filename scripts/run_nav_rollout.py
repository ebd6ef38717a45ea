#!/usr/bin/env -S uv run
"""Run the fillnav navigator over an ASCII map and print what it did."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from fillnav.config import NavigatorConfig
from fillnav.debug_logger import NavDebugLogger
from fillnav.sim.grid_world import GridWorld
from fillnav.sim.rollout import run_rollout

DEFAULT_MAP = """
..........
..........
....#.....
....#...T.
..@.#.....
....#.....
..........
"""


def _parse_target(raw: Optional[str], world: GridWorld) -> tuple[int, int]:
    if raw is None:
        targets = world.markers.get("T", [])
        if len(targets) != 1:
            raise ValueError("map needs exactly one 'T' marker when --target is not given")
        return targets[0]
    parts = raw.split(",")
    if len(parts) != 2:
        raise ValueError(f"--target must look like X,Y, got {raw!r}")
    return int(parts[0]), int(parts[1])


def run(
    *,
    map_text: str,
    target: Optional[str],
    turns: int,
    flee: bool,
    trace_level: int,
    wall_threshold: int,
    debug: int,
) -> int:
    world = GridWorld.from_ascii(map_text)
    goal = _parse_target(target, world)
    config = NavigatorConfig(
        wall_threshold=wall_threshold,
        trace=trace_level > 0,
        trace_level=max(trace_level, 1),
        debug=debug,
    )
    debug_logger = NavDebugLogger(level=debug) if debug > 0 else None

    result = run_rollout(world, goal, turns, config=config, flee=flee, debug_logger=debug_logger)

    if trace_level > 0:
        for line in result.trace_lines:
            print(line)
    print(world.render(target=None if flee else goal))
    print(result.summary())
    if debug_logger is not None:
        debug_logger.flush_summary()
    return 0 if result.reached or flee else 1


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--map", type=Path, default=None, help="ASCII map file (first row is north)")
    parser.add_argument("--target", default=None, help="Target as X,Y (defaults to the map's T marker)")
    parser.add_argument("--turns", type=int, default=50)
    parser.add_argument("--flee", action="store_true", help="Treat the target as an anchor to run from")
    parser.add_argument("--trace-level", type=int, default=1, choices=[0, 1, 2, 3])
    parser.add_argument("--wall-threshold", type=int, default=3)
    parser.add_argument("--debug", type=int, default=0, choices=[0, 1, 2])
    args = parser.parse_args()

    map_text = args.map.read_text() if args.map is not None else DEFAULT_MAP
    return run(
        map_text=map_text,
        target=args.target,
        turns=args.turns,
        flee=args.flee,
        trace_level=args.trace_level,
        wall_threshold=args.wall_threshold,
        debug=args.debug,
    )


if __name__ == "__main__":
    raise SystemExit(main())
