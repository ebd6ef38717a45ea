"""Turn loop that drives one Navigator through a GridWorld."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from typing import Optional

from fillnav.config import NavigatorConfig
from fillnav.debug_logger import NavDebugLogger
from fillnav.geometry import Direction, Position
from fillnav.services.navigator import Navigator
from fillnav.sim.grid_world import GridWorld


@dataclass
class RolloutResult:
    """What happened over a rollout, one entry per turn where relevant."""

    start: Position
    target: Position
    positions: list[Position] = field(default_factory=list)  # Position after each turn
    moves: list[Direction] = field(default_factory=list)  # Committed moves only
    claims: list[Position] = field(default_factory=list)
    stalled_turns: int = 0
    reached: bool = False
    turns: int = 0
    trace_lines: list[str] = field(default_factory=list)

    @property
    def final_position(self) -> Position:
        return self.positions[-1] if self.positions else self.start

    @property
    def final_distance_sq(self) -> int:
        return self.final_position.distance_squared_to(self.target)

    def summary(self) -> str:
        outcome = "reached" if self.reached else f"d²={self.final_distance_sq}"
        return (
            f"{self.start} → {self.target}: {outcome} after {self.turns} turns, "
            f"moves={len(self.moves)} fills={len(self.claims)} stalled={self.stalled_turns}"
        )


def _parse_trace(output: str) -> list[str]:
    return [line.strip() for line in output.splitlines() if "[fillnav]" in line]


def run_rollout(
    world: GridWorld,
    target: tuple[int, int],
    max_turns: int,
    config: Optional[NavigatorConfig] = None,
    flee: bool = False,
    debug_logger: Optional[NavDebugLogger] = None,
) -> RolloutResult:
    """Call the navigator once per turn until the target is reached or turns run out.

    With ``flee`` the target is treated as an anchor to run away from and the
    rollout always uses all of its turns.
    """
    if max_turns < 0:
        raise ValueError("max_turns must be >= 0")
    goal = Position(target[0], target[1])
    navigator = Navigator(world, config=config, debug_logger=debug_logger)
    result = RolloutResult(start=world.position, target=goal)

    # Capture stdout for trace output
    captured = io.StringIO()
    old_stdout = sys.stdout
    sys.stdout = captured
    try:
        for _ in range(max_turns):
            if not flee and world.position == goal:
                break
            if flee:
                navigator.attempt_flee(goal)
            else:
                navigator.attempt_move_to(goal)

            trace = navigator.last_trace
            if trace is not None and trace.moved is not None:
                result.moves.append(trace.moved)
            else:
                result.stalled_turns += 1
            if trace is not None and trace.claimed is not None:
                result.claims.append(trace.claimed)

            world.end_turn()
            if navigator.debug_logger is not None:
                navigator.debug_logger.flush_tick()
            result.turns += 1
            result.positions.append(world.position)
    finally:
        sys.stdout = old_stdout

    result.trace_lines = _parse_trace(captured.getvalue())
    result.reached = not flee and world.position == goal
    return result
