"""
World capability interface and the per-call planning context.

Every world mutation the planner makes goes through ``PlanContext.claim`` or
``PlanContext.commit``. Both re-check feasibility right before acting and
turn a rejected action into a False result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from fillnav.config import NavigatorConfig
from fillnav.geometry import Direction, Position
from fillnav.trace import NavTrace
from fillnav.types import CellInfo, Strategy, WorldActionError


class NavWorld(Protocol):
    """What the planner needs from the simulation, for the current tick."""

    @property
    def position(self) -> Position: ...

    @property
    def movement_cooldown(self) -> int: ...

    @property
    def map_width(self) -> int: ...

    @property
    def map_height(self) -> int: ...

    def on_the_map(self, pos: Position) -> bool: ...

    def sense_cell(self, pos: Position) -> Optional[CellInfo]:
        """Sensed info for an on-map cell in sensor range, else None."""
        ...

    def can_move(self, direction: Direction) -> bool: ...

    def move(self, direction: Direction) -> None:
        """Step one cell. Raises WorldActionError if the move is not allowed."""
        ...

    def can_claim(self, pos: Position) -> bool: ...

    def claim(self, pos: Position) -> None:
        """Paint a cell. Raises WorldActionError if the claim is not allowed."""
        ...


@dataclass
class PlanContext:
    """Everything one dispatcher call needs. Discarded when the call returns."""

    world: NavWorld
    config: NavigatorConfig
    trace: NavTrace = field(default_factory=NavTrace)
    origin: Optional[Position] = None
    start_cooldown: int = 0
    claimed: bool = False
    moved: bool = False

    def __post_init__(self) -> None:
        if self.origin is None:
            self.origin = self.world.position
        self.start_cooldown = self.world.movement_cooldown

    @property
    def here(self) -> Position:
        return self.world.position

    @property
    def map_center(self) -> Position:
        return Position(self.world.map_width // 2, self.world.map_height // 2)

    # === Queries ===

    def is_known_wall(self, pos: Position) -> bool:
        info = self.world.sense_cell(pos)
        return info is not None and info.is_wall

    def is_clear_ahead(self, pos: Position) -> bool:
        """Lookahead guard: on the map, sensed, and not a wall.

        Unknown cells count as blocked here.
        """
        if not self.world.on_the_map(pos):
            return False
        info = self.world.sense_cell(pos)
        return info is not None and not info.is_wall

    def can_fill(self, pos: Position) -> bool:
        """True if the cell is worth claiming and the world would allow it."""
        if self.claimed or not self.world.on_the_map(pos):
            return False
        info = self.world.sense_cell(pos)
        if info is None or not info.is_passable or info.ownership.is_ally:
            return False
        return self.world.can_claim(pos)

    def can_step(self, direction: Direction) -> bool:
        """Move feasibility as the planner sees it right now."""
        if direction is Direction.CENTER or self.moved:
            return False
        dest = self.here.add(direction)
        if not self.world.on_the_map(dest) or self.is_known_wall(dest):
            return False
        return self.world.can_move(direction)

    # === Actions ===

    def claim(self, pos: Position) -> bool:
        """Claim a cell if fillable. At most one claim per planning call."""
        if not self.can_fill(pos):
            return False
        try:
            self.world.claim(pos)
        except WorldActionError as exc:
            self.trace.failed(Strategy.FILL, f"{pos}:{exc}")
            return False
        self.claimed = True
        self.trace.claimed = pos
        return True

    def commit(self, direction: Direction, strategy: Strategy, detail: str = "") -> bool:
        """Move one step. The only place the planner calls world.move."""
        label = f"{detail}:{direction.short_name}" if detail else direction.short_name
        if not self.can_step(direction):
            self.trace.failed(strategy, label)
            return False
        try:
            self.world.move(direction)
        except WorldActionError as exc:
            self.trace.failed(strategy, f"{label}:{exc}")
            return False
        self.moved = True
        self.trace.moved = direction
        self.trace.winner = strategy
        self.trace.record(strategy, label, True)
        return True
