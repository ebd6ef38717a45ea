"""
Synthetic grid world for exercising the navigator without a game engine.

Maps are ASCII, first row northernmost::

    #  wall                 .  open floor
    R  impassable, not wall ?  open floor hidden from sensors
    a  ally paint (primary) b  ally paint (secondary)
    x  enemy paint (primary) y enemy paint (secondary)
    @  agent start          T  target marker (open floor)
    O  another agent (blocks moves)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional

import numpy as np

from fillnav.geometry import Direction, Position
from fillnav.types import MOVE_COOLDOWN_GATE, CellInfo, Ownership, WorldActionError


class CellKind(IntEnum):
    OPEN = 0
    WALL = 1
    BLOCKED = 2  # Impassable but not a wall (ruins, structures)


_OWNERSHIP_CODES: tuple[Ownership, ...] = (
    Ownership.UNCLAIMED,
    Ownership.ALLY_PRIMARY,
    Ownership.ALLY_SECONDARY,
    Ownership.ENEMY_PRIMARY,
    Ownership.ENEMY_SECONDARY,
)
_OWNERSHIP_INDEX: dict[Ownership, int] = {o: i for i, o in enumerate(_OWNERSHIP_CODES)}

_PAINT_CHARS: dict[str, Ownership] = {
    "a": Ownership.ALLY_PRIMARY,
    "b": Ownership.ALLY_SECONDARY,
    "x": Ownership.ENEMY_PRIMARY,
    "y": Ownership.ENEMY_SECONDARY,
}

_KNOWN_CHARS = set("#.R?@TO") | set(_PAINT_CHARS)


@dataclass
class WorldLog:
    """Every move/claim request the world received, in order."""

    move_requests: list[Direction] = field(default_factory=list)
    moves: list[Direction] = field(default_factory=list)
    claim_requests: list[Position] = field(default_factory=list)
    claims: list[Position] = field(default_factory=list)

    @property
    def mutations(self) -> int:
        return len(self.moves) + len(self.claims)


class GridWorld:
    """Single-agent world implementing the NavWorld interface."""

    MOVE_COOLDOWN_COST = 10  # Added to the cooldown by each move
    COOLDOWN_DECAY = 10  # Removed from the cooldown at end of turn

    def __init__(
        self,
        width: int,
        height: int,
        position: tuple[int, int],
        *,
        walls: Iterable[tuple[int, int]] = (),
        blocked: Iterable[tuple[int, int]] = (),
        fog: Iterable[tuple[int, int]] = (),
        occupied: Iterable[tuple[int, int]] = (),
        vision_radius_sq: int = 20,
        claim_radius_sq: int = 9,
        paint: int = 200,
        claim_cost: int = 5,
        movement_cooldown: int = 0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"map must be non-empty, got {width}x{height}")
        self.width = width
        self.height = height
        self.kinds = np.full((height, width), CellKind.OPEN, dtype=np.int8)
        self.owners = np.zeros((height, width), dtype=np.int8)
        self.fog = np.zeros((height, width), dtype=bool)
        for x, y in walls:
            self.kinds[y, x] = CellKind.WALL
        for x, y in blocked:
            self.kinds[y, x] = CellKind.BLOCKED
        for x, y in fog:
            self.fog[y, x] = True
        self.occupied: set[Position] = {Position(x, y) for x, y in occupied}

        self._position = Position(position[0], position[1])
        if not self.on_the_map(self._position):
            raise ValueError(f"agent position {self._position} is off the map")

        self.vision_radius_sq = vision_radius_sq
        self.claim_radius_sq = claim_radius_sq
        self.paint = paint
        self.claim_cost = claim_cost
        self._cooldown = movement_cooldown
        self.action_ready = True
        self.turn = 0
        self.markers: dict[str, list[Position]] = {}
        self.log = WorldLog()

    @classmethod
    def from_ascii(cls, text: str, **kwargs) -> GridWorld:
        """Build a world from an ASCII map. The map must contain exactly one '@'."""
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if not rows:
            raise ValueError("empty map")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("map rows must all have the same width")
        height = len(rows)

        walls, blocked, fog, occupied = [], [], [], []
        paint: list[tuple[Position, Ownership]] = []
        markers: dict[str, list[Position]] = {}
        for r, row in enumerate(rows):
            y = height - 1 - r
            for x, ch in enumerate(row):
                if ch not in _KNOWN_CHARS:
                    raise ValueError(f"unknown map character {ch!r} at row {r}, col {x}")
                pos = Position(x, y)
                if ch == "#":
                    walls.append(pos)
                elif ch == "R":
                    blocked.append(pos)
                elif ch == "?":
                    fog.append(pos)
                elif ch == "O":
                    occupied.append(pos)
                elif ch in _PAINT_CHARS:
                    paint.append((pos, _PAINT_CHARS[ch]))
                if ch in "@TO":
                    markers.setdefault(ch, []).append(pos)

        agents = markers.get("@", [])
        if len(agents) != 1:
            raise ValueError(f"map must contain exactly one '@', found {len(agents)}")

        world = cls(width, height, agents[0], walls=walls, blocked=blocked, fog=fog, occupied=occupied, **kwargs)
        for pos, owner in paint:
            world.set_owner(pos, owner)
        world.markers = markers
        return world

    # === NavWorld interface ===

    @property
    def position(self) -> Position:
        return self._position

    @property
    def movement_cooldown(self) -> int:
        return self._cooldown

    @property
    def map_width(self) -> int:
        return self.width

    @property
    def map_height(self) -> int:
        return self.height

    def on_the_map(self, pos: tuple[int, int]) -> bool:
        return 0 <= pos[0] < self.width and 0 <= pos[1] < self.height

    def sense_cell(self, pos: tuple[int, int]) -> Optional[CellInfo]:
        if not self.can_sense(pos):
            return None
        x, y = pos
        kind = CellKind(int(self.kinds[y, x]))
        return CellInfo(
            position=Position(x, y),
            is_wall=kind is CellKind.WALL,
            is_passable=kind is CellKind.OPEN,
            ownership=self.owner_at(pos),
        )

    def can_move(self, direction: Direction) -> bool:
        if direction is Direction.CENTER or self._cooldown >= MOVE_COOLDOWN_GATE:
            return False
        dest = self._position.add(direction)
        if not self.on_the_map(dest) or dest in self.occupied:
            return False
        return bool(self.kinds[dest.y, dest.x] == CellKind.OPEN)

    def move(self, direction: Direction) -> None:
        self.log.move_requests.append(direction)
        if not self.can_move(direction):
            raise WorldActionError(f"cannot move {direction.name} from {self._position}")
        self._position = self._position.add(direction)
        self._cooldown += self.MOVE_COOLDOWN_COST
        self.log.moves.append(direction)

    def can_claim(self, pos: tuple[int, int]) -> bool:
        if not self.action_ready or self.paint < self.claim_cost or not self.on_the_map(pos):
            return False
        if self._position.distance_squared_to(pos) > self.claim_radius_sq:
            return False
        return bool(self.kinds[pos[1], pos[0]] == CellKind.OPEN)

    def claim(self, pos: tuple[int, int]) -> None:
        target = Position(pos[0], pos[1])
        self.log.claim_requests.append(target)
        if not self.can_claim(target):
            raise WorldActionError(f"cannot claim {target}")
        self.set_owner(target, Ownership.ALLY_PRIMARY)
        self.paint -= self.claim_cost
        self.action_ready = False
        self.log.claims.append(target)

    # === Simulation helpers ===

    def can_sense(self, pos: tuple[int, int]) -> bool:
        if not self.on_the_map(pos) or self.fog[pos[1], pos[0]]:
            return False
        return self._position.distance_squared_to(pos) <= self.vision_radius_sq

    def owner_at(self, pos: tuple[int, int]) -> Ownership:
        return _OWNERSHIP_CODES[int(self.owners[pos[1], pos[0]])]

    def set_owner(self, pos: tuple[int, int], owner: Ownership) -> None:
        self.owners[pos[1], pos[0]] = _OWNERSHIP_INDEX[owner]

    def kind_at(self, pos: tuple[int, int]) -> CellKind:
        return CellKind(int(self.kinds[pos[1], pos[0]]))

    def set_cooldown(self, value: int) -> None:
        self._cooldown = value

    def end_turn(self) -> None:
        """Advance one turn: cooldown decays and the claim action recharges."""
        self._cooldown = max(0, self._cooldown - self.COOLDOWN_DECAY)
        self.action_ready = True
        self.turn += 1

    def ally_painted(self) -> int:
        ally = [_OWNERSHIP_INDEX[Ownership.ALLY_PRIMARY], _OWNERSHIP_INDEX[Ownership.ALLY_SECONDARY]]
        return int(np.isin(self.owners, ally).sum())

    def render(self, target: Optional[tuple[int, int]] = None) -> str:
        """ASCII snapshot, first row northernmost."""
        paint_chars = {v: k for k, v in _PAINT_CHARS.items()}
        lines = []
        for y in range(self.height - 1, -1, -1):
            row = []
            for x in range(self.width):
                pos = Position(x, y)
                kind = self.kind_at(pos)
                if pos == self._position:
                    ch = "@"
                elif target is not None and pos == tuple(target):
                    ch = "T"
                elif kind is CellKind.WALL:
                    ch = "#"
                elif kind is CellKind.BLOCKED:
                    ch = "R"
                elif pos in self.occupied:
                    ch = "O"
                else:
                    ch = paint_chars.get(self.owner_at(pos), "?" if self.fog[y, x] else ".")
                row.append(ch)
            lines.append("".join(row))
        return "\n".join(lines)
