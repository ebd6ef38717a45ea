"""
Grid geometry for fillnav.

Positions, the 8 compass directions and the angular classifiers that turn an
offset vector into a primary and a secondary step direction.

Coordinates are (x, y) with y growing toward North.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import NamedTuple

# tan(67.5°); offsets whose dominant component is at least this many times the
# other one count as "along an axis".
TAN_67_5 = 1.0 + math.sqrt(2.0)


class Direction(Enum):
    """Compass directions, clockwise from North, plus CENTER."""

    NORTH = (0, 1)
    NORTHEAST = (1, 1)
    EAST = (1, 0)
    SOUTHEAST = (1, -1)
    SOUTH = (0, -1)
    SOUTHWEST = (-1, -1)
    WEST = (-1, 0)
    NORTHWEST = (-1, 1)
    CENTER = (0, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    def rotate_right(self, steps: int = 1) -> Direction:
        """Rotate clockwise by 45° per step. CENTER stays CENTER."""
        if self is Direction.CENTER:
            return self
        return COMPASS[(COMPASS.index(self) + steps) % 8]

    def rotate_left(self, steps: int = 1) -> Direction:
        """Rotate counter-clockwise by 45° per step. CENTER stays CENTER."""
        return self.rotate_right(-steps)

    def opposite(self) -> Direction:
        return self.rotate_right(4)


COMPASS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.NORTHEAST,
    Direction.EAST,
    Direction.SOUTHEAST,
    Direction.SOUTH,
    Direction.SOUTHWEST,
    Direction.WEST,
    Direction.NORTHWEST,
)

_SHORT_NAMES: dict[Direction, str] = {
    Direction.NORTH: "N",
    Direction.NORTHEAST: "NE",
    Direction.EAST: "E",
    Direction.SOUTHEAST: "SE",
    Direction.SOUTH: "S",
    Direction.SOUTHWEST: "SW",
    Direction.WEST: "W",
    Direction.NORTHWEST: "NW",
    Direction.CENTER: "C",
}


class Position(NamedTuple):
    """Immutable grid coordinate."""

    x: int
    y: int

    def add(self, direction: Direction, steps: int = 1) -> Position:
        return Position(self.x + direction.dx * steps, self.y + direction.dy * steps)

    def translate(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def offset_to(self, other: tuple[int, int]) -> tuple[int, int]:
        return (other[0] - self.x, other[1] - self.y)

    def distance_squared_to(self, other: tuple[int, int]) -> int:
        dx, dy = self.offset_to(other)
        return dx * dx + dy * dy

    def direction_to(self, other: tuple[int, int]) -> Direction:
        return direction_to(*self.offset_to(other))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


def direction_to(dx: float, dy: float) -> Direction:
    """Classify an offset into the nearest of the 8 compass directions.

    Offsets within 22.5° of an axis map to that cardinal; everything else maps
    to the diagonal picked by the signs. The zero vector maps to CENTER.
    """
    if abs(dx) >= TAN_67_5 * abs(dy):
        if dx > 0:
            return Direction.EAST
        if dx < 0:
            return Direction.WEST
        return Direction.CENTER
    if abs(dy) >= TAN_67_5 * abs(dx):
        return Direction.NORTH if dy > 0 else Direction.SOUTH
    if dy > 0:
        return Direction.NORTHEAST if dx > 0 else Direction.NORTHWEST
    return Direction.SOUTHEAST if dx > 0 else Direction.SOUTHWEST


def secondary_direction(dx: float, dy: float) -> Direction:
    """Second-best step direction for an offset, complementing direction_to.

    Axis-dominant offsets get the diagonal on the side of the minor component
    (a zero minor component resolves south / west). Diagonal-ish offsets get
    the cardinal of the larger component; equal magnitudes resolve to the
    vertical cardinal. The zero vector maps to CENTER.
    """
    if abs(dx) >= TAN_67_5 * abs(dy):
        if dx > 0:
            return Direction.NORTHEAST if dy > 0 else Direction.SOUTHEAST
        if dx < 0:
            return Direction.NORTHWEST if dy > 0 else Direction.SOUTHWEST
        return Direction.CENTER
    if abs(dy) >= TAN_67_5 * abs(dx):
        if dy > 0:
            return Direction.NORTHEAST if dx > 0 else Direction.NORTHWEST
        return Direction.SOUTHEAST if dx > 0 else Direction.SOUTHWEST
    if abs(dx) > abs(dy):
        return Direction.EAST if dx > 0 else Direction.WEST
    return Direction.NORTH if dy > 0 else Direction.SOUTH


def neighbors(pos: Position) -> list[tuple[Direction, Position]]:
    """The 8 surrounding cells in clockwise order starting North."""
    return [(d, pos.add(d)) for d in COMPASS]
