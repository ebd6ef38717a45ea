"""
Types and constants for fillnav.

Cell ownership, sensed cell info, scoot modes and planner strategy tags.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fillnav.geometry import Position


class Ownership(Enum):
    """Who has claimed (painted) a cell."""

    UNCLAIMED = "unclaimed"
    ALLY_PRIMARY = "ally_primary"
    ALLY_SECONDARY = "ally_secondary"
    ENEMY_PRIMARY = "enemy_primary"
    ENEMY_SECONDARY = "enemy_secondary"

    @property
    def is_ally(self) -> bool:
        return self in (Ownership.ALLY_PRIMARY, Ownership.ALLY_SECONDARY)

    @property
    def is_enemy(self) -> bool:
        return self in (Ownership.ENEMY_PRIMARY, Ownership.ENEMY_SECONDARY)


@dataclass(frozen=True)
class CellInfo:
    """Sensed attributes of one on-map cell."""

    position: Position
    is_wall: bool = False
    is_passable: bool = True
    ownership: Ownership = Ownership.UNCLAIMED


class ScootMode(Enum):
    """How far the scoot primitive widens its search before giving up."""

    EXPLORATORY = "exploratory"  # Try every rotation out to ±135°
    BOUNDED_PROBE = "bounded_probe"  # Stop after the first ±45° fallback fails


class Strategy(Enum):
    """Planner strategies, used to tag trace entries and debug counters."""

    WALL_RIDER = "wall_rider"
    LOOKAHEAD = "lookahead"
    GREEDY = "greedy"
    PROBE = "probe"
    SCOOT = "scoot"
    FILL = "fill"


class WorldActionError(Exception):
    """Raised by a world when a move or claim is not allowed right now."""


# Movement is blocked while the cooldown counter is at or above this value
MOVE_COOLDOWN_GATE = 10

# Wall neighbors needed before the dispatcher takes a detour
DEFAULT_WALL_THRESHOLD = 3

# Wall neighbors needed for the detour tried inside a lookahead chain
CHAIN_WALL_THRESHOLD = 1

# Targets within this squared distance are handled by scoot directly
NEAR_DISTANCE_SQ = 2

# Flee target = position - FLEE_SCALE * (anchor - position)
FLEE_SCALE = 2
