"""
fillnav - local movement planner for paint-the-grid agents.

Each call commits at most one step (and at most one fill) toward a target,
using fixed fallback tables instead of search.
"""

from fillnav.config import NavigatorConfig
from fillnav.debug_logger import NavDebugLogger
from fillnav.geometry import Direction, Position
from fillnav.services.navigator import Navigator
from fillnav.services.world import NavWorld
from fillnav.trace import NavTrace
from fillnav.types import CellInfo, Ownership, ScootMode, WorldActionError

__all__ = [
    "CellInfo",
    "Direction",
    "NavDebugLogger",
    "NavTrace",
    "NavWorld",
    "Navigator",
    "NavigatorConfig",
    "Ownership",
    "Position",
    "ScootMode",
    "WorldActionError",
]
