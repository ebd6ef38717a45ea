"""
Wall rider: deflect away from a cluster of adjacent walls.

Each sensed wall neighbor pushes a synthetic waypoint one cell in the
direction 90° clockwise of that wall. When enough walls corroborate the push
and the push does not fight the goal, the agent scoots toward the waypoint.
"""

from __future__ import annotations

from fillnav.geometry import Direction, Position, neighbors
from fillnav.services.scoot import scoot_toward
from fillnav.services.world import PlanContext
from fillnav.types import ScootMode, Strategy


def deflected_waypoint(ctx: PlanContext) -> tuple[Position, int]:
    """Return (waypoint, wall_count) for the agent's current cell."""
    here = ctx.here
    waypoint = here
    wall_count = 0
    for direction, cell in neighbors(here):
        if ctx.world.on_the_map(cell) and ctx.is_known_wall(cell):
            waypoint = waypoint.add(direction.rotate_right(2))
            wall_count += 1
    return waypoint, wall_count


def fights_goal(goal_dir: Direction, deflect_dir: Direction) -> bool:
    """True if the deflection is perpendicular to or opposite the goal."""
    return deflect_dir in (goal_dir.rotate_right(2), goal_dir.rotate_right(4), goal_dir.rotate_right(6))


def wall_rider(ctx: PlanContext, target: Position, threshold: int) -> bool:
    if threshold == 0:
        return False

    here = ctx.here
    waypoint, wall_count = deflected_waypoint(ctx)
    goal_dir = here.direction_to(target)
    deflect_dir = here.direction_to(waypoint)
    detail = f"walls={wall_count}/{threshold}"

    if fights_goal(goal_dir, deflect_dir):
        ctx.trace.failed(Strategy.WALL_RIDER, f"{detail}:{deflect_dir.short_name}-vs-{goal_dir.short_name}")
        return False
    if wall_count < threshold:
        ctx.trace.failed(Strategy.WALL_RIDER, detail)
        return False

    ctx.trace.waypoint = waypoint
    # Cancelled pushes leave the waypoint on the agent; scoot_toward then aims at the map centroid
    if scoot_toward(ctx, waypoint, ScootMode.EXPLORATORY, label="ride"):
        # Credit the detour, not the scoot it delegated to
        ctx.trace.winner = Strategy.WALL_RIDER
        return True
    return False
