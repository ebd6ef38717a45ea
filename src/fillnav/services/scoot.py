"""
Scoot: the lowest-level single-step committer.

Tries a primary direction, a secondary direction, then rotations of the
primary out to ±135°. Every candidate is checked at the instant it is tried;
a feasible candidate fills the entered cell (when fillable) and then moves.
"""

from __future__ import annotations

from fillnav.geometry import Direction, Position, direction_to, secondary_direction
from fillnav.services.world import PlanContext
from fillnav.types import ScootMode, Strategy


def scoot_order(primary: Direction, secondary: Direction) -> tuple[list[Direction], list[Direction], list[Direction]]:
    """Candidate directions as (head, first fallback, wide fallbacks).

    The first fallback is the 45° neighbor of the primary that the secondary
    did not already cover. The wide fallbacks then alternate 90° and 135°
    rotations, starting on the secondary's side.
    """
    head = [primary, secondary]
    if secondary == primary.rotate_left():
        first = [primary.rotate_right()]
        wide = [primary.rotate_left(2), primary.rotate_right(2), primary.rotate_left(3), primary.rotate_right(3)]
    else:
        first = [primary.rotate_left()]
        wide = [primary.rotate_right(2), primary.rotate_left(2), primary.rotate_right(3), primary.rotate_left(3)]
    return head, first, wide


def scoot(ctx: PlanContext, primary: Direction, secondary: Direction, mode: ScootMode, label: str = "") -> bool:
    """Commit one step toward primary, widening the search as candidates fail.

    BOUNDED_PROBE gives up once the first fallback fails.
    """
    strategy = Strategy.PROBE if mode is ScootMode.BOUNDED_PROBE else Strategy.SCOOT
    head, first, wide = scoot_order(primary, secondary)
    tried: set[Direction] = set()

    for direction in head + first:
        if _attempt(ctx, direction, tried, strategy, label):
            return True
    if mode is ScootMode.BOUNDED_PROBE:
        return False
    for direction in wide:
        if _attempt(ctx, direction, tried, strategy, label):
            return True
    return False


def scoot_toward(ctx: PlanContext, target: Position, mode: ScootMode, label: str = "") -> bool:
    """Scoot toward a cell, classifying the offset into primary/secondary."""
    here = ctx.here
    dx, dy = here.offset_to(target)
    primary = direction_to(dx, dy)
    secondary = secondary_direction(dx, dy)
    if primary is Direction.CENTER:
        primary = here.direction_to(ctx.map_center)
    if secondary is Direction.CENTER:
        secondary = here.direction_to(ctx.map_center)
    if primary is Direction.CENTER:
        # Standing on the target and on the map centroid: nowhere to aim
        ctx.trace.failed(Strategy.SCOOT, f"{label}:no-heading" if label else "no-heading")
        return False
    return scoot(ctx, primary, secondary, mode, label=label)


def _attempt(ctx: PlanContext, direction: Direction, tried: set[Direction], strategy: Strategy, label: str) -> bool:
    if direction is Direction.CENTER or direction in tried:
        return False
    tried.add(direction)
    if not ctx.can_step(direction):
        ctx.trace.failed(strategy, f"{label}:{direction.short_name}" if label else direction.short_name)
        return False
    ctx.claim(ctx.here.add(direction))
    return ctx.commit(direction, strategy, label)
