"""Greedy single-step mover: look two cells ahead, fill, then step."""

from __future__ import annotations

from fillnav.services.tables import Heading
from fillnav.services.world import PlanContext
from fillnav.types import Strategy


def greedy_move(ctx: PlanContext, heading: Heading) -> bool:
    """Step along a heading if the cell two steps out looks clear.

    The look cell must be on the map, sensed and not a wall. The first step
    direction that can move wins; before moving, the first fillable cell among
    the heading's step cells is claimed.
    """
    here = ctx.here
    look = here.translate(*heading.look)
    if not ctx.is_clear_ahead(look):
        ctx.trace.failed(Strategy.GREEDY, f"{heading.name}:look{look}")
        return False

    for direction in heading.steps:
        if not ctx.can_step(direction):
            continue
        for fill_dir in heading.steps:
            if ctx.claim(here.add(fill_dir)):
                break
        return ctx.commit(direction, Strategy.GREEDY, heading.name)

    ctx.trace.failed(Strategy.GREEDY, f"{heading.name}:blocked")
    return False
