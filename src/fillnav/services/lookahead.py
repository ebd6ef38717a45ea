"""
Two-step lookahead selector.

Picks the two-step offset closest to the target and runs that bucket's
fallback chain until one entry commits a step.
"""

from __future__ import annotations

from fillnav.geometry import Position
from fillnav.services.greedy import greedy_move
from fillnav.services.scoot import scoot_toward
from fillnav.services.tables import BUCKETS, ChainKind, ChainStep, OffsetBucket
from fillnav.services.wall_rider import wall_rider
from fillnav.services.world import PlanContext
from fillnav.types import ScootMode, Strategy


def select_bucket(here: Position, target: Position) -> OffsetBucket:
    """Closest bucket to the target; ties go to the earliest (clockwise from North)."""
    best = BUCKETS[0]
    best_dist = target.distance_squared_to(here.translate(*best.offset))
    for bucket in BUCKETS[1:]:
        dist = target.distance_squared_to(here.translate(*bucket.offset))
        if dist < best_dist:
            best, best_dist = bucket, dist
    return best


def run_chain_step(ctx: PlanContext, step: ChainStep, target: Position, origin: Position) -> bool:
    """Run one chain entry. Probe offsets are relative to where the chain started."""
    if step.kind is ChainKind.GREEDY:
        assert step.heading is not None
        return greedy_move(ctx, step.heading)
    if step.kind is ChainKind.WALL_RIDER:
        return wall_rider(ctx, target, ctx.config.chain_wall_threshold)
    assert step.offset is not None
    return scoot_toward(ctx, origin.translate(*step.offset), ScootMode.BOUNDED_PROBE, label=step.describe())


def look_two_move(ctx: PlanContext, target: Position) -> bool:
    here = ctx.here
    bucket = select_bucket(here, target)
    ctx.trace.bucket = bucket.offset
    for step in bucket.chain:
        if run_chain_step(ctx, step, target, here):
            return True
    ctx.trace.failed(Strategy.LOOKAHEAD, f"{bucket.name}:exhausted")
    return False
