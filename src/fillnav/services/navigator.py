"""
Navigator service for fillnav.

Unified movement dispatcher: picks between the wall rider, the two-step
lookahead selector and the scoot primitive, and commits at most one step
(plus at most one fill) per call. Nothing is remembered between calls.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Union

from fillnav.config import NavigatorConfig
from fillnav.debug_logger import NavDebugLogger
from fillnav.geometry import Direction, Position
from fillnav.services.greedy import greedy_move
from fillnav.services.lookahead import look_two_move
from fillnav.services.scoot import scoot, scoot_toward
from fillnav.services.tables import HEADINGS_BY_NAME, Heading
from fillnav.services.wall_rider import wall_rider
from fillnav.services.world import NavWorld, PlanContext
from fillnav.trace import NavTrace
from fillnav.types import ScootMode

PositionLike = Union[Position, tuple[int, int]]


class Stage(Enum):
    """Dispatcher stages, tried in order until one commits."""

    WALL_RIDER = "wall_rider"
    LOOKAHEAD = "lookahead"
    SCOOT = "scoot"


FAR_STAGES = (Stage.WALL_RIDER, Stage.LOOKAHEAD, Stage.SCOOT)
NEAR_STAGES = (Stage.SCOOT,)


def _as_position(pos: Optional[PositionLike]) -> Optional[Position]:
    if pos is None:
        return None
    return pos if isinstance(pos, Position) else Position(pos[0], pos[1])


class Navigator:
    """Per-agent local movement planner over a NavWorld."""

    def __init__(
        self,
        world: NavWorld,
        config: Optional[NavigatorConfig] = None,
        agent_id: int = 0,
        debug_logger: Optional[NavDebugLogger] = None,
    ) -> None:
        self._world = world
        self.config = config or NavigatorConfig()
        self.agent_id = agent_id
        if debug_logger is None and self.config.debug > 0:
            debug_logger = NavDebugLogger(level=self.config.debug)
        self.debug_logger = debug_logger
        self.last_trace: Optional[NavTrace] = None
        self._calls = 0

    # === Entry points for behaviors ===

    def attempt_move_to(self, target: Optional[PositionLike], wall_threshold: Optional[int] = None) -> bool:
        """Take one step toward target. False if nothing was committed."""
        threshold = self.config.wall_threshold if wall_threshold is None else wall_threshold
        return self.move_unified(target, threshold)

    def attempt_flee(self, anchor: Optional[PositionLike], wall_threshold: Optional[int] = None) -> bool:
        """Step away from anchor, aiming at the anchor-to-self ray extended past the agent."""
        anchor_pos = _as_position(anchor)
        if anchor_pos is None:
            return self.attempt_move_to(None, wall_threshold)
        here = self._world.position
        dx, dy = here.offset_to(anchor_pos)
        scale = self.config.flee_scale
        return self.attempt_move_to(here.translate(-scale * dx, -scale * dy), wall_threshold)

    def move_unified(self, target: Optional[PositionLike], wall_threshold: int) -> bool:
        target_pos = _as_position(target)
        ctx = self._new_context(target_pos)
        committed = self._dispatch(ctx, target_pos, wall_threshold)
        self._finish(ctx)
        return committed

    # === Single strategies (one planning call each) ===

    def wall_rider(self, target: Optional[PositionLike], threshold: int) -> bool:
        target_pos = _as_position(target)
        return self._run_single(target_pos, lambda ctx: wall_rider(ctx, target_pos, threshold))

    def look_two_move(self, target: Optional[PositionLike]) -> bool:
        target_pos = _as_position(target)
        return self._run_single(target_pos, lambda ctx: look_two_move(ctx, target_pos))

    def greedy_move(self, heading: Union[str, Heading]) -> bool:
        resolved = HEADINGS_BY_NAME[heading] if isinstance(heading, str) else heading
        ctx = self._new_context(None)
        committed = self._gate_open(ctx) and greedy_move(ctx, resolved)
        self._finish(ctx)
        return committed

    def scoot(self, primary: Direction, secondary: Direction, mode: ScootMode = ScootMode.EXPLORATORY) -> bool:
        ctx = self._new_context(None)
        committed = self._gate_open(ctx) and scoot(ctx, primary, secondary, mode)
        self._finish(ctx)
        return committed

    def scoot_toward(self, target: Optional[PositionLike], mode: ScootMode = ScootMode.EXPLORATORY) -> bool:
        target_pos = _as_position(target)
        ctx = self._new_context(target_pos)
        committed = target_pos is not None and self._gate_open(ctx) and scoot_toward(ctx, target_pos, mode)
        self._finish(ctx)
        return committed

    # === Internals ===

    def _dispatch(self, ctx: PlanContext, target: Optional[Position], wall_threshold: int) -> bool:
        if target is None:
            ctx.trace.reason = "no-target"
            return False
        here = ctx.here
        if target == here:
            ctx.trace.reason = "at-target"
            return False
        if not self._gate_open(ctx):
            return False

        stages = FAR_STAGES if here.distance_squared_to(target) > self.config.near_distance_sq else NEAR_STAGES
        for stage in stages:
            if self._run_stage(ctx, stage, target, wall_threshold):
                return True
        return False

    def _run_stage(self, ctx: PlanContext, stage: Stage, target: Position, wall_threshold: int) -> bool:
        if stage is Stage.WALL_RIDER:
            return wall_rider(ctx, target, wall_threshold)
        if stage is Stage.LOOKAHEAD:
            return look_two_move(ctx, target)
        return scoot_toward(ctx, target, ScootMode.EXPLORATORY)

    def _run_single(self, target: Optional[Position], run: Callable[[PlanContext], bool]) -> bool:
        ctx = self._new_context(target)
        committed = False
        if target is None:
            ctx.trace.reason = "no-target"
        elif target == ctx.here:
            ctx.trace.reason = "at-target"
        elif self._gate_open(ctx):
            committed = run(ctx)
        self._finish(ctx)
        return committed

    def _gate_open(self, ctx: PlanContext) -> bool:
        if self._world.movement_cooldown >= self.config.cooldown_gate:
            ctx.trace.reason = "cooldown"
            return False
        return True

    def _new_context(self, target: Optional[Position]) -> PlanContext:
        self._calls += 1
        return PlanContext(world=self._world, config=self.config, trace=NavTrace(target=target))

    def _finish(self, ctx: PlanContext) -> None:
        self.last_trace = ctx.trace
        origin = ctx.origin if ctx.origin is not None else ctx.here
        if self.config.traces_agent(self.agent_id):
            line = ctx.trace.format_line(
                step=self._calls,
                agent_id=self.agent_id,
                pos=origin,
                cooldown=ctx.start_cooldown,
                level=self.config.trace_level,
            )
            print(f"[fillnav] {line}")
        if self.debug_logger is not None:
            self.debug_logger.record_call(self.agent_id, self._calls, origin, ctx.trace)
