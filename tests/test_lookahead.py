"""Tests for the two-step lookahead selector."""

from __future__ import annotations

import pytest

from fillnav.geometry import Direction, Position
from fillnav.services.lookahead import look_two_move, select_bucket
from fillnav.sim.grid_world import GridWorld
from fillnav.types import Strategy

HERE = Position(5, 5)
FAR_NORTH = Position(5, 10)


class TestSelectBucket:
    @pytest.mark.parametrize(
        "target,expected",
        [
            ((0, 5), "N"),
            ((5, 0), "E"),
            ((9, 9), "NE"),
            ((1, 6), "NNE"),
            ((-3, -1), "WSW"),
            ((0, -1), "S"),
        ],
    )
    def test_closest_offset(self, target, expected):
        assert select_bucket(Position(0, 0), Position(*target)).name == expected

    def test_tie_goes_to_earliest_bucket(self):
        # (1, 2) and (2, 1) are both one step from (1, 1)
        assert select_bucket(Position(0, 0), Position(1, 1)).name == "NNE"
        # (-1, -2) and (-2, -1) are both one step from (-1, -1)
        assert select_bucket(Position(0, 0), Position(-1, -1)).name == "SSW"

    def test_four_way_tie_goes_to_north(self):
        assert select_bucket(Position(3, 3), Position(3, 3)).name == "N"


class TestChain:
    def test_open_field_uses_own_heading(self, make_context):
        world = GridWorld(12, 11, HERE)
        ctx = make_context(world)
        assert look_two_move(ctx, FAR_NORTH)
        assert ctx.trace.bucket == (0, 2)
        assert ctx.trace.moved == Direction.NORTH
        assert ctx.trace.winner == Strategy.GREEDY

    def test_falls_through_to_probe(self, make_context):
        # A wall two cells north hides every leading look cell; the probe still steps north
        world = GridWorld(12, 11, HERE, walls=[(4, 7), (5, 7), (6, 7)])
        ctx = make_context(world)
        assert look_two_move(ctx, FAR_NORTH)
        assert ctx.trace.winner == Strategy.PROBE
        assert world.position == Position(5, 6)
        details = [a.detail for a in ctx.trace.attempts]
        assert details == [
            "N:look(5,7)",
            "NNE:look(6,7)",
            "NNW:look(4,7)",
            "walls=0/1",
            "probe(0, 2):N",
        ]

    def test_trailing_heading_can_step_away(self, make_context):
        # Everything but south is walled; the chain ends up on the SSE heading
        walls = [HERE.add(d) for d in Direction if d not in (Direction.SOUTH, Direction.CENTER)]
        world = GridWorld(12, 11, HERE, walls=walls)
        ctx = make_context(world)
        assert look_two_move(ctx, FAR_NORTH)
        assert ctx.trace.moved == Direction.SOUTH
        assert ctx.trace.attempts[-1].detail == "SSE:S"

    def test_wall_rider_link_uses_threshold_one(self, make_context):
        # One wall NE: its push (SE) does not fight an east-ish goal
        world = GridWorld(
            12,
            11,
            HERE,
            walls=[HERE.add(Direction.NORTHEAST), (7, 5), (7, 6), (7, 4)],
        )
        ctx = make_context(world)
        assert look_two_move(ctx, Position(10, 5))
        assert ctx.trace.winner == Strategy.WALL_RIDER
        assert ctx.trace.waypoint == Position(6, 4)

    def test_exhausted(self, boxed_world, make_context):
        ctx = make_context(boxed_world)
        assert not look_two_move(ctx, Position(2, 4))
        assert boxed_world.log.move_requests == []
        last = ctx.trace.attempts[-1]
        assert last.strategy == Strategy.LOOKAHEAD
        assert last.detail == "N:exhausted"

    def test_navigator_entry_point(self, make_navigator):
        world = GridWorld(12, 11, HERE)
        nav = make_navigator(world)
        assert nav.look_two_move((9, 5))
        assert world.position == Position(6, 5)
        assert not nav.look_two_move(None)
