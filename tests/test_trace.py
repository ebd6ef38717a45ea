"""Tests for NavTrace formatting and NavDebugLogger output."""

from __future__ import annotations

import io
import json

from fillnav.debug_logger import NavDebugLogger
from fillnav.geometry import Direction, Position
from fillnav.trace import NavTrace
from fillnav.types import Strategy


def _committed_trace() -> NavTrace:
    trace = NavTrace(target=Position(10, 5))
    trace.failed(Strategy.WALL_RIDER, "walls=1/3")
    trace.bucket = (2, 0)
    trace.failed(Strategy.GREEDY, "E:look(7,5)")
    trace.record(Strategy.GREEDY, "ESE:SE", True)
    trace.moved = Direction.SOUTHEAST
    trace.winner = Strategy.GREEDY
    trace.claimed = Position(6, 4)
    return trace


class TestFormatLine:
    PREFIX = "[t=3 a=1 (5,5) cd=0]"

    def _line(self, trace: NavTrace, level: int) -> str:
        return trace.format_line(step=3, agent_id=1, pos=(5, 5), cooldown=0, level=level)

    def test_level_1_shows_outcome(self):
        line = self._line(_committed_trace(), 1)
        assert line == f"{self.PREFIX} → (10,5) → greedy:SE fill=(6,4)"

    def test_level_2_lists_failures(self):
        line = self._line(_committed_trace(), 2)
        assert line == (
            f"{self.PREFIX} → (10,5) bucket=(2, 0) x:wall_rider(walls=1/3) x:greedy(E:look(7,5)) → greedy:SE fill=(6,4)"
        )

    def test_level_3_lists_everything(self):
        line = self._line(_committed_trace(), 3)
        assert "[3] x:wall_rider(walls=1/3) x:greedy(E:look(7,5)) ok:greedy(ESE:SE)" in line
        assert line.endswith("→ greedy:SE fill=(6,4)")

    def test_stay_with_reason(self):
        trace = NavTrace(target=None, reason="no-target")
        assert self._line(trace, 1) == f"{self.PREFIX} → - → stay(no-target)"

    def test_stay_exhausted(self):
        trace = NavTrace(target=Position(1, 1))
        trace.failed(Strategy.SCOOT, "N")
        assert self._line(trace, 1).endswith("→ stay(exhausted)")
        assert not trace.committed

    def test_waypoint_shown_from_level_2(self):
        trace = NavTrace(target=Position(10, 5), waypoint=Position(7, 3))
        assert "waypoint=(7,3)" in self._line(trace, 2)
        assert "waypoint" not in self._line(trace, 1)


class TestDebugLogger:
    def test_level_1_summary_line(self):
        out = io.StringIO()
        logger = NavDebugLogger(level=1, output=out)
        logger.record_call(0, 5, (5, 5), _committed_trace())
        logger.record_call(1, 5, (2, 2), NavTrace(target=Position(2, 4)))
        logger.flush_tick()
        assert out.getvalue() == "[fillnav:debug] t=5 calls=2 moved=1 filled=1\n"

    def test_empty_tick_is_silent(self):
        out = io.StringIO()
        NavDebugLogger(output=out).flush_tick()
        assert out.getvalue() == ""

    def test_counters_and_summary(self):
        out = io.StringIO()
        logger = NavDebugLogger(output=out)
        logger.record_call(0, 1, (5, 5), _committed_trace())
        logger.record_call(0, 2, (6, 4), NavTrace(target=Position(10, 5)))
        logger.record_call(0, 3, (6, 4), NavTrace(target=None, reason="no-target"))
        assert logger.summary() == {
            "total_steps": 3,
            "calls": 3,
            "moves": 1,
            "claims": 1,
            "exhausted": 1,
            "wins": {"greedy": 1},
        }

        logger.flush_summary()
        prefix, payload = out.getvalue().strip().split(" ", 1)
        assert prefix == "[fillnav:debug:summary]"
        assert json.loads(payload)["calls"] == 3

    def test_reset(self):
        logger = NavDebugLogger(output=io.StringIO())
        logger.record_call(0, 1, (5, 5), _committed_trace())
        logger.reset()
        assert logger.summary()["calls"] == 0
        assert logger.wins == {}
