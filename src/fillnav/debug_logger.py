"""
Debug output for fillnav navigators.

Per-tick, structured debug lines for diagnosing why agents stall or detour.

Verbosity levels (set via URI param ``fillnav?debug=0/1/2``):
    0: disabled (default)
    1: per-tick summary: calls, committed moves, claims
    2: full detail: per-agent position/target/strategy/direction

Lines are prefixed with ``[fillnav:debug]`` and go to stderr so they stay
separate from the ``[fillnav]`` trace lines on stdout.
"""

from __future__ import annotations

import json
import sys
from collections import Counter
from dataclasses import dataclass
from typing import Any, Optional

from fillnav.trace import NavTrace

# ---------------------------------------------------------------------------
# Per-call record
# ---------------------------------------------------------------------------


@dataclass
class NavCallRecord:
    """Snapshot of one dispatcher call."""

    agent_id: int
    position: tuple[int, int]
    target: Optional[tuple[int, int]]
    strategy: str  # Winning strategy, or "-" when nothing was committed
    direction: str
    claimed: bool
    attempts: int


# ---------------------------------------------------------------------------
# NavDebugLogger
# ---------------------------------------------------------------------------


class NavDebugLogger:
    """Collects navigator calls and emits debug output each tick.

    ``Navigator`` calls :meth:`record_call` after every dispatcher call; the
    turn loop calls :meth:`flush_tick` once all agents have moved.

    Parameters
    ----------
    level : int
        Verbosity level (1 or 2).
    output : file-like, optional
        Where to write output. Defaults to ``sys.stderr``.
    """

    PREFIX = "[fillnav:debug]"
    SUMMARY_PREFIX = "[fillnav:debug:summary]"

    def __init__(self, level: int = 1, output: Any = None) -> None:
        self.level = level
        self._out = output or sys.stderr

        # Per-tick accumulator, cleared on flush
        self._tick_records: list[NavCallRecord] = []
        self._current_step = 0

        # Episode counters
        self.calls = 0
        self.moves = 0
        self.claims = 0
        self.exhausted = 0
        self.wins: Counter[str] = Counter()

    def record_call(self, agent_id: int, step: int, position: tuple[int, int], trace: NavTrace) -> None:
        """Record the outcome of one dispatcher call."""
        self._current_step = max(self._current_step, step)
        self.calls += 1
        strategy = trace.winner.value if trace.winner is not None else "-"
        if trace.committed:
            self.moves += 1
            self.wins[strategy] += 1
        elif not trace.reason:
            self.exhausted += 1
        if trace.claimed is not None:
            self.claims += 1

        self._tick_records.append(
            NavCallRecord(
                agent_id=agent_id,
                position=(position[0], position[1]),
                target=(trace.target[0], trace.target[1]) if trace.target is not None else None,
                strategy=strategy,
                direction=trace.moved.short_name if trace.moved is not None else "-",
                claimed=trace.claimed is not None,
                attempts=len(trace.attempts),
            )
        )

    def flush_tick(self) -> None:
        """Emit debug output for the current tick and reset the accumulator."""
        if not self._tick_records:
            return

        moved = sum(1 for r in self._tick_records if r.direction != "-")
        claimed = sum(1 for r in self._tick_records if r.claimed)
        self._emit(f"t={self._current_step} calls={len(self._tick_records)} moved={moved} filled={claimed}")

        if self.level >= 2:
            for rec in sorted(self._tick_records, key=lambda r: r.agent_id):
                tgt = f" tgt={rec.target}" if rec.target else ""
                self._emit(
                    f"  a={rec.agent_id} ({rec.position[0]},{rec.position[1]}){tgt} "
                    f"via={rec.strategy} dir={rec.direction} tries={rec.attempts}"
                )

        self._tick_records.clear()

    def summary(self) -> dict[str, Any]:
        return {
            "total_steps": self._current_step,
            "calls": self.calls,
            "moves": self.moves,
            "claims": self.claims,
            "exhausted": self.exhausted,
            "wins": dict(sorted(self.wins.items())),
        }

    def flush_summary(self) -> None:
        """Emit a one-line JSON summary, prefixed with ``[fillnav:debug:summary]``."""
        line = json.dumps(self.summary(), separators=(",", ":"))
        print(f"{self.SUMMARY_PREFIX} {line}", file=self._out, flush=True)

    def reset(self) -> None:
        self._tick_records.clear()
        self._current_step = 0
        self.calls = 0
        self.moves = 0
        self.claims = 0
        self.exhausted = 0
        self.wins.clear()

    def _emit(self, msg: str) -> None:
        print(f"{self.PREFIX} {msg}", file=self._out, flush=True)
