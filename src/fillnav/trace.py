"""Tracing for fillnav planning calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from fillnav.geometry import Direction, Position
from fillnav.types import Strategy


@dataclass
class NavAttempt:
    """One candidate tried during a planning call."""

    strategy: Strategy
    detail: str
    ok: bool


@dataclass
class NavTrace:
    """Collects what the planner tried during a single dispatcher call."""

    target: Optional[Position] = None
    attempts: list[NavAttempt] = field(default_factory=list)
    bucket: Optional[tuple[int, int]] = None
    waypoint: Optional[Position] = None  # Deflected waypoint picked by the wall rider
    claimed: Optional[Position] = None
    moved: Optional[Direction] = None
    winner: Optional[Strategy] = None
    reason: str = ""  # Why the call stopped before planning, if it did

    def record(self, strategy: Strategy, detail: str, ok: bool) -> None:
        self.attempts.append(NavAttempt(strategy=strategy, detail=detail, ok=ok))

    def failed(self, strategy: Strategy, detail: str) -> None:
        self.record(strategy, detail, False)

    @property
    def committed(self) -> bool:
        return self.moved is not None

    def format_line(
        self,
        step: int,
        agent_id: int,
        pos: tuple[int, int],
        cooldown: int,
        level: int,
    ) -> str:
        """Format the trace as a single line."""
        prefix = f"[t={step} a={agent_id} ({pos[0]},{pos[1]}) cd={cooldown}]"
        target = f"{self.target}" if self.target is not None else "-"
        if self.moved is not None:
            winner = self.winner.value if self.winner else "?"
            outcome = f"{winner}:{self.moved.short_name}"
        else:
            outcome = f"stay({self.reason})" if self.reason else "stay(exhausted)"
        claim = f" fill={self.claimed}" if self.claimed is not None else ""

        if level == 1:
            return f"{prefix} → {target} → {outcome}{claim}"

        extras = ""
        if self.bucket is not None:
            extras += f" bucket={self.bucket}"
        if self.waypoint is not None:
            extras += f" waypoint={self.waypoint}"

        if level == 2:
            failed = " ".join(f"x:{a.strategy.value}({a.detail})" for a in self.attempts if not a.ok)
            tried = f" {failed}" if failed else ""
            return f"{prefix} → {target}{extras}{tried} → {outcome}{claim}"

        # Level 3: every attempt in order
        all_attempts = " ".join(f"{'ok' if a.ok else 'x'}:{a.strategy.value}({a.detail})" for a in self.attempts)
        return f"{prefix} → {target}{extras} [{len(self.attempts)}] {all_attempts} → {outcome}{claim}"
