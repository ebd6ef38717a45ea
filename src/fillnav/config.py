"""Navigator configuration.

Settings can be passed as keyword arguments or as URI query parameters::

    fillnav?wall_threshold=2&trace=1&trace_level=2&trace_agent=0
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from fillnav.types import (
    CHAIN_WALL_THRESHOLD,
    DEFAULT_WALL_THRESHOLD,
    FLEE_SCALE,
    MOVE_COOLDOWN_GATE,
    NEAR_DISTANCE_SQ,
)


class NavigatorConfig(BaseModel):
    """Tunables for one Navigator. Values are fixed for the navigator's lifetime."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    cooldown_gate: int = Field(default=MOVE_COOLDOWN_GATE, ge=1)
    wall_threshold: int = Field(default=DEFAULT_WALL_THRESHOLD, ge=0, le=8)
    chain_wall_threshold: int = Field(default=CHAIN_WALL_THRESHOLD, ge=0, le=8)
    near_distance_sq: int = Field(default=NEAR_DISTANCE_SQ, ge=0)
    flee_scale: int = Field(default=FLEE_SCALE, ge=1)

    # Tracing and debug output
    trace: bool = False
    trace_level: int = Field(default=1, ge=1, le=3)
    trace_agent: int = -1  # -1 traces every agent
    debug: int = Field(default=0, ge=0, le=2)

    @classmethod
    def from_uri(cls, uri: str) -> NavigatorConfig:
        """Build a config from the query part of a policy-style URI."""
        query = urlsplit(uri).query if "?" in uri else ""
        params = dict(parse_qsl(query, keep_blank_values=False))
        return cls.model_validate(params)

    def traces_agent(self, agent_id: int) -> bool:
        return self.trace and (self.trace_agent < 0 or self.trace_agent == agent_id)
