"""
Static tables for the lookahead planner.

HEADINGS: the 16 greedy headings. Each looks at the cell two steps out along
the heading and steps (and fills) along its listed directions, in order.

BUCKETS: the 16 two-step offsets on the boundary of the radius-2 square,
clockwise from (0, 2), each with the ordered fallback chain the lookahead
selector runs when that offset is the one closest to the target.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fillnav.geometry import Direction

N = Direction.NORTH
NE = Direction.NORTHEAST
E = Direction.EAST
SE = Direction.SOUTHEAST
S = Direction.SOUTH
SW = Direction.SOUTHWEST
W = Direction.WEST
NW = Direction.NORTHWEST


@dataclass(frozen=True)
class Heading:
    """A greedy heading: look-ahead offset plus ordered step directions."""

    name: str
    look: tuple[int, int]
    steps: tuple[Direction, ...]


# name, look offset, step (and fill) directions in priority order
HEADINGS: tuple[Heading, ...] = (
    Heading("N", (0, 2), (N, NE, NW)),
    Heading("NNE", (1, 2), (N, NE)),
    Heading("NE", (2, 2), (NE,)),
    Heading("ENE", (2, 1), (E, NE)),
    Heading("E", (2, 0), (E, NE, SE)),
    Heading("ESE", (2, -1), (E, SE)),
    Heading("SE", (2, -2), (SE,)),
    Heading("SSE", (1, -2), (S, SE)),
    Heading("S", (0, -2), (S, SW, SE)),
    Heading("SSW", (-1, -2), (S, SW)),
    Heading("SW", (-2, -2), (SW,)),
    Heading("WSW", (-2, -1), (W, SW)),
    Heading("W", (-2, 0), (W, SW, NW)),
    Heading("WNW", (-2, 1), (W, NW)),
    Heading("NW", (-2, 2), (NW,)),
    Heading("NNW", (-1, 2), (N, NW)),
)

HEADINGS_BY_NAME: dict[str, Heading] = {h.name: h for h in HEADINGS}


class ChainKind(Enum):
    GREEDY = "greedy"
    WALL_RIDER = "wall_rider"
    PROBE = "probe"


@dataclass(frozen=True)
class ChainStep:
    """One entry of a bucket's fallback chain."""

    kind: ChainKind
    heading: Optional[Heading] = None  # GREEDY
    offset: Optional[tuple[int, int]] = None  # PROBE, relative to the agent

    def describe(self) -> str:
        if self.kind is ChainKind.GREEDY and self.heading is not None:
            return self.heading.name
        if self.kind is ChainKind.PROBE and self.offset is not None:
            return f"probe{self.offset}"
        return self.kind.value


@dataclass(frozen=True)
class OffsetBucket:
    index: int
    offset: tuple[int, int]
    chain: tuple[ChainStep, ...]

    @property
    def name(self) -> str:
        return HEADINGS[self.index].name


# Per bucket: leading greedy headings, probe targets, trailing greedy headings.
# Leading: own heading, then its neighbors (even buckets clockwise first, odd
# buckets counter-clockwise first). Trailing: remaining headings alternating
# +k / -k around the bucket, so the far side comes last.
_CHAINS: tuple[tuple[tuple[str, ...], tuple[tuple[int, int], ...], tuple[str, ...]], ...] = (
    (
        ("N", "NNE", "NNW"),
        ((0, 2), (-1, 2), (1, 2)),
        ("NE", "NW", "ENE", "WNW", "E", "W", "ESE", "WSW", "SE", "SW", "SSE", "SSW", "S"),
    ),
    (
        ("NNE", "N", "NE"),
        ((1, 2), (0, 2), (2, 2)),
        ("ENE", "NNW", "E", "NW", "ESE", "WNW", "SE", "W", "SSE", "WSW", "S", "SW", "SSW"),
    ),
    (
        ("NE", "ENE", "NNE"),
        ((2, 2), (1, 2), (2, 1)),
        ("E", "N", "ESE", "NNW", "SE", "NW", "SSE", "WNW", "S", "W", "SSW", "WSW", "SW"),
    ),
    (
        ("ENE", "NE", "E"),
        ((2, 1), (2, 2), (2, 0)),
        ("ESE", "NNE", "SE", "N", "SSE", "NNW", "S", "NW", "SSW", "WNW", "SW", "W", "WSW"),
    ),
    (
        ("E", "ESE", "ENE"),
        ((2, 0), (2, 1), (2, -1)),
        ("SE", "NE", "SSE", "NNE", "S", "N", "SSW", "NNW", "SW", "NW", "WSW", "WNW", "W"),
    ),
    (
        ("ESE", "E", "SE"),
        ((2, -1), (2, 0), (2, -2)),
        ("SSE", "ENE", "S", "NE", "SSW", "NNE", "SW", "N", "WSW", "NNW", "W", "NW", "WNW"),
    ),
    (
        ("SE", "SSE", "ESE"),
        ((2, -2), (2, -1), (1, -2)),
        ("S", "E", "SSW", "ENE", "SW", "NE", "WSW", "NNE", "W", "N", "WNW", "NNW", "NW"),
    ),
    (
        ("SSE", "SE", "S"),
        ((1, -2), (2, -2), (0, -2)),
        ("SSW", "ESE", "SW", "E", "WSW", "ENE", "W", "NE", "WNW", "NNE", "NW", "N", "NNW"),
    ),
    (
        ("S", "SSW", "SSE"),
        ((0, -2), (1, -2), (-1, -2)),
        ("SW", "SE", "WSW", "ESE", "W", "E", "WNW", "ENE", "NW", "NE", "NNW", "NNE", "N"),
    ),
    (
        ("SSW", "S", "SW"),
        ((-1, -2), (0, -2), (-2, -2)),
        ("WSW", "SSE", "W", "SE", "WNW", "ESE", "NW", "E", "NNW", "ENE", "N", "NE", "NNE"),
    ),
    (
        ("SW", "WSW", "SSW"),
        ((-2, -2), (-2, -1), (-1, -2)),
        ("W", "S", "WNW", "SSE", "NW", "SE", "NNW", "ESE", "N", "E", "NNE", "ENE", "NE"),
    ),
    (
        ("WSW", "SW", "W"),
        ((-2, -1), (-2, 0), (-2, -2)),
        ("WNW", "SSW", "NW", "S", "NNW", "SSE", "N", "SE", "NNE", "ESE", "NE", "E", "ENE"),
    ),
    (
        ("W", "WNW", "WSW"),
        ((-2, 0), (-2, 1), (-2, -1)),
        ("NW", "SW", "NNW", "SSW", "N", "S", "NNE", "SSE", "NE", "SE", "ENE", "ESE", "E"),
    ),
    (
        ("WNW", "W", "NW"),
        ((-2, 1), (-2, 2), (-2, 0)),
        ("NNW", "WSW", "N", "SW", "NNE", "SSW", "NE", "S", "ENE", "SSE", "E", "SE", "ESE"),
    ),
    (
        ("NW", "NNW", "WNW"),
        ((-2, 2), (-1, 2), (-2, 1)),
        ("N", "W", "NNE", "WSW", "NE", "SW", "ENE", "SSW", "E", "S", "ESE", "SSE", "SE"),
    ),
    (
        ("NNW", "NW", "N"),
        ((-1, 2), (0, 2), (-2, 2)),
        ("NNE", "WNW", "NE", "W", "ENE", "WSW", "E", "SW", "ESE", "SSW", "SE", "S", "SSE"),
    ),
)


def _build_chain(leading: tuple[str, ...], probes: tuple[tuple[int, int], ...], trailing: tuple[str, ...]):
    chain: list[ChainStep] = [ChainStep(ChainKind.GREEDY, heading=HEADINGS_BY_NAME[n]) for n in leading]
    chain.append(ChainStep(ChainKind.WALL_RIDER))
    chain.extend(ChainStep(ChainKind.PROBE, offset=p) for p in probes)
    chain.extend(ChainStep(ChainKind.GREEDY, heading=HEADINGS_BY_NAME[n]) for n in trailing)
    return tuple(chain)


BUCKETS: tuple[OffsetBucket, ...] = tuple(
    OffsetBucket(index=i, offset=HEADINGS[i].look, chain=_build_chain(*row)) for i, row in enumerate(_CHAINS)
)
