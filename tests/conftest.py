"""Shared fixtures for fillnav tests.

Maps are ASCII with the first row northernmost; see ``fillnav.sim.grid_world``
for the legend.
"""

from __future__ import annotations

from typing import Callable

import pytest

from fillnav.config import NavigatorConfig
from fillnav.services.navigator import Navigator
from fillnav.services.world import PlanContext
from fillnav.sim.grid_world import GridWorld

# 8 wide, 8 tall, agent at (0, 0), target marker at (0, 5)
OPEN_CORNER_MAP = """
........
........
T.......
........
........
........
........
@.......
"""

# Agent boxed in on all 8 sides
BOXED_MAP = """
.....
.###.
.#@#.
.###.
.....
"""


@pytest.fixture
def make_world() -> Callable[..., GridWorld]:
    def _make(text: str, **kwargs) -> GridWorld:
        return GridWorld.from_ascii(text, **kwargs)

    return _make


@pytest.fixture
def open_world() -> GridWorld:
    """12x11 open field with the agent in the middle at (5, 5)."""
    return GridWorld(12, 11, (5, 5))


@pytest.fixture
def corner_world() -> GridWorld:
    return GridWorld.from_ascii(OPEN_CORNER_MAP)


@pytest.fixture
def boxed_world() -> GridWorld:
    return GridWorld.from_ascii(BOXED_MAP)


@pytest.fixture
def make_context() -> Callable[..., PlanContext]:
    def _make(world: GridWorld, **config_kwargs) -> PlanContext:
        return PlanContext(world=world, config=NavigatorConfig(**config_kwargs))

    return _make


@pytest.fixture
def make_navigator() -> Callable[..., Navigator]:
    def _make(world: GridWorld, **config_kwargs) -> Navigator:
        return Navigator(world, config=NavigatorConfig(**config_kwargs))

    return _make
