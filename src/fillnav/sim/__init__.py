"""Synthetic world and rollout loop for fillnav."""

from .grid_world import CellKind, GridWorld, WorldLog
from .rollout import RolloutResult, run_rollout

__all__ = ["CellKind", "GridWorld", "RolloutResult", "WorldLog", "run_rollout"]
