"""Uniform-cost (Dijkstra) search: A* with a zero heuristic."""

from __future__ import annotations

from typing import Optional

from wordladder.algorithms.astar import astar
from wordladder.algorithms.common import (
    GoalFunc,
    SearchOutcome,
    SearchStats,
    SuccessorsFunc,
)
from wordladder.types.base import C, N


def dijkstra(
    start: N,
    successors: SuccessorsFunc,
    is_goal: GoalFunc,
    zero: C,
    stats: Optional[SearchStats] = None,
) -> SearchOutcome:
    """Find a minimum-cost path without any heuristic guidance.

    Optimal regardless of heuristic quality, which makes it the reference the
    informed searches are checked against.
    """
    return astar(start, successors, lambda _node: zero, is_goal, zero, stats)
