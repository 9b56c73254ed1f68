"""A* best-first search.

The open set is a binary heap keyed by ``g + h``. Ties are broken by push
order, so among equally promising nodes the one discovered first is expanded
first. Nodes are re-opened whenever a cheaper route to them appears, which
keeps the search optimal for any admissible heuristic.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple

from wordladder.algorithms.common import (
    GoalFunc,
    HeuristicFunc,
    SearchOutcome,
    SearchStats,
    SuccessorsFunc,
    resolve_path,
)
from wordladder.logging import get_logger
from wordladder.types.base import C, N

logger = get_logger(__name__)


def astar(
    start: N,
    successors: SuccessorsFunc,
    heuristic: HeuristicFunc,
    is_goal: GoalFunc,
    zero: C,
    stats: Optional[SearchStats] = None,
) -> SearchOutcome:
    """Find a minimum-cost path from ``start`` to a goal node.

    Args:
        start: Initial node.
        successors: Returns ``(successor, move_cost)`` pairs for a node.
        heuristic: Admissible estimate of the cost left to reach a goal.
        is_goal: Goal test.
        zero: Additive identity of the cost type.
        stats: Optional counters, updated in place. Its ``max_expansions``
            bounds the number of expansions.

    Returns:
        ``(path, cost)`` with ``path`` running from ``start`` to the goal, or
        None when no goal is reachable (or the budget ran out).
    """
    stats = stats if stats is not None else SearchStats()
    stats.start()
    stats.rounds = 1

    tie = count()
    best_cost: Dict[N, C] = {start: zero}
    parents: Dict[N, Optional[N]] = {start: None}
    open_heap: List[Tuple[C, int, C, N]] = [
        (zero + heuristic(start), next(tie), zero, start)
    ]

    while open_heap:
        _, _, cost, node = heappop(open_heap)
        if best_cost[node] < cost:
            # Stale entry, a cheaper route to node was pushed later.
            continue

        if is_goal(node):
            stats.finish(found=True)
            logger.debug(
                "A* reached goal after %d expansions, cost %s", stats.expanded, cost
            )
            return resolve_path(parents, node), cost

        if not stats.record_expansion():
            break

        for successor, move_cost in successors(node):
            new_cost = cost + move_cost
            known = best_cost.get(successor)
            if known is not None and not new_cost < known:
                continue
            best_cost[successor] = new_cost
            parents[successor] = node
            heappush(
                open_heap,
                (new_cost + heuristic(successor), next(tie), new_cost, successor),
            )

    stats.finish(found=False)
    logger.debug("A* stopped (%s) after %d expansions", stats.state.name, stats.expanded)
    return None
