"""Fringe search.

Keeps two lists instead of a sorted open set. Nodes in ``now`` are examined
in order: those whose ``g + h`` exceeds the current limit move to ``later``,
the others are expanded and their improved successors go to the head of
``now``. When ``now`` runs dry the lists swap and the limit rises to the
smallest deferred ``f``.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Optional

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


def fringe(
    start: N,
    successors: SuccessorsFunc,
    heuristic: HeuristicFunc,
    is_goal: GoalFunc,
    zero: C,
    stats: Optional[SearchStats] = None,
) -> SearchOutcome:
    """Find a minimum-cost path from ``start`` to a goal node with fringe search.

    Takes the same arguments and returns the same outcome as ``astar``.
    """
    stats = stats if stats is not None else SearchStats()
    stats.start()

    estimates: Dict[N, C] = {}

    def estimate_of(node: N) -> C:
        if node not in estimates:
            estimates[node] = heuristic(node)
        return estimates[node]

    now: Deque[N] = deque([start])
    later: Deque[N] = deque()
    # Deque currently holding each queued node; a node is queued at most once.
    queued: Dict[N, Deque[N]] = {start: now}
    parents: Dict[N, Optional[N]] = {start: None}
    best_cost: Dict[N, C] = {start: zero}
    limit = zero + estimate_of(start)

    while now:
        stats.rounds += 1
        logger.debug("Fringe round %d, limit %s", stats.rounds, limit)
        next_limit: Optional[C] = None

        while now:
            node = now.popleft()
            del queued[node]
            cost = best_cost[node]
            estimate = cost + estimate_of(node)
            if limit < estimate:
                if next_limit is None or estimate < next_limit:
                    next_limit = estimate
                later.append(node)
                queued[node] = later
                continue

            if is_goal(node):
                stats.finish(found=True)
                logger.debug(
                    "Fringe reached goal after %d expansions in %d rounds",
                    stats.expanded,
                    stats.rounds,
                )
                return resolve_path(parents, node), cost

            if not stats.record_expansion():
                stats.finish(found=False)
                return None

            # Ordered set: first improvement fixes the position.
            improved: Dict[N, None] = {}
            for successor, move_cost in successors(node):
                new_cost = cost + move_cost
                known = best_cost.get(successor)
                if known is not None and not new_cost < known:
                    continue
                best_cost[successor] = new_cost
                parents[successor] = node
                holder = queued.pop(successor, None)
                if holder is not None:
                    holder.remove(successor)
                improved[successor] = None
            # Head of `now`, first successor first.
            now.extendleft(reversed(list(improved)))
            for successor in improved:
                queued[successor] = now

        now, later = later, now
        if next_limit is not None:
            limit = next_limit

    stats.finish(found=False)
    logger.debug(
        "Fringe exhausted after %d expansions in %d rounds",
        stats.expanded,
        stats.rounds,
    )
    return None
