"""Iterative-deepening A* (IDA*).

Runs depth-first probes from the start node, cutting every branch whose
``g + h`` exceeds the current threshold. The threshold starts at ``h(start)``
and is raised to the smallest ``f`` that overflowed it until a goal is hit or
no branch overflowed at all. Only the current path is kept in memory; nodes
already on it are not revisited.

Probes walk an explicit stack of frames rather than recursing, so ladder
length is not bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from operator import itemgetter
from typing import Dict, Iterator, List, Optional, Set, Tuple

from wordladder.algorithms.common import (
    GoalFunc,
    HeuristicFunc,
    SearchOutcome,
    SearchStats,
    SuccessorsFunc,
)
from wordladder.logging import get_logger
from wordladder.types.base import C, N

logger = get_logger(__name__)


class _BudgetExceeded(Exception):
    """Unwinds a probe once the expansion budget is spent."""


class _Frame:
    """Children still to visit below one path node, and the smallest
    overflowing ``f`` seen under it so far."""

    __slots__ = ("children", "minimum")

    def __init__(self, children: Iterator[Tuple[C, C, N]]) -> None:
        self.children = children
        self.minimum: Optional[C] = None

    def offer(self, value: Optional[C]) -> None:
        if value is not None and (self.minimum is None or value < self.minimum):
            self.minimum = value


def idastar(
    start: N,
    successors: SuccessorsFunc,
    heuristic: HeuristicFunc,
    is_goal: GoalFunc,
    zero: C,
    stats: Optional[SearchStats] = None,
) -> SearchOutcome:
    """Find a minimum-cost path from ``start`` to a goal node with IDA*.

    Takes the same arguments and returns the same outcome as ``astar``.
    """
    stats = stats if stats is not None else SearchStats()
    stats.start()

    path: List[N] = [start]
    on_path: Set[N] = {start}

    def expand(node: N, cost: C) -> _Frame:
        if not stats.record_expansion():
            raise _BudgetExceeded
        # Repeated successors keep their first position and cheapest cost.
        position: Dict[N, int] = {}
        children: List[Tuple[C, C, N]] = []
        for successor, move_cost in successors(node):
            if successor in on_path:
                continue
            child_cost = cost + move_cost
            index = position.get(successor)
            if index is not None and not child_cost < children[index][1]:
                continue
            entry = (child_cost + heuristic(successor), child_cost, successor)
            if index is None:
                position[successor] = len(children)
                children.append(entry)
            else:
                children[index] = entry
        # Stable sort: equal estimates keep successor order.
        children.sort(key=itemgetter(0))
        return _Frame(iter(children))

    def probe(threshold: C) -> Tuple[bool, Optional[C]]:
        # Returns (True, cost) on a goal, else (False, smallest overflowing f),
        # the latter None when nothing exceeded the threshold.
        estimate = zero + heuristic(start)
        if threshold < estimate:
            return False, estimate
        if is_goal(start):
            return True, zero

        frames = [expand(start, zero)]
        while frames:
            frame = frames[-1]
            entry = next(frame.children, None)
            if entry is None:
                frames.pop()
                if not frames:
                    return False, frame.minimum
                on_path.discard(path.pop())
                frames[-1].offer(frame.minimum)
                continue

            estimate, child_cost, child = entry
            if threshold < estimate:
                frame.offer(estimate)
                continue
            path.append(child)
            if is_goal(child):
                return True, child_cost
            on_path.add(child)
            frames.append(expand(child, child_cost))
        return False, None

    threshold = zero + heuristic(start)
    try:
        while True:
            stats.rounds += 1
            logger.debug("IDA* round %d, threshold %s", stats.rounds, threshold)
            found, value = probe(threshold)
            if found:
                stats.finish(found=True)
                logger.debug(
                    "IDA* reached goal after %d expansions in %d rounds",
                    stats.expanded,
                    stats.rounds,
                )
                return list(path), value
            if value is None:
                break
            threshold = value
    except _BudgetExceeded:
        logger.debug("IDA* spent its budget of %d expansions", stats.max_expansions)

    stats.finish(found=False)
    logger.debug(
        "IDA* stopped (%s) after %d expansions", stats.state.name, stats.expanded
    )
    return None
