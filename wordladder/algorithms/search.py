"""Entry point selecting one of the four search algorithms.

All algorithms share the signature
``(start, successors, heuristic, is_goal, zero, stats) -> outcome`` through
``SEARCH_FUNCTIONS``, so any of them can be swapped in by an ``Algorithm``
value.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from wordladder.algorithms.astar import astar
from wordladder.algorithms.common import (
    GoalFunc,
    HeuristicFunc,
    SearchOutcome,
    SearchStats,
    SuccessorsFunc,
)
from wordladder.algorithms.dijkstra import dijkstra
from wordladder.algorithms.fringe import fringe
from wordladder.algorithms.graph import WordGraph
from wordladder.algorithms.idastar import idastar
from wordladder.config import DEFAULT_CONFIG, SearchConfig
from wordladder.logging import get_logger
from wordladder.model.path import LadderPath
from wordladder.types.base import Algorithm, C, N

logger = get_logger(__name__)

SearchFunc = Callable[..., SearchOutcome]


def _uniform_cost(
    start: N,
    successors: SuccessorsFunc,
    heuristic: HeuristicFunc,
    is_goal: GoalFunc,
    zero: C,
    stats: Optional[SearchStats] = None,
) -> SearchOutcome:
    # Dijkstra ignores the heuristic.
    return dijkstra(start, successors, is_goal, zero, stats)


SEARCH_FUNCTIONS: Dict[Algorithm, SearchFunc] = {
    Algorithm.ASTAR: astar,
    Algorithm.IDASTAR: idastar,
    Algorithm.FRINGE: fringe,
    Algorithm.DIJKSTRA: _uniform_cost,
}


def find_shortest_path(
    start: str,
    target: str,
    candidates: Sequence[str],
    algorithm: Optional[Algorithm] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[LadderPath]:
    """Find the cheapest word ladder from ``start`` to ``target``.

    Args:
        start: First word of the ladder.
        target: Last word of the ladder. Always usable as a step, even when
            missing from ``candidates``.
        candidates: Words allowed as intermediate steps.
        algorithm: Search algorithm. Defaults to ``config.algorithm``.
        config: Search settings. Defaults to ``DEFAULT_CONFIG``.

    Returns:
        The ladder, or None when no ladder exists (or the expansion budget
        ran out before one was found).
    """
    config = config if config is not None else DEFAULT_CONFIG
    algorithm = algorithm if algorithm is not None else config.algorithm
    search = SEARCH_FUNCTIONS[algorithm]

    graph = WordGraph(target, candidates, config.scalar())
    stats = SearchStats(max_expansions=config.max_expansions)
    outcome = search(
        start, graph.successors, graph.heuristic, graph.is_goal, graph.zero, stats
    )
    logger.debug(
        "%s search %r -> %r over %d words: %s, %d expansions",
        algorithm,
        start,
        target,
        len(graph),
        stats.state.name,
        stats.expanded,
    )
    if outcome is None:
        return None

    words, cost = outcome
    return LadderPath(
        words=tuple(words), cost=cost, algorithm=algorithm, expanded=stats.expanded
    )
