"""Bookkeeping shared by the search algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

from wordladder.types.base import C, N, SearchState

#: Successor function: node -> iterable of (successor, move cost).
SuccessorsFunc = Callable[[N], Iterable[Tuple[N, C]]]

#: Heuristic function: node -> admissible estimate of the remaining cost.
HeuristicFunc = Callable[[N], C]

#: Goal test.
GoalFunc = Callable[[N], bool]

#: Outcome of a search: (nodes from start to goal, total cost), or None.
SearchOutcome = Optional[Tuple[List[N], C]]


@dataclass
class SearchStats:
    """Progress counters of a single search invocation.

    Attributes:
        state: Current lifecycle state.
        expanded: Number of nodes whose successors were generated.
        rounds: Thresholds tried by IDA* and fringe search; 1 for A*.
        max_expansions: Expansion budget, or None for unbounded.
    """

    state: SearchState = SearchState.INITIALIZED
    expanded: int = 0
    rounds: int = 0
    max_expansions: Optional[int] = None

    def start(self) -> None:
        self.state = SearchState.EXPLORING
        self.expanded = 0
        self.rounds = 0

    def record_expansion(self) -> bool:
        """Count one expansion.

        Returns:
            False once the budget is spent, in which case the state becomes
            ``BUDGET_EXCEEDED`` and the expansion must not happen.
        """
        if self.max_expansions is not None and self.expanded >= self.max_expansions:
            self.state = SearchState.BUDGET_EXCEEDED
            return False
        self.expanded += 1
        return True

    def finish(self, found: bool) -> None:
        if found:
            self.state = SearchState.FOUND
        elif self.state is not SearchState.BUDGET_EXCEEDED:
            self.state = SearchState.EXHAUSTED


def resolve_path(parents: Mapping[N, Optional[N]], node: N) -> List[N]:
    """Walk ``parents`` back from ``node`` and return the path from the root.

    The root is the node whose parent is None.
    """
    path = [node]
    parent = parents[node]
    while parent is not None:
        path.append(parent)
        parent = parents[parent]
    path.reverse()
    return path
