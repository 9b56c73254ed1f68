"""Base enums and protocols shared by the search algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Protocol, TypeVar


class CostLike(Protocol):
    """Capabilities a path cost must offer to the search algorithms.

    Costs are summed along a path and totally ordered. The search functions
    receive the additive identity explicitly as ``zero``.
    """

    def __add__(self: "C", other: "C") -> "C": ...

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...


#: Generic path cost accepted by the search algorithms.
C = TypeVar("C", bound=CostLike)

#: Generic graph node.
N = TypeVar("N")


class Algorithm(IntEnum):
    """Path-finding algorithm used to search the word graph."""

    #: Best-first search ordered by accumulated cost plus heuristic.
    ASTAR = 1
    #: Iterative-deepening A*, depth-first probes under a rising threshold.
    IDASTAR = 2
    #: Fringe search with ``now``/``later`` lists.
    FRINGE = 3
    #: Uniform-cost search (A* with a zero heuristic).
    DIJKSTRA = 4

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_string(cls, value: str) -> "Algorithm":
        """Parse a case-insensitive algorithm name.

        Args:
            value: Name such as ``"astar"`` or ``"DIJKSTRA"``.

        Returns:
            The matching Algorithm member.

        Raises:
            ValueError: If the name matches no member.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            valid = ", ".join(str(e) for e in cls)
            raise ValueError(
                f"Invalid algorithm '{value}'. Valid values are: {valid}"
            ) from None


class SearchState(IntEnum):
    """Lifecycle of a single search invocation."""

    INITIALIZED = 1
    EXPLORING = 2
    FOUND = 3
    #: Every reachable node was examined without reaching the goal.
    EXHAUSTED = 4
    #: Stopped after ``max_expansions`` expansions.
    BUDGET_EXCEEDED = 5

    @property
    def terminal(self) -> bool:
        return self in (
            SearchState.FOUND,
            SearchState.EXHAUSTED,
            SearchState.BUDGET_EXCEEDED,
        )
