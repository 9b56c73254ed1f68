"""Implicit word graph searched by the path-finding algorithms.

Every candidate word is a successor of every word, weighted by ``step_cost``.
The graph is never materialized: successors are computed on demand.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from wordladder.algorithms.edit_distance import edit_distance, step_cost
from wordladder.model.cost import UINT8, CostScalar, PathMultiCost


class WordGraph:
    """Successor, heuristic and goal functions over a fixed candidate list.

    The target is always the first successor, ahead of the supplied
    candidates, so a ladder can end on it even when the dictionary lacks it.
    Candidates keep their order and duplicates.

    Attributes:
        target: Goal word.
        words: Target followed by the candidates.
        scalar: Bucket scalar of every cost the graph produces.
    """

    def __init__(
        self,
        target: str,
        candidates: Sequence[str],
        scalar: CostScalar = UINT8,
    ) -> None:
        self.target = target
        self.words: Tuple[str, ...] = (target, *candidates)
        self.scalar = scalar
        self._heuristics: Dict[str, PathMultiCost] = {}

    @property
    def zero(self) -> PathMultiCost:
        return PathMultiCost.zero(self.scalar)

    def successors(self, word: str) -> List[Tuple[str, PathMultiCost]]:
        """Return ``(candidate, step_cost(word, candidate))`` for every word.

        Includes ``word`` itself (at minimum cost) when it is a candidate.
        """
        return [(other, step_cost(word, other, self.scalar)) for other in self.words]

    def heuristic(self, word: str) -> PathMultiCost:
        """Return the edit distance from ``word`` to the target (memoized)."""
        estimate = self._heuristics.get(word)
        if estimate is None:
            estimate = edit_distance(word, self.target, self.scalar)
            self._heuristics[word] = estimate
        return estimate

    def is_goal(self, word: str) -> bool:
        return word == self.target

    def __len__(self) -> int:
        return len(self.words)

    def __repr__(self) -> str:
        return f"WordGraph(target={self.target!r}, words={len(self.words)})"
