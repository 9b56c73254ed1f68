"""Result of a word-ladder search.

``LadderPath`` holds the words from start to target together with the
accumulated ``PathMultiCost``. Paths order by cost so several results can be
sorted or compared directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Tuple

from wordladder.model.cost import PathMultiCost
from wordladder.types.base import Algorithm


@dataclass(frozen=True)
class LadderPath:
    """A word ladder found by one of the search algorithms.

    Attributes:
        words: Words from start to target, both included.
        cost: Accumulated step cost of the ladder.
        algorithm: Algorithm that produced the ladder.
        expanded: Number of node expansions performed by the search.
    """

    words: Tuple[str, ...]
    cost: PathMultiCost
    algorithm: Algorithm = field(default=Algorithm.ASTAR, compare=False)
    expanded: int = field(default=0, compare=False)

    def __getitem__(self, idx: int) -> str:
        return self.words[idx]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    @property
    def start(self) -> str:
        """Return the first word of the ladder."""
        return self.words[0]

    @property
    def target(self) -> str:
        """Return the last word of the ladder."""
        return self.words[-1]

    @property
    def hops(self) -> int:
        """Number of steps between consecutive words."""
        return len(self.words) - 1

    def __lt__(self, other: Any) -> bool:
        """Compare two ladders by cost.

        Returns:
            True if this ladder is cheaper. NotImplemented if ``other`` is
            not a LadderPath.
        """
        if not isinstance(other, LadderPath):
            return NotImplemented
        return self.cost < other.cost

    def __str__(self) -> str:
        return "->".join(self.words)

    def describe(self) -> str:
        """Return ``"a->b->c (achieved in <cost>)"``."""
        return f"{self} (achieved in {self.cost})"
