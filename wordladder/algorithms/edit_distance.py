"""Edit distance between words and the two costs derived from it.

``edit_distance`` places the Levenshtein distance in the least significant
bucket. It is a metric and serves as the admissible search heuristic.

``step_cost`` records one unit at the bucket matching the number of letters
changed in a single step. It is not a metric: the ladder adrien -> adri -> adr
(one 2-letter step, one 1-letter step) is cheaper than the direct 3-letter
step adrien -> adr. This steers the search toward chains of small edits.
"""

from __future__ import annotations

from wordladder.model.cost import MAX_DIMENSION, UINT8, CostScalar, PathMultiCost


def levenshtein(w1: str, w2: str) -> int:
    """Return the Levenshtein distance between two words.

    Insertions, deletions and substitutions all cost 1.
    """
    if w1 == w2:
        return 0
    if not w1:
        return len(w2)
    if not w2:
        return len(w1)
    # Keep the shorter word on the inner loop.
    if len(w1) < len(w2):
        w1, w2 = w2, w1
    prev = list(range(len(w2) + 1))
    for i, c1 in enumerate(w1, start=1):
        cur = [i]
        for j, c2 in enumerate(w2, start=1):
            cost = 0 if c1 == c2 else 1
            cur.append(min(cur[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))
        prev = cur
    return prev[-1]


def edit_distance(w1: str, w2: str, scalar: CostScalar = UINT8) -> PathMultiCost:
    """Return the edit distance as a cost in bucket 0, clamped to ``MAX_DIMENSION - 1``."""
    return PathMultiCost.new(min(levenshtein(w1, w2), MAX_DIMENSION - 1), 0, scalar)


def step_cost(w1: str, w2: str, scalar: CostScalar = UINT8) -> PathMultiCost:
    """Return the cost of moving from ``w1`` to ``w2`` in one step.

    Identical words cost ``PathMultiCost.min_value()``. Otherwise a single
    unit lands in bucket ``min(distance, MAX_DIMENSION) - 1``.
    """
    distance = levenshtein(w1, w2)
    if distance == 0:
        return PathMultiCost.min_value(scalar)
    return PathMultiCost.new(1, min(distance, MAX_DIMENSION) - 1, scalar)
