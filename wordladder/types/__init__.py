"""Shared typing constructs for wordladder.

Defines the algorithm selector, the search lifecycle states and the protocol
that path costs satisfy. Contains no search logic.
"""

from wordladder.types.base import Algorithm, C, CostLike, N, SearchState

__all__ = [
    # Enums
    "Algorithm",
    "SearchState",
    # Protocols and type variables
    "CostLike",
    "C",
    "N",
]
