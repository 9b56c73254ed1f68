"""wordladder: cheapest word ladders between two words.

A ladder goes from a start word to a target word through dictionary words.
Each step costs one unit at the granularity of the letters it changes, and
costs compare coarse granularities first, so ladders made of many 1-letter
steps beat ladders with a few large jumps.

Primary API:
    find_shortest_path() - Search a ladder with one of four algorithms
    Algorithm - ASTAR, IDASTAR, FRINGE or DIJKSTRA
    PathMultiCost - Multi-resolution ladder cost
    LadderPath - Search result (words and cost)
    SearchConfig - Search settings

Example:
    from wordladder import Algorithm, find_shortest_path

    ladder = find_shortest_path(
        "banane", "ano", ["banan", "table", "banon"], Algorithm.FRINGE
    )
    print(ladder.describe())
    # banane->banan->banon->ano (achieved in 1 2-letter mutation + 2 1-letter mutation)
"""

from __future__ import annotations

from wordladder import cli, logging
from wordladder._version import __version__
from wordladder.algorithms import (
    SEARCH_FUNCTIONS,
    SearchStats,
    WordGraph,
    astar,
    dijkstra,
    edit_distance,
    find_shortest_path,
    fringe,
    idastar,
    levenshtein,
    step_cost,
)
from wordladder.config import SearchConfig, load_config
from wordladder.io import load_words
from wordladder.model import MAX_DIMENSION, UINT8, CostScalar, LadderPath, PathMultiCost
from wordladder.types import Algorithm, SearchState

__all__ = [
    # Version
    "__version__",
    # Model
    "PathMultiCost",
    "CostScalar",
    "UINT8",
    "MAX_DIMENSION",
    "LadderPath",
    # Types
    "Algorithm",
    "SearchState",
    # Costs and graph
    "levenshtein",
    "edit_distance",
    "step_cost",
    "WordGraph",
    # Search (primary API)
    "find_shortest_path",
    "astar",
    "idastar",
    "fringe",
    "dijkstra",
    "SearchStats",
    "SEARCH_FUNCTIONS",
    # Configuration and I/O
    "SearchConfig",
    "load_config",
    "load_words",
    # Utilities
    "cli",
    "logging",
]
