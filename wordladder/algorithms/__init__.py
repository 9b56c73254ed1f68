"""Edit-distance costs, the word graph and the search algorithms."""

from wordladder.algorithms.astar import astar
from wordladder.algorithms.common import SearchStats
from wordladder.algorithms.dijkstra import dijkstra
from wordladder.algorithms.edit_distance import edit_distance, levenshtein, step_cost
from wordladder.algorithms.fringe import fringe
from wordladder.algorithms.graph import WordGraph
from wordladder.algorithms.idastar import idastar
from wordladder.algorithms.search import SEARCH_FUNCTIONS, find_shortest_path

__all__ = [
    # Costs
    "levenshtein",
    "edit_distance",
    "step_cost",
    # Graph
    "WordGraph",
    # Search
    "astar",
    "idastar",
    "fringe",
    "dijkstra",
    "SearchStats",
    "SEARCH_FUNCTIONS",
    "find_shortest_path",
]
