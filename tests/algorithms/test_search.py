"""Tests for the four search algorithms.

Every test runs the same input through each algorithm. Uniform-cost search
needs no heuristic, so it serves as the reference the others must match.
NetworkX's Dijkstra provides an independent check of the optimal cost.
"""

import sys

import networkx as nx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from wordladder.algorithms.common import SearchStats, resolve_path
from wordladder.algorithms.edit_distance import step_cost
from wordladder.algorithms.graph import WordGraph
from wordladder.algorithms.search import SEARCH_FUNCTIONS, find_shortest_path
from wordladder.config import SearchConfig
from wordladder.model.cost import PathMultiCost
from wordladder.types.base import Algorithm, SearchState

ALGORITHMS = list(Algorithm)


def networkx_cost(start, target, candidates):
    """Optimal ladder cost computed by NetworkX over the explicit graph."""
    if start == target:
        return PathMultiCost.zero()
    nodes = list(dict.fromkeys([start, target, *candidates]))
    g = nx.DiGraph()
    g.add_nodes_from(nodes)
    for u in nodes:
        for v in nodes:
            # Edges into the start are never part of a cheapest ladder.
            if u != v and v != start:
                g.add_edge(u, v, cost=step_cost(u, v))
    return nx.dijkstra_path_length(g, start, target, weight="cost")


def run_all(start, target, candidates):
    return {
        algorithm: find_shortest_path(start, target, candidates, algorithm)
        for algorithm in ALGORITHMS
    }


@pytest.mark.parametrize(
    "start,target,candidates,expected_path,expected_cost",
    [
        ("adrien", "adrien", [], ["adrien"], "0 mutation"),
        (
            "banane",
            "banana",
            ["table", "chaise", "tabouret", "assiette"],
            ["banane", "banana"],
            "1 1-letter mutation",
        ),
        (
            "banane",
            "ano",
            ["banan", "table", "chaise", "lit", "banon"],
            ["banane", "banan", "banon", "ano"],
            "1 2-letter mutation + 2 1-letter mutation",
        ),
        (
            "abracadabrantesques",
            "petit",
            ["abracadabra"],
            ["abracadabrantesques", "abracadabra", "petit"],
            "1 11-letter mutation + 1 8-letter mutation",
        ),
    ],
    ids=["identity", "two-hop", "multi-hop", "long-words"],
)
@pytest.mark.parametrize("algorithm", ALGORITHMS, ids=str)
def test_scenarios(algorithm, start, target, candidates, expected_path, expected_cost):
    ladder = find_shortest_path(start, target, candidates, algorithm)
    assert ladder is not None
    assert list(ladder.words) == expected_path
    assert str(ladder.cost) == expected_cost
    assert ladder.algorithm is algorithm


def test_multi_hop_cost_breakdown():
    ladder = find_shortest_path(
        "banane", "ano", ["banan", "table", "chaise", "lit", "banon"]
    )
    assert ladder.cost.to_sparse() == ((1, 2), (2, 1))


@pytest.mark.parametrize("algorithm", ALGORITHMS, ids=str)
def test_identity_for_any_candidates(algorithm, ladder_words):
    ladder = find_shortest_path("cot", "cot", ladder_words, algorithm)
    assert ladder.words == ("cot",)
    assert ladder.cost == PathMultiCost.zero()
    assert ladder.expanded == 0


def test_target_missing_from_dictionary_is_reachable():
    for algorithm in ALGORITHMS:
        ladder = find_shortest_path("cat", "cab", [], algorithm)
        assert ladder.words == ("cat", "cab")


def test_all_algorithms_agree_on_ties(ladder_words):
    # cat->cot->cog->dog and cat->cot->dot->dog cost the same; ties go to the
    # word met first in the dictionary.
    results = run_all("cat", "dog", ladder_words)
    for ladder in results.values():
        assert ladder.words == ("cat", "cot", "cog", "dog")
        assert str(ladder.cost) == "3 1-letter mutation"


def test_duplicate_candidates_do_not_change_result(ladder_words):
    doubled = ladder_words + ladder_words + ["dog"]
    for algorithm, ladder in run_all("cat", "dog", doubled).items():
        assert ladder.words == ("cat", "cot", "cog", "dog"), algorithm


@pytest.mark.parametrize(
    "start,target,candidates",
    [
        ("banane", "ano", ["banan", "table", "chaise", "lit", "banon"]),
        ("cat", "dog", ["cat", "cot", "cog", "dot", "cut", "bat"]),
        ("lead", "gold", ["load", "goad", "lend", "bold", "gild", "lewd"]),
        ("table", "chaise", ["tables", "cable", "chable", "chase", "chaise"]),
    ],
)
def test_costs_match_networkx(start, target, candidates):
    expected = networkx_cost(start, target, candidates)
    for algorithm, ladder in run_all(start, target, candidates).items():
        assert ladder.cost == expected, algorithm


@settings(max_examples=40, deadline=None)
@given(
    st.lists(
        st.text(alphabet="abc", min_size=1, max_size=4),
        min_size=2,
        max_size=6,
    )
)
def test_random_dictionaries_agree(words):
    start, target, *candidates = words
    expected = networkx_cost(start, target, candidates)
    results = run_all(start, target, candidates)
    for algorithm, ladder in results.items():
        assert ladder is not None, algorithm
        assert ladder.cost == expected, algorithm
        assert ladder.words[0] == start
        assert ladder.words[-1] == target
        steps = zip(ladder.words, ladder.words[1:])
        assert sum((step_cost(a, b) for a, b in steps), PathMultiCost.zero()) == (
            ladder.cost
        )
    # Same tie-breaking everywhere: every algorithm returns the same ladder.
    assert len({ladder.words for ladder in results.values()}) == 1


@pytest.mark.parametrize("algorithm", ALGORITHMS, ids=str)
def test_expansion_budget(algorithm):
    config = SearchConfig(max_expansions=0)
    candidates = ["table", "chaise"]
    assert find_shortest_path("banane", "banana", candidates, algorithm, config) is None
    # The start is a goal: nothing needs expanding.
    ladder = find_shortest_path("banane", "banane", candidates, algorithm, config)
    assert ladder is not None


def test_config_algorithm_is_default():
    config = SearchConfig(algorithm=Algorithm.IDASTAR)
    ladder = find_shortest_path("banane", "banana", [], config=config)
    assert ladder.algorithm is Algorithm.IDASTAR


class TestGenericGraphs:
    """The algorithms are generic over node and cost types."""

    @pytest.mark.parametrize("algorithm", ALGORITHMS, ids=str)
    def test_not_found(self, algorithm, disconnected_graph):
        stats = SearchStats()
        outcome = SEARCH_FUNCTIONS[algorithm](
            "A",
            disconnected_graph.__getitem__,
            lambda _node: 0,
            lambda node: node == "D",
            0,
            stats,
        )
        assert outcome is None
        assert stats.state is SearchState.EXHAUSTED

    @pytest.mark.parametrize("algorithm", ALGORITHMS, ids=str)
    def test_integer_costs(self, algorithm, weighted_graph):
        estimates = {"A": 3, "B": 2, "C": 2, "G": 0}
        stats = SearchStats()
        outcome = SEARCH_FUNCTIONS[algorithm](
            "A",
            weighted_graph.__getitem__,
            estimates.__getitem__,
            lambda node: node == "G",
            0,
            stats,
        )
        assert outcome == (["A", "C", "G"], 4)
        assert stats.state is SearchState.FOUND
        assert stats.expanded >= 2

    @pytest.mark.parametrize("algorithm", ALGORITHMS, ids=str)
    def test_parallel_edges_use_the_cheapest(self, algorithm):
        graph = {"A": [("B", 5), ("B", 1)], "B": [("G", 1)], "G": []}
        stats = SearchStats()
        outcome = SEARCH_FUNCTIONS[algorithm](
            "A", graph.__getitem__, lambda _node: 0, lambda n: n == "G", 0, stats
        )
        assert outcome == (["A", "B", "G"], 2)
        if algorithm is not Algorithm.IDASTAR:
            # B is queued once even though it improved twice.
            assert stats.expanded == 2

    def test_fringe_requeues_improved_deferred_node(self):
        # C is deferred at cost 10, then reached for 2 through B and must be
        # pulled out of the later list rather than queued a second time.
        graph = {
            "A": [("C", 10), ("B", 1)],
            "B": [("C", 1)],
            "C": [("G", 1)],
            "G": [],
        }
        stats = SearchStats()
        outcome = SEARCH_FUNCTIONS[Algorithm.FRINGE](
            "A", graph.__getitem__, lambda _node: 0, lambda n: n == "G", 0, stats
        )
        assert outcome == (["A", "B", "C", "G"], 3)
        assert stats.expanded == 3

    @pytest.mark.parametrize("algorithm", ALGORITHMS, ids=str)
    def test_long_chain_beyond_recursion_limit(self, algorithm):
        length = 2500
        assert length > sys.getrecursionlimit()
        stats = SearchStats()
        outcome = SEARCH_FUNCTIONS[algorithm](
            0,
            lambda i: [(i + 1, 1)] if i < length else [],
            lambda i: length - i,
            lambda i: i == length,
            0,
            stats,
        )
        path, cost = outcome
        assert path == list(range(length + 1))
        assert cost == length
        assert stats.expanded == length

    def test_idastar_deep_ladder_under_coarse_threshold(self):
        # A 2-letter estimate sets the threshold; any number of 1-letter
        # steps fits below it, so the probe dives far past the recursion limit.
        length = 1500
        one_letter = PathMultiCost.new(1, 0)
        two_letter = PathMultiCost.new(1, 1)
        zero = PathMultiCost.zero()

        def successors(i):
            if i == length:
                return [("goal", two_letter)]
            return [(i + 1, one_letter)]

        stats = SearchStats()
        outcome = SEARCH_FUNCTIONS[Algorithm.IDASTAR](
            0,
            successors,
            lambda node: two_letter if node == 0 else zero,
            lambda node: node == "goal",
            zero,
            stats,
        )
        path, cost = outcome
        assert path == [*range(length + 1), "goal"]
        # 1500 one-letter steps saturate the uint8 bucket.
        assert cost == PathMultiCost.from_buckets([255, 1])
        assert stats.rounds == 2

    @pytest.mark.parametrize("algorithm", ALGORITHMS, ids=str)
    def test_float_costs_square(self, algorithm):
        square = {
            "A": [("B", 1.0), ("D", 2.0)],
            "B": [("C", 1.0)],
            "D": [("C", 2.0)],
            "C": [],
        }
        outcome = SEARCH_FUNCTIONS[algorithm](
            "A", square.__getitem__, lambda _node: 0.0, lambda n: n == "C", 0.0
        )
        assert outcome == (["A", "B", "C"], 2.0)


class TestSearchStats:
    def test_lifecycle_found(self):
        stats = SearchStats()
        assert stats.state is SearchState.INITIALIZED
        graph = WordGraph("banana", ["table"])
        SEARCH_FUNCTIONS[Algorithm.ASTAR](
            "banane", graph.successors, graph.heuristic, graph.is_goal, graph.zero, stats
        )
        assert stats.state is SearchState.FOUND
        assert stats.state.terminal
        assert stats.expanded == 1
        assert stats.rounds == 1

    @pytest.mark.parametrize("algorithm", ALGORITHMS, ids=str)
    def test_budget_exceeded_state(self, algorithm):
        stats = SearchStats(max_expansions=1)
        graph = WordGraph("ano", ["banan", "table", "chaise", "lit", "banon"])
        outcome = SEARCH_FUNCTIONS[algorithm](
            "banane", graph.successors, graph.heuristic, graph.is_goal, graph.zero, stats
        )
        assert outcome is None
        assert stats.state is SearchState.BUDGET_EXCEEDED
        assert stats.expanded == 1

    def test_exploring_is_not_terminal(self):
        assert not SearchState.EXPLORING.terminal
        assert not SearchState.INITIALIZED.terminal

    def test_record_expansion_without_budget(self):
        stats = SearchStats()
        stats.start()
        assert all(stats.record_expansion() for _ in range(100))
        assert stats.expanded == 100
        assert stats.state is SearchState.EXPLORING


def test_resolve_path():
    parents = {"a": None, "b": "a", "c": "b", "x": "a"}
    assert resolve_path(parents, "c") == ["a", "b", "c"]
    assert resolve_path(parents, "a") == ["a"]
