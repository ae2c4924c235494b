from __future__ import annotations

import random

import pytest

from hyperrank.algorithms.closeness import (
    closeness_centrality,
    closeness_score,
    in_closeness_centrality,
    resolve_workers,
)
from hyperrank.core.exceptions import ConfigurationError
from hyperrank.core.graph import DirectedGraph


def _chain() -> DirectedGraph:
    return DirectedGraph.from_edges([("A", "B"), ("B", "C")])


def _random_graph(seed: int = 11, nodes: int = 30, edges: int = 70) -> DirectedGraph:
    rng = random.Random(seed)
    labels = [f"r/{i}" for i in range(nodes)]
    return DirectedGraph.from_edges((rng.choice(labels), rng.choice(labels)) for _ in range(edges))


def test_chain_out_closeness() -> None:
    assert closeness_centrality(_chain(), executor="serial") == [("A", 1.0), ("B", 1.0), ("C", 0.0)]


def test_chain_in_closeness() -> None:
    assert in_closeness_centrality(_chain(), executor="serial") == [("B", 1.0), ("C", 1.0), ("A", 0.0)]


def test_partial_reach_is_penalised() -> None:
    # hub reaches all four leaves at distance 1
    g = DirectedGraph.from_edges([("hub", leaf) for leaf in "abcd"])
    assert closeness_score(g, "hub") == pytest.approx((4 / 4) * (5 / 4))

    g = DirectedGraph.from_edges([("x", "y"), ("p", "q"), ("q", "r")])
    # x reaches 1 of 4 other nodes, p reaches 2
    assert closeness_score(g, "x") == pytest.approx((1 / 4) * (2 / 1))
    assert closeness_score(g, "p") == pytest.approx((2 / 4) * (3 / 3))


def test_isolated_node_scores_zero() -> None:
    g = DirectedGraph()
    g.add_edge("A", "B")
    g.add_node("Z")
    g.freeze()
    scores = dict(closeness_centrality(g, executor="serial"))
    assert scores["Z"] == 0.0
    assert scores["B"] == 0.0


def test_self_loop_only_scores_zero() -> None:
    g = DirectedGraph.from_edges([("A", "A"), ("B", "C")])
    assert closeness_score(g, "A") == 0.0


def test_single_node_and_empty_graph() -> None:
    g = DirectedGraph()
    g.add_node("solo")
    g.freeze()
    assert closeness_centrality(g, executor="serial") == [("solo", 0.0)]
    assert in_closeness_centrality(g, executor="serial") == [("solo", 0.0)]
    assert closeness_centrality(DirectedGraph.from_edges([]), executor="serial") == []


def test_sorted_descending() -> None:
    scores = [s for _, s in closeness_centrality(_random_graph(), executor="serial")]
    assert scores == sorted(scores, reverse=True)


@pytest.mark.parametrize("executor", ["thread", "process"])
def test_parallel_matches_serial(executor: str) -> None:
    g = _random_graph()
    serial = closeness_centrality(g, executor="serial")
    assert closeness_centrality(g, workers=3, executor=executor) == serial


def test_process_pool_with_explicit_chunksize() -> None:
    g = _random_graph(seed=3)
    expected = closeness_centrality(g, executor="serial")
    assert closeness_centrality(g, workers=2, executor="process", chunksize=1) == expected


def test_repeat_runs_are_identical() -> None:
    g = _random_graph()
    before = dict(g.adjacency)
    first = closeness_centrality(g, workers=2, executor="thread")
    second = closeness_centrality(g, workers=2, executor="thread")
    assert first == second
    assert dict(g.adjacency) == before


def test_on_result_sees_every_node() -> None:
    g = _random_graph()
    seen = []
    closeness_centrality(g, workers=2, executor="thread", on_result=lambda node, score: seen.append(node))
    assert sorted(seen) == sorted(g)


def test_unfrozen_graph_is_frozen_before_fan_out() -> None:
    g = DirectedGraph()
    g.add_edge("A", "B")
    closeness_centrality(g, executor="serial")
    assert g.frozen


def test_bad_executor_and_workers() -> None:
    with pytest.raises(ConfigurationError):
        closeness_centrality(_chain(), executor="gpu")
    with pytest.raises(ConfigurationError):
        closeness_centrality(_chain(), workers=0)
    assert resolve_workers(None) >= 1
    assert resolve_workers(4) == 4
