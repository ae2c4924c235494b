from __future__ import annotations

from collections import Counter

import pytest

from hyperrank.core.exceptions import GraphFrozenError, UnknownNode
from hyperrank.core.graph import DirectedGraph


def _chain() -> DirectedGraph:
    return DirectedGraph.from_edges([("A", "B"), ("B", "C")])


def test_add_nodes_and_edges() -> None:
    g = DirectedGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B")
    assert g.neighbors("A") == ("B",)
    assert g.neighbors("B") == ()


def test_from_edges_collects_both_endpoints() -> None:
    g = _chain()
    assert g.nodes == {"A", "B", "C"}
    assert set(g.adjacency) == g.nodes
    assert g.adjacency["C"] == ()
    assert g.node_count == 3
    assert g.edge_count == 2


def test_adjacency_keeps_insertion_order_and_duplicates() -> None:
    g = DirectedGraph.from_edges([("A", "C"), ("A", "B"), ("A", "C"), ("A", "A")])
    assert g.neighbors("A") == ("C", "B", "C", "A")
    assert g.out_degree("A") == 4
    assert g.edge_count == 4


def test_node_order_is_first_seen() -> None:
    g = DirectedGraph.from_edges([("x", "y"), ("z", "x"), ("y", "w")])
    assert list(g) == ["x", "y", "z", "w"]


def test_reverse_flips_every_arc() -> None:
    reversed_graph = _chain().reverse()
    assert reversed_graph.adjacency["A"] == ()
    assert reversed_graph.adjacency["B"] == ("A",)
    assert reversed_graph.adjacency["C"] == ("B",)
    assert reversed_graph.nodes == {"A", "B", "C"}


def test_reverse_does_not_touch_original() -> None:
    g = _chain()
    before = dict(g.adjacency)
    g.reverse()
    assert dict(g.adjacency) == before


def test_double_reverse_preserves_adjacency_multiset() -> None:
    edges = [("a", "b"), ("a", "b"), ("b", "c"), ("c", "a"), ("c", "c"), ("d", "a"), ("a", "d")]
    g = DirectedGraph.from_edges(edges)
    twice = g.reverse().reverse()
    assert twice.nodes == g.nodes
    for node in g:
        assert Counter(twice.neighbors(node)) == Counter(g.neighbors(node))


def test_reverse_keeps_isolated_nodes() -> None:
    g = DirectedGraph()
    g.add_edge("a", "b")
    g.add_node("lonely")
    g.freeze()
    assert "lonely" in g.reverse()


def test_neighbors_of_unknown_node() -> None:
    g = _chain()
    with pytest.raises(UnknownNode) as info:
        g.neighbors("Z")
    assert info.value.node == "Z"
    with pytest.raises(KeyError):
        g.out_degree("Z")


def test_frozen_graph_rejects_mutation() -> None:
    g = _chain()
    assert g.frozen
    with pytest.raises(GraphFrozenError):
        g.add_edge("C", "A")
    with pytest.raises(GraphFrozenError):
        g.add_node("D")


def test_adjacency_view_is_read_only() -> None:
    g = _chain()
    with pytest.raises(TypeError):
        g.adjacency["A"] = ("C",)  # type: ignore[index]


def test_empty_graph() -> None:
    g = DirectedGraph.from_edges([])
    assert g.node_count == 0
    assert g.edge_count == 0
    assert g.nodes == frozenset()
    assert g.reverse().node_count == 0
