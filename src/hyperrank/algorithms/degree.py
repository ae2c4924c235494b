from __future__ import annotations

import logging
from typing import List, Tuple

from ..core.exceptions import DivisionUndefined
from ..core.graph import DirectedGraph
from .ranking import rank

logger = logging.getLogger(__name__)


def degree(graph: DirectedGraph) -> List[Tuple[str, int]]:
    """Out-degree of every node, highest first. Parallel arcs and self-loops count."""
    return rank((node, graph.out_degree(node)) for node in graph)


def normalize_degree(value: int, node_count: int) -> float:
    """Divide a degree by ``node_count - 1``."""
    if node_count <= 1:
        raise DivisionUndefined(f"cannot normalise degree over {node_count} node(s)")
    return value / (node_count - 1)


def out_degree_centrality(graph: DirectedGraph) -> List[Tuple[str, float]]:
    """Out-degree divided by ``N - 1`` for every node, highest first.

    Graphs with fewer than two nodes score 0.0 throughout.
    """
    n = graph.node_count
    centrality: List[Tuple[str, float]] = []
    for node, value in degree(graph):
        try:
            score = normalize_degree(value, n)
        except DivisionUndefined:
            score = 0.0
        centrality.append((node, score))
    if n <= 1:
        logger.debug("Degree centrality on a %d-node graph defaults to 0.0", n)
    return centrality


def in_degree_centrality(graph: DirectedGraph) -> List[Tuple[str, float]]:
    """In-degree centrality, i.e. out-degree centrality of the reversed graph."""
    return out_degree_centrality(graph.reverse())
