from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Tuple

from .exceptions import GraphFrozenError, UnknownNode

logger = logging.getLogger(__name__)

Edge = Tuple[str, str]


class DirectedGraph:
    """A directed multigraph with string node identifiers and unit-weight arcs.

    Nodes keep the order in which they were first seen. Parallel arcs and
    self-loops are stored as given. Once frozen the graph is read-only, which is
    what lets closeness workers share it without locking.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, List[str]] = {}
        self._frozen = False

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "DirectedGraph":
        """Build a frozen graph from ``(source, destination)`` pairs, in order."""
        graph = cls()
        for source, target in edges:
            graph.add_edge(source, target)
        graph.freeze()
        logger.debug("Built graph with %d nodes and %d edges", graph.node_count, graph.edge_count)
        return graph

    def add_node(self, node_id: str) -> None:
        self._check_mutable()
        self._adjacency.setdefault(node_id, [])

    def add_edge(self, source_id: str, target_id: str) -> None:
        self._check_mutable()
        if source_id not in self._adjacency:
            self._adjacency[source_id] = []
        if target_id not in self._adjacency:
            self._adjacency[target_id] = []
        self._adjacency[source_id].append(target_id)

    def freeze(self) -> "DirectedGraph":
        if not self._frozen:
            self._adjacency = {node: tuple(targets) for node, targets in self._adjacency.items()}
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("graph is frozen; build a new one instead")

    @property
    def nodes(self) -> FrozenSet[str]:
        return frozenset(self._adjacency)

    @property
    def adjacency(self) -> Mapping[str, Tuple[str, ...]]:
        """Read-only view of node -> outgoing destinations."""
        return MappingProxyType({node: tuple(targets) for node, targets in self._adjacency.items()})

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._adjacency

    def has_node(self, node_id: str) -> bool:
        return node_id in self._adjacency

    def neighbors(self, node_id: str) -> Tuple[str, ...]:
        try:
            return tuple(self._adjacency[node_id])
        except KeyError:
            raise UnknownNode(node_id) from None

    def out_degree(self, node_id: str) -> int:
        try:
            return len(self._adjacency[node_id])
        except KeyError:
            raise UnknownNode(node_id) from None

    def edges(self) -> Iterator[Edge]:
        for source, targets in self._adjacency.items():
            for target in targets:
                yield source, target

    def reverse(self) -> "DirectedGraph":
        """Return a new frozen graph with the same nodes and every arc flipped."""
        reverse = DirectedGraph()
        for node in self._adjacency:
            reverse.add_node(node)
        for source, target in self.edges():
            reverse.add_edge(target, source)
        return reverse.freeze()

    def __repr__(self) -> str:
        return f"DirectedGraph(nodes={self.node_count}, edges={self.edge_count}, frozen={self._frozen})"
