from __future__ import annotations

import heapq
from typing import Dict, List, Tuple

from ..core.exceptions import UnknownNode
from ..core.graph import DirectedGraph


def shortest_paths(graph: DirectedGraph, start: str) -> Dict[str, int]:
    """Hop distance from ``start`` to every node reachable along outgoing arcs.

    Dijkstra with every arc weighing 1. Nodes may be pushed more than once;
    an entry whose distance is larger than the one already recorded is stale
    and skipped when popped. Unreachable nodes are absent from the result.
    """
    if not graph.has_node(start):
        raise UnknownNode(start)

    distances: Dict[str, int] = {start: 0}
    queue: List[Tuple[int, str]] = [(0, start)]

    while queue:
        dist, node = heapq.heappop(queue)
        if dist > distances[node]:
            continue
        new_dist = dist + 1
        for target in graph.neighbors(node):
            known = distances.get(target)
            if known is None or new_dist < known:
                distances[target] = new_dist
                heapq.heappush(queue, (new_dist, target))

    return distances
