"""
Wasserman-Faust closeness centrality.

Every node's score needs its own shortest-path run, and the runs only read the
frozen graph, so they are fanned out over a ``concurrent.futures`` pool and the
scores are ranked once, after all of them are back.
"""

from __future__ import annotations

import concurrent.futures
import functools
import logging
import os
import time
from typing import Callable, Iterator, List, Optional, Tuple

from ..core.config import EXECUTORS
from ..core.exceptions import ConfigurationError
from ..core.graph import DirectedGraph
from .ranking import rank
from .shortest_paths import shortest_paths

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, float], None]

# Set once per worker process by _init_worker.
_worker_graph: Optional[DirectedGraph] = None


def closeness_score(graph: DirectedGraph, node: str) -> float:
    """Closeness of one node, measured along the graph's outgoing arcs.

    ``((n - 1) / (N - 1)) * (n / S)`` where ``n`` counts the nodes reached
    (the node itself included), ``S`` sums their distances and ``N`` is the
    graph size. A node that reaches nothing else scores 0.0.
    """
    distances = shortest_paths(graph, node)
    total = sum(distances.values())
    if total == 0:
        return 0.0
    reached = len(distances)
    return ((reached - 1) / (graph.node_count - 1)) * (reached / total)


def _init_worker(graph: DirectedGraph) -> None:
    global _worker_graph
    _worker_graph = graph


def _score_in_worker(node: str) -> Tuple[str, float]:
    return node, closeness_score(_worker_graph, node)


def _score_with(graph: DirectedGraph, node: str) -> Tuple[str, float]:
    return node, closeness_score(graph, node)


def resolve_workers(workers: Optional[int]) -> int:
    if workers is None:
        return os.cpu_count() or 1
    if workers < 1:
        raise ConfigurationError(f"workers must be a positive integer, got {workers}")
    return workers


def _scores(
    graph: DirectedGraph,
    nodes: List[str],
    executor: str,
    workers: int,
    chunksize: Optional[int],
) -> Iterator[Tuple[str, float]]:
    if executor == "serial" or workers == 1 or len(nodes) < 2:
        for node in nodes:
            yield _score_with(graph, node)
        return

    if executor == "thread":
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as pool:
            yield from pool.map(functools.partial(_score_with, graph), nodes)
        return

    if chunksize is None:
        chunksize = max(1, len(nodes) // (workers * 4))
    with concurrent.futures.ProcessPoolExecutor(
        max_workers=workers,
        initializer=_init_worker,
        initargs=(graph,),
    ) as pool:
        yield from pool.map(_score_in_worker, nodes, chunksize=chunksize)


def closeness_centrality(
    graph: DirectedGraph,
    workers: Optional[int] = None,
    executor: str = "process",
    chunksize: Optional[int] = None,
    on_result: Optional[ProgressCallback] = None,
) -> List[Tuple[str, float]]:
    """Closeness of every node along outgoing arcs, highest first.

    Pass ``graph.reverse()`` (or use :func:`in_closeness_centrality`) to measure
    along incoming arcs instead. ``executor`` is ``"process"``, ``"thread"`` or
    ``"serial"``; ``workers`` defaults to the CPU count. ``on_result`` is called
    in the calling thread as each node's score arrives.
    """
    if executor not in EXECUTORS:
        raise ConfigurationError(
            f"executor must be one of {', '.join(EXECUTORS)}, got {executor!r}"
        )
    workers = resolve_workers(workers)
    graph.freeze()
    nodes = list(graph)

    logger.info(
        "Computing closeness for %d nodes (%s executor, %d workers)",
        len(nodes), executor, workers,
    )
    started = time.perf_counter()

    collected: List[Tuple[str, float]] = []
    for node, score in _scores(graph, nodes, executor, workers, chunksize):
        collected.append((node, score))
        if on_result is not None:
            on_result(node, score)

    logger.info("Closeness done in %.2fs", time.perf_counter() - started)
    return rank(collected)


def in_closeness_centrality(graph: DirectedGraph, **kwargs) -> List[Tuple[str, float]]:
    """Closeness along incoming arcs: closeness of the reversed graph."""
    return closeness_centrality(graph.reverse(), **kwargs)

