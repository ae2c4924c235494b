"""
Bundles the four ranked metric tables for a graph and renders them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console
from rich.table import Table

from .algorithms.closeness import ProgressCallback, closeness_centrality, in_closeness_centrality
from .algorithms.degree import in_degree_centrality, out_degree_centrality
from .algorithms.ranking import top
from .core.graph import DirectedGraph

logger = logging.getLogger(__name__)

Ranked = List[Tuple[str, float]]

TITLES = {
    "out_degree": "Out degree centrality",
    "in_degree": "In degree centrality",
    "out_closeness": "Out closeness centrality",
    "in_closeness": "In closeness centrality",
}


@dataclass(frozen=True)
class GraphSummary:
    nodes: int
    edges: int

    @classmethod
    def of(cls, graph: DirectedGraph) -> "GraphSummary":
        return cls(nodes=graph.node_count, edges=graph.edge_count)


@dataclass
class CentralityReport:
    summary: GraphSummary
    out_degree: Ranked
    in_degree: Ranked
    out_closeness: Optional[Ranked] = None
    in_closeness: Optional[Ranked] = None

    def tables(self) -> Dict[str, Ranked]:
        """Computed tables keyed by metric name, skipping any left out."""
        tables = {}
        for name in TITLES:
            value = getattr(self, name)
            if value is not None:
                tables[name] = value
        return tables

    def to_dict(self, top_k: Optional[int] = None) -> Dict[str, Any]:
        out: Dict[str, Any] = {"nodes": self.summary.nodes, "edges": self.summary.edges}
        for name, ranked in self.tables().items():
            rows = ranked if top_k is None else top(ranked, top_k)
            out[name] = [{"node": node, "score": score} for node, score in rows]
        return out


def build_report(
    graph: DirectedGraph,
    closeness: bool = True,
    workers: Optional[int] = None,
    executor: str = "process",
    chunksize: Optional[int] = None,
    on_result: Optional[ProgressCallback] = None,
) -> CentralityReport:
    """Compute degree centralities and, unless ``closeness`` is False, closeness both ways."""
    graph.freeze()
    summary = GraphSummary.of(graph)
    logger.info("Graph has %d nodes and %d edges", summary.nodes, summary.edges)

    report = CentralityReport(
        summary=summary,
        out_degree=out_degree_centrality(graph),
        in_degree=in_degree_centrality(graph),
    )
    if closeness:
        options = dict(workers=workers, executor=executor, chunksize=chunksize, on_result=on_result)
        report.out_closeness = closeness_centrality(graph, **options)
        report.in_closeness = in_closeness_centrality(graph, **options)
    return report


def ranked_table(title: str, ranked: Ranked, k: int) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Node")
    table.add_column("Score", justify="right")
    for i, (node, score) in enumerate(top(ranked, k), 1):
        table.add_row(str(i), node, f"{score:.6f}")
    return table


def render_report(console: Console, report: CentralityReport, top_k: int) -> None:
    console.print(
        f"The network has {report.summary.nodes} nodes and {report.summary.edges} edges"
    )
    for name, ranked in report.tables().items():
        console.print(ranked_table(f"Top {top_k}: {TITLES[name]}", ranked, top_k))
