from .closeness import closeness_centrality, closeness_score, in_closeness_centrality
from .degree import degree, in_degree_centrality, out_degree_centrality
from .ranking import rank, top
from .shortest_paths import shortest_paths

__all__ = [
    "closeness_centrality",
    "closeness_score",
    "degree",
    "in_closeness_centrality",
    "in_degree_centrality",
    "out_degree_centrality",
    "rank",
    "shortest_paths",
    "top",
]
