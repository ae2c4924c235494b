"""hyperrank: degree and closeness centrality over directed hyperlink graphs.

The graph core and its algorithms know nothing about files or display; the
``ingest`` package turns a tab-separated hyperlink dump into edge pairs and
``report`` / ``cli`` present the ranked tables.
"""

__all__ = [
    "algorithms",
    "core",
    "ingest",
    "report",
]
