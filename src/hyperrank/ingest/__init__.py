from .tsv import read_edges

__all__ = [
    "read_edges",
]
