from .config import Config
from .exceptions import (
    ConfigurationError,
    DivisionUndefined,
    GraphFrozenError,
    HyperrankError,
    IngestError,
    UnknownNode,
)
from .graph import DirectedGraph

__all__ = [
    "Config",
    "ConfigurationError",
    "DirectedGraph",
    "DivisionUndefined",
    "GraphFrozenError",
    "HyperrankError",
    "IngestError",
    "UnknownNode",
]
