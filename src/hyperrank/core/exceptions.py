"""
Custom exceptions for hyperrank
"""

class HyperrankError(Exception):
    """Base exception for hyperrank"""
    pass

class ConfigurationError(HyperrankError):
    """Configuration-related errors"""
    pass

class IngestError(HyperrankError):
    """Edge-list reading errors"""
    pass

class UnknownNode(HyperrankError, KeyError):
    """A node was looked up that the graph does not contain"""

    def __init__(self, node: str):
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"unknown node: {self.node!r}"

class GraphFrozenError(HyperrankError):
    """Mutation attempted on a graph that has been frozen"""
    pass

class DivisionUndefined(HyperrankError, ZeroDivisionError):
    """Degree normalisation on a graph with fewer than two nodes"""
    pass
