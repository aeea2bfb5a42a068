"""
Exceptions raised by routegraph graphs.

Each error subclasses the builtin that callers would otherwise catch for
the same situation, so ``except ValueError`` keeps working.
"""

from typing import Any


class GraphError(Exception):
    """Base class for graph contract violations."""


class DuplicateVertexError(GraphError, ValueError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Vertex already exists: {value!r}")
        self.value = value


class UnknownVertexError(GraphError, ValueError):
    def __init__(self, *values: Any) -> None:
        names = ", ".join(repr(v) for v in values)
        super().__init__(f"Vertex does not exist: {names}")
        self.values = values


class DuplicateEdgeError(GraphError, ValueError):
    def __init__(self, source: Any, destination: Any) -> None:
        super().__init__(f"Edge already exists: {source!r} -> {destination!r}")
        self.source = source
        self.destination = destination


class EdgeNotFoundError(GraphError, ValueError):
    def __init__(self, source: Any, destination: Any) -> None:
        super().__init__(f"Edge does not exist: {source!r} -> {destination!r}")
        self.source = source
        self.destination = destination


class UnsupportedOperationError(GraphError, NotImplementedError):
    """Operation the storage representation cannot perform."""
