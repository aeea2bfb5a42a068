"""
Vertex records for routegraph.

A vertex is identified by its value. Everything else on the record is
transient working state written by the last algorithm that ran over the
owning graph.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from graph_config import INFINITY


class Color(Enum):
    """Visitation marker used by the traversals."""

    UNVISITED = "white"
    IN_PROGRESS = "gray"
    DONE = "black"


@dataclass(eq=False)
class Vertex:
    """
    Value plus per-algorithm transient state.

    parent is the position of the predecessor in the owning graph's ordered
    vertex collection, not a reference to the predecessor itself.
    """

    value: Any
    color: Color = Color.UNVISITED
    distance: float = INFINITY
    discovery_time: int = 0
    finishing_time: int = 0
    parent: Optional[int] = None

    def reset(self, distance: float = INFINITY) -> None:
        self.color = Color.UNVISITED
        self.distance = distance
        self.parent = None

    def __str__(self) -> str:
        return str(self.value)


@dataclass(eq=False)
class ListVertex(Vertex):
    """
    Vertex for the adjacency-list backend.

    adjacent maps neighbour value -> edge weight in insertion order.
    """

    adjacent: Dict[Any, int] = field(default_factory=dict)


@dataclass(eq=False)
class MatrixVertex(Vertex):
    """Vertex for the adjacency-matrix backend; adjacency lives in the graph's matrix."""
