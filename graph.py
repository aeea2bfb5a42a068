"""
Weighted graph abstraction for routegraph.

Vertices carry a hashable value and live in an ordered collection; a
vertex's position in that collection is its index everywhere (parents,
matrix rows/columns, engine working arrays). Edges carry integer weights
and are directed or undirected depending on the flag fixed at construction.

Storage is left to subclasses. The algorithms are delegated to engines
that only see the ``neighbors`` seam, so both backends run the same code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, Tuple
import logging

from algorithms import AllPairsEngine, DijkstraEngine, SpanningTreeEngine, TraversalEngine
from dijkstra_engine import SimpleDijkstraEngine
from floyd_warshall_engine import AllPairsPaths, SimpleFloydWarshallEngine
from graph_errors import DuplicateVertexError, UnknownVertexError
from prim_engine import SimplePrimEngine
from traversal_engine import SimpleTraversalEngine
from vertex import Vertex

logger = logging.getLogger(__name__)


class Graph(ABC):
    """
    Directed or undirected weighted graph over hashable vertex values.

    Subclasses provide edge storage and the vertex record type; this class
    owns the ordered vertex collection and the algorithm entry points.
    Algorithms mutate the transient fields of the vertex records and leave
    them readable afterwards.
    """

    def __init__(
        self,
        directed: bool = False,
        traversal: Optional[TraversalEngine] = None,
        dijkstra: Optional[DijkstraEngine] = None,
        all_pairs: Optional[AllPairsEngine] = None,
        spanning_tree: Optional[SpanningTreeEngine] = None,
    ) -> None:
        self._directed = directed
        self._vertices: List[Vertex] = []
        self._positions: Dict[Any, int] = {}

        self.traversal_engine = traversal or SimpleTraversalEngine()
        self.dijkstra_engine = dijkstra or SimpleDijkstraEngine()
        self.all_pairs_engine = all_pairs or SimpleFloydWarshallEngine()
        self.spanning_tree_engine = spanning_tree or SimplePrimEngine()

    # --- Storage hooks --------------------------------------------------------

    @abstractmethod
    def _new_vertex(self, value: Any) -> Vertex:
        """Create the backend-specific vertex record for value."""
        raise NotImplementedError

    @abstractmethod
    def _grow(self) -> None:
        """Make room for the vertex just appended to the collection."""
        raise NotImplementedError

    @abstractmethod
    def add_edge(self, source: Any, destination: Any, weight: int) -> None:
        """
        Add an edge source -> destination (and the mirror if undirected).

        Raises:
            UnknownVertexError: if either endpoint is absent.
            DuplicateEdgeError: if the ordered pair already has an edge.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_vertex(self, value: Any) -> None:
        """Remove a vertex and every edge touching it."""
        raise NotImplementedError

    @abstractmethod
    def remove_edge(self, source: Any, destination: Any) -> None:
        """
        Remove the edge source -> destination (and the mirror if undirected).

        Raises:
            UnknownVertexError: if either endpoint is absent.
            EdgeNotFoundError: if the ordered pair has no edge.
        """
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, index: int) -> Iterator[Tuple[int, int]]:
        """
        Outgoing (neighbour_index, weight) pairs of the vertex at index.

        Order is the representation's natural adjacency order, which every
        traversal follows.
        """
        raise NotImplementedError

    @abstractmethod
    def has_edge(self, source: Any, destination: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def weight(self, source: Any, destination: Any) -> int:
        """
        Weight of the edge source -> destination.

        Raises:
            UnknownVertexError: if either endpoint is absent.
            EdgeNotFoundError: if the ordered pair has no edge.
        """
        raise NotImplementedError

    # --- Vertex collection ----------------------------------------------------

    def add_vertex(self, value: Any) -> None:
        """
        Append a new vertex holding value.

        Raises:
            DuplicateVertexError: if value is already present; nothing is
            mutated in that case.
        """
        if value in self._positions:
            raise DuplicateVertexError(value)

        self._positions[value] = len(self._vertices)
        self._vertices.append(self._new_vertex(value))
        self._grow()
        logger.debug(f"Added vertex {value!r} at position {len(self._vertices) - 1}")

    def get_vertex(self, value: Any) -> Optional[Vertex]:
        """Vertex record for value, or None when absent."""
        index = self._positions.get(value)
        if index is None:
            return None
        return self._vertices[index]

    def index_of(self, value: Any) -> Optional[int]:
        """Position of value in the ordered collection, or None when absent."""
        return self._positions.get(value)

    @property
    def vertices(self) -> List[Vertex]:
        return self._vertices

    def values(self) -> List[Any]:
        return [v.value for v in self._vertices]

    def is_directed(self) -> bool:
        return self._directed

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, value: Any) -> bool:
        return value in self._positions

    def edges(self) -> Iterator[Tuple[Any, Any, int]]:
        """
        All stored (source, destination, weight) triples in natural order.

        Undirected edges appear once per direction.
        """
        for i, vertex in enumerate(self._vertices):
            for j, w in self.neighbors(i):
                yield vertex.value, self._vertices[j].value, w

    def is_connected(self) -> bool:
        """
        True iff every vertex has at least one outgoing adjacency entry.

        This is a cheap necessary condition, not real connectivity: a vertex
        with only incoming edges, or two components that are each internally
        linked, still pass.
        """
        for i in range(len(self._vertices)):
            if next(self.neighbors(i), None) is None:
                return False
        return True

    # --- Helpers for subclasses -----------------------------------------------

    def _require(self, *values: Any) -> List[int]:
        """Positions of values, raising UnknownVertexError naming the absent ones."""
        missing = [v for v in values if v not in self._positions]
        if missing:
            raise UnknownVertexError(*missing)
        return [self._positions[v] for v in values]

    def _reindex(self) -> None:
        self._positions = {v.value: i for i, v in enumerate(self._vertices)}

    # --- Traversal trees ------------------------------------------------------

    def parent_of(self, value: Any) -> Optional[Any]:
        """Value of the parent left by the last run, or None."""
        (index,) = self._require(value)
        parent = self._vertices[index].parent
        if parent is None:
            return None
        return self._vertices[parent].value

    def path_to(self, value: Any) -> List[Any]:
        """
        Values from the root of value's traversal tree down to value.

        The tree is whatever the last BFS, DFS, Dijkstra or Prim run left in
        the parent fields. A vertex that was not reached yields just [value].
        """
        (index,) = self._require(value)
        path: List[Any] = []
        seen = set()
        current: Optional[int] = index
        while current is not None and current not in seen:
            seen.add(current)
            path.append(self._vertices[current].value)
            current = self._vertices[current].parent
        path.reverse()
        return path

    # --- Algorithms -----------------------------------------------------------

    def bfs(self, source: Any) -> List[Any]:
        """Breadth-first search; returns values in discovery order."""
        (index,) = self._require(source)
        return self.traversal_engine.bfs(self, index)

    def dfs(self, source: Any) -> List[Any]:
        """Depth-first search with timestamps; returns values in discovery order."""
        (index,) = self._require(source)
        return self.traversal_engine.dfs(self, index)

    def dijkstra(self, source: Any) -> Dict[Any, Optional[Any]]:
        """
        Single-source shortest paths; returns value -> parent value (or None).

        Edge weights must be non-negative. With negative weights the result is
        undefined; nothing detects or rejects them.
        """
        (index,) = self._require(source)
        return self.dijkstra_engine.shortest_paths(self, index)

    def floyd_warshall(self) -> AllPairsPaths:
        """All-pairs shortest paths over every vertex pair."""
        return self.all_pairs_engine.all_pairs(self)

    def prim(self, source: Any) -> Dict[Any, Optional[Any]]:
        """Minimum spanning forest grown from source; returns value -> parent value."""
        (index,) = self._require(source)
        return self.spanning_tree_engine.spanning_tree(self, index)
