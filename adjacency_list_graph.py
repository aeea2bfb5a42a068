"""
Adjacency-list graph for routegraph.

Implements the Graph interface with a neighbour -> weight mapping carried by
every vertex record. Suited to sparse graphs.
"""

from typing import Any, Iterator, Tuple
import logging

from graph import Graph
from graph_errors import DuplicateEdgeError, EdgeNotFoundError
from vertex import ListVertex

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph):
    """
    Weighted graph backed by per-vertex (neighbour value -> weight) maps.

    Undirected edges are stored on both endpoints. Neighbours are enumerated
    in the order their edges were added.
    """

    def _new_vertex(self, value: Any) -> ListVertex:
        return ListVertex(value)

    def _grow(self) -> None:
        pass

    # --- Mutation API ---------------------------------------------------------

    def add_edge(self, source: Any, destination: Any, weight: int) -> None:
        i, j = self._require(source, destination)
        src = self._vertices[i]
        if destination in src.adjacent:
            raise DuplicateEdgeError(source, destination)

        src.adjacent[destination] = weight
        if not self._directed:
            self._vertices[j].adjacent[source] = weight
        logger.debug(f"Added edge {source!r} -> {destination!r} ({weight})")

    def remove_edge(self, source: Any, destination: Any) -> None:
        i, j = self._require(source, destination)
        src = self._vertices[i]
        if destination not in src.adjacent:
            raise EdgeNotFoundError(source, destination)

        del src.adjacent[destination]
        if not self._directed:
            self._vertices[j].adjacent.pop(source, None)
        logger.debug(f"Removed edge {source!r} -> {destination!r}")

    def remove_vertex(self, value: Any) -> None:
        """
        Remove value and strip it from every other vertex's adjacency.

        Positions after the removed vertex shift down by one, so every
        parent left by an earlier run is cleared.

        Raises:
            UnknownVertexError: if value is absent.
        """
        (index,) = self._require(value)
        del self._vertices[index]
        self._reindex()

        for u in self._vertices:
            u.adjacent.pop(value, None)
            u.parent = None
        logger.debug(f"Removed vertex {value!r}")

    # --- Graph interface ------------------------------------------------------

    def neighbors(self, index: int) -> Iterator[Tuple[int, int]]:
        positions = self._positions
        return ((positions[v], w) for v, w in self._vertices[index].adjacent.items())

    def has_edge(self, source: Any, destination: Any) -> bool:
        i, _ = self._require(source, destination)
        return destination in self._vertices[i].adjacent

    def weight(self, source: Any, destination: Any) -> int:
        i, _ = self._require(source, destination)
        try:
            return self._vertices[i].adjacent[destination]
        except KeyError:
            raise EdgeNotFoundError(source, destination) from None
