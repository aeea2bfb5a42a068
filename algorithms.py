"""
Algorithm interfaces for routegraph.

Keeps graph algorithms separate from storage. Every engine works on vertex
positions and the ``Graph.neighbors`` seam, so a single implementation
serves both the adjacency-list and adjacency-matrix backends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from floyd_warshall_engine import AllPairsPaths
    from graph import Graph


class TraversalEngine(ABC):
    """
    Interface for unweighted traversals from a single source.
    """

    @abstractmethod
    def bfs(self, graph: Graph, source: int) -> List[Any]:
        """
        Breadth-first search from the vertex at position source.

        Leaves hop counts in distance and the BFS tree in parent.

        Returns:
            Vertex values in discovery order.
        """
        raise NotImplementedError

    @abstractmethod
    def dfs(self, graph: Graph, source: int) -> List[Any]:
        """
        Depth-first search from the vertex at position source.

        Leaves discovery/finishing timestamps and the DFS tree on the
        vertices reached.

        Returns:
            Vertex values in discovery order.
        """
        raise NotImplementedError


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: int) -> Dict[Any, Optional[Any]]:
        """
        Compute shortest-path costs from source into each vertex's distance.

        Returns:
            Mapping value -> parent value on the shortest-path tree (None for
            the source and for unreachable vertices).
        """
        raise NotImplementedError


class AllPairsEngine(ABC):
    """
    Interface for all-pairs shortest-path computation.
    """

    @abstractmethod
    def all_pairs(self, graph: Graph) -> AllPairsPaths:
        """
        Compute shortest distances and predecessors for every ordered pair.
        """
        raise NotImplementedError


class SpanningTreeEngine(ABC):
    """
    Interface for minimum spanning tree construction.
    """

    @abstractmethod
    def spanning_tree(self, graph: Graph, source: int) -> Dict[Any, Optional[Any]]:
        """
        Grow a minimum spanning forest starting at source.

        Each vertex's distance holds the weight of the edge joining it to its
        parent.

        Returns:
            Mapping value -> parent value (None for roots).
        """
        raise NotImplementedError
