"""
Floyd-Warshall all-pairs shortest paths for routegraph.

"No edge" is an explicit absent state: a pair without an adjacency entry
starts at infinite distance with no predecessor, so a zero or negative
weight is always a real edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional
import logging

import numpy as np

from algorithms import AllPairsEngine
from graph_config import INFINITY, NO_PREDECESSOR
from graph_errors import UnknownVertexError

if TYPE_CHECKING:
    from graph import Graph

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class AllPairsPaths:
    """
    Result of an all-pairs run.

    dist[i, j] is the shortest known cost from position i to position j
    (infinity when j is unreachable). prev[i, j] is the position of j's
    predecessor on that route, NO_PREDECESSOR when there is none.
    """

    values: List[Any]
    dist: np.ndarray
    prev: np.ndarray

    def __post_init__(self) -> None:
        self._positions: Dict[Any, int] = {v: i for i, v in enumerate(self.values)}

    def _position(self, value: Any) -> int:
        try:
            return self._positions[value]
        except KeyError:
            raise UnknownVertexError(value) from None

    def distance(self, source: Any, destination: Any) -> float:
        return float(self.dist[self._position(source), self._position(destination)])

    def predecessor(self, source: Any, destination: Any) -> Optional[Any]:
        p = int(self.prev[self._position(source), self._position(destination)])
        if p == NO_PREDECESSOR:
            return None
        return self.values[p]

    def predecessor_matrix(self) -> List[List[Optional[Any]]]:
        """prev as nested lists of vertex values, None where absent."""
        return [
            [None if p == NO_PREDECESSOR else self.values[p] for p in row]
            for row in self.prev.tolist()
        ]

    def path(self, source: Any, destination: Any) -> List[Any]:
        """
        Values along the shortest route from source to destination.

        Walks predecessors backwards from destination until source is
        reached. Returns [] when destination is unreachable, [source] when
        both are the same vertex.
        """
        s = self._position(source)
        current = self._position(destination)
        route = [self.values[current]]

        # Bounded walk: a negative cycle can leave predecessor loops behind.
        for _ in range(len(self.values)):
            if current == s:
                route.reverse()
                return route
            current = int(self.prev[s, current])
            if current == NO_PREDECESSOR:
                return []
            route.append(self.values[current])

        return []


class SimpleFloydWarshallEngine(AllPairsEngine):
    """
    Classic triple relaxation, vectorised over (i, j) for each intermediate k.

    Complexity:
        O(V^3) time, O(V^2) memory.
    """

    def all_pairs(self, graph: Graph) -> AllPairsPaths:
        """
        Relax every pair through every intermediate vertex.

        Initial state: 0 on the diagonal, the direct weight and the source
        endpoint as predecessor for every stored edge, infinity and no
        predecessor elsewhere. For each k, a pair whose i -> k or k -> j leg
        is infinite cannot improve; otherwise i -> k -> j replaces i -> j when
        strictly cheaper and inherits prev[k][j].
        """
        n = len(graph)
        dist = np.full((n, n), INFINITY, dtype=np.float64)
        prev = np.full((n, n), NO_PREDECESSOR, dtype=np.int64)
        np.fill_diagonal(dist, 0.0)

        for i in range(n):
            for j, w in graph.neighbors(i):
                if i == j:
                    continue
                dist[i, j] = w
                prev[i, j] = i

        for k in range(n):
            via = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
            better = via < dist
            if not better.any():
                continue
            dist = np.where(better, via, dist)
            prev = np.where(better, prev[np.newaxis, k, :], prev)

        logger.debug(f"Floyd-Warshall over {n} vertices")
        return AllPairsPaths(values=graph.values(), dist=dist, prev=prev)
