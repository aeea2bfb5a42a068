"""
Heap-based DijkstraEngine implementation for routegraph.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.
"""

from __future__ import annotations

from itertools import count
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple
import heapq
import logging

from algorithms import DijkstraEngine

if TYPE_CHECKING:
    from graph import Graph

logger = logging.getLogger(__name__)


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O((V + E) log V); every vertex starts in the heap.

    Precondition:
        Edge weights are non-negative. Negative weights are neither detected
        nor rejected and give undefined (wrong) distances. The run still
        terminates because a vertex is final once popped.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def shortest_paths(self, graph: Graph, source: int) -> Dict[Any, Optional[Any]]:
        """
        Dijkstra that records distance and parent on each vertex.

        Every vertex is pushed up front in insertion order with a sequence
        number, so equal distances pop in insertion order. Decrease-key is a
        fresh push with a new sequence number; the superseded entry is
        skipped when popped. The returned mapping covers every vertex and
        lets callers walk parents back to the source.
        """
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

        vertices = graph.vertices
        for u in vertices:
            u.reset()
        vertices[source].distance = 0

        seq = count()
        pq: List[Tuple[float, int, int]] = []
        for i, u in enumerate(vertices):
            pq.append((u.distance, next(seq), i))
            self.last_heap_pushes += 1
        heapq.heapify(pq)
        done = [False] * len(vertices)

        while pq:
            d_u, _, u = heapq.heappop(pq)
            self.last_heap_pops += 1

            # Skip outdated entries
            if done[u] or d_u != vertices[u].distance:
                continue
            done[u] = True

            for v, w in graph.neighbors(u):
                self.last_edges_examined += 1
                if done[v]:
                    continue
                alt = d_u + w
                if alt < vertices[v].distance:
                    vertices[v].distance = alt
                    vertices[v].parent = u
                    heapq.heappush(pq, (alt, next(seq), v))
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1

        logger.debug(
            f"Dijkstra from {vertices[source].value!r}: "
            f"{self.last_heap_pops} pops, {self.last_relaxed} relaxations"
        )
        return {
            u.value: (vertices[u.parent].value if u.parent is not None else None)
            for u in vertices
        }
