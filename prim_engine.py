"""
Prim's minimum spanning tree for routegraph.
"""

from __future__ import annotations

from itertools import count
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple
import heapq
import logging

from algorithms import SpanningTreeEngine
from vertex import Color

if TYPE_CHECKING:
    from graph import Graph

logger = logging.getLogger(__name__)


class SimplePrimEngine(SpanningTreeEngine):
    """
    Heap-based Prim over every vertex of the graph.

    All vertices start in the queue, so a disconnected graph yields a
    spanning forest: the first vertex popped from an unreached component
    keeps infinite distance and no parent and becomes that tree's root.
    Negative weights need no special handling.
    """

    def spanning_tree(self, graph: Graph, source: int) -> Dict[Any, Optional[Any]]:
        vertices = graph.vertices
        for u in vertices:
            u.reset()
        vertices[source].distance = 0

        seq = count()
        pq: List[Tuple[float, int, int]] = [
            (u.distance, next(seq), i) for i, u in enumerate(vertices)
        ]
        heapq.heapify(pq)
        in_queue = [True] * len(vertices)

        while pq:
            d_u, _, u = heapq.heappop(pq)
            if not in_queue[u] or d_u != vertices[u].distance:
                continue
            in_queue[u] = False

            for v, w in graph.neighbors(u):
                if in_queue[v] and w < vertices[v].distance:
                    vertices[v].distance = w
                    vertices[v].parent = u
                    heapq.heappush(pq, (w, next(seq), v))
            vertices[u].color = Color.DONE

        total = sum(u.distance for u in vertices if u.parent is not None)
        logger.debug(f"Prim from {vertices[source].value!r}: tree weight {total}")
        return {
            u.value: (vertices[u.parent].value if u.parent is not None else None)
            for u in vertices
        }
