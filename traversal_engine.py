"""
Breadth-first and depth-first traversal engine for routegraph.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Iterator, List, Tuple
import logging

from algorithms import TraversalEngine
from vertex import Color

if TYPE_CHECKING:
    from graph import Graph

logger = logging.getLogger(__name__)


class SimpleTraversalEngine(TraversalEngine):
    """
    BFS with a FIFO queue and DFS with an explicit stack.

    Both follow the graph's natural adjacency order, so the trees they leave
    behind are deterministic for a given insertion history.
    """

    def bfs(self, graph: Graph, source: int) -> List[Any]:
        vertices = graph.vertices
        s = vertices[source]

        for i, u in enumerate(vertices):
            if i != source:
                u.reset()

        s.color = Color.IN_PROGRESS
        s.distance = 0
        s.parent = None

        order = [s.value]
        queue = deque([source])

        while queue:
            u = queue.popleft()
            for v, _ in graph.neighbors(u):
                nxt = vertices[v]
                if nxt.color is Color.UNVISITED:
                    nxt.color = Color.IN_PROGRESS
                    nxt.distance = vertices[u].distance + 1
                    nxt.parent = u
                    order.append(nxt.value)
                    queue.append(v)
            vertices[u].color = Color.DONE

        logger.debug(f"BFS from {s.value!r} reached {len(order)} of {len(vertices)} vertices")
        return order

    def dfs(self, graph: Graph, source: int) -> List[Any]:
        """
        Iterative DFS equivalent to the recursive CLRS visit.

        A frame is (position, iterator over its neighbours). The counter is
        local to the run: it ticks once on discovery and once on finish.
        """
        vertices = graph.vertices
        for u in vertices:
            u.color = Color.UNVISITED
            u.parent = None

        time = 0
        order: List[Any] = []
        stack: List[Tuple[int, Iterator[Tuple[int, int]]]] = []

        def discover(index: int) -> None:
            nonlocal time
            time += 1
            vertex = vertices[index]
            vertex.discovery_time = time
            vertex.color = Color.IN_PROGRESS
            order.append(vertex.value)
            stack.append((index, graph.neighbors(index)))

        discover(source)

        while stack:
            u, pending = stack[-1]
            for v, _ in pending:
                if vertices[v].color is Color.UNVISITED:
                    vertices[v].parent = u
                    discover(v)
                    break
            else:
                stack.pop()
                vertices[u].color = Color.DONE
                time += 1
                vertices[u].finishing_time = time

        logger.debug(f"DFS from {vertices[source].value!r} visited {len(order)} vertices, clock {time}")
        return order
