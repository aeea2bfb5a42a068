"""
Adjacency-matrix graph for routegraph.

Implements the Graph interface with one square numpy weight matrix shared by
the whole graph. Row and column indices are vertex positions. Suited to
dense graphs.
"""

from typing import Any, Iterator, Optional, Tuple
import logging

import numpy as np

from graph import Graph
from graph_config import MATRIX_ZERO_IS_NO_EDGE, WEIGHT_DTYPE
from graph_errors import DuplicateEdgeError, EdgeNotFoundError, UnsupportedOperationError
from vertex import MatrixVertex

logger = logging.getLogger(__name__)


class AdjacencyMatrixGraph(Graph):
    """
    Weighted graph backed by an N x N weight matrix and a presence mask.

    By default presence is tracked explicitly, so weight 0 is a legal edge.
    With zero_is_no_edge=True the matrix follows the older convention where
    a zero cell means "no edge": adding a weight-0 edge then records nothing
    and the pair stays edgeless.

    Vertices cannot be removed; shrinking the matrix safely means building a
    new graph.
    """

    def __init__(self, directed: bool = False, zero_is_no_edge: Optional[bool] = None, **engines: Any) -> None:
        super().__init__(directed, **engines)
        self.zero_is_no_edge = MATRIX_ZERO_IS_NO_EDGE if zero_is_no_edge is None else zero_is_no_edge
        self._weights = np.zeros((0, 0), dtype=WEIGHT_DTYPE)
        self._present = np.zeros((0, 0), dtype=bool)

    def _new_vertex(self, value: Any) -> MatrixVertex:
        return MatrixVertex(value)

    def _grow(self) -> None:
        # Existing cells keep their row/column; the new vertex gets an empty last row and column.
        self._weights = np.pad(self._weights, ((0, 1), (0, 1)))
        self._present = np.pad(self._present, ((0, 1), (0, 1)))

    @property
    def adjacency_matrix(self) -> np.ndarray:
        """Read-only view of the raw weight matrix (0 where there is no edge)."""
        view = self._weights.view()
        view.flags.writeable = False
        return view

    @property
    def edge_mask(self) -> np.ndarray:
        """Read-only boolean view: True where an edge is stored."""
        view = self._present.view()
        view.flags.writeable = False
        return view

    # --- Mutation API ---------------------------------------------------------

    def add_edge(self, source: Any, destination: Any, weight: int) -> None:
        i, j = self._require(source, destination)
        if self._present[i, j]:
            raise DuplicateEdgeError(source, destination)

        self._set(i, j, weight)
        if not self._directed:
            self._set(j, i, weight)
        logger.debug(f"Added edge {source!r} -> {destination!r} ({weight})")

    def remove_edge(self, source: Any, destination: Any) -> None:
        i, j = self._require(source, destination)
        if not self._present[i, j]:
            raise EdgeNotFoundError(source, destination)

        self._clear(i, j)
        if not self._directed:
            self._clear(j, i)
        logger.debug(f"Removed edge {source!r} -> {destination!r}")

    def remove_vertex(self, value: Any) -> None:
        raise UnsupportedOperationError(
            "AdjacencyMatrixGraph does not support vertex removal; build a new graph instead"
        )

    def _set(self, i: int, j: int, weight: int) -> None:
        self._weights[i, j] = weight
        self._present[i, j] = weight != 0 if self.zero_is_no_edge else True

    def _clear(self, i: int, j: int) -> None:
        self._weights[i, j] = 0
        self._present[i, j] = False

    # --- Graph interface ------------------------------------------------------

    def neighbors(self, index: int) -> Iterator[Tuple[int, int]]:
        row = self._weights[index]
        for j in np.flatnonzero(self._present[index]):
            yield int(j), int(row[j])

    def has_edge(self, source: Any, destination: Any) -> bool:
        i, j = self._require(source, destination)
        return bool(self._present[i, j])

    def weight(self, source: Any, destination: Any) -> int:
        i, j = self._require(source, destination)
        if not self._present[i, j]:
            raise EdgeNotFoundError(source, destination)
        return int(self._weights[i, j])
