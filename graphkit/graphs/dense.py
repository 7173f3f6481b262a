"""
Adjacency-matrix graph storage.

DenseGraph keeps a square numpy matrix of weights where NaN marks a missing
edge. The matrix starts small and doubles whenever a new vertex id does not
fit, copying the old block into the new one.
"""

from typing import Iterator, Optional, Tuple

import numpy as np

from graphkit.config import DENSE_INITIAL_CAPACITY

from .core import Graph, GraphType


class DenseGraph(Graph):
    """
    Graph backed by an adjacency matrix.

    Best for dense graphs: edge lookup is O(1) but listing the neighbors of a
    vertex scans a whole matrix row, O(V).

    Example:
        >>> G = DenseGraph(directed=True, weighted=True)
        >>> G.connect("A", "B", 2.5)
        >>> G.get_edge(0, 1).weight
        2.5
    """

    graph_type = GraphType.DENSE

    def _store_reset(self) -> None:
        self._matrix = np.full((DENSE_INITIAL_CAPACITY, DENSE_INITIAL_CAPACITY), np.nan)

    def _store_reserve(self, size: int) -> None:
        capacity = self._matrix.shape[0]
        if size <= capacity:
            return
        while capacity < size:
            capacity *= 2
        grown = np.full((capacity, capacity), np.nan)
        old = self._matrix.shape[0]
        grown[:old, :old] = self._matrix
        self._matrix = grown

    def _store_put(self, from_id: int, to_id: int, weight: float) -> bool:
        is_new = bool(np.isnan(self._matrix[from_id, to_id]))
        self._matrix[from_id, to_id] = weight
        return is_new

    def _store_get(self, from_id: int, to_id: int) -> Optional[float]:
        weight = self._matrix[from_id, to_id]
        if np.isnan(weight):
            return None
        return float(weight)

    def _store_neighbors(self, vid: int) -> Iterator[Tuple[int, float]]:
        row = self._matrix[vid, : self.vertex_count()]
        for to_id in np.flatnonzero(~np.isnan(row)):
            yield int(to_id), float(row[to_id])

    def capacity(self) -> int:
        """Current side length of the backing matrix."""
        return self._matrix.shape[0]

    def adjacency_matrix(self) -> np.ndarray:
        """
        Return a copy of the ``(V, V)`` weight matrix.

        Row and column ``i`` belong to the vertex with id ``i``; NaN means no
        edge.
        """
        n = self.vertex_count()
        return self._matrix[:n, :n].copy()
