"""
Adjacency-list graph storage.

SparseGraph keeps, for every vertex id, a map ``target id -> weight`` plus the
target ids in ascending order (maintained with :mod:`bisect`), so neighbors
come out sorted without re-sorting on every scan.
"""

import bisect
from typing import Dict, Iterator, List, Optional, Tuple

from .core import Graph, GraphType


class _AdjacencyMap:
    """Ordered ``target id -> weight`` map of one vertex."""

    __slots__ = ("weights", "keys")

    def __init__(self) -> None:
        self.weights: Dict[int, float] = {}
        self.keys: List[int] = []

    def put(self, key: int, weight: float) -> bool:
        is_new = key not in self.weights
        if is_new:
            bisect.insort(self.keys, key)
        self.weights[key] = weight
        return is_new

    def items(self) -> Iterator[Tuple[int, float]]:
        weights = self.weights
        for key in self.keys:
            yield key, weights[key]


class SparseGraph(Graph):
    """
    Graph backed by sorted adjacency lists.

    Best for sparse graphs: memory grows with the number of edges and the
    neighbors of a vertex are listed in O(out-degree).

    Example:
        >>> G = SparseGraph(directed=False, weighted=True)
        >>> G.connect("A", "B", 2.0)
        >>> [e.target.name for e in G.adjacent_edges(1)]
        ['A']
    """

    graph_type = GraphType.SPARSE

    def _store_reset(self) -> None:
        self._adjacency: List[_AdjacencyMap] = []

    def _store_reserve(self, size: int) -> None:
        while len(self._adjacency) < size:
            self._adjacency.append(_AdjacencyMap())

    def _store_put(self, from_id: int, to_id: int, weight: float) -> bool:
        return self._adjacency[from_id].put(to_id, weight)

    def _store_get(self, from_id: int, to_id: int) -> Optional[float]:
        return self._adjacency[from_id].weights.get(to_id)

    def _store_neighbors(self, vid: int) -> Iterator[Tuple[int, float]]:
        if vid >= len(self._adjacency):
            return iter(())
        return self._adjacency[vid].items()

    def out_degree(self, vid: int) -> int:
        """Number of outgoing edges of ``vid`` (0 for an unknown id)."""
        if vid < 0 or vid >= len(self._adjacency):
            return 0
        return len(self._adjacency[vid].keys)

    def adjacency_list(self) -> List[Dict[int, float]]:
        """Return a copy of the adjacency lists as ordered dicts, one per vertex."""
        return [dict(adj.items()) for adj in self._adjacency]
