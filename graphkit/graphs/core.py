"""
Graph contract shared by every storage backend.

Provides the abstract :class:`Graph` base. Concrete storage lives in
:mod:`graphkit.graphs.dense` (adjacency matrix) and
:mod:`graphkit.graphs.sparse` (sorted adjacency lists). Algorithms only talk
to this contract, so either backend can be passed to any of them.

Complexity (V vertices, E edges, d out-degree):
    - DenseGraph:  O(V^2) space, O(1) edge lookup, O(V) neighbor scan
    - SparseGraph: O(V + E) space, O(1) edge lookup, O(d) neighbor scan
"""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from graphkit.logging import get_logger

from .elements import DEFAULT_UNWEIGHTED_VALUE, Edge, Vertex, VertexIndex

logger = get_logger(__name__)


class GraphType(str, Enum):
    """Storage strategy of a graph."""

    DENSE = "dense"
    SPARSE = "sparse"


class Graph(ABC):
    """
    In-memory graph over named vertices.

    ``directed`` and ``weighted`` are fixed at construction. Undirected graphs
    store every connection in both directions with the same weight, and
    self-loops are never stored.

    Subclasses provide the edge store through the ``_store_*`` hooks; the
    public operations (connect, lookups, clear) are implemented once here.

    Attributes:
        directed: If True, edges are one-way.
        weighted: If False, algorithms use a unit cost per edge and ignore
            stored weights.
    """

    graph_type: GraphType

    def __init__(self, directed: bool = False, weighted: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
            weighted: If True, stored weights are meaningful to algorithms.
        """
        self._directed = bool(directed)
        self._weighted = bool(weighted)
        self._vertex_index = VertexIndex()
        self._edge_count = 0
        self._store_reset()

    # ---------- storage hooks ----------

    @abstractmethod
    def _store_reset(self) -> None:
        """Drop every stored edge."""

    @abstractmethod
    def _store_reserve(self, size: int) -> None:
        """Make room for vertex ids ``0 .. size - 1``."""

    @abstractmethod
    def _store_put(self, from_id: int, to_id: int, weight: float) -> bool:
        """Store one directed entry. Returns True if it did not exist before."""

    @abstractmethod
    def _store_get(self, from_id: int, to_id: int) -> Optional[float]:
        """Return the stored weight, or None if there is no entry."""

    @abstractmethod
    def _store_neighbors(self, vid: int) -> Iterable[Tuple[int, float]]:
        """Yield ``(to_id, weight)`` for ``vid`` in ascending ``to_id`` order."""

    # ---------- flags ----------

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def vertex_index(self) -> VertexIndex:
        """The name <-> id authority of this graph."""
        return self._vertex_index

    # ---------- mutation ----------

    def connect(self, from_name: str, to_name: str, weight: float = DEFAULT_UNWEIGHTED_VALUE) -> None:
        """
        Add or update the edge ``from_name -> to_name``.

        Missing vertices are created. Connecting an existing pair overwrites
        its weight. For undirected graphs the reverse entry is written too.
        A self-loop is silently ignored.

        Args:
            from_name: Name of the source vertex.
            to_name: Name of the target vertex.
            weight: Edge weight (default 1.0).

        Raises:
            ValueError: If a name is blank or not a string, or weight is NaN.
        """
        if not isinstance(from_name, str) or not isinstance(to_name, str):
            raise ValueError("Vertex names must be strings")
        if not from_name.strip() or not to_name.strip():
            raise ValueError("Vertex names cannot be empty")
        weight = float(weight)
        if math.isnan(weight):
            raise ValueError("Edge weight must be a number, got NaN")

        if from_name == to_name:
            return

        from_v = self._vertex_index.create_vertex(from_name)
        to_v = self._vertex_index.create_vertex(to_name)
        self._store_reserve(self._vertex_index.size())

        self._put(from_v.id, to_v.id, weight)
        if not self._directed:
            self._put(to_v.id, from_v.id, weight)

    def _put(self, from_id: int, to_id: int, weight: float) -> None:
        if self._store_put(from_id, to_id, weight):
            self._edge_count += 1
        else:
            logger.debug("Edge %d -> %d already exists, weight updated to %s", from_id, to_id, weight)

    def clear(self) -> None:
        """Remove every vertex and edge; vertex ids restart at 0."""
        self._vertex_index.clear()
        self._edge_count = 0
        self._store_reset()

    # ---------- queries ----------

    def get_edge(self, from_id: int, to_id: int) -> Optional[Edge]:
        """
        Return the edge between two vertex ids.

        Returns:
            A new Edge, or None if either id is unknown or there is no edge.
        """
        from_v = self._vertex_index.get_vertex(from_id)
        to_v = self._vertex_index.get_vertex(to_id)
        if from_v is None or to_v is None or from_id == to_id:
            return None
        weight = self._store_get(from_id, to_id)
        if weight is None:
            return None
        return Edge(from_v, to_v, weight)

    def adjacent_edges(self, vid: int) -> List[Edge]:
        """
        Return the outgoing edges of vertex ``vid``.

        Edges are ordered by ascending target id. An unknown id yields an
        empty list.
        """
        from_v = self._vertex_index.get_vertex(vid)
        if from_v is None:
            return []
        get_vertex = self._vertex_index.get_vertex
        return [Edge(from_v, get_vertex(to_id), weight) for to_id, weight in self._store_neighbors(vid)]

    def get_edges(self) -> List[Edge]:
        """
        Return every stored edge, ordered by source id then target id.

        Undirected connections appear once per direction.
        """
        edges: List[Edge] = []
        for vid in range(self._vertex_index.size()):
            edges.extend(self.adjacent_edges(vid))
        return edges

    def get_vertexes(self) -> List[Vertex]:
        """Return all vertices in ascending id order."""
        return self._vertex_index.vertexes()

    def get_vertex(self, name: str) -> Optional[Vertex]:
        """Return the vertex called ``name``, or None if unknown."""
        return self._vertex_index.find_vertex(name)

    def vertex_count(self) -> int:
        return self._vertex_index.size()

    def edge_count(self) -> int:
        """Number of stored directed entries (undirected edges count twice)."""
        return self._edge_count

    def is_empty(self) -> bool:
        return self._vertex_index.is_empty()

    def __len__(self) -> int:
        return self._vertex_index.size()

    def __contains__(self, name: object) -> bool:
        return name in self._vertex_index

    def __repr__(self) -> str:
        kind = "Directed" if self._directed else "Undirected"
        weighting = "Weighted" if self._weighted else "Unweighted"
        return (
            f"{type(self).__name__}({kind}, {weighting}, "
            f"vertices={self.vertex_count()}, edges={self._edge_count})"
        )
