"""
Graph elements: vertices, edges and the vertex index.

A vertex is identified by its name. Each graph owns one VertexIndex which
hands out dense integer ids (0, 1, 2, ...) in creation order; the storage
backends use those ids to address rows of a matrix or slots of a list.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from graphkit.config import DEFAULT_UNWEIGHTED_VALUE

__all__ = ["DEFAULT_UNWEIGHTED_VALUE", "Vertex", "Edge", "VertexIndex"]


@dataclass(frozen=True)
class Vertex:
    """
    Immutable vertex identity.

    Attributes:
        name: Vertex name, unique within one graph.
        id: Dense integer id assigned by the owning VertexIndex.
    """

    name: str
    id: int

    def __repr__(self) -> str:
        return f"V(id={self.id}, name='{self.name}')"


@dataclass
class Edge:
    """
    Directed edge record.

    Edges are value objects: graphs build fresh instances on every query,
    so changing ``weight`` on a returned edge does not modify the graph.

    Attributes:
        source: Vertex the edge leaves.
        target: Vertex the edge enters.
        weight: Edge weight (1.0 unless given).
    """

    source: Vertex
    target: Vertex
    weight: float = DEFAULT_UNWEIGHTED_VALUE

    def as_tuple(self) -> Tuple[str, str, float]:
        """Return ``(source name, target name, weight)``."""
        return self.source.name, self.target.name, self.weight

    def __repr__(self) -> str:
        return f"E(from={self.source.name}, to={self.target.name}, weight={self.weight})"


class VertexIndex:
    """
    Bidirectional name <-> id mapping for one graph.

    Ids always form the contiguous range ``[0, size)``. The index only grows;
    :meth:`clear` empties it and restarts ids at 0.
    """

    def __init__(self) -> None:
        self._vertexes: List[Vertex] = []
        self._by_name: Dict[str, Vertex] = {}

    def create_vertex(self, name: str) -> Vertex:
        """
        Return the vertex called ``name``, creating it if needed.

        Args:
            name: Vertex name.

        Returns:
            The existing vertex for ``name``, or a new one carrying the next id.
        """
        vertex = self._by_name.get(name)
        if vertex is None:
            vertex = Vertex(name, len(self._vertexes))
            self._vertexes.append(vertex)
            self._by_name[name] = vertex
        return vertex

    def get_vertex(self, vid: int) -> Optional[Vertex]:
        """Return the vertex with id ``vid``, or None if out of range."""
        if vid < 0 or vid >= len(self._vertexes):
            return None
        return self._vertexes[vid]

    def find_vertex(self, name: str) -> Optional[Vertex]:
        """Return the vertex called ``name``, or None if unknown."""
        return self._by_name.get(name)

    def vertexes(self) -> List[Vertex]:
        """Return all vertices in ascending id order."""
        return list(self._vertexes)

    def size(self) -> int:
        return len(self._vertexes)

    def is_empty(self) -> bool:
        return not self._vertexes

    def clear(self) -> None:
        self._vertexes.clear()
        self._by_name.clear()

    def __len__(self) -> int:
        return len(self._vertexes)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self):
        return iter(list(self._vertexes))
