"""
Topological sorting of directed acyclic graphs (Kahn's algorithm).

References:
    - Kahn, A. B. "Topological sorting of large networks" (1962).
"""

from collections import deque
from dataclasses import dataclass
from typing import IO, List, Optional, Set, Tuple

from graphkit.logging import get_logger

from .checker import GraphChecker
from .core import Graph
from .cycles import CycleAnalyzer
from .elements import Vertex
from .render import emit, format_topo_sort

logger = get_logger(__name__)


@dataclass(frozen=True)
class SortedVertex:
    """
    A vertex in topological order.

    Attributes:
        degree: Layer in which the vertex was released: 0 for vertices with
            no incoming edges, parent layer + 1 otherwise.
        vertex: The vertex.
    """

    degree: int
    vertex: Vertex

    def __str__(self) -> str:
        return f"{self.vertex.name}({self.degree})"


class TopoSortResult:
    """Vertices in topological order."""

    def __init__(self, items: List[SortedVertex]):
        self._sorted = tuple(items)
        self._positions = {item.vertex.name: i for i, item in enumerate(self._sorted)}

    @property
    def sorted(self) -> Tuple[SortedVertex, ...]:
        return self._sorted

    def is_valid(self, total_vertices: int) -> bool:
        """Return True if every one of ``total_vertices`` vertices was emitted."""
        return len(self._sorted) == total_vertices

    def get_vertex_names(self) -> List[str]:
        return [item.vertex.name for item in self._sorted]

    def get_position(self, name: str) -> Optional[int]:
        """Return the index of ``name`` in the order, or None if absent."""
        return self._positions.get(name)

    def format(self) -> str:
        return format_topo_sort(self)

    def print_topo_sort(self, file: Optional[IO[str]] = None) -> None:
        emit(self.format(), file)

    def __len__(self) -> int:
        return len(self._sorted)

    def __repr__(self) -> str:
        return f"TopoSortResult({' -> '.join(str(item) for item in self._sorted)})"


class TopoSort(GraphChecker):
    """
    Topological sort of a directed acyclic graph.

    Raises:
        ValueError: If the graph is empty, undirected or contains a cycle.

    Example:
        >>> TopoSort(G).kahn().get_vertex_names()
        ['A', 'B', 'C']
    """

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.check_empty().check_directed(True)
        if CycleAnalyzer(graph).has_cycle():
            self._fail("Graph contains cycles, cannot compute topological sort")

    def kahn(self) -> TopoSortResult:
        """
        Kahn's algorithm.

        Vertices with no incoming edges are released first, in ascending id
        order; afterwards a vertex is released when its last incoming edge
        has been processed.

        Complexity: O(V + E) for sparse storage, O(V^2) for dense storage.
        """
        in_degree = [0] * self.graph.vertex_count()
        for edge in self.graph.get_edges():
            in_degree[edge.target.id] += 1

        queue = deque(SortedVertex(0, v) for v in self.graph.get_vertexes() if in_degree[v.id] == 0)
        processed: Set[int] = set()
        order: List[SortedVertex] = []

        while queue:
            current = queue.popleft()
            processed.add(current.vertex.id)
            order.append(current)

            for edge in self.graph.adjacent_edges(current.vertex.id):
                neighbor = edge.target
                if neighbor.id in processed:
                    continue
                in_degree[neighbor.id] -= 1
                if in_degree[neighbor.id] == 0:
                    queue.append(SortedVertex(current.degree + 1, neighbor))

        if len(order) != len(in_degree):
            logger.warning("Topological order covers %d of %d vertices", len(order), len(in_degree))
        return TopoSortResult(order)
