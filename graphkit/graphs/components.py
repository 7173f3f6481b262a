"""
Connected components of an undirected graph.

One depth-first pass labels the components; every edge followed to a new
vertex is recorded in a union-find so that connectivity queries afterwards
are near O(1).
"""

from typing import Iterator, List, Tuple

from graphkit.logging import get_logger

from .checker import GraphChecker
from .core import Graph
from .elements import Edge, Vertex
from .unionfind import UnionFind

logger = get_logger(__name__)


class ComponentsResult:
    """
    Outcome of :meth:`Components.compute`.

    Only valid for the graph state it was computed on.
    """

    def __init__(self, graph: Graph, component_count: int, uf: UnionFind[Vertex]):
        self._graph = graph
        self._component_count = component_count
        self._uf = uf

    @property
    def component_count(self) -> int:
        """Number of connected components."""
        return self._component_count

    def has_path(self, src: str, dest: str) -> bool:
        """
        Return True if both vertices exist and lie in the same component.

        Unknown names give False rather than an error.
        """
        src_v = self._graph.get_vertex(src)
        dest_v = self._graph.get_vertex(dest)
        if src_v is None or dest_v is None:
            return False
        return self._uf.is_connected(src_v, dest_v)

    def __repr__(self) -> str:
        return f"ComponentsResult(component_count={self._component_count})"


class Components(GraphChecker):
    """
    Connectivity analysis for undirected graphs.

    Raises:
        ValueError: If the graph is empty or directed.

    Example:
        >>> result = Components(G).compute()
        >>> result.component_count
        2
        >>> result.has_path("A", "C")
        True
    """

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.check_empty().check_directed(False)

    def compute(self) -> ComponentsResult:
        """
        Label the connected components.

        Complexity: O(V + E) union-find operations (amortized near O(1) each).
        """
        visited = [False] * self.graph.vertex_count()
        uf: UnionFind[Vertex] = UnionFind(key=lambda v: v.id)
        count = 0

        for vertex in self.graph.get_vertexes():
            uf.add(vertex)
            if not visited[vertex.id]:
                self._dfs(vertex, visited, uf)
                count += 1

        logger.debug("Found %d component(s) over %d vertices", count, len(visited))
        return ComponentsResult(self.graph, count, uf)

    def _dfs(self, root: Vertex, visited: List[bool], uf: UnionFind[Vertex]) -> None:
        visited[root.id] = True
        stack: List[Tuple[Vertex, Iterator[Edge]]] = [(root, iter(self.graph.adjacent_edges(root.id)))]

        while stack:
            vertex, edges = stack[-1]
            edge = next(edges, None)
            if edge is None:
                stack.pop()
                continue
            target = edge.target
            if visited[target.id]:
                continue
            uf.union(vertex, target)
            visited[target.id] = True
            stack.append((target, iter(self.graph.adjacent_edges(target.id))))
