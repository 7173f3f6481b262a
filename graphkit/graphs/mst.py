"""
Minimum spanning tree algorithms: lazy Prim and Kruskal.

Lazy Prim keeps every edge seen from the growing tree in one priority queue
and discards edges into the tree only when they are popped. Kruskal pops all
edges globally by weight and uses union-find to reject the ones that would
close a cycle.

Both require a connected, undirected, weighted graph and reach the same
total weight; with tied weights the chosen edges may differ.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 4.3 (lazy Prim).
"""

import heapq
import itertools
from typing import IO, Iterable, List, Optional, Tuple

from graphkit.logging import get_logger

from .checker import GraphChecker
from .components import Components
from .core import Graph
from .elements import Edge, Vertex
from .render import emit, format_mst
from .unionfind import UnionFind

logger = get_logger(__name__)


class MstResult:
    """
    Edges of a minimum spanning tree and their total weight.

    Attributes:
        edges: Tree edges in the order they were accepted. Each access
            returns fresh copies, so the tree cannot drift from
            ``total_weight``.
        total_weight: Sum of the tree edge weights.
    """

    def __init__(self, edges: Iterable[Edge] = (), total_weight: float = 0.0):
        self._edges: Tuple[Tuple[Vertex, Vertex, float], ...] = tuple(
            (e.source, e.target, e.weight) for e in edges
        )
        self._total_weight = total_weight

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(Edge(source, target, weight) for source, target, weight in self._edges)

    @property
    def total_weight(self) -> float:
        return self._total_weight

    def edge_count(self) -> int:
        return len(self._edges)

    def is_spanning_tree(self, vertex_count: int) -> bool:
        """Return True if the tree has exactly ``vertex_count - 1`` edges."""
        return len(self._edges) == vertex_count - 1

    def get_weights(self) -> List[float]:
        return [weight for _, _, weight in self._edges]

    def format(self) -> str:
        return format_mst(self)

    def print_mst(self, file: Optional[IO[str]] = None) -> None:
        emit(self.format(), file)

    def __repr__(self) -> str:
        return f"MST(edges={len(self._edges)}, totalWeight={self.total_weight})"


class Mst(GraphChecker):
    """
    Minimum spanning tree of a connected, undirected, weighted graph.

    Raises:
        ValueError: If the graph is empty, directed, unweighted or not
            connected.

    Example:
        >>> Mst(G).kruskal().total_weight
        37.0
    """

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.check_empty().check_directed(False).check_weighted(True)
        if Components(graph).compute().component_count != 1:
            self._fail("The graph must be connected.")

    def lazy_prim(self) -> MstResult:
        """
        Lazy Prim from the vertex with id 0.

        Complexity: O(E log E).
        """
        visited = [False] * self.graph.vertex_count()
        counter = itertools.count()
        pq: List[Tuple[float, int, Edge]] = []
        edges: List[Edge] = []
        total = 0.0

        def visit(vertex: Vertex) -> None:
            visited[vertex.id] = True
            for edge in self.graph.adjacent_edges(vertex.id):
                heapq.heappush(pq, (edge.weight, next(counter), edge))

        visit(self.graph.vertex_index.get_vertex(0))
        while pq:
            _, _, edge = heapq.heappop(pq)
            if visited[edge.target.id]:
                continue
            edges.append(edge)
            total += edge.weight
            visit(edge.target)

        logger.debug("Lazy Prim accepted %d edge(s), total weight %s", len(edges), total)
        return MstResult(tuple(edges), total)

    def kruskal(self) -> MstResult:
        """
        Kruskal over every stored edge, lightest first.

        Complexity: O(E log E) for the heap plus near O(1) union-find steps.
        """
        uf: UnionFind[Vertex] = UnionFind(key=lambda v: v.id)
        counter = itertools.count()
        pq = [(edge.weight, next(counter), edge) for edge in self.graph.get_edges()]
        heapq.heapify(pq)
        edges: List[Edge] = []
        total = 0.0

        while pq:
            _, _, edge = heapq.heappop(pq)
            if uf.union(edge.source, edge.target):
                edges.append(edge)
                total += edge.weight

        logger.debug("Kruskal accepted %d edge(s), total weight %s", len(edges), total)
        return MstResult(tuple(edges), total)
