"""
Single-source shortest paths: Dijkstra's algorithm.

Works on directed and undirected graphs with non-negative weights.
Unweighted graphs cost 1.0 per edge whatever weight is stored. An optional
set of breakpoint vertices stops the search as soon as all of them have
been finalized.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import itertools
from typing import IO, Dict, Iterable, List, Optional, Set, Tuple

from graphkit.logging import get_logger

from .checker import GraphChecker
from .core import Graph
from .elements import DEFAULT_UNWEIGHTED_VALUE, Edge, Vertex
from .render import emit, format_all_routes, format_routes

logger = get_logger(__name__)


class ShortestPathResult:
    """
    Distances and predecessor edges from one source vertex.

    Arrays are indexed by vertex id and sized to the graph at compute time.
    """

    def __init__(
        self,
        graph: Graph,
        source: Vertex,
        completed: List[bool],
        distance: List[Optional[float]],
        path_from: List[Optional[Edge]],
    ):
        self._graph = graph
        self._source = source
        self._completed = completed
        self._distance = distance
        self._path_from = path_from

    @property
    def source(self) -> Vertex:
        return self._source

    def _lookup(self, name: str) -> Optional[Vertex]:
        vertex = self._graph.get_vertex(name)
        if vertex is None or vertex.id >= len(self._distance):
            return None
        return vertex

    def is_completed(self, name: str) -> bool:
        """Return True if the vertex's distance was finalized."""
        vertex = self._lookup(name)
        return vertex is not None and self._completed[vertex.id]

    def get_routes(self, dest: str) -> List[Edge]:
        """
        Return the edges of the shortest path from the source to ``dest``.

        Returns:
            Copies of the edges in travel order; empty if ``dest`` is unknown,
            unreachable or the source itself.
        """
        vertex = self._lookup(dest)
        if vertex is None:
            return []

        reversed_routes: List[Edge] = []
        while vertex.name != self._source.name:
            edge = self._path_from[vertex.id]
            if edge is None:
                break
            reversed_routes.append(Edge(edge.source, edge.target, edge.weight))
            vertex = edge.source

        reversed_routes.reverse()
        return reversed_routes

    def get_distance(self, dest: str) -> Optional[float]:
        """Return the best known distance to ``dest``, or None if unreachable/unknown."""
        vertex = self._lookup(dest)
        if vertex is None:
            return None
        return self._distance[vertex.id]

    def has_path(self, dest: str) -> bool:
        return self.get_distance(dest) is not None

    def get_all_distances(self) -> Dict[str, float]:
        """Map every reached vertex name (source included) to its distance."""
        distances: Dict[str, float] = {}
        for vertex in self._graph.get_vertexes():
            if vertex.id < len(self._distance) and self._distance[vertex.id] is not None:
                distances[vertex.name] = self._distance[vertex.id]
        return distances

    def format_routes(self, edges: List[Edge]) -> str:
        return format_routes(self, edges)

    def print_routes(self, edges: List[Edge], file: Optional[IO[str]] = None) -> None:
        emit(self.format_routes(edges), file)

    def print_all_routes(self, file: Optional[IO[str]] = None) -> None:
        emit(format_all_routes(self, self._graph), file)

    def __repr__(self) -> str:
        return f"ShortestPathResult(source={self._source.name!r}, reached={len(self.get_all_distances())})"


class Dijkstra(GraphChecker):
    """
    Dijkstra's algorithm for single-source shortest paths.

    Raises:
        ValueError: If the graph is empty, or weighted with a negative edge.

    Complexity: O(E log E) using a binary heap with lazy deletion.

    Example:
        >>> result = Dijkstra(G).compute("A")
        >>> result.get_distance("F")
        4.0
        >>> [e.target.name for e in result.get_routes("F")]
        ['C', 'E', 'F']
    """

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.check_empty()
        if graph.weighted:
            for edge in graph.get_edges():
                if edge.weight < 0:
                    self._fail(
                        f"Dijkstra requires non-negative weights. Found negative weight "
                        f"{edge.weight} on edge ({edge.source.name}, {edge.target.name})"
                    )

    def _cost(self, edge: Edge) -> float:
        return edge.weight if self.graph.weighted else DEFAULT_UNWEIGHTED_VALUE

    def _resolve_breakpoints(self, source: Vertex, break_filter: Optional[Iterable[str]]) -> Optional[Set[str]]:
        if break_filter is None:
            return None
        names: Set[str] = set()
        for name in break_filter:
            try:
                vertex = self.check_vertex(name, False)
            except KeyError:
                logger.debug("Dropping unknown breakpoint %r", name)
                continue
            if vertex.name != source.name:
                names.add(vertex.name)
        return names or None

    def compute(self, source: str, break_filter: Optional[Iterable[str]] = None) -> ShortestPathResult:
        """
        Compute shortest paths from ``source``.

        Args:
            source: Name of the source vertex.
            break_filter: Optional vertex names; the search stops once all of
                them are finalized. Unknown names and the source itself are
                ignored; if nothing is left the search runs to completion.

        Returns:
            ShortestPathResult for this source.

        Raises:
            ValueError: If ``source`` is not a vertex of the graph.
        """
        source_v = self.check_vertex(source, True)
        breakpoints = self._resolve_breakpoints(source_v, break_filter)

        n = self.graph.vertex_count()
        completed = [False] * n
        distance: List[Optional[float]] = [None] * n
        path_from: List[Optional[Edge]] = [None] * n

        # Priority queue: (cumulative weight, insertion order, edge); ties pop in insertion order
        counter = itertools.count()
        pq: List[Tuple[float, int, Edge]] = []

        for edge in self.graph.adjacent_edges(source_v.id):
            total = self._cost(edge)
            distance[edge.target.id] = total
            path_from[edge.target.id] = edge
            heapq.heappush(pq, (total, next(counter), edge))

        completed[source_v.id] = True
        distance[source_v.id] = 0.0

        while pq:
            _, _, min_edge = heapq.heappop(pq)
            pivot = min_edge.target
            if completed[pivot.id]:
                continue

            pivot_distance = distance[pivot.id]
            for edge in self.graph.adjacent_edges(pivot.id):
                target = edge.target
                if completed[target.id]:
                    continue
                updated = pivot_distance + self._cost(edge)
                known = distance[target.id]
                if known is None or updated < known:
                    distance[target.id] = updated
                    path_from[target.id] = edge
                    heapq.heappush(pq, (updated, next(counter), edge))

            completed[pivot.id] = True

            if breakpoints is not None:
                breakpoints.discard(pivot.name)
                if not breakpoints:
                    logger.debug("All breakpoints finalized at %s, stopping early", pivot.name)
                    break

        return ShortestPathResult(self.graph, source_v, completed, distance, path_from)
