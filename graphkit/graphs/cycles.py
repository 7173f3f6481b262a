"""
Cycle detection and enumeration for directed and undirected graphs.

A depth-first search keeps two sets: ``visited`` (every vertex ever reached)
and ``marked`` (vertices on the current DFS stack), plus the path from the
DFS root to the current vertex. Reaching a marked neighbor closes a cycle,
which is the suffix of the path starting at that neighbor.

A neighbor that is visited but no longer on the stack is descended into
again with the current path; this is what finds cycles that share edges with
a cycle found earlier (``A->B->C->D->A`` plus ``B->D`` gives ``A B C D`` and
``A B D``).

For undirected graphs each cycle is found once per direction, so cycles are
de-duplicated by their sorted vertex names. Every undirected edge also shows
up as a two-vertex cycle ``A <=> B``.
"""

from typing import IO, Iterator, List, Optional, Set, Tuple

from graphkit.diagnostics import trace
from graphkit.logging import get_logger

from .checker import GraphChecker
from .core import Graph
from .elements import Edge, Vertex
from .render import emit, format_cycles

logger = get_logger(__name__)


class CycleResult:
    """
    Cycles found by :meth:`CycleAnalyzer.find_cycles`.

    Each cycle is a tuple of vertices from the cycle start to the vertex that
    closes it (the edge back to the start is implied).
    """

    def __init__(self, directed: bool):
        self._directed = directed
        self._cycles: List[Tuple[Vertex, ...]] = []
        self._canonical: Set[str] = set()

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def cycles(self) -> Tuple[Tuple[Vertex, ...], ...]:
        return tuple(self._cycles)

    def has_cycle(self) -> bool:
        return bool(self._cycles)

    def cycle_names(self) -> List[List[str]]:
        """Return the cycles as lists of vertex names."""
        return [[v.name for v in cycle] for cycle in self._cycles]

    def _add(self, cycle: List[Vertex]) -> bool:
        if not self._directed:
            canonical = " ".join(sorted(v.name for v in cycle))
            if canonical in self._canonical:
                return False
            self._canonical.add(canonical)
        self._cycles.append(tuple(cycle))
        return True

    def format(self) -> str:
        return format_cycles(self)

    def print_cycles(self, file: Optional[IO[str]] = None) -> None:
        """Print every cycle with a small diagram to stdout or ``file``."""
        emit(self.format(), file)

    def __len__(self) -> int:
        return len(self._cycles)

    def __repr__(self) -> str:
        return f"CycleResult(directed={self._directed}, cycles={self.cycle_names()})"


class _Frame:
    __slots__ = ("vertex", "edges", "path")

    def __init__(self, vertex: Vertex, edges: Iterator[Edge], path: List[Vertex]):
        self.vertex = vertex
        self.edges = edges
        self.path = path


class CycleAnalyzer(GraphChecker):
    """
    Find cycles in a graph of either directedness.

    Raises:
        ValueError: If the graph is empty.

    Example:
        >>> result = CycleAnalyzer(G).find_cycles()
        >>> result.cycle_names()
        [['A', 'B', 'C'], ['C', 'D', 'E']]
    """

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.check_empty()

    def has_cycle(self) -> bool:
        """Return True as soon as any cycle is found."""
        return self.find_cycles(quick_return=True).has_cycle()

    def find_cycles(self, quick_return: bool = False) -> CycleResult:
        """
        Find cycles, starting a DFS from every vertex not yet visited.

        Args:
            quick_return: Stop at the first cycle found. The result then holds
                exactly that cycle. Fully explored vertices are not walked
                again, so the search is O(V + E).

        Returns:
            CycleResult with the discovered cycles.
        """
        result = CycleResult(self.graph.directed)
        visited: Set[str] = set()

        for vertex in self.graph.get_vertexes():
            if vertex.name in visited:
                continue
            if self._search(vertex, visited, result, quick_return):
                logger.debug("Cycle found from root %s, stopping early", vertex.name)
                break

        logger.debug("Cycle analysis found %d cycle(s)", len(result))
        return result

    def _search(self, root: Vertex, visited: Set[str], result: CycleResult, quick_return: bool) -> bool:
        """
        Run one DFS from ``root``.

        Each frame carries its own copy of the path so sibling branches never
        see each other's vertices.

        Returns:
            True if ``quick_return`` is set and a cycle was recorded.
        """
        marked: Set[str] = set()
        stack: List[_Frame] = []

        def push(vertex: Vertex, parent_path: List[Vertex]) -> None:
            visited.add(vertex.name)
            marked.add(vertex.name)
            stack.append(_Frame(vertex, iter(self.graph.adjacent_edges(vertex.id)), parent_path + [vertex]))
            trace(logger, "%s enter %s | visited=%s | marked=%s", "- " * len(stack), vertex.name, visited, marked)

        push(root, [])
        while stack:
            frame = stack[-1]
            edge = next(frame.edges, None)
            if edge is None:
                stack.pop()
                marked.discard(frame.vertex.name)
                trace(logger, "%s leave %s | marked=%s", "- " * (len(stack) + 1), frame.vertex.name, marked)
                continue

            target = edge.target
            if target.name not in visited:
                push(target, frame.path)
            elif target.name in marked:
                start = next(i for i, v in enumerate(frame.path) if v.name == target.name)
                cycle = frame.path[start:]
                trace(logger, "back edge %s -> %s closes %s", frame.vertex.name, target.name, cycle)
                if result._add(cycle) and quick_return:
                    return True
            elif not quick_return:
                # Visited through another branch: walk it again from here.
                # A finished vertex cannot lead back onto the stack, so a
                # quick search gains nothing by re-entering it.
                push(target, frame.path)

        return False
