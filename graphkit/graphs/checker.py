"""
Precondition gate shared by the graph algorithms.

Every algorithm class derives from :class:`GraphChecker` and validates its
graph in ``__init__``, so an algorithm object only exists for a graph it can
actually run on.
"""

from graphkit.logging import get_logger

from .core import Graph
from .elements import Vertex

logger = get_logger(__name__)


class GraphChecker:
    """
    Base class holding the graph and the precondition checks.

    The ``check_*`` methods return ``self`` so they can be chained::

        self.check_empty().check_directed(False).check_weighted(True)
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    def _fail(self, message: str) -> None:
        logger.debug("%s rejected %r: %s", type(self).__name__, self.graph, message)
        raise ValueError(message)

    def check_empty(self) -> "GraphChecker":
        """Raise ValueError if the graph has no vertices."""
        if self.graph.is_empty():
            self._fail("Graph is empty")
        return self

    def check_directed(self, expected: bool) -> "GraphChecker":
        """Raise ValueError if the graph's directedness differs from ``expected``."""
        if self.graph.directed != expected:
            self._fail(f"Graph is not {'directed' if expected else 'undirected'}")
        return self

    def check_weighted(self, expected: bool) -> "GraphChecker":
        """Raise ValueError if the graph's weightedness differs from ``expected``."""
        if self.graph.weighted != expected:
            self._fail(f"Graph is not {'weighted' if expected else 'unweighted'}")
        return self

    def check_vertex(self, name: str, required: bool) -> Vertex:
        """
        Resolve a vertex name.

        Args:
            name: Vertex name to look up.
            required: Whether a missing vertex is a usage error.

        Returns:
            The vertex called ``name``.

        Raises:
            ValueError: If the vertex is unknown and ``required`` is True.
            KeyError: If the vertex is unknown and ``required`` is False.
        """
        vertex = self.graph.get_vertex(name)
        if vertex is not None:
            return vertex
        if required:
            self._fail(f"Vertex '{name}' not found")
        raise KeyError(f"Vertex '{name}' not found")
