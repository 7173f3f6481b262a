"""
Utility functions for building graphs.

Provides the storage factory and a reader for whitespace-separated edge
lists, one edge per line::

    A B 3
    A C      # weight defaults to 1.0
"""

import re
from typing import Optional, Tuple, Union

from graphkit import config
from graphkit.logging import get_logger

from .core import Graph, GraphType
from .dense import DenseGraph
from .elements import DEFAULT_UNWEIGHTED_VALUE
from .sparse import SparseGraph

logger = get_logger(__name__)

_DELIMITER = re.compile(r"\s+")


def new_graph(kind: Union[GraphType, str, None] = None, directed: bool = False, weighted: bool = False) -> Graph:
    """
    Create an empty graph with the requested storage.

    Args:
        kind: GraphType or its value ("dense"/"sparse"). Defaults to
            ``config.DEFAULT_GRAPH_TYPE``.
        directed: If True, graph is directed.
        weighted: If True, graph is weighted.

    Raises:
        ValueError: If ``kind`` is not a known storage type.
    """
    graph_type = GraphType(kind if kind is not None else config.DEFAULT_GRAPH_TYPE)
    if graph_type is GraphType.DENSE:
        return DenseGraph(directed=directed, weighted=weighted)
    return SparseGraph(directed=directed, weighted=weighted)


def parse_edge_line(line: str) -> Optional[Tuple[str, str, float]]:
    """
    Parse one edge-list line.

    Args:
        line: ``<from> <to> [weight]``, whitespace-delimited.

    Returns:
        ``(from, to, weight)``, or None for blank or malformed lines (fewer
        than two tokens). A missing or non-numeric weight becomes 1.0.

    Example:
        >>> parse_edge_line("A  B 2.5")
        ('A', 'B', 2.5)
        >>> parse_edge_line("A") is None
        True
    """
    parts = _DELIMITER.split(line.strip())
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None

    weight = DEFAULT_UNWEIGHTED_VALUE
    if len(parts) > 2:
        try:
            weight = float(parts[2])
        except ValueError:
            weight = DEFAULT_UNWEIGHTED_VALUE
    return parts[0], parts[1], weight


def build_graph(
    text: str,
    directed: bool = False,
    weighted: bool = False,
    kind: Union[GraphType, str, None] = None,
) -> Graph:
    """
    Build a graph from an edge-list text.

    Lines that do not parse are skipped.

    Args:
        text: Edge list, one ``<from> <to> [weight]`` per line.
        directed: If True, graph is directed.
        weighted: If True, graph is weighted.
        kind: Storage type, see :func:`new_graph`.

    Returns:
        The populated graph.

    Example:
        >>> G = build_graph("A B 1\\nB C 2", directed=True, weighted=True, kind="dense")
        >>> G.vertex_count()
        3
    """
    graph = new_graph(kind, directed=directed, weighted=weighted)
    skipped = 0
    for line in text.splitlines():
        if not line.strip():
            continue
        parsed = parse_edge_line(line)
        if parsed is None:
            skipped += 1
            continue
        graph.connect(*parsed)

    if skipped:
        logger.debug("Skipped %d malformed edge line(s)", skipped)
    return graph
