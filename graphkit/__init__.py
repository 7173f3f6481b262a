"""graphkit - an in-memory graph engine with interchangeable dense and sparse storage."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# Graph engine
from .graphs import (
    DEFAULT_UNWEIGHTED_VALUE,
    Components,
    ComponentsResult,
    CycleAnalyzer,
    CycleResult,
    DenseGraph,
    Dijkstra,
    Edge,
    Graph,
    GraphChecker,
    GraphType,
    Mst,
    MstResult,
    ShortestPathResult,
    SortedVertex,
    SparseGraph,
    TopoSort,
    TopoSortResult,
    Traverse,
    UnionFind,
    Vertex,
    VertexIndex,
    build_graph,
    new_graph,
    parse_edge_line,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph model
    "DEFAULT_UNWEIGHTED_VALUE",
    "Vertex",
    "Edge",
    "VertexIndex",
    "Graph",
    "GraphType",
    "DenseGraph",
    "SparseGraph",
    "GraphChecker",
    "UnionFind",
    # Algorithms
    "Traverse",
    "Components",
    "ComponentsResult",
    "CycleAnalyzer",
    "CycleResult",
    "Dijkstra",
    "ShortestPathResult",
    "Mst",
    "MstResult",
    "TopoSort",
    "TopoSortResult",
    "SortedVertex",
    # Builders
    "build_graph",
    "new_graph",
    "parse_edge_line",
    # Diagnostics and logging
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
