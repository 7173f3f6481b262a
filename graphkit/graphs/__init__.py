"""
Graph engine for graphkit.

This package provides:
- Graph storage behind one contract (DenseGraph: adjacency matrix,
  SparseGraph: sorted adjacency lists)
- Traversal (DFS, BFS) with visitor callbacks
- Connected components (union-find)
- Cycle detection and enumeration
- Shortest paths (Dijkstra, with early stop on breakpoint vertices)
- Minimum spanning trees (lazy Prim, Kruskal)
- Topological sort (Kahn)

Algorithms validate their graph when constructed and return immutable
result objects. Adjacent edges are always processed in ascending vertex-id
order, so results are deterministic.
"""

from .checker import GraphChecker
from .components import Components, ComponentsResult
from .core import Graph, GraphType
from .cycles import CycleAnalyzer, CycleResult
from .dense import DenseGraph
from .elements import DEFAULT_UNWEIGHTED_VALUE, Edge, Vertex, VertexIndex
from .mst import Mst, MstResult
from .render import format_cycle, format_cycles, format_graph, format_mst, format_routes, format_topo_sort
from .shortest import Dijkstra, ShortestPathResult
from .sparse import SparseGraph
from .toposort import SortedVertex, TopoSort, TopoSortResult
from .traversal import Traverse
from .unionfind import UnionFind
from .utils import build_graph, new_graph, parse_edge_line

__all__ = [
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
    "build_graph",
    "new_graph",
    "parse_edge_line",
    "format_graph",
    "format_cycle",
    "format_cycles",
    "format_mst",
    "format_routes",
    "format_topo_sort",
]

# Example usage:
# from graphkit.graphs import Dijkstra, build_graph
#
# G = build_graph("A B 3\nA C 1\nC B 1", directed=True, weighted=True, kind="sparse")
# result = Dijkstra(G).compute("A")
# result.get_distance("B")                        # 2.0
# [e.target.name for e in result.get_routes("B")]  # ['C', 'B']
