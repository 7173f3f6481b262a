"""
Plain-text rendering of graphs and algorithm results.

These helpers are for humans reading a console; nothing in the algorithms
depends on their layout. Every ``format_*`` function returns a string, and
the result classes expose ``print_*`` wrappers that write it out.
"""

from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING, List, Optional, Sequence

from .core import Graph, GraphType
from .elements import Edge, Vertex

if TYPE_CHECKING:
    from .cycles import CycleResult
    from .mst import MstResult
    from .shortest import ShortestPathResult
    from .toposort import TopoSortResult

_INDENT = "  "
_CELL_WIDTH = 7


def _cell(text: str) -> str:
    return text.ljust(_CELL_WIDTH)


def emit(text: str, file: Optional[IO[str]] = None) -> None:
    """Write ``text`` followed by a newline to ``file`` (stdout by default)."""
    print(text, file=file if file is not None else sys.stdout)


def format_graph(graph: Graph) -> str:
    """
    Describe a graph: flags, counts and its storage.

    Dense graphs are shown as a labelled matrix (``nil`` = no edge), sparse
    graphs as one adjacency line per vertex with outgoing edges.
    """
    lines = [
        f"Graph: {'Directed' if graph.directed else 'Undirected'}, "
        f"{'Weighted' if graph.weighted else 'Unweighted'}",
        f"Vertices: {graph.vertex_count()}",
        f"Edges: {graph.edge_count()}",
    ]
    vertexes = graph.get_vertexes()

    if graph.graph_type is GraphType.DENSE:
        lines.append("Vertex Information:")
        lines.extend(repr(v) for v in vertexes)
        lines.append("")
        lines.append("Adjacency Matrix:")
        labels = [_cell(f"{v.id}:{v.name}") for v in vertexes]
        lines.append(_cell("") + "".join(labels))
        for v, label in zip(vertexes, labels):
            row = [label]
            for u in vertexes:
                edge = graph.get_edge(v.id, u.id)
                row.append(_cell("nil" if edge is None else str(edge.weight)))
            lines.append("".join(row).rstrip())
        return "\n".join(lines)

    lines.append("")
    lines.append("Adjacency List:")
    for v in vertexes:
        edges = graph.adjacent_edges(v.id)
        if not edges:
            continue
        parts = [f"{v.name}({v.id}) : "]
        for e in edges:
            parts.append(f"{v.name}({v.id}) -- {e.weight:.2f} -> {e.target.name}({e.target.id})   ")
        lines.append("".join(parts).rstrip())
    return "\n".join(lines)


def format_cycle(cycle: Sequence[Vertex], directed: bool) -> str:
    """
    Draw one cycle as a small diagram.

    A two-vertex cycle is drawn on one line (``A <=> B``). Longer cycles are
    folded in half: the first half on top, the second half reversed below, so
    the drawing reads as a loop::

        A -> B -> C
        ↑        ↙
        E <- D
    """
    names = [v.name for v in cycle]
    if len(names) == 2:
        return f"{_INDENT}{names[0]} <=> {names[1]}"

    is_even = len(names) % 2 == 0
    mid = len(names) // 2 if is_even else len(names) // 2 + 1

    upper = _INDENT + (" -> " if directed else " - ").join(names[:mid])
    lower = _INDENT + (" <- " if directed else " - ").join(reversed(names[mid:]))

    mid_start = _INDENT + ("↑" if directed else "|")
    if is_even:
        mid_end = "↓" if directed else "|"
        sub = 2
    else:
        mid_end = "↙" if directed else "/"
        sub = 4 if directed else 3
    connector = mid_start + " " * (len(upper) - len(_INDENT) - sub) + mid_end

    return "\n".join([upper, connector, lower])


def format_cycles(result: CycleResult) -> str:
    """List every cycle of a cycle analysis with its diagram."""
    lines = [f"Cycles Found|Cycle's Number = {len(result.cycles)}"]
    for cycle in result.cycles:
        lines.append(
            f"Printing Cycle|Vertex's Number = {len(cycle)}|"
            f"Vertexes = {' '.join(v.name for v in cycle)}"
        )
        lines.append(format_cycle(cycle, result.directed))
        lines.append("")
    return "\n".join(lines)


def format_mst(result: MstResult) -> str:
    lines = [
        "=== Minimum Spanning Tree ===",
        f"Total Weight: {result.total_weight}",
        f"Edge Count  : {result.edge_count()}",
        "Edges:",
    ]
    for index, edge in enumerate(result.edges, start=1):
        lines.append(f"{_INDENT}{index}. {edge.source.name} -> {edge.target.name}, weight: {edge.weight}")
    return "\n".join(lines)


def format_topo_sort(result: TopoSortResult) -> str:
    if not result.sorted:
        return "No vertices in the graph"
    return "Topological Sort Result: \n" + " -> ".join(str(item) for item in result.sorted)


def format_routes(result: ShortestPathResult, edges: List[Edge]) -> str:
    """
    Describe one route returned by :meth:`ShortestPathResult.get_routes`.

    Shows source and target, the distance as a sum of edge weights, and the
    hop-by-hop route.
    """
    if not edges:
        return "No route found"

    target = edges[-1].target.name
    distance = result.get_distance(target)
    hops = " ".join(f"[{e.source.name}] --{e.weight}->" for e in edges)
    return "\n".join(
        [
            "Shortest Path:",
            f"{_INDENT}source: [{result.source.name}] target: [{target}]",
            f"Distance: {distance} = {' + '.join(str(e.weight) for e in edges)}",
            f"Route: {hops} [{target}]",
        ]
    )


def format_all_routes(result: ShortestPathResult, graph: Graph) -> str:
    """Describe the shortest route from the source to every other vertex."""
    blocks = [f"=== Dijkstra Shortest Paths from [{result.source.name}] ==="]
    for vertex in graph.get_vertexes():
        if vertex.name == result.source.name:
            continue
        routes = result.get_routes(vertex.name)
        if routes:
            blocks.append(format_routes(result, routes))
        else:
            blocks.append(f"No path to [{vertex.name}]")
    return "\n".join(blocks)
