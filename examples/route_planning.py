"""Route planning example: one road map, every graph algorithm.

This example builds a small weighted road map from an edge list and runs
shortest paths, spanning trees, connectivity and cycle analysis on it. The
same text is loaded into both storage backends to show that they give the
same answers.
"""

from __future__ import annotations

import graphkit as gk

ROADS = """
A B 3
A C 1
B D 3
C B 1
C D 5
C E 2
D F 2
E F 1
B F 8
"""

TASKS = """
wake dress
dress breakfast
wake shower
shower dress
breakfast leave
"""


def main() -> None:
    """Run every algorithm on the example graphs."""
    # Directed road map: shortest routes from A
    for kind in ("sparse", "dense"):
        roads = gk.build_graph(ROADS, directed=True, weighted=True, kind=kind)
        result = gk.Dijkstra(roads).compute("A")
        print(f"[{kind}] distances from A: {result.get_all_distances()}")
    result.print_all_routes()

    # Same roads, two-way: cheapest network that still connects everything
    two_way = gk.build_graph(ROADS, directed=False, weighted=True)
    print(gk.graphs.format_graph(two_way))
    mst = gk.Mst(two_way).kruskal()
    mst.print_mst()
    print(f"Connected components: {gk.Components(two_way).compute().component_count}")

    # A morning routine as a DAG
    tasks = gk.build_graph(TASKS, directed=True)
    print(f"Routine has cycle: {gk.CycleAnalyzer(tasks).has_cycle()}")
    gk.TopoSort(tasks).kahn().print_topo_sort()

    # Close a loop and show the cycles found
    tasks.connect("leave", "wake")
    gk.CycleAnalyzer(tasks).find_cycles().print_cycles()

    print(f"\nFinal MST weight: {mst.total_weight}")


if __name__ == "__main__":
    main()
