"""Benchmark dense vs sparse storage on the same random graphs."""

import time
from typing import Dict

import numpy as np

import graphkit as gk


def _random_graph(kind: str, n_vertices: int, n_edges: int, seed: int = 0) -> gk.Graph:
    rng = np.random.default_rng(seed)
    graph = gk.new_graph(kind, directed=True, weighted=True)
    for _ in range(n_edges):
        u, v = rng.integers(0, n_vertices, size=2)
        graph.connect(f"v{u}", f"v{v}", float(rng.integers(1, 100)))
    return graph


def benchmark_storage(
    kind: str,
    n_vertices: int = 500,
    n_edges: int = 5000,
) -> Dict[str, float]:
    """Benchmark building a graph and running Dijkstra on it.

    Args:
        kind: Storage type ('dense' or 'sparse').
        n_vertices: Number of distinct vertex names to draw from.
        n_edges: Number of connect() calls.

    Returns:
        Dictionary with timing results.
    """
    start = time.perf_counter()
    graph = _random_graph(kind, n_vertices, n_edges)
    build_time = time.perf_counter() - start

    source = graph.get_vertexes()[0].name

    # Warmup
    gk.Dijkstra(graph).compute(source)

    start = time.perf_counter()
    gk.Dijkstra(graph).compute(source)
    dijkstra_time = time.perf_counter() - start

    start = time.perf_counter()
    gk.CycleAnalyzer(graph).has_cycle()
    cycle_time = time.perf_counter() - start

    return {
        "kind": kind,
        "n_vertices": graph.vertex_count(),
        "n_edges": graph.edge_count(),
        "build_time_sec": build_time,
        "dijkstra_time_sec": dijkstra_time,
        "has_cycle_time_sec": cycle_time,
    }


if __name__ == "__main__":
    print("Benchmarking graph storage...")

    for kind in ("dense", "sparse"):
        results = benchmark_storage(kind)
        print(f"{kind} ({results['n_vertices']} vertices, {results['n_edges']} edges):")
        print(f"  Build:     {results['build_time_sec']*1e3:.2f} ms")
        print(f"  Dijkstra:  {results['dijkstra_time_sec']*1e3:.2f} ms")
        print(f"  has_cycle: {results['has_cycle_time_sec']*1e3:.2f} ms")
