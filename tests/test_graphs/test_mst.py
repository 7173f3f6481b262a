"""Tests for minimum spanning tree algorithms."""

from io import StringIO

import pytest

from graphkit.graphs import Mst, MstResult, build_graph

MST_TEXT = """
0 1 4
0 5 8
1 5 11
1 2 8
5 6 7
2 6 2
5 4 8
4 6 4
2 3 3
4 3 3
"""


@pytest.fixture(params=["dense", "sparse"])
def kind(request):
    return request.param


@pytest.fixture
def network(kind):
    return build_graph(MST_TEXT, directed=False, weighted=True, kind=kind)


def _undirected_pairs(result):
    return {frozenset((e.source.name, e.target.name)) for e in result.edges}


class TestLazyPrim:
    """Tests for lazy Prim."""

    def test_total_weight(self, network):
        """Test the tree weight and size."""
        result = Mst(network).lazy_prim()
        assert result.total_weight == 27.0
        assert result.edge_count() == 6
        assert result.is_spanning_tree(network.vertex_count())

    def test_starts_from_first_vertex(self, network):
        """Test that the tree grows from the vertex with id 0."""
        result = Mst(network).lazy_prim()
        assert result.edges[0].as_tuple() == ("0", "1", 4.0)
        assert result.get_weights() == [4.0, 8.0, 7.0, 2.0, 3.0, 3.0]

    def test_tree_touches_every_vertex(self, network):
        """Test that the tree spans all vertices."""
        result = Mst(network).lazy_prim()
        touched = {name for pair in _undirected_pairs(result) for name in pair}
        assert touched == {v.name for v in network.get_vertexes()}


class TestKruskal:
    """Tests for Kruskal's algorithm."""

    def test_total_weight(self, network):
        """Test the tree weight and size."""
        result = Mst(network).kruskal()
        assert result.total_weight == 27.0
        assert result.edge_count() == 6
        assert result.is_spanning_tree(7)

    def test_edges_accepted_lightest_first(self, network):
        """Test that edges come out in non-decreasing weight."""
        result = Mst(network).kruskal()
        assert result.get_weights() == [2.0, 3.0, 3.0, 4.0, 7.0, 8.0]
        assert result.edges[0].as_tuple() == ("2", "6", 2.0)

    def test_matches_prim_on_distinct_weights(self, kind):
        """Test that both algorithms pick the same unique tree."""
        g = build_graph("A B 1\nB C 2\nA C 3\nC D 4\nB D 5", directed=False, weighted=True, kind=kind)
        prim = Mst(g).lazy_prim()
        kruskal = Mst(g).kruskal()
        assert prim.total_weight == kruskal.total_weight == 7.0
        assert _undirected_pairs(prim) == _undirected_pairs(kruskal)


class TestMstPreconditions:
    """Tests for Mst preconditions."""

    def test_directed_rejected(self, kind):
        """Test that directed graphs are rejected."""
        g = build_graph("A B 1", directed=True, weighted=True, kind=kind)
        with pytest.raises(ValueError, match="not undirected"):
            Mst(g)

    def test_unweighted_rejected(self, kind):
        """Test that unweighted graphs are rejected."""
        g = build_graph("A B 1", directed=False, weighted=False, kind=kind)
        with pytest.raises(ValueError, match="not weighted"):
            Mst(g)

    def test_disconnected_rejected(self, kind):
        """Test that every vertex must be reachable."""
        g = build_graph("A B 1\nC D 1", directed=False, weighted=True, kind=kind)
        with pytest.raises(ValueError, match="connected"):
            Mst(g)

    def test_empty_rejected(self, graph_cls):
        """Test that an empty graph is rejected."""
        with pytest.raises(ValueError, match="empty"):
            Mst(graph_cls(weighted=True))


class TestMstResult:
    """Tests for the result object."""

    def test_empty_result(self):
        """Test the default result."""
        result = MstResult()
        assert result.edge_count() == 0
        assert result.total_weight == 0.0
        assert result.is_spanning_tree(1)
        assert repr(result) == "MST(edges=0, totalWeight=0.0)"

    def test_print_mst(self, kind):
        """Test the printed summary."""
        g = build_graph("A B 1\nB C 2", directed=False, weighted=True, kind=kind)
        out = StringIO()
        Mst(g).kruskal().print_mst(file=out)
        assert out.getvalue().splitlines() == [
            "=== Minimum Spanning Tree ===",
            "Total Weight: 3.0",
            "Edge Count  : 2",
            "Edges:",
            "  1. A -> B, weight: 1.0",
            "  2. B -> C, weight: 2.0",
        ]


class TestMstResultIsolation:
    """Tests that tree edges handed to callers cannot alter the result."""

    def test_mutating_edges_does_not_leak(self, network):
        """Test that editing a returned edge keeps weights and total in step."""
        result = Mst(network).kruskal()
        result.edges[0].weight = 100.0

        assert result.get_weights() == [2.0, 3.0, 3.0, 4.0, 7.0, 8.0]
        assert result.edges[0].weight == 2.0
        assert sum(e.weight for e in result.edges) == result.total_weight
        assert "Total Weight: 27.0" in result.format()
        assert "  1. 2 -> 6, weight: 2.0" in result.format()

    def test_read_only_total(self):
        """Test that the total weight cannot be reassigned."""
        result = MstResult()
        with pytest.raises(AttributeError):
            result.total_weight = 1.0
