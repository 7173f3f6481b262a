"""Tests for shortest path algorithms."""

from io import StringIO

import pytest

from graphkit.graphs import Dijkstra, build_graph

DIJKSTRA_TEXT = """
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


@pytest.fixture(params=["dense", "sparse"])
def kind(request):
    return request.param


@pytest.fixture
def road_map(kind):
    return build_graph(DIJKSTRA_TEXT, directed=True, weighted=True, kind=kind)


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_distances(self, road_map):
        """Test distances to every vertex from A."""
        result = Dijkstra(road_map).compute("A")
        assert result.get_all_distances() == {"A": 0.0, "B": 2.0, "C": 1.0, "D": 5.0, "E": 3.0, "F": 4.0}
        assert all(result.is_completed(name) for name in "ABCDEF")

    def test_route(self, road_map):
        """Test path reconstruction to F."""
        result = Dijkstra(road_map).compute("A")
        routes = result.get_routes("F")
        assert [e.as_tuple() for e in routes] == [("A", "C", 1.0), ("C", "E", 2.0), ("E", "F", 1.0)]
        assert sum(e.weight for e in routes) == result.get_distance("F")

    def test_route_via_relaxed_vertex(self, road_map):
        """Test that B is reached through C, not directly."""
        result = Dijkstra(road_map).compute("A")
        assert [e.target.name for e in result.get_routes("B")] == ["C", "B"]
        assert [e.target.name for e in result.get_routes("D")] == ["C", "B", "D"]

    def test_route_to_source_is_empty(self, road_map):
        """Test that the source has no route and distance zero."""
        result = Dijkstra(road_map).compute("A")
        assert result.get_routes("A") == []
        assert result.get_distance("A") == 0.0
        assert result.source.name == "A"

    def test_unreachable_and_unknown(self, kind):
        """Test vertices that cannot be reached or do not exist."""
        g = build_graph("A B 1\nC D 1", directed=True, weighted=True, kind=kind)
        result = Dijkstra(g).compute("A")
        assert result.get_distance("C") is None
        assert not result.has_path("C")
        assert result.get_routes("C") == []
        assert not result.is_completed("C")
        assert result.get_routes("Z") == []
        assert result.get_distance("Z") is None

    def test_unweighted_counts_hops(self, kind):
        """Test that stored weights are ignored on unweighted graphs."""
        g = build_graph(DIJKSTRA_TEXT, directed=True, weighted=False, kind=kind)
        result = Dijkstra(g).compute("A")
        assert result.get_all_distances() == {"A": 0.0, "B": 1.0, "C": 1.0, "D": 2.0, "E": 2.0, "F": 2.0}
        assert [e.target.name for e in result.get_routes("F")] == ["B", "F"]

    def test_undirected(self, kind):
        """Test that undirected edges can be travelled both ways."""
        g = build_graph("A B 4\nB C 1\nC A 1", directed=False, weighted=True, kind=kind)
        result = Dijkstra(g).compute("B")
        assert result.get_distance("A") == 2.0
        assert [e.target.name for e in result.get_routes("A")] == ["C", "A"]

    def test_zero_weight_edges(self, kind):
        """Test that zero weights are allowed."""
        g = build_graph("A B 0\nB C 0", directed=True, weighted=True, kind=kind)
        assert Dijkstra(g).compute("A").get_distance("C") == 0.0


class TestDijkstraBreakpoints:
    """Tests for early stopping on breakpoint vertices."""

    def test_stops_after_breakpoint(self, road_map):
        """Test that the search stops once C is finalized."""
        result = Dijkstra(road_map).compute("A", break_filter={"C"})
        assert result.is_completed("C")
        assert not result.is_completed("B")
        assert result.get_distance("C") == 1.0
        assert result.get_distance("B") == 2.0
        assert result.get_distance("D") == 6.0
        assert result.get_distance("E") == 3.0
        assert result.get_distance("F") is None

    def test_waits_for_every_breakpoint(self, road_map):
        """Test that all breakpoints must be finalized before stopping."""
        result = Dijkstra(road_map).compute("A", break_filter=["C", "E"])
        assert result.is_completed("E")
        assert result.get_distance("F") == 4.0
        assert not result.is_completed("D")

    @pytest.mark.parametrize("break_filter", [{"Z"}, {"A"}, {"A", "Z"}, set()])
    def test_ignored_breakpoints_run_to_completion(self, road_map, break_filter):
        """Test that unknown names and the source never stop the search."""
        result = Dijkstra(road_map).compute("A", break_filter=break_filter)
        assert all(result.is_completed(name) for name in "ABCDEF")
        assert result.get_distance("F") == 4.0


class TestDijkstraPreconditions:
    """Tests for Dijkstra preconditions."""

    def test_negative_weight_rejected(self, kind):
        """Test that weighted graphs may not hold negative weights."""
        g = build_graph("A B -1", directed=True, weighted=True, kind=kind)
        with pytest.raises(ValueError, match="non-negative"):
            Dijkstra(g)

    def test_negative_weight_ignored_when_unweighted(self, kind):
        """Test that unweighted graphs never look at the stored weight."""
        g = build_graph("A B -1", directed=True, weighted=False, kind=kind)
        assert Dijkstra(g).compute("A").get_distance("B") == 1.0

    def test_unknown_source(self, road_map):
        """Test that the source must exist."""
        with pytest.raises(ValueError, match="not found"):
            Dijkstra(road_map).compute("Z")

    def test_empty_graph(self, graph_cls):
        """Test that an empty graph is rejected."""
        with pytest.raises(ValueError, match="empty"):
            Dijkstra(graph_cls(directed=True, weighted=True))


class TestDijkstraOutput:
    """Tests for the printed routes."""

    def test_format_routes(self, road_map):
        """Test the single-route description."""
        result = Dijkstra(road_map).compute("A")
        text = result.format_routes(result.get_routes("F"))
        assert text == (
            "Shortest Path:\n"
            "  source: [A] target: [F]\n"
            "Distance: 4.0 = 1.0 + 2.0 + 1.0\n"
            "Route: [A] --1.0-> [C] --2.0-> [E] --1.0-> [F]"
        )
        assert result.format_routes([]) == "No route found"

    def test_print_all_routes(self, kind):
        """Test the listing of every route from the source."""
        g = build_graph("A B 1\nC D 1", directed=True, weighted=True, kind=kind)
        out = StringIO()
        Dijkstra(g).compute("A").print_all_routes(file=out)
        lines = out.getvalue().splitlines()
        assert lines[0] == "=== Dijkstra Shortest Paths from [A] ==="
        assert "No path to [C]" in lines
        assert "  source: [A] target: [B]" in lines


class TestShortestPathResultIsolation:
    """Tests that routes handed to callers cannot alter the result."""

    def test_mutating_route_does_not_leak(self, road_map):
        """Test that editing a returned edge leaves later routes intact."""
        result = Dijkstra(road_map).compute("A")
        routes = result.get_routes("F")
        routes[0].weight = 99.0

        again = result.get_routes("F")
        assert [e.weight for e in again] == [1.0, 2.0, 1.0]
        assert "Distance: 4.0 = 1.0 + 2.0 + 1.0" in result.format_routes(again)
        assert road_map.get_edge(0, 2).weight == 1.0
