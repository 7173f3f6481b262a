"""Tests for connected components."""

import pytest

from graphkit.graphs import Components, build_graph

COMPONENTS_TEXT = """
A B 1
B C 1
A C 1
D E 1
E F 1
F G 1
"""


@pytest.fixture(params=["dense", "sparse"])
def two_components(request):
    return build_graph(COMPONENTS_TEXT, directed=False, weighted=True, kind=request.param)


class TestComponents:
    """Tests for Components.compute."""

    def test_component_count(self, two_components):
        """Test the two triangle/chain components."""
        result = Components(two_components).compute()
        assert result.component_count == 2

    def test_has_path(self, two_components):
        """Test connectivity inside and across components."""
        result = Components(two_components).compute()
        assert result.has_path("A", "C")
        assert result.has_path("D", "G")
        assert result.has_path("A", "A")
        assert not result.has_path("A", "G")
        assert not result.has_path("C", "D")

    def test_unknown_vertex_is_not_an_error(self, two_components):
        """Test that unknown names simply have no path."""
        result = Components(two_components).compute()
        assert not result.has_path("A", "Z")
        assert not result.has_path("Z", "A")

    def test_single_component(self, graph_cls):
        """Test a connected graph."""
        g = graph_cls(directed=False)
        for u, v in [("A", "B"), ("B", "C"), ("C", "D")]:
            g.connect(u, v)
        result = Components(g).compute()
        assert result.component_count == 1
        assert result.has_path("A", "D")

    def test_many_components(self, graph_cls):
        """Test one component per disjoint edge."""
        g = graph_cls(directed=False)
        for i in range(0, 20, 2):
            g.connect(f"n{i}", f"n{i + 1}")
        result = Components(g).compute()
        assert result.component_count == 10
        assert repr(result) == "ComponentsResult(component_count=10)"


class TestComponentsPreconditions:
    """Tests for Components preconditions."""

    def test_directed_rejected(self, graph_cls):
        """Test that directed graphs are a usage error."""
        g = graph_cls(directed=True)
        g.connect("A", "B")
        with pytest.raises(ValueError, match="undirected"):
            Components(g)

    def test_empty_rejected(self, graph_cls):
        """Test that empty graphs are a usage error."""
        with pytest.raises(ValueError, match="empty"):
            Components(graph_cls(directed=False))
