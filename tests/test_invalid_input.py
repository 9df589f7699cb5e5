"""
Tests for invalid input handling.

Invalid arguments must raise InvalidNodeError before any state changes.
"""

import pytest

from dependency_tracker import (
    DependencyGraph,
    DependencyGraphError,
    InvalidNodeError,
)
from dependency_tracker.utils import validate_node, validate_nodes


@pytest.fixture
def graph():
    """A small populated graph."""
    g = DependencyGraph()
    g.add_dependency("a", "b")
    g.add_dependency("a", "c")
    g.add_dependency("c", "d")
    return g


class TestInvalidNodes:
    """Tests for None and unhashable node arguments."""

    @pytest.mark.parametrize(
        "call",
        [
            lambda g: g.add_dependency(None, "a"),
            lambda g: g.add_dependency("a", None),
            lambda g: g.remove_dependency(None, "b"),
            lambda g: g.remove_dependency("a", None),
            lambda g: g.has_dependents(None),
            lambda g: g.has_dependees(None),
            lambda g: g.get_dependents(None),
            lambda g: g.get_dependees(None),
            lambda g: g.get_dependee_count(None),
            lambda g: g.get_dependent_count(None),
            lambda g: g[None],
            lambda g: g.has_dependency(None, "b"),
            lambda g: g.replace_dependents(None, {"x"}),
            lambda g: g.replace_dependees(None, {"x"}),
        ],
    )
    def test_none_node_raises(self, graph, call):
        """Test every operation rejects a None node."""
        before = graph.to_dict()

        with pytest.raises(InvalidNodeError):
            call(graph)

        assert graph.size == 3
        assert graph.to_dict() == before

    def test_unhashable_node_raises(self, graph):
        """Test an unhashable node is rejected."""
        with pytest.raises(InvalidNodeError, match="must be hashable"):
            graph.add_dependency(["a"], "b")

        assert graph.size == 3

    def test_contains_rejects_none(self, graph):
        """Test membership checks validate the node."""
        with pytest.raises(InvalidNodeError):
            None in graph  # noqa: B015

    def test_error_attributes(self, graph):
        """Test the error names the offending argument."""
        with pytest.raises(InvalidNodeError) as exc_info:
            graph.add_dependency("a", None)

        assert exc_info.value.argument == "dependent"
        assert exc_info.value.value is None
        assert "dependent" in exc_info.value.message

    def test_is_dependency_graph_error(self, graph):
        """Test InvalidNodeError can be caught via the base class."""
        with pytest.raises(DependencyGraphError):
            graph.remove_dependency(None, None)


class TestInvalidCollections:
    """Tests for invalid replacement collections."""

    @pytest.mark.parametrize("values", [None, "xy", b"xy", 42])
    def test_bad_collection_raises(self, graph, values):
        """Test None, strings and non-iterables are rejected."""
        before = graph.to_dict()

        with pytest.raises(InvalidNodeError):
            graph.replace_dependents("a", values)
        with pytest.raises(InvalidNodeError):
            graph.replace_dependees("d", values)

        assert graph.to_dict() == before

    def test_invalid_element_leaves_graph_unchanged(self, graph):
        """Test a bad element is caught before any pair is replaced."""
        before = graph.to_dict()

        with pytest.raises(InvalidNodeError) as exc_info:
            graph.replace_dependents("a", ["x", None, "y"])

        assert exc_info.value.argument == "new_dependents"
        assert graph.to_dict() == before
        assert graph.get_dependents("a") == {"b", "c"}

    def test_unhashable_element(self, graph):
        """Test an unhashable element is rejected."""
        with pytest.raises(InvalidNodeError):
            graph.replace_dependees("d", [{"x": 1}])

        assert graph.get_dependees("d") == {"c"}


class TestValidationHelpers:
    """Tests for the validation helpers."""

    def test_validate_node_returns_value(self):
        """Test a valid node is returned unchanged."""
        assert validate_node("A1", "node") == "A1"
        assert validate_node(0, "node") == 0
        assert validate_node("", "node") == ""

    def test_validate_nodes_deduplicates(self):
        """Test the helper returns a de-duplicated set."""
        assert validate_nodes(["a", "b", "a"], "nodes") == {"a", "b"}

    def test_validate_nodes_returns_copy(self):
        """Test the helper never hands back the caller's set."""
        original = {"a"}

        result = validate_nodes(original, "nodes")
        result.add("b")

        assert original == {"a"}
