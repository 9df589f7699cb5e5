"""
Dependency graph for tracking relationships between named nodes.

This module defines the DependencyGraph class, which uses networkx to record
ordered pairs "t depends on s" and to answer dependent/dependee queries over
them. An edge ``s -> t`` in the underlying DiGraph means ``t`` depends on
``s``, so the successor adjacency is the dependents view and the predecessor
adjacency is the dependees view. networkx updates both adjacencies together
on every edge change, which keeps the two views mirror images.
"""

from __future__ import annotations

import warnings
from typing import Any, Hashable, Iterable, Iterator, Optional

import networkx as nx

from dependency_tracker.exceptions import SelfDependencyError
from dependency_tracker.models.config import ErrorMode, GraphConfig
from dependency_tracker.models.dependency import Dependency
from dependency_tracker.utils.validation import validate_node, validate_nodes


class DependencyGraph:
    """Directed dependency graph over opaque, hashable nodes.

    The graph records a set of ordered pairs ``(s, t)``, each meaning that
    ``t`` depends on ``s``. Pairs have set semantics: adding an existing
    pair or removing an absent one changes nothing. Nodes that have never
    appeared are not an error anywhere; they simply have no dependents and
    no dependees.

    Query results are frozenset snapshots taken at call time, so later
    mutation never changes a result that was already returned.

    The class is not thread-safe. Callers sharing an instance across
    threads must serialize access themselves.

    Attributes:
        config: GraphConfig controlling self-dependency handling.

    Example:
        >>> graph = DependencyGraph()
        >>> graph.add_dependency("A1", "B1")
        >>> graph.add_dependency("A2", "B1")
        >>> graph.size
        2
        >>> graph["B1"]
        2
        >>> sorted(graph.get_dependees("B1"))
        ['A1', 'A2']
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        """Initialize an empty DependencyGraph.

        Args:
            config: Optional configuration. Defaults to GraphConfig().
        """
        self.config = config if config is not None else GraphConfig()
        self._graph = nx.DiGraph()
        self._size = 0

    # ------------------------------------------------------------------
    # Size and counts
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of distinct ordered pairs currently recorded."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, node: Hashable) -> int:
        """Return the number of dependees of ``node``.

        Example:
            >>> graph = DependencyGraph()
            >>> graph.add_dependency("b", "c")
            >>> graph.add_dependency("e", "c")
            >>> graph["c"]
            2
            >>> graph["unknown"]
            0
        """
        return self.get_dependee_count(node)

    def get_dependee_count(self, node: Hashable) -> int:
        """Return the number of nodes that ``node`` depends on.

        Args:
            node: Node to inspect.

        Returns:
            Dependee count, 0 for a node that has none or never appeared.

        Raises:
            InvalidNodeError: If ``node`` is None or unhashable.
        """
        validate_node(node, "node")
        if node not in self._graph:
            return 0
        return len(self._graph.pred[node])

    def get_dependent_count(self, node: Hashable) -> int:
        """Return the number of nodes that depend on ``node``.

        Raises:
            InvalidNodeError: If ``node`` is None or unhashable.
        """
        validate_node(node, "node")
        if node not in self._graph:
            return 0
        return len(self._graph.succ[node])

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_dependents(self, node: Hashable) -> bool:
        """Check whether any node depends on ``node``.

        Args:
            node: Node to inspect.

        Returns:
            True if ``node`` has at least one dependent, False otherwise
            (including for nodes that never appeared).

        Raises:
            InvalidNodeError: If ``node`` is None or unhashable.
        """
        return self.get_dependent_count(node) > 0

    def has_dependees(self, node: Hashable) -> bool:
        """Check whether ``node`` depends on any node.

        Raises:
            InvalidNodeError: If ``node`` is None or unhashable.
        """
        return self.get_dependee_count(node) > 0

    def get_dependents(self, node: Hashable) -> frozenset[Hashable]:
        """Get the nodes that depend on ``node``.

        The result is a snapshot: it can be iterated any number of times
        and is unaffected by later changes to the graph. Order is
        unspecified.

        Args:
            node: Node whose dependents are requested.

        Returns:
            Frozenset of dependents, empty for an unknown node.

        Raises:
            InvalidNodeError: If ``node`` is None or unhashable.

        Example:
            >>> graph = DependencyGraph()
            >>> graph.add_dependency("x", "y")
            >>> graph.get_dependents("x")
            frozenset({'y'})
        """
        validate_node(node, "node")
        if node not in self._graph:
            return frozenset()
        return frozenset(self._graph.succ[node])

    def get_dependees(self, node: Hashable) -> frozenset[Hashable]:
        """Get the nodes that ``node`` depends on.

        Args:
            node: Node whose dependees are requested.

        Returns:
            Frozenset snapshot of dependees, empty for an unknown node.

        Raises:
            InvalidNodeError: If ``node`` is None or unhashable.
        """
        validate_node(node, "node")
        if node not in self._graph:
            return frozenset()
        return frozenset(self._graph.pred[node])

    def has_dependency(self, dependee: Hashable, dependent: Hashable) -> bool:
        """Check whether ``dependent`` depends on ``dependee``.

        Raises:
            InvalidNodeError: If either argument is None or unhashable.
        """
        validate_node(dependee, "dependee")
        validate_node(dependent, "dependent")
        return self._graph.has_edge(dependee, dependent)

    def __contains__(self, node: Hashable) -> bool:
        """Check whether ``node`` takes part in at least one pair."""
        validate_node(node, "node")
        return node in self._graph

    def nodes(self) -> frozenset[Hashable]:
        """Return a snapshot of every node that takes part in a pair."""
        return frozenset(self._graph.nodes)

    def __iter__(self) -> Iterator[Dependency]:
        """Iterate over a snapshot of all recorded pairs."""
        for dependee, dependent in list(self._graph.edges):
            yield Dependency(dependee=dependee, dependent=dependent)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_dependency(self, dependee: Hashable, dependent: Hashable) -> None:
        """Record that ``dependent`` depends on ``dependee``.

        Adding a pair that already exists has no effect. Both nodes may be
        previously unseen. A node may depend on itself unless the config
        says otherwise.

        Args:
            dependee: Node that must be evaluated first.
            dependent: Node that depends on ``dependee``.

        Raises:
            InvalidNodeError: If either argument is None or unhashable.
            SelfDependencyError: If ``dependee == dependent`` and the config
                uses ErrorMode.FAIL for self-dependencies.

        Example:
            >>> graph = DependencyGraph()
            >>> graph.add_dependency("b", "c")
            >>> graph.add_dependency("b", "c")
            >>> graph.size
            1
        """
        validate_node(dependee, "dependee")
        validate_node(dependent, "dependent")

        if self._graph.has_edge(dependee, dependent):
            return
        if dependee == dependent:
            self._check_self_dependency(dependee)

        self._graph.add_edge(dependee, dependent)
        self._size += 1

    def remove_dependency(self, dependee: Hashable, dependent: Hashable) -> None:
        """Remove the pair ``(dependee, dependent)`` if it is recorded.

        Removing an absent pair, or a pair naming unknown nodes, is a no-op.

        Args:
            dependee: Node that is depended upon.
            dependent: Node that depends on ``dependee``.

        Raises:
            InvalidNodeError: If either argument is None or unhashable.
        """
        validate_node(dependee, "dependee")
        validate_node(dependent, "dependent")

        if not self._graph.has_edge(dependee, dependent):
            return

        self._graph.remove_edge(dependee, dependent)
        self._size -= 1
        self._prune((dependee, dependent))

    def replace_dependents(
        self, node: Hashable, new_dependents: Iterable[Hashable]
    ) -> None:
        """Replace every dependent of ``node`` with ``new_dependents``.

        Afterwards ``get_dependents(node)`` equals the de-duplicated
        contents of ``new_dependents``. Each dropped dependent loses
        ``node`` from its dependees; each new dependent gains it. The size
        changes by the net difference in the number of dependents.

        Args:
            node: Node whose dependents are replaced.
            new_dependents: Collection of nodes that should depend on
                ``node``. An empty collection removes all dependents.

        Raises:
            InvalidNodeError: If ``node`` or any element is invalid, or the
                collection itself is None or a bare string.
            SelfDependencyError: If ``node`` is among ``new_dependents`` and
                the config uses ErrorMode.FAIL for self-dependencies.
        """
        validate_node(node, "node")
        new = validate_nodes(new_dependents, "new_dependents")
        old = self.get_dependents(node)

        if node in new and node not in old:
            self._check_self_dependency(node)

        dropped = old - new
        for dependent in dropped:
            self._graph.remove_edge(node, dependent)
        for dependent in new - old:
            self._graph.add_edge(node, dependent)

        self._size += len(new) - len(old)
        self._prune((node, *dropped))

    def replace_dependees(
        self, node: Hashable, new_dependees: Iterable[Hashable]
    ) -> None:
        """Replace every dependee of ``node`` with ``new_dependees``.

        Mirror of :meth:`replace_dependents`: afterwards
        ``get_dependees(node)`` equals the de-duplicated contents of
        ``new_dependees``, and the dependents of every affected node are
        updated to match.

        Args:
            node: Node whose dependees are replaced.
            new_dependees: Collection of nodes ``node`` should depend on.

        Raises:
            InvalidNodeError: If ``node`` or any element is invalid, or the
                collection itself is None or a bare string.
            SelfDependencyError: If ``node`` is among ``new_dependees`` and
                the config uses ErrorMode.FAIL for self-dependencies.

        Example:
            >>> graph = DependencyGraph()
            >>> graph.add_dependency("c", "d")
            >>> graph.replace_dependees("d", {"z", "a"})
            >>> sorted(graph.get_dependees("d")), graph.size
            (['a', 'z'], 2)
        """
        validate_node(node, "node")
        new = validate_nodes(new_dependees, "new_dependees")
        old = self.get_dependees(node)

        if node in new and node not in old:
            self._check_self_dependency(node)

        dropped = old - new
        for dependee in dropped:
            self._graph.remove_edge(dependee, node)
        for dependee in new - old:
            self._graph.add_edge(dependee, node)

        self._size += len(new) - len(old)
        self._prune((node, *dropped))

    def clear(self) -> None:
        """Remove every pair from the graph."""
        self._graph.clear()
        self._size = 0

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Export graph to dictionary format.

        Nodes and edges are sorted by ``repr`` so the output is stable for
        a given graph regardless of insertion order.

        Returns:
            Dictionary containing nodes and edges.

        Example:
            >>> graph = DependencyGraph()
            >>> graph.add_dependency("A1", "B1")
            >>> graph.to_dict()["edges"]
            [{'dependee': 'A1', 'dependent': 'B1'}]
        """
        return {
            "nodes": [
                {
                    "id": node,
                    "dependents": len(self._graph.succ[node]),
                    "dependees": len(self._graph.pred[node]),
                }
                for node in sorted(self._graph.nodes, key=repr)
            ],
            "edges": [
                Dependency(dependee=u, dependent=v).to_dict()
                for u, v in sorted(self._graph.edges, key=repr)
            ],
        }

    def get_statistics(self) -> dict[str, int]:
        """Get graph statistics.

        Returns:
            Dictionary with node, pair, source, sink and self-dependency
            counts. Source nodes have dependents but no dependees; sink
            nodes have dependees but no dependents.
        """
        source_nodes = [
            n for n in self._graph.nodes if self._graph.in_degree(n) == 0
        ]
        sink_nodes = [
            n for n in self._graph.nodes if self._graph.out_degree(n) == 0
        ]

        return {
            "total_nodes": self._graph.number_of_nodes(),
            "total_dependencies": self._size,
            "source_nodes": len(source_nodes),
            "sink_nodes": len(sink_nodes),
            "self_dependencies": nx.number_of_selfloops(self._graph),
        }

    def __repr__(self) -> str:
        return (
            f"DependencyGraph(size={self._size}, "
            f"nodes={self._graph.number_of_nodes()})"
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_self_dependency(self, node: Hashable) -> None:
        mode = self.config.on_self_dependency
        if mode == ErrorMode.FAIL:
            raise SelfDependencyError(node)
        if mode == ErrorMode.WARN:
            warnings.warn(
                f"Node {node!r} is being recorded as depending on itself.",
                UserWarning,
                stacklevel=3,
            )

    def _prune(self, nodes: Iterable[Hashable]) -> None:
        # Drop nodes left with no pairs so they look exactly like unseen ones.
        for node in nodes:
            if node in self._graph and self._graph.degree(node) == 0:
                self._graph.remove_node(node)
