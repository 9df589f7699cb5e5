"""
Argument validation helpers for the dependency graph.

Every public graph operation validates its arguments with these helpers
before touching any state, so a rejected call never leaves the graph
half-updated.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable

from dependency_tracker.exceptions import InvalidNodeError


def validate_node(value: Any, argument: str) -> Hashable:
    """Check that a value can identify a node.

    A node may be any hashable value other than ``None``.

    Args:
        value: Candidate node.
        argument: Parameter name, used in the error message.

    Returns:
        The value unchanged.

    Raises:
        InvalidNodeError: If the value is None or unhashable.

    Example:
        >>> validate_node("A1", "dependee")
        'A1'
    """
    if value is None:
        raise InvalidNodeError(
            f"'{argument}' must identify a node, got None", argument, value
        )
    try:
        hash(value)
    except TypeError as exc:
        raise InvalidNodeError(
            f"'{argument}' must be hashable, got {type(value).__name__}",
            argument,
            value,
        ) from exc
    return value


def validate_nodes(values: Any, argument: str) -> set[Hashable]:
    """Check a replacement collection and de-duplicate it.

    Strings and bytes are rejected as collections: ``"AB"`` would otherwise
    be read as the two nodes ``"A"`` and ``"B"``.

    Args:
        values: Candidate iterable of nodes.
        argument: Parameter name, used in the error message.

    Returns:
        A new set holding the distinct nodes.

    Raises:
        InvalidNodeError: If the collection is None, not iterable, a bare
            string, or holds an invalid node.
    """
    if values is None:
        raise InvalidNodeError(
            f"'{argument}' must be a collection of nodes, got None",
            argument,
            values,
        )
    if isinstance(values, (str, bytes)):
        raise InvalidNodeError(
            f"'{argument}' must be a collection of nodes, not a single "
            f"{type(values).__name__}",
            argument,
            values,
        )
    try:
        items: Iterable[Any] = iter(values)
    except TypeError as exc:
        raise InvalidNodeError(
            f"'{argument}' must be iterable, got {type(values).__name__}",
            argument,
            values,
        ) from exc

    return {validate_node(item, argument) for item in items}
