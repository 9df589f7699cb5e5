"""
Custom exception classes for dependency tracking.

This module defines all custom exceptions used throughout the dependency
tracker package. Unknown nodes are never an error: queries on them return
empty results and removals on them are no-ops. Only malformed arguments
and, when configured, self-dependencies are rejected.
"""

from typing import Any, Hashable


class DependencyGraphError(Exception):
    """Base exception class for all dependency graph errors.

    This exception serves as the base class for all custom exceptions in the
    dependency tracker package and can be used to catch any of them.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a DependencyGraphError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class InvalidNodeError(DependencyGraphError):
    """Exception raised when an argument cannot identify a node.

    This exception is raised before any state is touched, so the graph is
    left exactly as it was before the failing call. Typical causes are a
    ``None`` node, an unhashable node, or a replacement collection that is
    missing or is a bare string.

    Attributes:
        message: Error message describing the invalid input.
        argument: Name of the offending parameter.
        value: The rejected value.
    """

    def __init__(self, message: str, argument: str, value: Any = None) -> None:
        """Initialize an InvalidNodeError.

        Args:
            message: Error message describing the invalid input.
            argument: Name of the offending parameter.
            value: The rejected value.
        """
        self.argument = argument
        self.value = value
        super().__init__(message)


class SelfDependencyError(DependencyGraphError):
    """Exception raised when a node would be recorded as depending on itself.

    Only raised when the graph is configured with
    ``on_self_dependency=ErrorMode.FAIL``.

    Attributes:
        message: Error message describing the rejected pair.
        node: The node that would depend on itself.
    """

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(
            f"Node {node!r} cannot depend on itself "
            f"(self-dependencies are disabled by configuration)."
        )
