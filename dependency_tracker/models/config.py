"""
Configuration model for dependency tracking.

This module defines the GraphConfig class and ErrorMode enum, which control
how a DependencyGraph reacts to questionable but well-formed input.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorMode(str, Enum):
    """Enumeration of handling modes for questionable input.

    Attributes:
        FAIL: Raise an exception immediately, before any state is changed.
        WARN: Emit a ``UserWarning`` and carry on with the operation.
        IGNORE: Carry on with the operation silently.

    Example:
        >>> mode = ErrorMode.WARN
        >>> mode.value
        'warn'
        >>> ErrorMode.values()
        ['fail', 'warn', 'ignore']
    """

    FAIL = "fail"
    WARN = "warn"
    IGNORE = "ignore"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible error mode values.

        Returns:
            List of string values for all error modes in the enum.
        """
        return [member.value for member in cls]


@dataclass(frozen=True)
class GraphConfig:
    """Configuration settings for a DependencyGraph.

    The config is immutable, so one instance may be shared by any number
    of graphs without coupling their state.

    Attributes:
        on_self_dependency: What to do when an operation would record a
            node as depending on itself. Defaults to ErrorMode.IGNORE,
            which records the pair and counts it like any other.

    Example:
        >>> config = GraphConfig(on_self_dependency=ErrorMode.FAIL)
        >>> config.on_self_dependency
        <ErrorMode.FAIL: 'fail'>
    """

    on_self_dependency: ErrorMode = ErrorMode.IGNORE

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.on_self_dependency, ErrorMode):
            raise TypeError("on_self_dependency must be an ErrorMode instance")
