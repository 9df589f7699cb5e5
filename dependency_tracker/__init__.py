"""
Dependency Tracker v1.0

Bookkeeping for "t depends on s" relationships between named nodes, such as
spreadsheet cells. The graph answers who depends on a node and what a node
depends on, and supports replacing a node's relationships in one step.

Example:
    >>> from dependency_tracker import DependencyGraph
    >>> graph = DependencyGraph()
    >>> graph.add_dependency("A1", "B1")
    >>> graph.replace_dependees("B1", {"A2", "A3"})
    >>> sorted(graph.get_dependees("B1"))
    ['A2', 'A3']
"""

from dependency_tracker.version import __version__, __version_info__

__author__ = "Dependency Tracker Contributors"

from dependency_tracker.exceptions import (
    DependencyGraphError,
    InvalidNodeError,
    SelfDependencyError,
)
from dependency_tracker.graph.dependency_graph import DependencyGraph
from dependency_tracker.models.config import ErrorMode, GraphConfig
from dependency_tracker.models.dependency import Dependency

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Core
    "DependencyGraph",
    # Configuration
    "GraphConfig",
    "ErrorMode",
    # Data models
    "Dependency",
    # Exceptions
    "DependencyGraphError",
    "InvalidNodeError",
    "SelfDependencyError",
]
