"""
Dependency graph module.

This package contains the DependencyGraph class, the mirrored
dependents/dependees structure at the core of the dependency tracker.
"""

from dependency_tracker.graph.dependency_graph import DependencyGraph

__all__ = [
    "DependencyGraph",
]
