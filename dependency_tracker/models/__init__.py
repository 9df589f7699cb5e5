"""
Data models for dependency tracking.

This package contains the value types used alongside the dependency graph:
the ordered dependency pair and the graph configuration.
"""

from dependency_tracker.models.config import ErrorMode, GraphConfig
from dependency_tracker.models.dependency import Dependency

__all__ = [
    "Dependency",
    "ErrorMode",
    "GraphConfig",
]
