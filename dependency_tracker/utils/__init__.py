"""
Utility functions and helpers for dependency tracking.
"""

from dependency_tracker.utils.validation import validate_node, validate_nodes

__all__ = [
    "validate_node",
    "validate_nodes",
]
