"""Version information."""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Version history
CHANGELOG = """
# Changelog

## v1.0.0

- DependencyGraph with mirrored dependents/dependees views
- Bulk replacement of a node's dependents or dependees
- Configurable handling of self-dependencies
- Dictionary export and graph statistics
"""
