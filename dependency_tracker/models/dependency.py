"""
Dependency pair model.

This module defines the Dependency class, which represents a single recorded
relationship between two nodes: ``dependent`` depends on ``dependee``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass(frozen=True, eq=True)
class Dependency:
    """An ordered dependency pair.

    A Dependency ``(dependee, dependent)`` records that ``dependent``
    depends on ``dependee``; equivalently ``dependee`` is a dependee of
    ``dependent`` and ``dependent`` is a dependent of ``dependee``. The
    pair carries no payload and is immutable and hashable.

    Attributes:
        dependee: The node that is depended upon.
        dependent: The node that depends on ``dependee``.

    Example:
        >>> dep = Dependency(dependee="A1", dependent="B1")
        >>> dep.to_tuple()
        ('A1', 'B1')
    """

    dependee: Hashable
    dependent: Hashable

    def to_tuple(self) -> tuple[Hashable, Hashable]:
        """Return the pair as a ``(dependee, dependent)`` tuple."""
        return (self.dependee, self.dependent)

    def is_self_dependency(self) -> bool:
        return self.dependee == self.dependent

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary format.

        Returns:
            Dictionary with ``dependee`` and ``dependent`` keys.
        """
        return {"dependee": self.dependee, "dependent": self.dependent}

    def __str__(self) -> str:
        return f"{self.dependee} -> {self.dependent}"
