"""
Exceptions raised by the collection algorithms.

Absence of a match in the nearest-match search is not an error: it is
reported as `None`.
"""

from collections.abc import Callable
from typing import Any


class CollectionAlgorithmsError(Exception):
    """Base class for every error raised by this package."""

    pass


class InvalidArgumentError(CollectionAlgorithmsError, ValueError):
    """Raised when a required argument is missing or unusable."""

    pass


class UnknownDependencyError(InvalidArgumentError):
    """Raised when an item depends on something outside the leveled items."""

    def __init__(self, item: Any, dependency: Any) -> None:
        super().__init__(
            f"{item!r} depends on {dependency!r}, which is not one of the items"
        )
        self.item = item
        self.dependency = dependency


class CircularDependencyError(CollectionAlgorithmsError, ValueError):
    """Raised when the dependency graph contains a cycle."""

    def __init__(self, item: Any) -> None:
        super().__init__(f"Circular dependency found at {item!r}")
        self.item = item


def require_callable(value: Callable[..., Any] | None, name: str) -> None:
    """Raise InvalidArgumentError unless `value` is callable."""
    if value is None:
        raise InvalidArgumentError(f"`{name}` is required")
    if not callable(value):
        raise InvalidArgumentError(
            f"`{name}` must be callable, got {type(value).__name__}"
        )


__all__ = [
    "CollectionAlgorithmsError",
    "InvalidArgumentError",
    "UnknownDependencyError",
    "CircularDependencyError",
    "require_callable",
]
