"""
Type definitions shared by the collection algorithms.

Comparison Convention:
    A comparison is a three-way function `(a, b) -> int`, following the
    `functools.cmp_to_key` convention. Only the sign of the result matters:
    - negative: a orders before b
    - zero:     a and b are equivalent
    - positive: a orders after b
"""

from collections.abc import Callable, Hashable, Iterable
from enum import IntEnum


# =============================================================================
# Ordering
# =============================================================================


class Ordering(IntEnum):
    """Canonical three-way comparison result."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# Function Types
# =============================================================================

type Comparison[T] = Callable[[T, T], int]
"""Three-way comparison between two elements."""

type KeyProjection[T, K] = Callable[[T], K]
"""Extracts a comparable key from an element."""

type IdentityKey[T] = Callable[[T], Hashable]
"""Projects an item to the hashable value that decides item equality."""

type DependencyFunction[T] = Callable[[T], Iterable[T] | None]
"""Returns the items a given item depends on (None means no dependencies)."""

type ItemSelector[S, T] = Callable[[S], Iterable[T]]
"""Opens the (possibly lazy, possibly unbounded) item sequence of a source."""


# =============================================================================
# Result Types
# =============================================================================

type Level[T] = list[T]
"""Items sharing the same maximum dependency depth."""


__all__ = [
    "Ordering",
    "Comparison",
    "KeyProjection",
    "IdentityKey",
    "DependencyFunction",
    "ItemSelector",
    "Level",
]
