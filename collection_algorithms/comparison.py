"""
Comparison helpers.

Every algorithm takes its comparison explicitly; there is no registry of
per-type comparers. These helpers build the common ones.

Functions:
    to_ordering(result)              - Normalise a raw result to an Ordering
    natural_compare(a, b)            - Natural ordering via `<` and `>`
    compare_by(key, comparison)      - Compare projected keys
    reverse_comparison(comparison)   - Flip an ordering
    chain_comparisons(*comparisons)  - First non-equal result wins
"""

from typing import Any

from .errors import InvalidArgumentError, require_callable
from .types import Comparison, KeyProjection, Ordering


def to_ordering(result: int) -> Ordering:
    """Map any signed comparison result onto LESS, EQUAL or GREATER."""
    if result < 0:
        return Ordering.LESS
    if result > 0:
        return Ordering.GREATER
    return Ordering.EQUAL


def natural_compare(a: Any, b: Any) -> Ordering:
    """Compare two values with their own `<` and `>` operators."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_by[T, K](
    key: KeyProjection[T, K], comparison: Comparison[K] = natural_compare
) -> Comparison[T]:
    """
    Build a comparison that orders elements by a projected key.

    Args:
        key: Extracts the sort key from each element.
        comparison: Ordering of the keys. Natural ordering by default.

    Example:
        >>> by_length = compare_by(len)
        >>> by_length("ab", "abc")
        <Ordering.LESS: -1>
    """
    require_callable(key, "key")
    require_callable(comparison, "comparison")

    def compare(a: T, b: T) -> int:
        return comparison(key(a), key(b))

    return compare


def reverse_comparison[T](comparison: Comparison[T]) -> Comparison[T]:
    """Descending version of `comparison`."""
    require_callable(comparison, "comparison")

    def compare(a: T, b: T) -> int:
        return comparison(b, a)

    return compare


def chain_comparisons[T](*comparisons: Comparison[T]) -> Comparison[T]:
    """
    Lexicographic combination: the first comparison that does not report
    equality decides.
    """
    if not comparisons:
        raise InvalidArgumentError("At least one comparison is required")
    for index, comparison in enumerate(comparisons):
        require_callable(comparison, f"comparisons[{index}]")

    def compare(a: T, b: T) -> int:
        for comparison in comparisons:
            result = comparison(a, b)
            if result:
                return result
        return Ordering.EQUAL

    return compare


__all__ = [
    "to_ordering",
    "natural_compare",
    "compare_by",
    "reverse_comparison",
    "chain_comparisons",
]
