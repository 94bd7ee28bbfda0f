"""
Nearest-match binary search over sequences sorted by a projected key.

The sequence must be sorted ascending by `key`. When no element has a key
equal to the criteria, the closest one on the requested side is chosen:

    keys = [1, 3, 3, 7], criteria = 5
    nearest_under -> 2  (rightmost key <= 5)
    nearest_over  -> 3  (leftmost key >= 5)

Both searches check the two ends of the sequence first, which settles
empty and tiny sequences and out-of-range criteria without entering the
narrowing loop. Inside the loop only a bound that just moved is re-read.

"No match" is reported as None, never raised.
"""

import logging
from bisect import bisect_left, bisect_right
from collections.abc import Sequence

from .comparison import natural_compare
from .errors import require_callable
from .types import KeyProjection

logger = logging.getLogger(__name__)


def nearest_under[T, K](
    seq: Sequence[T], key: KeyProjection[T, K], criteria: K
) -> int | None:
    """
    Index of the rightmost element whose key is <= criteria.

    Args:
        seq: Elements sorted ascending by key.
        key: Projects each element to its sort key.
        criteria: The key value to look for.

    Returns:
        The index, or None if even the first key exceeds the criteria.
    """
    require_callable(key, "key")
    if len(seq) == 0:
        return None

    low = 0
    high = len(seq) - 1

    if natural_compare(key(seq[low]), criteria) > 0:
        logger.debug(f"nearest_under: {criteria!r} below the whole range")
        return None
    if low == high:
        return low

    if natural_compare(key(seq[high]), criteria) <= 0:
        logger.debug(f"nearest_under: {criteria!r} at or above the last key")
        return high
    if high == low + 1:
        return low

    # From here on: key(seq[low - 1]) <= criteria < key(seq[high + 1])
    low += 1
    high -= 1
    low_moved = high_moved = True

    while True:
        if low_moved:
            result = natural_compare(key(seq[low]), criteria)
            if result == 0:
                return bisect_right(seq, criteria, low, high + 1, key=key) - 1
            if result > 0:
                return low - 1
            low_moved = False

        if high_moved:
            if natural_compare(key(seq[high]), criteria) <= 0:
                return high
            high_moved = False

        if low >= high:
            break  # Only reachable when the sequence is not sorted

        middle = low + (high - low) // 2
        result = natural_compare(key(seq[middle]), criteria)
        if result < 0:
            low = middle + 1
            low_moved = True
        elif result > 0:
            high = middle - 1
            high_moved = True
        else:
            return bisect_right(seq, criteria, middle, high + 1, key=key) - 1

    return None


def nearest_over[T, K](
    seq: Sequence[T], key: KeyProjection[T, K], criteria: K
) -> int | None:
    """
    Index of the leftmost element whose key is >= criteria.

    Args:
        seq: Elements sorted ascending by key.
        key: Projects each element to its sort key.
        criteria: The key value to look for.

    Returns:
        The index, or None if even the last key is below the criteria.
    """
    require_callable(key, "key")
    if len(seq) == 0:
        return None

    low = 0
    high = len(seq) - 1

    if natural_compare(key(seq[high]), criteria) < 0:
        logger.debug(f"nearest_over: {criteria!r} above the whole range")
        return None
    if low == high:
        return high

    if natural_compare(key(seq[low]), criteria) >= 0:
        logger.debug(f"nearest_over: {criteria!r} at or below the first key")
        return low
    if low == high - 1:
        return high

    # From here on: key(seq[low - 1]) < criteria <= key(seq[high + 1])
    low += 1
    high -= 1
    low_moved = high_moved = True

    while True:
        if low_moved:
            if natural_compare(key(seq[low]), criteria) >= 0:
                return low
            low_moved = False

        if high_moved:
            result = natural_compare(key(seq[high]), criteria)
            if result == 0:
                return bisect_left(seq, criteria, low, high + 1, key=key)
            if result < 0:
                return high + 1
            high_moved = False

        if low >= high:
            break  # Only reachable when the sequence is not sorted

        middle = low + (high - low) // 2
        result = natural_compare(key(seq[middle]), criteria)
        if result < 0:
            low = middle + 1
            low_moved = True
        elif result > 0:
            high = middle - 1
            high_moved = True
        else:
            return bisect_left(seq, criteria, low, middle + 1, key=key)

    return None


def find_nearest_under[T, K](
    seq: Sequence[T],
    key: KeyProjection[T, K],
    criteria: K,
    default: T | None = None,
) -> T | None:
    """Element at nearest_under(...), or `default` when there is no match."""
    index = nearest_under(seq, key, criteria)
    if index is None:
        return default
    return seq[index]


def find_nearest_over[T, K](
    seq: Sequence[T],
    key: KeyProjection[T, K],
    criteria: K,
    default: T | None = None,
) -> T | None:
    """Element at nearest_over(...), or `default` when there is no match."""
    index = nearest_over(seq, key, criteria)
    if index is None:
        return default
    return seq[index]


__all__ = [
    "nearest_under",
    "nearest_over",
    "find_nearest_under",
    "find_nearest_over",
]
