"""
In-place comparison sorts.

All sorts reorder a mutable, randomly indexable sequence (list, array,
1-D numpy array, ...) according to a three-way comparison. They never add
or drop elements, and each one performs a number of comparisons bounded by
its structure, so an inconsistent comparison yields an unspecified order
but always terminates. If the comparison raises, the exception propagates
with the sequence partially sorted but still holding the same elements.

Algorithms:
    bubble_sort(seq, comparison) - Stable, adaptive, O(n²)
    shell_sort(seq, comparison)  - Unstable, gapped insertion sort
    heap_sort(seq, comparison)   - Unstable, O(n log n), O(1) extra space
    merge_sort(seq, comparison)  - Stable, O(n log n), O(n) extra space

Helpers:
    sort(seq, comparison, algorithm) - Dispatch by algorithm name
    is_sorted(seq, comparison)       - Non-decreasing check
    swap(seq, i, j)                  - Exchange two positions
"""

import logging
from collections.abc import Callable, MutableSequence, Sequence

from .comparison import natural_compare
from .constants import DEFAULT_SORT_ALGORITHM, SHELL_SORT_GAPS
from .errors import InvalidArgumentError, require_callable
from .types import Comparison

logger = logging.getLogger(__name__)


def swap[T](seq: MutableSequence[T], i: int, j: int) -> None:
    """Exchange the elements at positions i and j."""
    seq[i], seq[j] = seq[j], seq[i]


def is_sorted[T](
    seq: Sequence[T], comparison: Comparison[T] = natural_compare
) -> bool:
    """True if no element compares greater than its successor."""
    require_callable(comparison, "comparison")
    return all(comparison(seq[i], seq[i + 1]) <= 0 for i in range(len(seq) - 1))


# =============================================================================
# Bubble Sort
# =============================================================================


def bubble_sort[T](
    seq: MutableSequence[T], comparison: Comparison[T] = natural_compare
) -> None:
    """
    Sorts by repeated passes of adjacent swaps.

    Only strictly greater neighbours are swapped, so equal elements keep
    their order. Each pass settles the largest remaining element at the end
    of the unsorted prefix, and a pass without swaps ends the sort early.
    """
    require_callable(comparison, "comparison")
    unsorted = len(seq)
    logger.debug(f"bubble_sort: {unsorted} elements")

    passes = 0
    made_changes = True
    while made_changes:
        made_changes = False
        unsorted -= 1
        passes += 1
        for i in range(unsorted):
            if comparison(seq[i], seq[i + 1]) > 0:
                swap(seq, i, i + 1)
                made_changes = True

    logger.debug(f"bubble_sort: done after {passes} passes")


# =============================================================================
# Shell Sort
# =============================================================================


def shell_sort[T](
    seq: MutableSequence[T], comparison: Comparison[T] = natural_compare
) -> None:
    """
    Insertion sort over a decreasing sequence of gaps.

    Uses the gaps of SHELL_SORT_GAPS that are smaller than the sequence
    length, largest first; the final pass (gap 1) is a plain insertion sort.
    """
    require_callable(comparison, "comparison")
    n = len(seq)
    gaps = [gap for gap in reversed(SHELL_SORT_GAPS) if gap < n]
    logger.debug(f"shell_sort: {n} elements, gaps {gaps}")

    for gap in gaps:
        for i in range(gap, n):
            j = i - gap
            if comparison(seq[i], seq[j]) < 0:
                item = seq[i]
                # Shift larger elements of this gap chain one slot right;
                # seq[j + gap] is the free slot until item is put back
                try:
                    while True:
                        seq[j + gap] = seq[j]
                        j -= gap
                        if j < 0 or comparison(item, seq[j]) >= 0:
                            break
                finally:
                    seq[j + gap] = item


# =============================================================================
# Heap Sort
# =============================================================================


def heap_sort[T](
    seq: MutableSequence[T],
    comparison: Comparison[T] = natural_compare,
    *,
    offset: int = 0,
    length: int | None = None,
) -> None:
    """
    Sorts seq[offset:offset + length] through an implicit binary max-heap.

    The heap is built by sifting each element up as it is appended, then the
    root is repeatedly moved behind the shrinking heap while the displaced
    tail element is sifted down.

    Args:
        seq: The sequence to sort in place.
        comparison: Three-way comparison between elements.
        offset: First position of the range to sort.
        length: Size of the range. Defaults to the rest of the sequence.

    Raises:
        InvalidArgumentError: If the range does not fit inside the sequence.
    """
    require_callable(comparison, "comparison")
    if length is None:
        length = len(seq) - offset
    if offset < 0 or length < 0 or offset + length > len(seq):
        raise InvalidArgumentError(
            f"Range [{offset}, {offset + length}) is outside a sequence "
            f"of length {len(seq)}"
        )
    logger.debug(f"heap_sort: {length} elements at offset {offset}")

    # Build the heap
    for i in range(length):
        index = i
        item = seq[offset + i]
        try:
            while index > 0:
                parent = (index - 1) // 2
                if comparison(seq[offset + parent], item) >= 0:
                    break
                seq[offset + index] = seq[offset + parent]
                index = parent
        finally:
            seq[offset + index] = item

    # Move the max behind the heap, then restore heap order on the prefix
    for end in range(length - 1, 0, -1):
        last = seq[offset + end]
        seq[offset + end] = seq[offset]

        index = 0
        try:
            while index * 2 + 1 < end:
                left = index * 2 + 1
                right = left + 1
                if (
                    right < end
                    and comparison(seq[offset + left], seq[offset + right]) < 0
                ):
                    child = right
                else:
                    child = left
                if comparison(last, seq[offset + child]) > 0:
                    break
                seq[offset + index] = seq[offset + child]
                index = child
        finally:
            seq[offset + index] = last


# =============================================================================
# Merge Sort
# =============================================================================


def merge_sort[T](
    seq: MutableSequence[T], comparison: Comparison[T] = natural_compare
) -> None:
    """
    Top-down merge sort.

    Splits at the midpoint, sorts both halves, then merges them through
    temporary buffers. Ties are taken from the left half, which keeps the
    sort stable.
    """
    require_callable(comparison, "comparison")
    logger.debug(f"merge_sort: {len(seq)} elements")
    _merge_sort_range(seq, 0, len(seq), comparison)


def _merge_sort_range[T](
    seq: MutableSequence[T], start: int, stop: int, comparison: Comparison[T]
) -> None:
    """Sort seq[start:stop] in place."""
    if stop - start <= 1:
        return
    middle = start + (stop - start) // 2
    _merge_sort_range(seq, start, middle, comparison)
    _merge_sort_range(seq, middle, stop, comparison)
    _merge(seq, start, middle, stop, comparison)


def _merge[T](
    seq: MutableSequence[T],
    start: int,
    middle: int,
    stop: int,
    comparison: Comparison[T],
) -> None:
    """Merge the sorted runs seq[start:middle] and seq[middle:stop]."""
    # Copied element-wise: a numpy slice is a view
    left = [seq[i] for i in range(start, middle)]
    right = [seq[i] for i in range(middle, stop)]

    i = j = 0
    k = start
    try:
        while i < len(left) and j < len(right):
            if comparison(left[i], right[j]) <= 0:
                seq[k] = left[i]
                i += 1
            else:
                seq[k] = right[j]
                j += 1
            k += 1
    finally:
        # seq[k:stop] is exactly the unconsumed rest of both runs
        for item in left[i:]:
            seq[k] = item
            k += 1
        for item in right[j:]:
            seq[k] = item
            k += 1


# =============================================================================
# Dispatch
# =============================================================================

SORT_ALGORITHMS: dict[str, Callable[..., None]] = {
    "bubble": bubble_sort,
    "shell": shell_sort,
    "heap": heap_sort,
    "merge": merge_sort,
}

STABLE_ALGORITHMS: frozenset[str] = frozenset({"bubble", "merge"})


def sort[T](
    seq: MutableSequence[T],
    comparison: Comparison[T] = natural_compare,
    algorithm: str = DEFAULT_SORT_ALGORITHM,
) -> None:
    """
    Sort seq in place with the named algorithm.

    Raises:
        InvalidArgumentError: If the algorithm name is unknown.
    """
    try:
        sorter = SORT_ALGORITHMS[algorithm]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown sort algorithm {algorithm!r}, "
            f"expected one of {sorted(SORT_ALGORITHMS)}"
        ) from None
    sorter(seq, comparison)


__all__ = [
    "swap",
    "is_sorted",
    "bubble_sort",
    "shell_sort",
    "heap_sort",
    "merge_sort",
    "sort",
    "SORT_ALGORITHMS",
    "STABLE_ALGORITHMS",
]
