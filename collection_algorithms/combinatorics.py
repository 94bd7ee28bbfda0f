"""
Lazy enumerators over several item sources.

Each source is opened through an item selector, and the resulting iterator
acts as a pull cursor: every step advances exactly one cursor and yields
what became available. Nothing is materialised ahead of time, so sources may
be expensive or unbounded.

Functions:
    cartesian_product(sources, item_selector)  - Every one-per-source combination
    alternating_select(sources, item_selector) - Round-robin interleave
    merge_consecutive(items, predicate, merge) - Fold runs of adjacent items

Cursors that can be closed (generators) are closed once exhausted, or when
the consumer closes or drops the enumerator.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from itertools import product
from typing import Any

from .errors import require_callable
from .types import ItemSelector

logger = logging.getLogger(__name__)

# Marks a cursor that has no further items
_EXHAUSTED: Any = object()


def _release(cursor: Iterator[Any]) -> None:
    close = getattr(cursor, "close", None)
    if close is not None:
        close()


# =============================================================================
# Cartesian Product
# =============================================================================


def cartesian_product[S, T](
    sources: Iterable[S], item_selector: ItemSelector[S, T]
) -> Iterator[tuple[T, ...]]:
    """
    Lazily yields every combination of one item per source.

    Items are discovered one source at a time in round-robin order. Each new
    item is immediately paired with every item already seen from the other
    sources, so combinations of early items are available before late
    sources are read to the end.

    Emission order:
        1. The combination of every source's first item.
        2. Round-robin over the sources: pull one item from the current
           source; if there is one, yield every combination using it for
           that source and any seen item for the others (lexicographic in
           discovery order, first source most significant).

    The product is empty when there are no sources or any source is empty.

    Args:
        sources: The item sources, in combination order.
        item_selector: Opens the item sequence of a source.

    Returns:
        Iterator of tuples with one item per source, in source order. Each
        combination is yielded exactly once.

    Example:
        >>> list(cartesian_product([[1, 2], ["x", "y"]], iter))
        [(1, 'x'), (2, 'x'), (1, 'y'), (2, 'y')]
    """
    require_callable(item_selector, "item_selector")
    return _cartesian_product(sources, item_selector)


def _cartesian_product[S, T](
    sources: Iterable[S], item_selector: ItemSelector[S, T]
) -> Iterator[tuple[T, ...]]:
    cursors: list[Iterator[T]] = []
    try:
        seen: list[list[T]] = []
        for source in sources:
            cursor = iter(item_selector(source))
            cursors.append(cursor)
            first = next(cursor, _EXHAUSTED)
            if first is _EXHAUSTED:
                logger.debug(f"cartesian_product: source {len(seen)} is empty")
                return
            seen.append([first])

        if not cursors:
            return

        yield tuple(items[0] for items in seen)

        exhausted = [False] * len(cursors)
        remaining = len(cursors)
        index = 0
        while True:
            if not exhausted[index]:
                item = next(cursors[index], _EXHAUSTED)
                if item is _EXHAUSTED:
                    logger.debug(
                        f"cartesian_product: source {index} exhausted "
                        f"after {len(seen[index])} items"
                    )
                    exhausted[index] = True
                    remaining -= 1
                    _release(cursors[index])
                    if remaining == 0:
                        return
                else:
                    seen[index].append(item)
                    pools = [
                        (item,) if position == index else items
                        for position, items in enumerate(seen)
                    ]
                    yield from product(*pools)

            index = (index + 1) % len(cursors)
    finally:
        for cursor in cursors:
            _release(cursor)


# =============================================================================
# Round-Robin Interleave
# =============================================================================


def alternating_select[S, T](
    sources: Iterable[S], item_selector: ItemSelector[S, T]
) -> Iterator[T]:
    """
    Yields one item from each source in turn until all are exhausted.

    The first pass yields each source's first item as soon as the source is
    opened. Afterwards the sources are cycled, skipping those that have no
    more items.

    Example:
        >>> list(alternating_select([[1, 2, 3], ["a", "b"]], iter))
        [1, 'a', 2, 'b', 3]
    """
    require_callable(item_selector, "item_selector")
    return _alternating_select(sources, item_selector)


def _alternating_select[S, T](
    sources: Iterable[S], item_selector: ItemSelector[S, T]
) -> Iterator[T]:
    active: list[Iterator[T]] = []
    try:
        for source in sources:
            cursor = iter(item_selector(source))
            first = next(cursor, _EXHAUSTED)
            if first is _EXHAUSTED:
                _release(cursor)
                continue
            active.append(cursor)
            yield first

        # A cursor that runs dry is released and leaves the rotation
        index = 0
        while active:
            cursor = active[index]
            item = next(cursor, _EXHAUSTED)
            if item is _EXHAUSTED:
                del active[index]
                _release(cursor)
                logger.debug(
                    f"alternating_select: source exhausted, {len(active)} left"
                )
                if active:
                    index %= len(active)
                continue
            yield item
            index = (index + 1) % len(active)
    finally:
        for cursor in active:
            _release(cursor)


# =============================================================================
# Streaming Helpers
# =============================================================================


def merge_consecutive[T](
    items: Iterable[T],
    predicate: Callable[[T, T], bool],
    merge: Callable[[T, T], T],
) -> Iterator[T]:
    """
    Lazily merges runs of adjacent items.

    While `predicate(current, next)` holds, `current` becomes
    `merge(current, next)`; otherwise `current` is yielded and `next` starts
    a new run.

    Example:
        >>> spans = [(0, 2), (2, 5), (7, 8)]
        >>> touching = lambda a, b: a[1] == b[0]
        >>> join = lambda a, b: (a[0], b[1])
        >>> list(merge_consecutive(spans, touching, join))
        [(0, 5), (7, 8)]
    """
    require_callable(predicate, "predicate")
    require_callable(merge, "merge")
    return _merge_consecutive(items, predicate, merge)


def _merge_consecutive[T](
    items: Iterable[T],
    predicate: Callable[[T, T], bool],
    merge: Callable[[T, T], T],
) -> Iterator[T]:
    current: Any = _EXHAUSTED
    for item in items:
        if current is _EXHAUSTED:
            current = item
        elif predicate(current, item):
            current = merge(current, item)
        else:
            yield current
            current = item

    if current is not _EXHAUSTED:
        yield current


__all__ = [
    "cartesian_product",
    "alternating_select",
    "merge_consecutive",
]
