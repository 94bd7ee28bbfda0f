"""Tests for collection_algorithms/combinatorics.py"""

from collections.abc import Iterator
from itertools import count, islice, product

import pytest

from collection_algorithms import (
    InvalidArgumentError,
    alternating_select,
    cartesian_product,
    merge_consecutive,
)


class Source:
    """Item source that records how far it has been read."""

    def __init__(self, name: str, items):
        self.name = name
        self.items = items
        self.pulled = 0
        self.closed = False

    def open(self) -> Iterator:
        try:
            for item in self.items:
                self.pulled += 1
                yield item
        finally:
            self.closed = True


def open_source(source: Source) -> Iterator:
    return source.open()


class TestCartesianProduct:
    def test_two_by_two(self):
        combinations = list(cartesian_product([[1, 2], ["x", "y"]], iter))
        assert len(combinations) == 4
        assert set(combinations) == {(1, "x"), (1, "y"), (2, "x"), (2, "y")}

    def test_emission_order(self):
        combinations = list(cartesian_product([[1, 2], ["x", "y"]], iter))
        assert combinations == [(1, "x"), (2, "x"), (1, "y"), (2, "y")]

    def test_three_sources_match_full_product(self):
        sources = [[1, 2, 3], ["a", "b"], [True, False, None, 0]]
        combinations = list(cartesian_product(sources, iter))
        assert len(combinations) == 3 * 2 * 4
        assert len(set(combinations)) == len(combinations)
        assert set(combinations) == set(product(*sources))

    def test_new_item_pairs_with_all_seen_items(self):
        combinations = list(cartesian_product([[1, 2, 3], ["a", "b"]], iter))
        assert combinations == [
            (1, "a"),
            (2, "a"),
            (1, "b"),
            (2, "b"),
            (3, "a"),
            (3, "b"),
        ]

    def test_single_source(self):
        assert list(cartesian_product([[1, 2, 3]], iter)) == [(1,), (2,), (3,)]

    def test_no_sources(self):
        assert list(cartesian_product([], iter)) == []

    def test_empty_source_empties_product(self):
        assert list(cartesian_product([[1, 2], [], ["x"]], iter)) == []

    def test_unbounded_sources_stream(self):
        """Combinations of early items arrive without reading sources to the end."""
        combinations = list(islice(cartesian_product([None, None], lambda _: count()), 4))
        assert combinations == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_reads_one_source_at_a_time(self):
        left = Source("left", [1, 2, 3])
        right = Source("right", ["a", "b", "c"])
        combinations = cartesian_product([left, right], open_source)

        assert next(combinations) == (1, "a")
        assert (left.pulled, right.pulled) == (1, 1)
        assert next(combinations) == (2, "a")
        assert (left.pulled, right.pulled) == (2, 1)

    def test_abandoned_cursors_are_closed(self):
        left = Source("left", [1, 2, 3])
        right = Source("right", ["a", "b", "c"])
        combinations = cartesian_product([left, right], open_source)
        next(combinations)
        combinations.close()
        assert left.closed and right.closed

    def test_missing_selector_fails_eagerly(self):
        with pytest.raises(InvalidArgumentError):
            cartesian_product([[1]], None)


class TestAlternatingSelect:
    def test_round_robin(self):
        assert list(alternating_select([[1, 2, 3], ["a", "b"]], iter)) == [
            1,
            "a",
            2,
            "b",
            3,
        ]

    def test_skips_exhausted_sources(self):
        sources = [[1], ["a", "b", "c"], [True, False]]
        assert list(alternating_select(sources, iter)) == [
            1,
            "a",
            True,
            "b",
            False,
            "c",
        ]

    def test_empty_sources_are_dropped(self):
        assert list(alternating_select([[], [1, 2], []], iter)) == [1, 2]

    def test_no_sources(self):
        assert list(alternating_select([], iter)) == []

    def test_first_items_streamed_before_later_sources_open(self):
        opened = []

        def selector(source: list) -> Iterator:
            opened.append(source[0])
            return iter(source)

        interleaved = alternating_select([["a1", "a2"], ["b1"]], selector)
        assert next(interleaved) == "a1"
        assert opened == ["a1"]
        assert next(interleaved) == "b1"
        assert opened == ["a1", "b1"]

    def test_unbounded_source(self):
        sources = [count(), iter("ab")]
        assert list(islice(alternating_select(sources, iter), 6)) == [
            0,
            "a",
            1,
            "b",
            2,
            3,
        ]

    def test_abandoned_cursors_are_closed(self):
        first = Source("first", [1, 2])
        second = Source("second", [3, 4])
        interleaved = alternating_select([first, second], open_source)
        assert next(interleaved) == 1
        assert next(interleaved) == 3
        interleaved.close()
        assert first.closed and second.closed

    def test_exhausted_cursor_closed_while_others_continue(self):
        short = Source("short", [1])
        long = Source("long", [2, 3, 4])
        interleaved = alternating_select([short, long], open_source)
        assert next(interleaved) == 1
        assert next(interleaved) == 2
        assert next(interleaved) == 3
        assert short.closed
        assert not long.closed

    def test_exhausted_cursor_not_pulled_again(self):
        """A dry iterator that could resume is never read after it stops."""

        class Resumable:
            def __init__(self, items):
                self.items = list(items)
                self.pulls = 0

            def __iter__(self):
                return self

            def __next__(self):
                self.pulls += 1
                if not self.items:
                    raise StopIteration
                return self.items.pop(0)

        resumable = Resumable([1])
        interleaved = alternating_select([resumable, ["a", "b", "c"]], iter)
        assert next(interleaved) == 1
        assert next(interleaved) == "a"
        assert next(interleaved) == "b"
        resumable.items.append(99)
        assert list(interleaved) == ["c"]
        assert resumable.pulls == 2

    def test_missing_selector_fails_eagerly(self):
        with pytest.raises(InvalidArgumentError):
            alternating_select([[1]], None)


class TestMergeConsecutive:
    def test_merges_touching_spans(self):
        spans = [(0, 2), (2, 5), (5, 6), (8, 9), (9, 10), (12, 13)]
        merged = merge_consecutive(
            spans, lambda a, b: a[1] == b[0], lambda a, b: (a[0], b[1])
        )
        assert list(merged) == [(0, 6), (8, 10), (12, 13)]

    def test_empty(self):
        assert list(merge_consecutive([], lambda a, b: True, max)) == []

    def test_single_item(self):
        assert list(merge_consecutive([None], lambda a, b: True, max)) == [None]

    def test_nothing_merges(self):
        items = [1, 2, 3]
        assert list(merge_consecutive(items, lambda a, b: False, max)) == items

    def test_missing_functions_fail_eagerly(self):
        with pytest.raises(InvalidArgumentError):
            merge_consecutive([1], None, max)
        with pytest.raises(InvalidArgumentError):
            merge_consecutive([1], lambda a, b: True, None)
