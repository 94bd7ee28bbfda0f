"""
Generic algorithms over in-memory collections.

Everything here is a pure, synchronous transformation over caller-supplied
sequences and functions; there is no shared state between calls.

**Sorting** (sorting.py)
    In-place sorts driven by a three-way comparison.
    - bubble_sort, merge_sort: stable
    - shell_sort, heap_sort: unstable

**Searching** (searching.py)
    Nearest-match binary search over sequences sorted by a projected key.
    - nearest_under / nearest_over -> index or None
    - find_nearest_under / find_nearest_over -> item or default

**Dependencies** (dag.py)
    Grouping of items into dependency levels, with cycle detection.
    - group_by_dependencies(items, dependencies) -> levels

**Combinatorics** (combinatorics.py)
    Lazy enumerators over several item sources.
    - cartesian_product(sources, item_selector)
    - alternating_select(sources, item_selector)

**Comparison** (comparison.py)
    Builders for the comparison functions the sorts consume.
"""

import logging

from .combinatorics import (
    alternating_select,
    cartesian_product,
    merge_consecutive,
)
from .comparison import (
    chain_comparisons,
    compare_by,
    natural_compare,
    reverse_comparison,
    to_ordering,
)
from .constants import LOGGER_NAME
from .dag import (
    dependency_levels,
    group_by_dependencies,
    topological_order,
)
from .errors import (
    CircularDependencyError,
    CollectionAlgorithmsError,
    InvalidArgumentError,
    UnknownDependencyError,
)
from .searching import (
    find_nearest_over,
    find_nearest_under,
    nearest_over,
    nearest_under,
)
from .sorting import (
    SORT_ALGORITHMS,
    STABLE_ALGORITHMS,
    bubble_sort,
    heap_sort,
    is_sorted,
    merge_sort,
    shell_sort,
    sort,
    swap,
)
from .types import Ordering

# Library logging stays silent unless the application configures it
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    # Sorting
    "bubble_sort",
    "shell_sort",
    "heap_sort",
    "merge_sort",
    "sort",
    "is_sorted",
    "swap",
    "SORT_ALGORITHMS",
    "STABLE_ALGORITHMS",
    # Searching
    "nearest_under",
    "nearest_over",
    "find_nearest_under",
    "find_nearest_over",
    # Dependencies
    "group_by_dependencies",
    "dependency_levels",
    "topological_order",
    # Combinatorics
    "cartesian_product",
    "alternating_select",
    "merge_consecutive",
    # Comparison
    "Ordering",
    "natural_compare",
    "compare_by",
    "reverse_comparison",
    "chain_comparisons",
    "to_ordering",
    # Errors
    "CollectionAlgorithmsError",
    "InvalidArgumentError",
    "UnknownDependencyError",
    "CircularDependencyError",
]
