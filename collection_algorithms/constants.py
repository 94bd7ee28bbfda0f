"""
Global constants used throughout the project
"""

# Shell sort increments, smallest first. Each pass uses the largest gap
# still smaller than the sequence length, down to the final gap of 1.
SHELL_SORT_GAPS: tuple[int, ...] = (
    1,
    3,
    7,
    21,
    48,
    112,
    336,
    861,
    1968,
    4592,
    13776,
    33936,
    86961,
    198768,
    463792,
    1391376,
    3402672,
    8382192,
    21479367,
    49095696,
    114556624,
    343669872,
    852913488,
    2085837936,
)

DEFAULT_SORT_ALGORITHM = "merge"

LOGGER_NAME = "collection_algorithms"
