"""
Dependency leveling: topological grouping of items by dependency depth.

Given items and a function returning what each item depends on, every item
is assigned a level:

    level(x) = 0                                  if x has no dependencies
    level(x) = 1 + max(level(d) for d in deps(x)) otherwise

so every dependency lands in a strictly earlier level. Levels are computed
with an iterative depth-first traversal (no recursion limit on long chains),
memoised so each item and each edge is visited once: O(n + e).

Functions:
    group_by_dependencies(items, dependencies) - Items grouped per level
    dependency_levels(items, dependencies)     - Level of each item
    topological_order(items, dependencies)     - Levels flattened
"""

import logging
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .errors import (
    CircularDependencyError,
    UnknownDependencyError,
    require_callable,
)
from .types import DependencyFunction, IdentityKey, Level

logger = logging.getLogger(__name__)

# Level marker of an item whose dependencies are still being visited
IN_PROGRESS = -1


@dataclass(slots=True)
class _Frame:
    """One item on the traversal stack."""

    item: Any
    key: Hashable
    pending: Iterator[Any]
    deepest: int = -1  # Highest level among dependencies settled so far


def _identity(item: Any) -> Hashable:
    return item


def _level_items[T](
    items: Iterable[T],
    dependencies: DependencyFunction[T],
    key: IdentityKey[T] | None,
    strict: bool,
) -> tuple[list[Level[T]], dict[Hashable, int]]:
    """Shared traversal behind the public functions."""
    require_callable(dependencies, "dependencies")
    if key is None:
        key = _identity
    else:
        require_callable(key, "key")

    items = list(items)
    members = {key(item) for item in items} if strict else None

    levels: dict[Hashable, int] = {}
    groups: list[Level[T]] = []

    def open_frame(item: T, item_key: Hashable) -> _Frame:
        levels[item_key] = IN_PROGRESS
        item_dependencies = dependencies(item)
        if item_dependencies is None:
            item_dependencies = ()
        return _Frame(item, item_key, iter(item_dependencies))

    for root in items:
        root_key = key(root)
        if root_key in levels:
            continue

        stack = [open_frame(root, root_key)]
        while stack:
            frame = stack[-1]
            for dependency in frame.pending:
                dependency_key = key(dependency)
                if members is not None and dependency_key not in members:
                    raise UnknownDependencyError(frame.item, dependency)

                state = levels.get(dependency_key)
                if state is None:
                    # Descend; this frame resumes from its iterator later
                    stack.append(open_frame(dependency, dependency_key))
                    break
                if state == IN_PROGRESS:
                    logger.debug(
                        f"Cycle closed by {frame.item!r} -> {dependency!r}, "
                        f"path: {[f.item for f in stack]}"
                    )
                    raise CircularDependencyError(dependency)
                frame.deepest = max(frame.deepest, state)
            else:
                stack.pop()
                level = frame.deepest + 1
                levels[frame.key] = level
                while len(groups) <= level:
                    groups.append([])
                groups[level].append(frame.item)
                if stack:
                    stack[-1].deepest = max(stack[-1].deepest, level)

    logger.debug(f"Leveled {len(levels)} items into {len(groups)} levels")
    return groups, levels


def group_by_dependencies[T](
    items: Iterable[T],
    dependencies: DependencyFunction[T],
    key: IdentityKey[T] | None = None,
    *,
    strict: bool = True,
) -> list[Level[T]]:
    """
    Groups items so that each item's dependencies all sit in earlier groups.

    Args:
        items: The items to group. Repeated items are only grouped once.
        dependencies: Returns the items a given item depends on, or None.
        key: Decides item equality: two items are the same item when their
            keys are equal. Defaults to the item itself.
        strict: Reject dependencies that are not among `items`. When False,
            such dependencies are leveled and returned like any other item.

    Returns:
        Groups ordered from least (no dependencies) to most dependent. Within
        a group, items appear in the order their level was settled.

    Raises:
        InvalidArgumentError: If `dependencies` or `key` is not callable.
        UnknownDependencyError: If strict and a dependency is not an item.
        CircularDependencyError: If the dependencies contain a cycle. No
            partial grouping is returned.

    Example:
        >>> deps = {"A": [], "B": ["A"], "C": ["A", "B"]}
        >>> group_by_dependencies("ABC", deps.get)
        [['A'], ['B'], ['C']]
    """
    groups, _ = _level_items(items, dependencies, key, strict)
    return groups


def dependency_levels[T](
    items: Iterable[T],
    dependencies: DependencyFunction[T],
    key: IdentityKey[T] | None = None,
    *,
    strict: bool = True,
) -> dict[Hashable, int]:
    """Level of every leveled item, indexed by its key (the item by default)."""
    _, levels = _level_items(items, dependencies, key, strict)
    return levels


def topological_order[T](
    items: Iterable[T],
    dependencies: DependencyFunction[T],
    key: IdentityKey[T] | None = None,
    *,
    strict: bool = True,
) -> tuple[T, ...]:
    """
    Returns items ordered so dependencies come before their dependents.

    Raises:
        CircularDependencyError: If the dependencies contain a cycle.
    """
    groups = group_by_dependencies(items, dependencies, key, strict=strict)
    return tuple(item for group in groups for item in group)


__all__ = [
    "group_by_dependencies",
    "dependency_levels",
    "topological_order",
]
