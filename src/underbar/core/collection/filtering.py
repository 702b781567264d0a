"""Filtering: keep, drop, and deduplicate values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from underbar.core.collection.iteration import each
from underbar.core.equality import StrictSet
from underbar.core.types import Collection, Predicate


def filter(collection: Collection[Any], predicate: Predicate) -> list[Any]:
    """Collect the values that pass a truth test.

    Args:
        collection: Sequence or Mapping to scan.
        predicate: Function of a single value; truthy keeps the value.

    Returns:
        New list of passing values in visitation order.
    """
    passed: list[Any] = []

    def keep(value: Any, key: Any, coll: Any) -> None:
        if predicate(value):
            passed.append(value)

    each(collection, keep)
    return passed


def reject(collection: Collection[Any], predicate: Predicate) -> list[Any]:
    """Collect the values that fail a truth test. Complement of `filter`."""
    return filter(collection, lambda value: not predicate(value))


def uniq(sequence: Sequence[Any]) -> list[Any]:
    """Drop later duplicates, keeping the first occurrence of each value.

    Duplicates are detected with strict equality, so 1, 1.0 and True are all
    kept. Unhashable values (lists, dicts) are supported.

    Returns:
        New list of distinct values in order of first occurrence.
    """
    seen = StrictSet()

    def first_time(value: Any) -> bool:
        if value in seen:
            return False
        seen.add(value)
        return True

    return filter(sequence, first_time)
