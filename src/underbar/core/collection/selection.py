"""Selection and search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from underbar.core.collection.iteration import each
from underbar.core.collection.transform import reduce
from underbar.core.equality import strict_equal
from underbar.core.types import MISSING, Collection, Missing


def first[T](sequence: Sequence[T], n: int | Missing = MISSING) -> T | list[T] | None:
    """Return the first element, or a list of the first n elements.

    Args:
        sequence: Sequence to read from.
        n: How many elements to take. Omit to get the bare first element.

    Returns:
        First element (None if empty) when n is omitted, otherwise a new list
        of the first min(n, len) elements. Zero or negative n gives [].
    """
    if n is MISSING:
        return sequence[0] if len(sequence) else None
    if n <= 0:
        return []
    return list(sequence[:n])


def last[T](
    sequence: Sequence[T], n: int | Missing = MISSING
) -> T | list[T] | Sequence[T] | None:
    """Return the last element, or a list of the last n elements.

    Args:
        sequence: Sequence to read from.
        n: How many elements to take. Omit to get the bare last element.

    Returns:
        Last element (None if empty) when n is omitted. If n exceeds the
        length the sequence itself is returned. Zero or negative n gives [].
    """
    length = len(sequence)
    if n is MISSING:
        return sequence[length - 1] if length else None
    if n > length:
        return sequence
    if n <= 0:
        return []
    return list(sequence[length - n : length])


def index_of(sequence: Sequence[Any], target: Any) -> int:
    """Find the lowest index holding a value strictly equal to target.

    Returns:
        Index of the first match, or -1 if absent.
    """
    result = -1

    def check(item: Any, index: int, seq: Any) -> None:
        nonlocal result
        if result == -1 and strict_equal(item, target):
            result = index

    each(sequence, check)
    return result


def contains(collection: Collection[Any], target: Any) -> bool:
    """Check whether any value of a sequence or mapping strictly equals target."""
    return bool(
        reduce(
            collection,
            lambda was_found, item: True if was_found else strict_equal(item, target),
            False,
        )
    )
