"""Advanced sequence operations: reordering, zipping, flattening, set algebra.

Usage:
    shuffle([1, 2, 3])                         # e.g. [3, 1, 2], input untouched
    zip(["a", "b", "c"], [1, 2])               # [["a", 1], ["b", 2], ["c", None]]
    flatten([1, [2, [3, [4]], 5]])             # [1, 2, 3, 4, 5]
    intersection([1, 2, 3], [2, 3, 4], [3, 2]) # [2, 3]
    difference([1, 2, 2, 5], [2], [4])         # [1, 5]
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from functools import cache
from typing import Any

from underbar.config import get_shuffle_settings
from underbar.core.collection.filtering import filter
from underbar.core.collection.iteration import each
from underbar.core.equality import StrictSet


@cache
def _default_rng() -> random.Random:
    """Process-wide RNG for shuffle, seeded from ShuffleSettings."""
    return random.Random(get_shuffle_settings().seed)


def shuffle[T](sequence: Sequence[T], *, rng: random.Random | None = None) -> list[T]:
    """Return a uniformly random permutation of a sequence.

    Uses a Fisher-Yates pass over a copy; the input is never modified.

    Args:
        sequence: Values to reorder.
        rng: Random source. Defaults to the shared RNG (seeded by
            UNDERBAR_SHUFFLE_SEED when set).

    Returns:
        New list containing every input element exactly once.
    """
    if rng is None:
        rng = _default_rng()
    result = list(sequence)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def zip(*sequences: Sequence[Any]) -> list[list[Any]]:
    """Group elements sharing an index across several sequences.

    Shorter sequences are padded with None so the result is as long as the
    longest input.

    Returns:
        New list of lists; entry i holds element i of every input.
    """
    if not sequences:
        return []
    length = max(len(seq) for seq in sequences)
    return [[seq[i] if i < len(seq) else None for seq in sequences] for i in range(length)]


def _is_nested(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def flatten(nested: Sequence[Any]) -> list[Any]:
    """Flatten arbitrarily deep lists and tuples into one list.

    Strings, mappings and other values are leaves and are not expanded.

    Returns:
        New list of leaves in depth-first, left-to-right order.
    """
    result: list[Any] = []
    _flatten_into(nested, result)
    return result


def _flatten_into(nested: Sequence[Any], result: list[Any]) -> None:
    def visit(value: Any, index: int, seq: Any) -> None:
        if _is_nested(value):
            _flatten_into(value, result)
        else:
            result.append(value)

    each(nested, visit)


def intersection(*sequences: Sequence[Any]) -> list[Any]:
    """Values present in every input sequence.

    Returns:
        New list of shared values, each once, in order of first occurrence in
        the first sequence. Empty when no sequences are given.
    """
    if not sequences:
        return []
    head, *rest = sequences
    others = [StrictSet(seq) for seq in rest]
    emitted = StrictSet()

    def shared(value: Any) -> bool:
        if value in emitted or not all(value in other for other in others):
            return False
        emitted.add(value)
        return True

    return filter(head, shared)


def difference(sequence: Sequence[Any], *others: Sequence[Any]) -> list[Any]:
    """Values of sequence that occur in none of the other sequences.

    Order and duplicates of the first sequence are preserved.
    """
    excluded = StrictSet()
    for other in others:
        each(other, lambda value, index, seq: excluded.add(value))
    return filter(sequence, lambda value: value not in excluded)
