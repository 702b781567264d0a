"""Strict equality and membership.

Strict equality compares without coercion across types: `1`, `1.0` and `True`
are pairwise distinct even though Python's `==` treats them as equal.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any


def strict_equal(a: Any, b: Any) -> bool:
    """Check equality without cross-type coercion.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if both values have the same exact type and compare equal.
    """
    return type(a) is type(b) and bool(a == b)


class StrictSet:
    """Membership set using strict equality.

    Hashable values are tracked by (type, value) so lookups stay O(1).
    Unhashable values, and values not equal to themselves such as NaN, fall
    back to a linear scan with strict_equal, so a NaN is never a member.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._hashed: set[tuple[type, Any]] = set()
        self._scanned: list[Any] = []
        for value in values:
            self.add(value)

    def add(self, value: Any) -> None:
        key = _hash_key(value)
        if key is not None:
            self._hashed.add(key)
        elif not any(strict_equal(value, seen) for seen in self._scanned):
            self._scanned.append(value)

    def __contains__(self, value: Any) -> bool:
        key = _hash_key(value)
        if key is not None:
            return key in self._hashed
        return any(strict_equal(value, seen) for seen in self._scanned)

    def __len__(self) -> int:
        return len(self._hashed) + len(self._scanned)


def _hash_key(value: Any) -> tuple[type, Any] | None:
    """Set key for value, or None when it must go through the scan.

    Set lookups short-circuit on identity, which would let a NaN match itself.
    """
    if not isinstance(value, Hashable):
        return None
    try:
        hash(value)
    except TypeError:
        # Hashable by type but not by content, e.g. a tuple of lists
        return None
    if value != value:
        return None
    return (type(value), value)
