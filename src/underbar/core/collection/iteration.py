"""Generic traversal over ordered sequences and keyed mappings.

Usage:
    each([10, 20], lambda value, index, seq: print(index, value))
    each({"a": 1}, lambda value, key, mapping: print(key, value))

Every derived traversal (filter, map, reduce, ...) is built on `each`, so the
sequence/mapping dispatch lives in exactly one place.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import singledispatch
from typing import Any

from underbar.core.types import Iterator


def identity[T](value: T) -> T:
    """Return the argument unchanged. Default iterator for several operations."""
    return value


@singledispatch
def each(collection: Any, iterator: Iterator) -> None:
    """Call iterator(value, key, collection) for every element of collection.

    Sequences are visited in ascending index order with integer keys. Mappings
    are visited once per key, in the mapping's own order.

    Args:
        collection: Sequence or Mapping to traverse.
        iterator: Callback receiving (value, key, collection).

    Raises:
        TypeError: If collection is neither a Sequence nor a Mapping.
    """
    raise TypeError(
        f"Expected a sequence or mapping, got {type(collection).__name__}"
    )


@each.register(Mapping)
def _each_mapping(collection: Mapping, iterator: Iterator) -> None:
    for key in collection:
        iterator(collection[key], key, collection)


@each.register(Sequence)
def _each_sequence(collection: Sequence, iterator: Iterator) -> None:
    for index in range(len(collection)):
        iterator(collection[index], index, collection)


def property_of(obj: Any, key: Any) -> Any:
    """Look up a named property on an element.

    Mappings (and sequences given an integer key) are subscripted, anything
    else is read as an attribute.

    Args:
        obj: Element to read from.
        key: Mapping key, sequence index, or attribute name.

    Returns:
        The looked-up value.

    Raises:
        KeyError: Mapping has no such key.
        IndexError: Sequence index out of range.
        AttributeError: Object has no such attribute.
    """
    if isinstance(obj, Mapping):
        return obj[key]
    if isinstance(obj, Sequence) and isinstance(key, int):
        return obj[key]
    return getattr(obj, key)
