"""Transformation and reduction over collections.

All operations visit elements through `each`, so they accept sequences and
mappings alike and always return new lists.

Usage:
    map([1, 2, 3], lambda n: n * 2)              # [2, 4, 6]
    pluck([{"age": 3}, {"age": 5}], "age")       # [3, 5]
    reduce([1, 2, 3], lambda total, n: total + n, 0)  # 6
    sort_by(people, "name")
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from underbar.core.collection.iteration import each, identity, property_of
from underbar.core.types import MISSING, Collection, Missing, Predicate, Reducer


def map(collection: Collection[Any], iterator: Callable[[Any], Any]) -> list[Any]:
    """Apply iterator to each value and collect the results.

    Args:
        collection: Sequence or Mapping to transform.
        iterator: Function of a single value.

    Returns:
        New list with one result per element, in visitation order.
    """
    results: list[Any] = []
    each(collection, lambda value, key, coll: results.append(iterator(value)))
    return results


def pluck(collection: Collection[Any], property_name: Any) -> list[Any]:
    """Extract one property from every element.

    Args:
        collection: Elements to read from.
        property_name: Key, index, or attribute name (see `property_of`).

    Returns:
        New list of the property values.
    """
    return map(collection, lambda value: property_of(value, property_name))


def invoke(
    collection: Collection[Any],
    function_or_key: Callable[..., Any] | str,
    args: Sequence[Any] = (),
) -> list[Any]:
    """Call a function or named method on every element.

    A callable receives the element as its first argument (the receiver)
    followed by args. A string names a method looked up on each element.

    Args:
        collection: Elements to call on.
        function_or_key: Callable, or method name.
        args: Extra positional arguments for every call.

    Returns:
        New list of call results, in visitation order.

    Raises:
        TypeError: If function_or_key is neither callable nor a string.
    """
    if callable(function_or_key):
        func = function_or_key
        return map(collection, lambda value: func(value, *args))
    if isinstance(function_or_key, str):
        name = function_or_key
        return map(collection, lambda value: getattr(value, name)(*args))
    raise TypeError(
        f"invoke expects a callable or method name, got {type(function_or_key).__name__}"
    )


def reduce(
    collection: Collection[Any],
    iterator: Reducer,
    initial: Any | Missing = MISSING,
) -> Any:
    """Fold a collection into a single value, left to right.

    When initial is omitted the first visited element seeds the accumulator
    and folding starts from the second element.

    Args:
        collection: Sequence or Mapping to fold.
        iterator: Function of (accumulator, value) returning the new accumulator.
        initial: Starting accumulator. Pass None explicitly to seed with None.

    Returns:
        Final accumulator.

    Raises:
        ValueError: If collection is empty and no initial value is given.
    """
    accumulator = initial

    def step(value: Any, key: Any, coll: Any) -> None:
        nonlocal accumulator
        if accumulator is MISSING:
            accumulator = value
        else:
            accumulator = iterator(accumulator, value)

    each(collection, step)
    if accumulator is MISSING:
        raise ValueError("Cannot reduce empty collection with no initial value")
    return accumulator


def every(collection: Collection[Any], predicate: Predicate = identity) -> bool:
    """Check that every value passes predicate. Vacuously true when empty.

    Once a value fails, predicate is not called on the remaining values.
    """
    return bool(
        reduce(
            collection,
            lambda passed, value: bool(predicate(value)) if passed else False,
            True,
        )
    )


def some(collection: Collection[Any], predicate: Predicate = identity) -> bool:
    """Check that at least one value passes predicate. False when empty."""
    return not every(collection, lambda value: not predicate(value))


def sort_by(
    collection: Collection[Any],
    iterator_or_property: Callable[[Any], Any] | str,
) -> list[Any]:
    """Sort values ascending by a computed key or a named property.

    Sorting is stable: values with equal keys keep their visitation order.

    Args:
        collection: Sequence or Mapping whose values are sorted.
        iterator_or_property: Key function, or property name for `property_of`.

    Returns:
        New sorted list.
    """
    if callable(iterator_or_property):
        key_fn = iterator_or_property
    else:
        name = iterator_or_property

        def key_fn(value: Any) -> Any:
            return property_of(value, name)

    return sorted(map(collection, identity), key=key_fn)
