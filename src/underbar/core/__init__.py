"""Core functionalities: stateless collection and object operations.

Architecture Note:
    core/ contains pure, stateless operations. Each is a single traversal
    built on `each`, and none keeps state between calls. For wrappers that
    own state (once, memoize, delay, throttle), see functions/.
"""

from underbar.core.collection import (
    contains,
    difference,
    each,
    every,
    filter,
    first,
    flatten,
    identity,
    index_of,
    intersection,
    invoke,
    last,
    map,
    pluck,
    property_of,
    reduce,
    reject,
    shuffle,
    some,
    sort_by,
    uniq,
    zip,
)
from underbar.core.equality import StrictSet, strict_equal
from underbar.core.objects import defaults, extend
from underbar.core.types import MISSING, Collection, Iterator, Predicate, Reducer

__all__ = [
    # Types
    "MISSING",
    "Collection",
    "Iterator",
    "Predicate",
    "Reducer",
    # Equality
    "strict_equal",
    "StrictSet",
    # Collection
    "identity",
    "each",
    "property_of",
    "first",
    "last",
    "index_of",
    "contains",
    "filter",
    "reject",
    "uniq",
    "map",
    "pluck",
    "invoke",
    "reduce",
    "every",
    "some",
    "sort_by",
    "shuffle",
    "zip",
    "flatten",
    "intersection",
    "difference",
    # Objects
    "extend",
    "defaults",
]
