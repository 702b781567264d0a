"""Collection operations: traversal, selection, filtering, reduction, reordering."""

from underbar.core.collection.advanced import (
    difference,
    flatten,
    intersection,
    shuffle,
    zip,
)
from underbar.core.collection.filtering import filter, reject, uniq
from underbar.core.collection.iteration import each, identity, property_of
from underbar.core.collection.selection import contains, first, index_of, last
from underbar.core.collection.transform import (
    every,
    invoke,
    map,
    pluck,
    reduce,
    some,
    sort_by,
)

__all__ = [
    # Iteration
    "identity",
    "each",
    "property_of",
    # Selection
    "first",
    "last",
    "index_of",
    "contains",
    # Filtering
    "filter",
    "reject",
    "uniq",
    # Transformation
    "map",
    "pluck",
    "invoke",
    "reduce",
    "every",
    "some",
    "sort_by",
    # Advanced
    "shuffle",
    "zip",
    "flatten",
    "intersection",
    "difference",
]
