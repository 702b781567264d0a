"""Underbar: collection and function utilities built from first principles.

Usage:
    import underbar as _

    _.each({"a": 1, "b": 2}, lambda value, key, obj: print(key, value))
    evens = _.filter([1, 2, 3, 4], lambda n: n % 2 == 0)
    total = _.reduce([1, 2, 3], lambda acc, n: acc + n, 0)
    merged = _.extend({"a": 1}, {"b": 2})

    @_.memoize
    def slow_square(n: int) -> int:
        return n * n

    on_resize = _.throttle(redraw, 100)
"""

__version__ = "0.1.0"

# Collections
from underbar.core import (
    MISSING,
    contains,
    defaults,
    difference,
    each,
    every,
    extend,
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
    reduce,
    reject,
    shuffle,
    some,
    sort_by,
    strict_equal,
    uniq,
    zip,
)

# Configuration
from underbar.config import ShuffleSettings, TimingSettings

# Functions
from underbar.functions import (
    Cancellable,
    Throttled,
    TimerBackend,
    delay,
    memoize,
    once,
    throttle,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "MISSING",
    "identity",
    "strict_equal",
    # Collections
    "each",
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
    # Functions
    "once",
    "memoize",
    "delay",
    "throttle",
    "Throttled",
    "Cancellable",
    "TimerBackend",
    # Configuration
    "TimingSettings",
    "ShuffleSettings",
]
