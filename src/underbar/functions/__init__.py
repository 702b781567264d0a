"""Function wrappers: one-time and memoized calls, deferred and throttled calls."""

from underbar.functions.decorators import memoize, once
from underbar.functions.timers import (
    AsyncioTimerBackend,
    Cancellable,
    ThreadTimerBackend,
    TimerBackend,
    resolve_backend,
)
from underbar.functions.timing import Throttled, delay, throttle

__all__ = [
    # Decorators
    "once",
    "memoize",
    # Timing
    "delay",
    "throttle",
    "Throttled",
    # Backends
    "Cancellable",
    "TimerBackend",
    "ThreadTimerBackend",
    "AsyncioTimerBackend",
    "resolve_backend",
]
