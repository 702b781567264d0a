"""Timer backends for deferred invocation.

A backend hands a callback to some timer facility and returns a handle that
can cancel it. `delay` and `throttle` only talk to the TimerBackend protocol,
so tests can swap in a manual backend.

Usage:
    backend = resolve_backend("auto")
    handle = backend.call_later(0.5, print, "hello")
    handle.cancel()
"""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from underbar.config import TimerBackendKind


@runtime_checkable
class Cancellable(Protocol):
    """Handle to a pending deferred call."""

    def cancel(self) -> None:
        """Abort the call if it has not fired yet. No-op afterwards."""
        ...


@runtime_checkable
class TimerBackend(Protocol):
    """Protocol for scheduling a callback after a delay.

    Built-in implementations:
    - ThreadTimerBackend: one threading.Timer per call
    - AsyncioTimerBackend: loop.call_later on an asyncio event loop
    """

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> Cancellable:
        """Schedule callback(*args) after at least delay seconds.

        Args:
            delay: Seconds to wait. Zero means "as soon as possible".
            callback: Function to call.
            *args: Positional arguments for callback.

        Returns:
            Handle that cancels the pending call.
        """
        ...


class ThreadTimerBackend:
    """Runs each callback on its own threading.Timer.

    Exceptions raised by the callback are reported through threading.excepthook.
    """

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> threading.Timer:
        timer = threading.Timer(delay, callback, args=args)
        timer.start()
        return timer


class AsyncioTimerBackend:
    """Schedules callbacks on an asyncio event loop.

    Exceptions raised by the callback go to the loop's exception handler.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Initialize backend.

        Args:
            loop: Loop to schedule on. Defaults to the loop running at call time.
        """
        self._loop = loop

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback, *args)


def _has_running_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def resolve_backend(kind: TimerBackendKind) -> TimerBackend:
    """Build the timer backend for a configured kind.

    Args:
        kind: "thread", "asyncio", or "auto" (asyncio when a loop is running in
            the current thread, thread otherwise).

    Returns:
        A TimerBackend instance.

    Raises:
        ValueError: If kind is not a known backend.
    """
    if kind == "auto":
        kind = "asyncio" if _has_running_loop() else "thread"
    if kind == "thread":
        return ThreadTimerBackend()
    if kind == "asyncio":
        return AsyncioTimerBackend()
    raise ValueError(f"Unknown timer backend: {kind}")
