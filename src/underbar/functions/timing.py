"""Deferred and rate-limited invocation.

Usage:
    # Fire-and-forget after 500 ms; keep the handle to cancel it
    handle = delay(save_draft, 500, document)
    handle.cancel()

    # Run at most once per 100 ms window, coalescing bursts into a trailing call
    on_scroll = throttle(redraw, 100)
    for event in events:
        on_scroll(event)

Both wrappers talk to a TimerBackend. Without an explicit backend they use the
one configured by TimingSettings.backend (UNDERBAR_TIMING_BACKEND).
"""

from __future__ import annotations

import functools
import threading
import time
import warnings
from collections.abc import Callable
from typing import Any

from underbar.config import TimerBackendKind, TimingSettings, get_timing_settings
from underbar.functions.timers import Cancellable, TimerBackend, resolve_backend


def delay(
    func: Callable[..., Any],
    wait_ms: float,
    *args: Any,
    backend: TimerBackend | None = None,
    settings: TimingSettings | None = None,
    **kwargs: Any,
) -> Cancellable:
    """Call func(*args, **kwargs) after at least wait_ms milliseconds, without blocking.

    The return value of func is discarded. Exceptions raised by func surface
    through the backend's unhandled-error channel, not to the caller.
    The keywords backend and settings belong to delay and are never forwarded.

    Args:
        func: Function to call later.
        wait_ms: Minimum delay in milliseconds.
        *args: Positional arguments for func.
        backend: Timer backend. Defaults to the one named by settings.
        settings: Timing settings. Defaults to get_timing_settings().
        **kwargs: Keyword arguments for func.

    Returns:
        Handle whose cancel() aborts the call if it has not fired yet.

    Raises:
        ValueError: If wait_ms is negative.
    """
    if wait_ms < 0:
        raise ValueError(f"wait_ms must be >= 0, got {wait_ms}")
    if backend is None:
        settings = settings or get_timing_settings()
        backend = resolve_backend(settings.backend)
    if kwargs:
        func = functools.partial(func, **kwargs)
    return backend.call_later(wait_ms / 1000, func, *args)


class Throttled[**P, R]:
    """Callable wrapper running func at most once per time window.

    The first call of a window runs immediately (when leading). Calls made
    inside the window are coalesced: the latest arguments are kept and func
    runs once more at the window boundary (when trailing), or the calls are
    dropped. Every call returns the most recent result of func, which is None
    until func has run at least once.
    """

    def __init__(
        self,
        func: Callable[P, R],
        wait_ms: float,
        *,
        leading: bool,
        trailing: bool,
        backend: TimerBackend | None,
        backend_kind: TimerBackendKind,
        clock: Callable[[], float],
    ) -> None:
        self._func = func
        self._wait = wait_ms / 1000
        self._leading = leading
        self._trailing = trailing
        self._backend = backend
        self._backend_kind = backend_kind
        self._clock = clock

        self._lock = threading.Lock()
        self._previous: float | None = None  # start of the current window
        self._pending: Cancellable | None = None
        self._pending_call: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._generation = 0  # bumps on cancel so stale timers become no-ops
        self._result: R | None = None

        self.__wrapped__ = func
        self.__name__ = getattr(func, "__name__", type(self).__name__)
        self.__doc__ = func.__doc__

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R | None:
        run_now = False
        with self._lock:
            now = self._clock()
            if self._previous is None and not self._leading:
                self._previous = now
            if self._previous is None:
                run_now = True
            else:
                remaining = self._wait - (now - self._previous)
                # remaining > wait means the clock went backwards
                run_now = remaining <= 0 or remaining > self._wait

            if run_now:
                self._clear_pending()
                self._previous = now
            elif self._trailing:
                self._pending_call = (args, kwargs)
                if self._pending is None:
                    self._pending = self._schedule(remaining, self._generation)

        if run_now:
            result = self._func(*args, **kwargs)
            with self._lock:
                self._result = result
            return result
        return self._result

    def cancel(self) -> None:
        """Drop any pending trailing call and start a fresh window."""
        with self._lock:
            self._clear_pending()
            self._previous = None

    @property
    def pending(self) -> bool:
        """Whether a trailing call is scheduled."""
        with self._lock:
            return self._pending is not None

    def _clear_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
        self._pending = None
        self._pending_call = None
        self._generation += 1

    def _schedule(self, remaining: float, generation: int) -> Cancellable:
        backend = self._backend
        if backend is None:
            backend = resolve_backend(self._backend_kind)
        return backend.call_later(remaining, self._fire_trailing, generation)

    def _fire_trailing(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._pending_call is None:
                return
            args, kwargs = self._pending_call
            self._pending_call = None
            self._pending = None
            self._previous = self._clock() if self._leading else None

        result = self._func(*args, **kwargs)
        with self._lock:
            self._result = result


def throttle[**P, R](
    func: Callable[P, R],
    wait_ms: float,
    *,
    leading: bool | None = None,
    trailing: bool | None = None,
    backend: TimerBackend | None = None,
    clock: Callable[[], float] | None = None,
    settings: TimingSettings | None = None,
) -> Throttled[P, R]:
    """Wrap func so it runs at most once per wait_ms window.

    Args:
        func: Function to throttle.
        wait_ms: Window length in milliseconds.
        leading: Run the first call of a window immediately.
            Defaults to settings.throttle_leading.
        trailing: Coalesce calls inside a window into one call at the window
            boundary; False drops them. Defaults to settings.throttle_trailing.
        backend: Timer backend for trailing calls. Defaults to settings.backend.
        clock: Monotonic clock in seconds. Defaults to time.monotonic.
        settings: Timing settings (uses process defaults if None).

    Returns:
        Throttled wrapper with a cancel() method.

    Raises:
        ValueError: If wait_ms is negative, or both leading and trailing are off.
    """
    settings = settings or get_timing_settings()
    if leading is None:
        leading = settings.throttle_leading
    if trailing is None:
        trailing = settings.throttle_trailing

    if wait_ms < 0:
        raise ValueError(f"wait_ms must be >= 0, got {wait_ms}")
    if not leading and not trailing:
        raise ValueError("throttle needs leading or trailing enabled, otherwise func never runs")
    if wait_ms == 0:
        warnings.warn(
            f"throttle({getattr(func, '__name__', func)!r}, 0) never limits calls; "
            f"every call runs immediately.",
            stacklevel=2,
        )

    return Throttled(
        func,
        wait_ms,
        leading=leading,
        trailing=trailing,
        backend=backend,
        backend_kind=settings.backend,
        clock=clock or time.monotonic,
    )
