"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field
from typing import Any

from underbar.config import get_shuffle_settings, get_timing_settings
from underbar.core.collection import advanced


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test."""
    get_timing_settings.cache_clear()
    get_shuffle_settings.cache_clear()
    advanced._default_rng.cache_clear()
    yield
    get_timing_settings.cache_clear()
    get_shuffle_settings.cache_clear()
    advanced._default_rng.cache_clear()


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@dataclass
class ManualHandle:
    due: float
    callback: Any
    args: tuple[Any, ...]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualTimerBackend:
    """Timer backend driven by advance() instead of wall time."""

    clock: ManualClock
    scheduled: list[ManualHandle] = field(default_factory=list)

    def call_later(self, delay: float, callback: Any, *args: Any) -> ManualHandle:
        handle = ManualHandle(self.clock.now + delay, callback, args)
        self.scheduled.append(handle)
        return handle

    def live(self) -> list[ManualHandle]:
        return [h for h in self.scheduled if not h.cancelled and not h.fired]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due callbacks in due order."""
        target = self.clock.now + seconds
        while True:
            due = [h for h in self.live() if h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self.clock.now = max(self.clock.now, handle.due)
            handle.fired = True
            handle.callback(*handle.args)
        self.clock.now = target


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def backend(clock):
    return ManualTimerBackend(clock)
