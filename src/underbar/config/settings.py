"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
timing wrappers and the shuffle RNG.

Usage:
    from underbar.config import TimingSettings, ShuffleSettings

    # Load from environment variables (UNDERBAR_TIMING_*, UNDERBAR_SHUFFLE_*)
    timing = TimingSettings()
    shuffle_settings = ShuffleSettings()

    # Or override with explicit values
    timing = TimingSettings(backend="thread", throttle_trailing=False)
"""

from __future__ import annotations

from functools import cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TimerBackendKind = Literal["auto", "thread", "asyncio"]
"""Which timer facility deferred calls use."""


class TimingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for delay and throttle.

    Attributes:
        backend: Timer facility for deferred calls. "auto" uses the running
            asyncio loop when there is one, threads otherwise.
        throttle_leading: Run the first call of a window immediately.
        throttle_trailing: Coalesce calls made inside a window into one call
            at the window boundary (False drops them instead).

    Environment Variables:
        UNDERBAR_TIMING_BACKEND
        UNDERBAR_TIMING_THROTTLE_LEADING
        UNDERBAR_TIMING_THROTTLE_TRAILING
    """

    model_config = SettingsConfigDict(
        env_prefix="UNDERBAR_TIMING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backend: TimerBackendKind = "auto"
    throttle_leading: bool = True
    throttle_trailing: bool = True


class ShuffleSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the shared shuffle RNG.

    Attributes:
        seed: Seed for reproducible shuffles. None seeds from the OS.

    Environment Variables:
        UNDERBAR_SHUFFLE_SEED
    """

    model_config = SettingsConfigDict(
        env_prefix="UNDERBAR_SHUFFLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    seed: int | None = Field(default=None, ge=0)


@cache
def get_timing_settings() -> TimingSettings:
    """Process-wide TimingSettings, read from the environment once."""
    return TimingSettings()


@cache
def get_shuffle_settings() -> ShuffleSettings:
    """Process-wide ShuffleSettings, read from the environment once."""
    return ShuffleSettings()
