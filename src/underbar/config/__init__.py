"""Configuration module using Pydantic Settings.

Usage:
    from underbar.config import TimingSettings, get_timing_settings

    settings = TimingSettings(throttle_trailing=False)
    defaults = get_timing_settings()
"""

from underbar.config.settings import (
    ShuffleSettings,
    TimerBackendKind,
    TimingSettings,
    get_shuffle_settings,
    get_timing_settings,
)

__all__ = [
    "TimingSettings",
    "ShuffleSettings",
    "TimerBackendKind",
    "get_timing_settings",
    "get_shuffle_settings",
]
