"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from underbar.config import (
    ShuffleSettings,
    TimingSettings,
    get_shuffle_settings,
    get_timing_settings,
)


def test_timing_defaults():
    settings = TimingSettings()

    assert settings.backend == "auto"
    assert settings.throttle_leading is True
    assert settings.throttle_trailing is True


def test_timing_reads_environment(monkeypatch):
    monkeypatch.setenv("UNDERBAR_TIMING_BACKEND", "thread")
    monkeypatch.setenv("UNDERBAR_TIMING_THROTTLE_LEADING", "false")

    settings = TimingSettings()

    assert settings.backend == "thread"
    assert settings.throttle_leading is False


def test_timing_rejects_unknown_backend(monkeypatch):
    monkeypatch.setenv("UNDERBAR_TIMING_BACKEND", "cron")

    with pytest.raises(ValidationError):
        TimingSettings()


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("UNDERBAR_TIMING_BACKEND", "thread")

    assert TimingSettings(backend="asyncio").backend == "asyncio"


def test_shuffle_seed(monkeypatch):
    assert ShuffleSettings().seed is None

    monkeypatch.setenv("UNDERBAR_SHUFFLE_SEED", "42")
    assert ShuffleSettings().seed == 42


def test_shuffle_seed_must_be_non_negative():
    with pytest.raises(ValidationError):
        ShuffleSettings(seed=-1)


def test_cached_getters_return_same_instance():
    assert get_timing_settings() is get_timing_settings()
    assert get_shuffle_settings() is get_shuffle_settings()
