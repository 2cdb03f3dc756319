"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from wheelspin.settings import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.env == "simulator"
    assert not settings.is_headless
    assert settings.timing.fade_ms == 500
    assert settings.timing.spin_ms == 1000
    assert settings.wheel.starting_balance == 1000
    assert settings.wheel.force_weight == -1
    assert settings.wheel.jitter_deg == 21


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WHEELSPIN_ENV", "headless")
    monkeypatch.setenv("WHEELSPIN_HEADLESS_ROUNDS", "3")
    monkeypatch.setenv("WHEELSPIN_TIMING__SPIN_MS", "3000")
    monkeypatch.setenv("WHEELSPIN_WHEEL__FORCE_WEIGHT", "0")

    settings = Settings(_env_file=None)

    assert settings.is_headless
    assert settings.headless_rounds == 3
    assert settings.timing.spin_ms == 3000
    assert settings.wheel.force_weight == 0


def test_invalid_values_rejected(monkeypatch):
    monkeypatch.setenv("WHEELSPIN_WHEEL__FORCE_WEIGHT", "-2")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
