"""Tests for configuration loading utilities."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from email_pass.core.config import PasswordSettings, get_settings


def test_settings_load_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings should reflect values read from environment variables."""
    monkeypatch.setenv("EMAIL_PASS_MIN_COST", "8")
    monkeypatch.setenv("EMAIL_PASS_DEFAULT_COST", "11")
    monkeypatch.setenv("EMAIL_PASS_LOG_LEVEL", "debug")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.min_cost == 8
    assert settings.default_cost == 11
    assert settings.log_level == "DEBUG"


def test_settings_have_sensible_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """When the env vars are missing, production defaults apply."""
    monkeypatch.delenv("EMAIL_PASS_MIN_COST", raising=False)
    monkeypatch.delenv("EMAIL_PASS_DEFAULT_COST", raising=False)
    monkeypatch.delenv("EMAIL_PASS_LOG_LEVEL", raising=False)
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.default_cost == 12
    assert settings.min_cost == 10
    assert settings.log_level == "INFO"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_cost": 3},
        {"default_cost": 32},
        {"min_cost": 12, "default_cost": 10},
        {"log_level": "LOUD"},
    ],
)
def test_settings_reject_invalid_values(overrides: dict[str, object]) -> None:
    """Out-of-range costs and unknown log levels are configuration errors."""
    with pytest.raises(ValidationError):
        PasswordSettings(**overrides)  # type: ignore[arg-type]
