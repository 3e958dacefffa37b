"""Configuration for password hashing and logging.

This module centralises environment-driven configuration. The
:class:`PasswordSettings` object is cached by :func:`get_settings` so
environment parsing happens once per process; tests clear the cache to pick
up overrides.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Final

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BCRYPT_MIN_COST: Final[int] = 4
BCRYPT_MAX_COST: Final[int] = 31
DEFAULT_HASH_COST: Final[int] = 12
DEFAULT_MIN_HASH_COST: Final[int] = 10
DEFAULT_LOG_LEVEL: Final[str] = "INFO"


class PasswordSettings(BaseSettings):
    """Settings controlling the bcrypt work factor and library logging.

    ``min_cost`` is the floor accepted by ``RawPassword.to_encrypt``; it is
    configurable so test suites can hash with cheap costs while production
    keeps a safe lower bound.
    """

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False, populate_by_name=True)

    default_cost: int = Field(
        DEFAULT_HASH_COST,
        alias="EMAIL_PASS_DEFAULT_COST",
        ge=BCRYPT_MIN_COST,
        le=BCRYPT_MAX_COST,
    )
    min_cost: int = Field(
        DEFAULT_MIN_HASH_COST,
        alias="EMAIL_PASS_MIN_COST",
        ge=BCRYPT_MIN_COST,
        le=BCRYPT_MAX_COST,
    )
    log_level: str = Field(DEFAULT_LOG_LEVEL, alias="EMAIL_PASS_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"EMAIL_PASS_LOG_LEVEL must be a logging level name, got {value!r}")
        return level

    @model_validator(mode="after")
    def validate_default_cost(self) -> "PasswordSettings":
        if self.default_cost < self.min_cost:
            raise ValueError("EMAIL_PASS_DEFAULT_COST must not be lower than EMAIL_PASS_MIN_COST")
        return self


@lru_cache()
def get_settings() -> PasswordSettings:
    """Return the cached settings instance."""

    return PasswordSettings()


__all__ = [
    "PasswordSettings",
    "get_settings",
    "BCRYPT_MIN_COST",
    "BCRYPT_MAX_COST",
    "DEFAULT_HASH_COST",
    "DEFAULT_MIN_HASH_COST",
]
