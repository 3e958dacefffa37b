"""Global pytest fixtures for the email_pass tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from email_pass.core.config import get_settings

SECURE_PASSWORD = "ThisIsAPassPhrase.And.Secure.Password"
TEST_COST = 4


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Allow the cheapest bcrypt cost so hashing tests stay fast.

    Settings are cached per process, so the cache is cleared before and after
    each test to pick up (and then drop) the environment override.
    """

    monkeypatch.setenv("EMAIL_PASS_MIN_COST", str(TEST_COST))
    monkeypatch.setenv("EMAIL_PASS_DEFAULT_COST", str(TEST_COST))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def secure_password() -> str:
    return SECURE_PASSWORD


@pytest.fixture
def cost() -> int:
    return TEST_COST
