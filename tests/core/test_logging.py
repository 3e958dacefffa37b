"""Tests for the structured logging helpers."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from email_pass.core.logging import (
    LOGGER_NAME,
    StructuredFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after tests that configure it."""

    base_logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(base_logger.handlers), base_logger.level, base_logger.propagate
    yield base_logger
    base_logger.handlers[:] = handlers
    base_logger.setLevel(level)
    base_logger.propagate = propagate


def _record(msg: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("email_pass.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_renders_extra_fields_sorted() -> None:
    line = StructuredFormatter().format(_record("Password hashed", cost=12, elapsed_ms=3.5))

    assert "[info] email_pass.test: Password hashed" in line
    assert line.endswith('"cost = 12" "elapsed_ms = 3.5"')


def test_formatter_truncates_long_values() -> None:
    line = StructuredFormatter().format(_record("msg", detail="x" * 500, items=list(range(100))))

    assert '"detail = ' + "x" * 97 + '..."' in line
    assert "x" * 98 not in line


def test_formatter_skips_none_values() -> None:
    line = StructuredFormatter().format(_record("msg", missing=None))

    assert "missing" not in line


def test_structured_logger_passes_dict_as_extra(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("email_pass.test")

    with caplog.at_level(logging.DEBUG, logger="email_pass.test"):
        logger.debug("Password verified", {"matched": True})

    assert caplog.records[-1].matched is True
    assert caplog.records[-1].getMessage() == "Password verified"


def test_structured_logger_supports_format_args(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("email_pass.test")

    with caplog.at_level(logging.INFO, logger="email_pass.test"):
        logger.info("checked %d passwords", 3)

    assert caplog.records[-1].getMessage() == "checked 3 passwords"


def test_configure_logging_uses_settings_level(
    monkeypatch: pytest.MonkeyPatch, package_logger: logging.Logger
) -> None:
    from email_pass.core.config import get_settings

    monkeypatch.setenv("EMAIL_PASS_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()

    configure_logging()

    assert package_logger.level == logging.WARNING
    assert package_logger.propagate is False
    assert any(isinstance(h.formatter, StructuredFormatter) for h in package_logger.handlers)


def test_configure_logging_replaces_its_own_handler(package_logger: logging.Logger) -> None:
    configure_logging("DEBUG")
    configure_logging("DEBUG")

    installed = [h for h in package_logger.handlers if isinstance(h.formatter, StructuredFormatter)]
    assert len(installed) == 1
    assert package_logger.level == logging.DEBUG
