"""Structured logging helpers shared by the email_pass modules.

Library modules obtain a :class:`StructuredLogger` through :func:`get_logger`
and never configure handlers themselves; applications that want the
``email_pass`` records on stderr call :func:`configure_logging`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from email_pass.core.config import get_settings

LOGGER_NAME = "email_pass"

_MAX_VALUE_LENGTH = 100


class StructuredFormatter(logging.Formatter):
    """Formatter rendering ``extra`` fields as ``"key = value"`` pairs after the message."""

    # Standard LogRecord attributes to exclude from structured output
    _STANDARD_ATTRS = {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "asctime", "taskName",
    }

    def __init__(self) -> None:
        super().__init__()
        self.datefmt = "%Y-%m-%d %H:%M:%S"

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        level = f"[{record.levelname.lower()}]"
        message = record.getMessage()

        extra_dict = {
            key: value for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS and value is not None
        }

        line = f"{timestamp} {level} {record.name}: {message}"
        if extra_dict:
            extra_str = " ".join(
                f'"{key} = {_render_value(value)}"' for key, value in sorted(extra_dict.items())
            )
            line = f"{line} {extra_str}"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _render_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        rendered = json.dumps(value, ensure_ascii=False, default=str)
    else:
        rendered = str(value)
    if len(rendered) > _MAX_VALUE_LENGTH:
        rendered = rendered[: _MAX_VALUE_LENGTH - 3] + "..."
    return rendered


class StructuredLogger:
    """Wrapper around a standard logger that accepts structured data as a dict second argument."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if args and isinstance(args[0], dict):
            self._logger.log(level, msg, extra=args[0], stacklevel=3)
        else:
            self._logger.log(level, msg, *args, stacklevel=3, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Return a structured logger for a module inside the ``email_pass`` package."""

    return StructuredLogger(logging.getLogger(name))


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stderr handler with :class:`StructuredFormatter` to the package logger.

    ``level`` defaults to ``PasswordSettings.log_level``. Calling this more
    than once replaces the previously installed handler instead of stacking
    a new one.
    """

    base_logger = logging.getLogger(LOGGER_NAME)
    for existing in list(base_logger.handlers):
        if getattr(existing, "_email_pass_handler", False):
            base_logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    handler._email_pass_handler = True  # type: ignore[attr-defined]

    base_logger.setLevel(level if level is not None else get_settings().log_level)
    base_logger.addHandler(handler)
    base_logger.propagate = False
    return base_logger


__all__ = ["StructuredFormatter", "StructuredLogger", "configure_logging", "get_logger", "LOGGER_NAME"]
