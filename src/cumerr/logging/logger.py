# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""
Logger implementation for cumerr.

Based on Python's standard logging module, with a formatter that renders
``extra`` fields either as ``key=value`` pairs or as a JSON document.
"""

from __future__ import annotations

import enum
import json
import logging
import sys
from logging import StreamHandler
from typing import Any, Final

from cumerr.logging.config import LoggingSettings

ROOT_LOGGER_NAME: Final = "cumerr"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(name)s: %(message)s"
        if include_level and not json_format:
            fmt = "[%(levelname)s] " + fmt
        if include_timestamp:
            fmt = "%(asctime)s " + fmt

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }

        if self.json_format:
            return self._format_json(record, extra)
        return self._format_text(super().format(record), extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data = {
            "logger": record.name,
            "message": record.getMessage(),
            **{k: self._json_value(v) for k, v in extra.items()},
        }

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message

        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, enum.Enum):
            return value.name
        try:
            return json.dumps(value)
        except (TypeError, ValueError):
            return str(value)

    @staticmethod
    def _json_value(value: Any) -> Any:
        try:
            json.dumps(value)
        except (TypeError, ValueError):
            return str(value)
        return value


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger inside the ``cumerr`` namespace.

    Args:
        name: Dotted name, usually ``__name__``; names outside the namespace
            are nested under it.

    Returns:
        A standard library logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """
    Attach console output to the ``cumerr`` logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        settings: Logging settings (loaded from the environment if None)

    Returns:
        The configured package logger
    """
    settings = settings or LoggingSettings.load()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.level.to_stdlib_level())

    for handler in list(logger.handlers):
        if getattr(handler, "_cumerr_managed", False):
            logger.removeHandler(handler)

    if settings.console_enabled:
        console = StreamHandler(sys.stderr)
        console.setFormatter(
            StructuredFormatter(
                json_format=settings.json_format,
                include_timestamp=settings.include_timestamp,
            )
        )
        console._cumerr_managed = True  # type: ignore[attr-defined]
        logger.addHandler(console)

    return logger


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
