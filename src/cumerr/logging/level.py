# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""Log level names accepted by cumerr's logging settings."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final

# Spellings the stdlib accepts for the same numeric levels
_ALIASES: Final[dict[str, str]] = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class LogLevel(str, Enum):
    """Levels ``configure_logging`` can put on the ``cumerr`` logger."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib_level(self) -> int:
        return logging.getLevelNamesMapping()[self.value]

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Parse a level name, case-insensitively, including WARN and FATAL.

        Raises:
            ValueError: If the name is not a known level
        """
        name = value.strip().upper()
        try:
            return cls(_ALIASES.get(name, name))
        except ValueError:
            raise ValueError(f"Invalid log level: {value}") from None
