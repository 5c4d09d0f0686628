# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""
Configuration for cumerr logging, driven by ``CUMERR_LOGGING_*`` variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cumerr.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """
    Configuration settings for cumerr logging.
    Loads from environment variables using Pydantic v2's env support.
    """

    model_config = SettingsConfigDict(
        env_prefix="CUMERR_LOGGING_",
        extra="ignore",
        case_sensitive=False,
        frozen=False,
    )

    level: LogLevel = Field(default=LogLevel.WARNING, description="Log level")
    json_format: bool = Field(default=False, description="Enable JSON log format")
    include_timestamp: bool = Field(
        default=True, description="Include timestamp in logs"
    )
    console_enabled: bool = Field(default=True, description="Enable console logging")

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, v: Any) -> LogLevel:
        """Accept level names in any case, plus the WARN and FATAL aliases."""
        if isinstance(v, LogLevel):
            return v
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a name, got {type(v).__name__}")
        return LogLevel.from_string(v)

    @classmethod
    def load(cls) -> LoggingSettings:
        """Load logging settings from environment variables or defaults."""
        return cls()
