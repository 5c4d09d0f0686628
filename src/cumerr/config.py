# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""
Runtime settings for error records.

Settings are read from ``CUMERR_*`` environment variables using Pydantic v2's
settings support. ``get_settings`` caches the loaded instance; call
``get_settings.cache_clear()`` after changing the environment.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ErrorSettings(BaseSettings):
    """Behaviour switches for ``ErrorRecord`` and ``abort_if_error``."""

    model_config = SettingsConfigDict(
        env_prefix="CUMERR_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    checked_indices: bool = Field(
        default=True,
        description="Raise EventIndexError for indices outside 0..count-1",
    )
    abort_on_empty: bool = Field(
        default=False,
        description="Let abort_if_error escalate records holding no events",
    )
    log_events: bool = Field(
        default=True, description="Emit a DEBUG line for every aggregated event"
    )

    @classmethod
    def load(cls) -> ErrorSettings:
        """Load settings from the environment or defaults."""
        return cls()


@lru_cache(maxsize=1)
def get_settings() -> ErrorSettings:
    """Return the process-wide settings instance."""
    return ErrorSettings.load()
