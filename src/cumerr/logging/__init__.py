# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr

"""
Logging helpers for cumerr.

The library logs through the standard ``logging`` module under the
``cumerr`` namespace and stays silent until ``configure_logging`` is called.
"""

from __future__ import annotations

from cumerr.logging.config import LoggingSettings
from cumerr.logging.level import LogLevel
from cumerr.logging.logger import (
    ROOT_LOGGER_NAME,
    StructuredFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "LogLevel",
    "LoggingSettings",
    "ROOT_LOGGER_NAME",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
]
