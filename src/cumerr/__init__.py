# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr

"""
Cumulative error reporting.

A function returns either its normal value (optionally wrapped in
``Success``) or an ``ErrorRecord`` aggregating one or more error events,
each with a ``(TAG) message`` and an arbitrary payload::

    from cumerr import abort_if_error, is_error_value, raise_error, register_tag

    register_tag("WFILE", "\\t%s")

    error = raise_error()
    error.raise_error("ESTAT", "a.nofile", handles)
    if is_error_value(error):
        abort_if_error(error)
"""

from __future__ import annotations

from cumerr.api import abort_if_error, combine, is_error_value, raise_error
from cumerr.config import ErrorSettings, get_settings
from cumerr.errors import (
    CumErrError,
    EmptyRecordError,
    ErrorSeverity,
    EventIndexError,
    FatalError,
)
from cumerr.formatter import format_template, join_params, normalize_params, render_message
from cumerr.logging import configure_logging, get_logger
from cumerr.record import ErrorEvent, ErrorRecord
from cumerr.registry import TagRegistry, default_registry, register_tag
from cumerr.result import Result, Success, of
from cumerr.tags import BUILTIN_TEMPLATES, BuiltinTag

__version__ = "0.11.0"

__all__ = [
    "BUILTIN_TEMPLATES",
    "BuiltinTag",
    "CumErrError",
    "EmptyRecordError",
    "ErrorEvent",
    "ErrorRecord",
    "ErrorSettings",
    "ErrorSeverity",
    "EventIndexError",
    "FatalError",
    "Result",
    "Success",
    "TagRegistry",
    "abort_if_error",
    "combine",
    "configure_logging",
    "default_registry",
    "format_template",
    "get_logger",
    "get_settings",
    "is_error_value",
    "join_params",
    "normalize_params",
    "of",
    "raise_error",
    "register_tag",
    "render_message",
]
