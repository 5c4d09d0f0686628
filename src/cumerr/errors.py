# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""
Exceptions raised by cumerr itself.

Error *events* are never exceptions: they are values accumulated in an
``ErrorRecord``. The classes below only cover misuse of a record (reading
an event that does not exist) and the explicit escalation performed by
``abort_if_error``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from cumerr.record import ErrorRecord

EMPTY_RECORD: Final = "EMPTY_RECORD"
EVENT_INDEX: Final = "EVENT_INDEX"
FATAL: Final = "FATAL"


class ErrorSeverity(str, Enum):
    """Severity levels for library exceptions."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    FATAL = "fatal"


class CumErrError(Exception):
    """
    Base error class for cumerr exceptions.
    Should only be subclassed, not instantiated directly.
    """

    message: str
    code: str
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> "CumErrError":
        if cls is CumErrError:
            raise TypeError(
                "Do not instantiate CumErrError directly; use a subclass."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new error.

        Args:
            message: Human-readable error message
            code: Stable error code string
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Extra context keys
        """
        full_context = dict(context or {})
        full_context.update(kwargs)

        super().__init__(message)
        self.message = message
        self.code = code
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> "CumErrError":
        """Add a key-value pair to the error context and return self for chaining."""
        self.context[key] = value
        return self

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


class EmptyRecordError(CumErrError, LookupError):
    """A last-event accessor was called on a record holding no events."""

    def __init__(self, accessor: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot read {accessor} of an empty error record",
            code=EMPTY_RECORD,
            context={"accessor": accessor},
            **kwargs,
        )


class EventIndexError(CumErrError, IndexError):
    """A checked accessor was given an index outside ``0..count-1``."""

    def __init__(self, index: Any, count: int, **kwargs: Any) -> None:
        super().__init__(
            f"Event index {index!r} out of range for a record of {count} event(s)",
            code=EVENT_INDEX,
            context={"index": index, "count": count},
            **kwargs,
        )


class FatalError(CumErrError):
    """
    Unrecoverable escalation of an error record.

    The message is every recorded message joined by a single space, in the
    order the events were aggregated.
    """

    def __init__(self, record: "ErrorRecord", **kwargs: Any) -> None:
        self.record = record
        super().__init__(
            " ".join(record.all_messages()),
            code=FATAL,
            severity=ErrorSeverity.FATAL,
            context={"tag": record.tag(), "count": record.count()},
            **kwargs,
        )

    def __str__(self) -> str:
        return self.message
