# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""
The cumulative error record.

An ``ErrorRecord`` accumulates error events. Each event is a rendered
message plus an arbitrary payload handed back to the caller untouched. The
record's tag is the resolved tag of its first event and never changes
afterwards; events are only ever appended.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from cumerr.config import ErrorSettings, get_settings
from cumerr.errors import EmptyRecordError, EventIndexError, FatalError
from cumerr.formatter import join_params, normalize_params, render_message
from cumerr.logging import get_logger
from cumerr.registry import TagRegistry, default_registry
from cumerr.result import Result
from cumerr.tags import BUILTIN_TEMPLATES, BuiltinTag

logger = get_logger(__name__)


@dataclass(frozen=True)
class ErrorEvent:
    """One aggregated occurrence: its rendered message and its payload."""

    message: str
    payload: Any = None


def resolve_tag(
    tag: Any, params: list[Any], registry: TagRegistry
) -> tuple[str, str, list[Any]]:
    """
    Resolve a caller-supplied tag into ``(tag, template, params)``.

    Unregistered tags degrade to ``ETAG`` and missing tags to ``ENOTAG``;
    both carry the original parameters joined into a single string.
    """
    if tag is not None and not isinstance(tag, str):
        tag = str(tag)

    template = registry.lookup(tag) if tag else None
    if template is not None:
        return tag, template, params

    if tag:
        resolved = BuiltinTag.ETAG.value
        params = [tag, join_params(params)]
        logger.warning("Unregistered error tag", extra={"tag": tag})
    else:
        resolved = BuiltinTag.ENOTAG.value
        params = [join_params(params)]
        logger.warning("Error event raised without a tag")

    template = registry.lookup(resolved)
    if template is None:
        template = BUILTIN_TEMPLATES[resolved]
    return resolved, template, params


class ErrorRecord(Result[Any]):
    """
    Cumulative error object, the failure arm of ``Result``.

    A record can be created empty and filled through ``raise_error``, which
    returns the record itself so calls can be chained::

        error = ErrorRecord()
        for name in names:
            if not os.path.isfile(name):
                error.raise_error("ESTAT", name, handles)
        return error if error.count() else Success(handles)

    Index accessors follow ``ErrorSettings.checked_indices``: when checked,
    any index outside ``0..count()-1`` raises ``EventIndexError``; when
    unchecked, plain list indexing applies and out-of-range indices yield
    ``None``.
    """

    def __init__(self, *, settings: ErrorSettings | None = None) -> None:
        """Create an empty record.

        Args:
            settings: Behaviour switches (process-wide settings if None)
        """
        self._tag: str | None = None
        self._messages: list[str] = []
        self._payloads: list[Any] = []
        self._settings = settings

    @property
    def settings(self) -> ErrorSettings:
        return self._settings if self._settings is not None else get_settings()

    # -------- aggregation --------

    def raise_error(
        self,
        tag: str | None = None,
        params: Any = None,
        payload: Any = None,
        *,
        registry: TagRegistry | None = None,
    ) -> ErrorRecord:
        """
        Record one error event and return this record.

        Args:
            tag: Registered error tag; unknown or missing tags degrade to
                ``ETAG`` / ``ENOTAG`` events instead of failing
            params: Template parameters: a list or tuple, a single scalar,
                or None for no parameters
            payload: Arbitrary value attached to the event
            registry: Tag registry to resolve against (default registry if None)

        Returns:
            This record
        """
        registry = registry if registry is not None else default_registry
        resolved, template, param_list = resolve_tag(
            tag, normalize_params(params), registry
        )
        message = render_message(resolved, template, param_list)

        if not self._messages:
            self._tag = resolved
        self._messages.append(message)
        self._payloads.append(payload)

        if self.settings.log_events:
            logger.debug(
                message,
                extra={
                    "tag": resolved,
                    "record_tag": self._tag,
                    "event_index": len(self._messages) - 1,
                },
            )
        return self

    def absorb(self, other: ErrorRecord) -> ErrorRecord:
        """
        Append every event of ``other`` to this record, in order.

        Messages are copied as rendered; they are not re-resolved. An empty
        record takes over the tag of ``other``.

        Returns:
            This record
        """
        if other is self or not other._messages:
            return self
        if not self._messages:
            self._tag = other._tag
        self._messages.extend(other._messages)
        self._payloads.extend(other._payloads)
        return self

    # -------- scalar accessors --------

    def tag(self) -> str | None:
        """Return the tag of the first event, or None for an empty record."""
        return self._tag

    def count(self) -> int:
        """Return the number of recorded events."""
        return len(self._messages)

    def last_message(self) -> str:
        if not self._messages:
            raise EmptyRecordError("last_message")
        return self._messages[-1]

    def render(self) -> str:
        """Summarize the record as one string: its last message."""
        if not self._messages:
            raise EmptyRecordError("render")
        return self._messages[-1]

    def last_payload(self) -> Any:
        if not self._payloads:
            raise EmptyRecordError("last_payload")
        return self._payloads[-1]

    # -------- indexed accessors --------

    def _select(self, values: list[Any], index: Any) -> Any:
        if self.settings.checked_indices:
            try:
                position = operator.index(index)
            except TypeError:
                raise EventIndexError(index, len(values)) from None
            if isinstance(index, bool) or not 0 <= position < len(values):
                raise EventIndexError(index, len(values))
            return values[position]
        try:
            return values[index]
        except IndexError:
            return None

    def message_at(self, index: int) -> str | None:
        return self._select(self._messages, index)

    def messages_at(self, indices: Iterable[int]) -> list[str | None]:
        return [self._select(self._messages, i) for i in indices]

    def all_messages(self) -> list[str]:
        return list(self._messages)

    def payload_at(self, index: int) -> Any:
        return self._select(self._payloads, index)

    def payloads_at(self, indices: Iterable[int]) -> list[Any]:
        return [self._select(self._payloads, i) for i in indices]

    def all_payloads(self) -> list[Any]:
        return list(self._payloads)

    def events(self) -> list[ErrorEvent]:
        """Return every event in the order it was recorded."""
        return [
            ErrorEvent(message, payload)
            for message, payload in zip(self._messages, self._payloads)
        ]

    # -------- Result interface --------

    @property
    def is_success(self) -> bool:
        return False

    def map(self, func: Callable[[Any], Any]) -> ErrorRecord:
        return self

    def flat_map(self, func: Callable[[Any], Result[Any]]) -> ErrorRecord:
        return self

    def unwrap(self) -> Any:
        """
        There is no value to unwrap.

        Raises:
            FatalError: Always, carrying every recorded message
        """
        raise FatalError(self)

    def unwrap_or(self, default: Any) -> Any:
        return default

    def unwrap_or_else(self, func: Callable[[ErrorRecord], Any]) -> Any:
        return func(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "error",
            "error": {
                "tag": self._tag,
                "count": self.count(),
                "messages": self.all_messages(),
                "payloads": self.all_payloads(),
            },
        }

    def __str__(self) -> str:
        return self._messages[-1] if self._messages else ""

    def __repr__(self) -> str:
        return f"ErrorRecord(tag={self._tag!r}, count={self.count()})"
