# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""
Module-level entry points: create-or-aggregate, the error-value predicate
and the opt-in fatal escalation.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

from cumerr.config import ErrorSettings
from cumerr.errors import FatalError
from cumerr.logging import get_logger
from cumerr.record import ErrorRecord
from cumerr.registry import TagRegistry
from cumerr.result import Result, Success

logger = get_logger(__name__)


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Final = _Unset()


_EVENT_FIELDS: Final = ("tag", "params", "payload")


def raise_error(
    *args: Any,
    existing: Any = _UNSET,
    tag: Any = _UNSET,
    params: Any = _UNSET,
    payload: Any = _UNSET,
    registry: TagRegistry | None = None,
    settings: ErrorSettings | None = None,
) -> ErrorRecord:
    """
    Create an error record or aggregate a new event into an existing one.

    Positional arguments are read as ``([existing,] tag, params, payload)``:
    a leading record (or None) is the record to aggregate into, anything
    else is already the tag, so ``raise_error("ESTAT", path, handles)`` works
    without an explicit record. Each field may instead be passed by keyword.
    ``raise_error()`` returns a fresh, empty record.

    Args:
        *args: ``[existing,] tag, params, payload``
        existing: Record to aggregate into (None for a new record)
        tag: Registered error tag
        params: Template parameters (list/tuple, scalar or None)
        payload: Arbitrary value attached to the event
        registry: Tag registry to resolve against (default registry if None)
        settings: Settings for a newly created record

    Returns:
        The record that received the event

    Raises:
        TypeError: If the arguments cannot be bound, e.g. a field given both
            positionally and by keyword, or ``existing`` not a record
    """
    if existing is _UNSET:
        existing = None
        if args and (args[0] is None or isinstance(args[0], ErrorRecord)):
            existing, args = args[0], args[1:]
    elif existing is not None and not isinstance(existing, ErrorRecord):
        raise TypeError(
            f"existing must be an ErrorRecord or None, not {type(existing).__name__}"
        )

    if len(args) > len(_EVENT_FIELDS):
        raise TypeError(f"raise_error() got {len(args)} event arguments, at most 3")

    fields = dict(zip(_EVENT_FIELDS, args))
    for name, value in zip(_EVENT_FIELDS, (tag, params, payload)):
        if value is _UNSET:
            continue
        if name in fields:
            raise TypeError(f"raise_error() got multiple values for argument {name!r}")
        fields[name] = value

    if existing is None:
        existing = ErrorRecord(settings=settings)
        if not fields:
            return existing

    return existing.raise_error(
        fields.get("tag"),
        fields.get("params"),
        fields.get("payload"),
        registry=registry,
    )



def is_error_value(value: Any) -> bool:
    """Return True if ``value`` is an ``ErrorRecord``."""
    return isinstance(value, ErrorRecord)


def abort_if_error(value: Any, *, settings: ErrorSettings | None = None) -> None:
    """
    Escalate an error record to a fatal exception; do nothing otherwise.

    A record holding no events is left alone unless ``abort_on_empty`` is
    set, in which case it aborts with an empty message.

    Raises:
        FatalError: If ``value`` is an error record; its message is every
            recorded message joined by a single space
    """
    if not is_error_value(value):
        return

    if value.count() == 0:
        if settings is None:
            settings = value.settings
        if not settings.abort_on_empty:
            return

    error = FatalError(value)
    logger.error(
        "Aborting on error record",
        extra={"tag": value.tag(), "count": value.count()},
    )
    raise error


def combine(
    results: Iterable[Any], *, settings: ErrorSettings | None = None
) -> Result[list[Any]]:
    """
    Combine several results into one.

    Plain values and ``Success`` values are collected in order. If any item
    is an error record, the events of every failing item are merged, in
    order, into a new record which is returned instead.

    Args:
        results: Results or plain values
        settings: Settings for the merged record

    Returns:
        A Success with the list of values, or the merged ErrorRecord
    """
    values: list[Any] = []
    merged: ErrorRecord | None = None

    for item in results:
        if isinstance(item, ErrorRecord):
            if merged is None:
                merged = ErrorRecord(settings=settings)
            merged.absorb(item)
        elif isinstance(item, Success):
            values.append(item.value)
        else:
            values.append(item)

    if merged is not None:
        return merged
    return Success(values)
