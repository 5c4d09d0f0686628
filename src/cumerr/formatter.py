# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""
Message rendering for error events.

Templates are printf-style strings. Rendering is total: a template whose
placeholders do not line up with the parameters still produces a message,
and the mismatch is reported through the ``cumerr.formatter`` logger.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Final

from cumerr.logging import get_logger

logger = get_logger(__name__)

# One printf conversion specifier, or a literal "%%".
_PLACEHOLDER: Final = re.compile(
    r"%(?:%|[-+ #0]*(?:\d+)?(?:\.\d+)?[hlL]?[diouxXeEfFgGcrsa])"
)


def normalize_params(params: Any) -> list[Any]:
    """
    Turn a scalar-or-sequence parameter argument into a list.

    Only lists and tuples count as sequences; strings, mappings and any other
    object are a single parameter. ``None`` means no parameters at all.
    """
    if params is None:
        return []
    if isinstance(params, (list, tuple)):
        return list(params)
    return [params]


def join_params(params: Sequence[Any]) -> str:
    """Join parameters with single spaces, rendering ``None`` as empty."""
    return " ".join("" if p is None else str(p) for p in params)


def count_placeholders(template: str) -> int:
    """Return how many parameters ``template`` consumes."""
    return sum(1 for m in _PLACEHOLDER.finditer(template) if m.group() != "%%")


def format_template(template: str, params: Sequence[Any]) -> str:
    """
    Substitute ``params`` into ``template`` positionally.

    Missing parameters render as empty strings and surplus ones are dropped.
    If the substitution itself fails, the template is returned followed by
    the joined parameters.
    """
    args = ["" if p is None else p for p in params]
    expected = count_placeholders(template)
    if len(args) != expected:
        logger.warning(
            "Template parameter count mismatch",
            extra={"template": template, "expected": expected, "received": len(args)},
        )
        args = args[:expected] + [""] * (expected - len(args))

    try:
        return template % tuple(args)
    except (TypeError, ValueError) as exc:
        logger.warning(
            "Template substitution failed",
            extra={"template": template, "error": str(exc)},
        )
        joined = join_params(params)
        return f"{template} {joined}" if joined else template


def render_message(tag: str, template: str, params: Sequence[Any]) -> str:
    """Render an event message as ``(TAG) text``."""
    return f"({tag}) {format_template(template, params)}"
