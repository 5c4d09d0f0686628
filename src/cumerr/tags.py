# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""
Built-in error tags and their message templates.

Templates use printf-style positional placeholders (``%s``). The table is
part of the public contract and must stay byte-for-byte stable.
"""

from __future__ import annotations

from typing import Final

from strenum import StrEnum


class BuiltinTag(StrEnum):
    """Tags every registry knows about from the start."""

    EARG = "EARG"
    """A required argument was not supplied."""

    ELIB = "ELIB"
    """A library could not be loaded or used."""

    ENOTAG = "ENOTAG"
    """An event was raised without any tag."""

    EOPEN = "EOPEN"
    """A file could not be opened."""

    ESTAT = "ESTAT"
    """A file could not be stat'ed."""

    ETAG = "ETAG"
    """An event was raised with a tag nobody registered."""


BUILTIN_TEMPLATES: Final[dict[str, str]] = {
    BuiltinTag.EARG.value: "Missing argument:[%s]",
    BuiltinTag.ELIB.value: "Cannot use library:[%s] - %s",
    BuiltinTag.ENOTAG.value: "Missing tag. Params:[%s]",
    BuiltinTag.EOPEN.value: "Cannot open file:[%s]",
    BuiltinTag.ESTAT.value: "Cannot stat file:[%s]",
    BuiltinTag.ETAG.value: "Invalid tag:[%s] %s",
}
