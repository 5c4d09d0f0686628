# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""Tag registry mapping error tags to their message templates."""

from __future__ import annotations

import threading

from cumerr.logging import get_logger
from cumerr.tags import BUILTIN_TEMPLATES

logger = get_logger(__name__)


class TagRegistry:
    """
    Thread-safe mapping from error tag to message template.

    A new registry starts out with the built-in tags. The module-level
    ``default_registry`` instance is the process-wide default; independent registries
    can be created and passed explicitly to ``raise_error``.
    """

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        """Initialize the registry.

        Args:
            entries: Extra templates layered over the built-in ones
        """
        self._lock = threading.RLock()
        self._templates: dict[str, str] = dict(BUILTIN_TEMPLATES)
        if entries:
            self._templates.update(entries)

    def register_tag(self, tag: str, template: str) -> str:
        """Register a tag, or replace the template of an existing one.

        Args:
            tag: The error tag
            template: printf-style template for messages with this tag

        Returns:
            The tag, for chaining
        """
        with self._lock:
            previous = self._templates.get(tag)
            self._templates[tag] = template

        if previous is None:
            logger.debug("Registered error tag", extra={"tag": tag})
        elif previous != template:
            logger.debug(
                "Overrode error tag template",
                extra={"tag": tag, "previous": previous},
            )
        return tag

    def lookup(self, tag: str) -> str | None:
        """Return the template for a tag, or None if it is not registered."""
        with self._lock:
            return self._templates.get(tag)

    def __contains__(self, tag: object) -> bool:
        with self._lock:
            return tag in self._templates

    def tags(self) -> list[str]:
        """Return every registered tag, sorted."""
        with self._lock:
            return sorted(self._templates)

    def snapshot(self) -> dict[str, str]:
        """Return a plain copy of the tag table."""
        with self._lock:
            return dict(self._templates)

    def copy(self) -> TagRegistry:
        """Return an independent registry seeded with the current entries."""
        return TagRegistry(self.snapshot())

    def reset(self) -> None:
        """Drop every custom tag and restore the built-in templates."""
        with self._lock:
            self._templates = dict(BUILTIN_TEMPLATES)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tags={self.tags()!r})"


# Process-wide default registry
default_registry = TagRegistry()


def register_tag(
    tag: str, template: str, *, registry: TagRegistry | None = None
) -> str:
    """
    Define a custom error tag or redefine a default one.

    Args:
        tag: The error tag
        template: printf-style template for messages with this tag
        registry: Registry to update (the default registry if None)

    Returns:
        The tag, for chaining
    """
    target = registry if registry is not None else default_registry
    return target.register_tag(tag, template)
