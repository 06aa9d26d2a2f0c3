"""StringBuilder for assembling element markup.

Parts are collected in a list and joined once, so building a tag with
many attribute and child fragments stays linear in the output size.
"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Append-only string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("hi").append("</p>").build()
        '<p>hi</p>'
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment; empty fragments are skipped.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def extend(self, strings: Iterable[str]) -> StringBuilder:
        """Append several fragments at once, skipping empty ones."""
        self._parts.extend(s for s in strings if s)
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
