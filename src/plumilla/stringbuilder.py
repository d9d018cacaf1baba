"""StringBuilder for O(n) string accumulation.

Appends to a list and joins once at the end, avoiding the quadratic cost of
repeated string concatenation while the renderer walks the tree.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<p>").append("Hello").append("</p>")
            >>> sb.build()
            '<p>Hello</p>'
            >>> sb.size
            12

    """

    __slots__ = ("_parts", "_size")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._size = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string; empty strings are skipped.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._size += len(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    @property
    def size(self) -> int:
        """Total number of characters appended so far."""
        return self._size
