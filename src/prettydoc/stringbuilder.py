"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation.

The layout engine also needs to take back speculative output when a
``Union`` attempt overflows, so the builder supports marks: ``mark()``
returns the current part count and ``truncate(mark)`` drops everything
appended after it.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with rollback.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("foo(")
            >>> checkpoint = sb.mark()
            >>> sb.append("a, b")
            >>> sb.truncate(checkpoint)
            >>> sb.append("\\n  a,\\n  b")
            >>> sb.build()
            'foo(\\n  a,\\n  b'

    Thread Safety:
        Instance is local to each render() call.
        No shared mutable state.

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def mark(self) -> int:
        """Return a mark for the current end of the buffer."""
        return len(self._parts)

    def truncate(self, mark: int) -> StringBuilder:
        """Drop every part appended after ``mark``.

        Args:
            mark: Value previously returned by ``mark()``

        Returns:
            self for method chaining
        """
        del self._parts[mark:]
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)
