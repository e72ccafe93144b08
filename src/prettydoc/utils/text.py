"""Text measurement utilities for prettydoc.

Width accounting is done in display columns, not code points: East-Asian
wide and fullwidth characters take two columns, combining marks and other
zero-width characters take none.

Example:
    >>> from prettydoc.utils.text import display_width
    >>> display_width("abc")
    3
    >>> display_width("全角")
    4
"""

from __future__ import annotations

from functools import lru_cache

from wcwidth import wcwidth


@lru_cache(maxsize=4096)
def _char_width(char: str) -> int:
    width = wcwidth(char)
    # Control characters report -1; they still occupy a cell in the buffer.
    return 1 if width < 0 else width


def display_width(s: str) -> int:
    """Return the number of terminal columns ``s`` occupies.

    Args:
        s: Text without line breaks

    Returns:
        Sum of per-character display widths

    Examples:
        >>> display_width("")
        0
        >>> display_width("café")
        4
        >>> display_width("e\\u0301")
        1
    """
    if s.isascii():
        return len(s)
    return sum(_char_width(char) for char in s)


def contains_line_break(s: str) -> bool:
    """Return True if ``s`` holds a raw ``\\n`` or ``\\r``."""
    return "\n" in s or "\r" in s
