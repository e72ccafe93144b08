"""Fits lookahead for group layout decisions.

Wadler-style fitting: a group is laid out flat when its contents, followed by
everything after it up to the next possible line break, fit in the width left
on the current line. Looking only at the group's own subtree is not enough,
since a short group immediately followed by more text on the same line can
still overflow.

The lookahead walks the group's child in flat mode with a small local stack,
then continues into the renderer's own work stack, reading it from the top
down by index. Nothing is copied and nothing is printed.

"""

from __future__ import annotations

from collections.abc import Sequence

from prettydoc.nodes import (
    Concat,
    FlatOrBreak,
    Group,
    Indent,
    Line,
    LineKind,
    Text,
    Union,
)
from prettydoc.renderers.frames import Frame, Mode


def fits(next_frame: Frame, rest: Sequence[Frame], width_left: int) -> bool:
    """Return True if ``next_frame`` and what follows fit in ``width_left``.

    Args:
        next_frame: The candidate, usually a group's child in flat mode.
        rest: The renderer's work stack; its last item renders next.
        width_left: Columns remaining on the current line.

    Returns:
        False as soon as the accumulated width exceeds ``width_left``.
        True on reaching a line that will break (a hard or literal line, or
        any line in a broken frame), or when the document ends first.

    """
    if width_left < 0:
        return False

    local: list[Frame] = [next_frame]
    rest_index = len(rest)

    while True:
        if local:
            indent, mode, node = local.pop()
        elif rest_index:
            rest_index -= 1
            indent, mode, node = rest[rest_index]
        else:
            return True

        match node:
            case Text(width=width):
                width_left -= width
                if width_left < 0:
                    return False
            case Line(kind=kind):
                if mode is Mode.BREAK or kind.forced:
                    return True
                if kind is LineKind.SOFT:
                    width_left -= 1
                    if width_left < 0:
                        return False
            case Concat(left=left, right=right):
                local.append((indent, mode, right))
                local.append((indent, mode, left))
            case Indent(amount=amount, child=child):
                local.append((indent + amount, mode, child))
            case Group(child=child):
                local.append((indent, mode, child))
            case FlatOrBreak(flat=flat, broken=broken):
                local.append((indent, mode, flat if mode is Mode.FLAT else broken))
            case Union(attempt=attempt, alternate=alternate):
                local.append(
                    (indent, mode, attempt if mode is Mode.FLAT else alternate)
                )
            case _:
                # Nil, LineSuffix and marker frames take no room on the line.
                pass


__all__ = ["fits"]
