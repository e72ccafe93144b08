"""Work-stack frames shared by the layout walk and the fits lookahead.

A frame is an ``(indent, mode, node)`` triple. ``indent`` is the number of
indentation levels in effect, ``mode`` is the layout mode inherited from the
nearest enclosing group, and ``node`` is the document still to render.

``Checkpoint`` frames are markers pushed below a ``Union`` attempt. They
render nothing; reaching one means the attempt finished without overflow.

``SUFFIX_END`` sits below flushed line suffixes. Reaching it means the
suffix content has been printed.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from prettydoc.nodes import Doc


class Mode(Enum):
    """Layout mode of a frame."""

    FLAT = "flat"
    BREAK = "break"


@dataclass(slots=True)
class Checkpoint:
    """Render state saved before a speculative ``Union`` attempt.

    Attributes:
        stack_depth: Stack length before the checkpoint frame was pushed.
        output_mark: StringBuilder mark to truncate back to.
        column: Column to restore.
        pending_suffixes: Line suffixes queued at the time of the checkpoint.
        fallback: Frame rendered instead of the attempt after a rollback.

    """

    stack_depth: int
    output_mark: int
    column: int
    pending_suffixes: tuple[tuple[int, Doc], ...]
    fallback: Frame


@dataclass(frozen=True, slots=True)
class SuffixEnd:
    """Marker frame closing a line-suffix flush."""


SUFFIX_END = SuffixEnd()


Frame: TypeAlias = tuple[int, Mode, Doc | Checkpoint | SuffixEnd]


__all__ = ["SUFFIX_END", "Checkpoint", "Frame", "Mode", "SuffixEnd"]
