"""Typed document nodes for prettydoc.

All document nodes are frozen dataclasses with slots for:
- Immutability: one tree can be rendered by several threads at once
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: the layout engine dispatches with ``match``

Node Hierarchy:
Doc (base)
├── Nil           no output, identity of concatenation
├── Text          literal run of characters, no line breaks
├── Line          breakable point (soft, soft-no-space, hard, literal)
├── Concat        left then right
├── Indent        child with a deeper indentation level
├── Group         child laid out flat if it fits, broken otherwise
├── LineSuffix    child deferred to the end of the current line
├── FlatOrBreak   one child per layout mode
└── Union         attempt, or alternate if the attempt overflows

Every node is validated in ``__post_init__``; an invalid parameter raises
InvalidArgumentError before the node exists. Composite nodes cache
``forced_break`` at construction, so deciding whether a group may be flat
never rescans its subtree.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from prettydoc.errors import InvalidArgumentError
from prettydoc.utils.text import contains_line_break, display_width


class LineKind(Enum):
    """Flavours of breakable points."""

    SOFT = "soft"  # " " when flat
    SOFT_NO_SPACE = "soft_no_space"  # "" when flat
    HARD = "hard"  # always breaks
    LITERAL = "literal"  # always breaks, no indentation

    @property
    def forced(self) -> bool:
        """True for kinds that break regardless of layout mode."""
        return self is LineKind.HARD or self is LineKind.LITERAL

    @property
    def flat_text(self) -> str:
        """Text emitted when the line is laid out flat."""
        return " " if self is LineKind.SOFT else ""


def _require_doc(argument: str, value: object) -> None:
    if not isinstance(value, Doc):
        raise InvalidArgumentError(
            argument, f"expected a document node, got {type(value).__name__}"
        )


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Doc:
    """Base class for all document nodes."""


# =============================================================================
# Leaf Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Nil(Doc):
    """Empty document. Use the shared ``NIL`` instance."""

    forced_break: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Text(Doc):
    """Literal text on a single line.

    ``width`` is the display width, measured once at construction.

    """

    content: str
    width: int = field(init=False, repr=False, compare=False)

    forced_break: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise InvalidArgumentError(
                "content", f"expected str, got {type(self.content).__name__}"
            )
        if contains_line_break(self.content):
            raise InvalidArgumentError(
                "content", "text must not contain line breaks; use a Line node"
            )
        object.__setattr__(self, "width", display_width(self.content))


@dataclass(frozen=True, slots=True)
class Line(Doc):
    """Breakable point.

    SOFT renders as a space when flat, SOFT_NO_SPACE as nothing. Both become
    a line break plus indentation when broken. HARD and LITERAL always break;
    LITERAL drops the indentation.

    """

    kind: LineKind

    def __post_init__(self) -> None:
        if not isinstance(self.kind, LineKind):
            raise InvalidArgumentError("kind", f"expected LineKind, got {self.kind!r}")

    @property
    def forced_break(self) -> bool:
        return self.kind.forced


# =============================================================================
# Composite Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Concat(Doc):
    """Sequential composition with no separator."""

    left: Doc
    right: Doc
    forced_break: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _require_doc("left", self.left)
        _require_doc("right", self.right)
        object.__setattr__(
            self, "forced_break", self.left.forced_break or self.right.forced_break
        )


@dataclass(frozen=True, slots=True)
class Indent(Doc):
    """Child rendered ``amount`` indentation levels deeper.

    Only lines broken inside ``child`` are affected.

    """

    amount: int
    child: Doc
    forced_break: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidArgumentError(
                "amount", f"expected int, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise InvalidArgumentError(
                "amount", f"indent amount must be >= 0, got {self.amount}"
            )
        _require_doc("child", self.child)
        object.__setattr__(self, "forced_break", self.child.forced_break)


@dataclass(frozen=True, slots=True)
class Group(Doc):
    """Unit of alternative layout.

    Rendered flat when the whole child, plus whatever follows it up to the
    next possible line break, fits the remaining width and the child has no
    forced break. Otherwise rendered broken. Nested groups decide on their own.

    """

    child: Doc
    forced_break: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _require_doc("child", self.child)
        object.__setattr__(self, "forced_break", self.child.forced_break)


@dataclass(frozen=True, slots=True)
class LineSuffix(Doc):
    """Content deferred until just before the next line break.

    Typical use is a trailing line comment. The content never counts against
    the width of the line it is attached to and never forces a break.

    """

    child: Doc

    forced_break: ClassVar[bool] = False

    def __post_init__(self) -> None:
        _require_doc("child", self.child)


@dataclass(frozen=True, slots=True)
class FlatOrBreak(Doc):
    """``flat`` when the enclosing layout is flat, ``broken`` otherwise."""

    flat: Doc
    broken: Doc
    forced_break: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _require_doc("flat", self.flat)
        _require_doc("broken", self.broken)
        object.__setattr__(self, "forced_break", self.flat.forced_break)


@dataclass(frozen=True, slots=True)
class Union(Doc):
    """Backtracking choice between two layouts.

    In break mode the renderer prints ``attempt`` speculatively and falls
    back to ``alternate`` if any column overflows while doing so.

    """

    attempt: Doc
    alternate: Doc
    forced_break: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _require_doc("attempt", self.attempt)
        _require_doc("alternate", self.alternate)
        object.__setattr__(self, "forced_break", self.attempt.forced_break)


NIL: Nil = Nil()
"""Shared empty document."""


__all__ = [
    "NIL",
    "Concat",
    "Doc",
    "FlatOrBreak",
    "Group",
    "Indent",
    "Line",
    "LineKind",
    "LineSuffix",
    "Nil",
    "Text",
    "Union",
]
