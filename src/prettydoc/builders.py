"""Document builders.

Thin constructors over the node classes in ``prettydoc.nodes``. They are
the intended way to assemble documents: each one validates its arguments
(through the node's ``__post_init__``) and normalizes trivial shapes so
callers can fold children without special-casing emptiness.

Example:
    >>> from prettydoc import concat, group, indent, join, line_or_nil, line, render, text
    >>> args = join(concat(text(","), line()), [text("a"), text("b")])
    >>> doc = concat(
    ...     text("call("),
    ...     group(concat(indent(concat(line_or_nil(), args)), line_or_nil())),
    ...     text(")"),
    ... )
    >>> render(doc)
    'call(a, b)'

"""

from __future__ import annotations

from collections.abc import Iterable

from prettydoc.nodes import (
    NIL,
    Concat,
    Doc,
    FlatOrBreak,
    Group,
    Indent,
    Line,
    LineKind,
    LineSuffix,
    Nil,
    Text,
    Union,
)

_SOFT = Line(LineKind.SOFT)
_SOFT_NO_SPACE = Line(LineKind.SOFT_NO_SPACE)
_HARD = Line(LineKind.HARD)
_LITERAL = Line(LineKind.LITERAL)
_SPACE = Text(" ")


def nil() -> Nil:
    """Empty document."""
    return NIL


def text(s: str) -> Doc:
    """Literal text. Must not contain ``\\n`` or ``\\r``.

    Raises:
        InvalidArgumentError: If ``s`` is not a string or holds a line break.
    """
    node = Text(s)
    return NIL if not s else node


def space() -> Text:
    """A single space; short for ``text(" ")``."""
    return _SPACE


def line() -> Line:
    """Space when flat, line break when broken."""
    return _SOFT


def line_or_nil() -> Line:
    """Nothing when flat, line break when broken."""
    return _SOFT_NO_SPACE


def softline() -> Group:
    """A line in its own group.

    Breaks only when the content up to the next possible break does not fit,
    which packs as many items as possible on each line.
    """
    return Group(_SOFT)


def hardline() -> Line:
    """Line break that always happens and breaks every enclosing group."""
    return _HARD


def literalline() -> Line:
    """Like ``hardline`` but the next line starts at column zero."""
    return _LITERAL


def concat(*docs: Doc) -> Doc:
    """Concatenate documents left to right.

    ``NIL`` is the identity: ``concat(NIL, d) is d`` and ``concat(d, NIL) is d``.
    Folds from the right so the resulting tree leans right.

    Raises:
        InvalidArgumentError: If any argument is not a document node.
    """
    result: Doc = NIL
    for doc in reversed(docs):
        result = _concat2(doc, result)
    return result


def _concat2(left: Doc, right: Doc) -> Doc:
    if isinstance(left, Nil) and isinstance(right, Doc):
        return right
    if isinstance(right, Nil) and isinstance(left, Doc):
        return left
    return Concat(left, right)


def join(separator: Doc, docs: Iterable[Doc]) -> Doc:
    """Concatenate ``docs`` with ``separator`` between each pair.

    Example:
        >>> render(join(text(", "), [text("a"), text("b"), text("c")]))
        'a, b, c'
    """
    items = list(docs)
    if not items:
        return NIL
    result = items[-1]
    for doc in reversed(items[:-1]):
        result = _concat2(doc, _concat2(separator, result))
    return result


def indent(doc: Doc, amount: int = 1) -> Doc:
    """Indent lines broken inside ``doc`` by ``amount`` more levels.

    Raises:
        InvalidArgumentError: If ``amount`` is negative or not an int.
    """
    node = Indent(amount, doc)
    if amount == 0 or isinstance(doc, Nil):
        return doc
    return node


def group(doc: Doc) -> Doc:
    """Lay ``doc`` out flat if it fits, broken otherwise.

    Grouping a group or ``NIL`` returns it unchanged.
    """
    if isinstance(doc, (Group, Nil)):
        return doc
    return Group(doc)


def line_suffix(doc: Doc) -> Doc:
    """Defer ``doc`` to just before the next line break (or end of output)."""
    node = LineSuffix(doc)
    return NIL if isinstance(doc, Nil) else node


def flat_or_break(flat: Doc, broken: Doc) -> FlatOrBreak:
    """``flat`` inside a flat group, ``broken`` otherwise.

    Outside any group the layout is broken, so ``broken`` is used.

    Example:
        >>> trailing_comma = flat_or_break(nil(), text(","))
    """
    return FlatOrBreak(flat, broken)


def union(attempt: Doc, alternate: Doc) -> Union:
    """Try ``attempt``; use ``alternate`` if any of its lines overflow.

    The attempt is rendered speculatively and rolled back on overflow, so it
    costs one extra rendering of ``attempt`` when the fallback is taken.
    """
    return Union(attempt, alternate)


__all__ = [
    "concat",
    "flat_or_break",
    "group",
    "hardline",
    "indent",
    "join",
    "line",
    "line_or_nil",
    "line_suffix",
    "literalline",
    "nil",
    "softline",
    "space",
    "text",
    "union",
]
