"""Tests for the document builders."""

import pytest

from prettydoc import (
    NIL,
    Concat,
    FlatOrBreak,
    Group,
    Indent,
    InvalidArgumentError,
    Line,
    LineKind,
    LineSuffix,
    RenderConfig,
    Text,
    Union,
    concat,
    flat_or_break,
    group,
    hardline,
    indent,
    join,
    line,
    line_or_nil,
    line_suffix,
    literalline,
    nil,
    render,
    softline,
    space,
    text,
    union,
)


class TestLeaves:
    """Leaf builders return shared or validated nodes."""

    def test_nil(self) -> None:
        assert nil() is NIL

    def test_text(self) -> None:
        assert text("abc") == Text("abc")

    def test_empty_text_is_nil(self) -> None:
        assert text("") is NIL

    def test_text_rejects_newline(self) -> None:
        with pytest.raises(InvalidArgumentError):
            text("a\nb")

    def test_space(self) -> None:
        assert space() == Text(" ")

    def test_lines(self) -> None:
        assert line() == Line(LineKind.SOFT)
        assert line_or_nil() == Line(LineKind.SOFT_NO_SPACE)
        assert hardline() == Line(LineKind.HARD)
        assert literalline() == Line(LineKind.LITERAL)

    def test_softline_is_grouped_line(self) -> None:
        assert softline() == Group(Line(LineKind.SOFT))


class TestConcat:
    """concat folds with NIL as identity."""

    def test_nil_left_identity(self) -> None:
        doc = text("x")
        assert concat(NIL, doc) is doc

    def test_nil_right_identity(self) -> None:
        doc = text("x")
        assert concat(doc, NIL) is doc

    def test_empty(self) -> None:
        assert concat() is NIL

    def test_single(self) -> None:
        doc = text("x")
        assert concat(doc) is doc

    def test_folds_right(self) -> None:
        a, b, c = text("a"), text("b"), text("c")
        assert concat(a, b, c) == Concat(a, Concat(b, c))

    def test_skips_nils_in_the_middle(self) -> None:
        a, b = text("a"), text("b")
        assert concat(a, NIL, NIL, b) == Concat(a, b)

    def test_associative_rendering(self) -> None:
        a, b, c = text("a"), line(), text("c")
        left = concat(concat(a, b), c)
        right = concat(a, concat(b, c))
        for width in (0, 1, 80):
            config = RenderConfig(max_width=width)
            assert render(group(left), config) == render(group(right), config)

    def test_rejects_non_doc(self) -> None:
        with pytest.raises(InvalidArgumentError):
            concat(text("a"), "b")  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            concat(NIL, "b")  # type: ignore[arg-type]


class TestJoin:
    """join interleaves a separator."""

    def test_empty(self) -> None:
        assert join(text(","), []) is NIL

    def test_single(self) -> None:
        doc = text("a")
        assert join(text(","), [doc]) is doc

    def test_renders_separators(self) -> None:
        assert render(join(text(", "), [text("a"), text("b"), text("c")])) == "a, b, c"

    def test_accepts_generator(self) -> None:
        docs = (text(s) for s in "xyz")
        assert render(join(text("-"), docs)) == "x-y-z"


class TestIndentBuilder:
    """indent normalizes trivial shapes and validates."""

    def test_default_amount_is_one(self) -> None:
        doc = indent(hardline())
        assert doc == Indent(1, Line(LineKind.HARD))

    def test_zero_amount_returns_child(self) -> None:
        doc = text("x")
        assert indent(doc, 0) is doc

    def test_nil_child_returns_nil(self) -> None:
        assert indent(NIL, 3) is NIL

    def test_negative_rejected_even_for_nil(self) -> None:
        with pytest.raises(InvalidArgumentError):
            indent(NIL, -1)


class TestGroupBuilder:
    """group collapses redundant nesting."""

    def test_wraps(self) -> None:
        assert group(text("x")) == Group(Text("x"))

    def test_group_of_group_is_same(self) -> None:
        inner = group(concat(text("a"), line()))
        assert group(inner) is inner

    def test_group_of_nil(self) -> None:
        assert group(NIL) is NIL

    def test_rejects_non_doc(self) -> None:
        with pytest.raises(InvalidArgumentError):
            group("x")  # type: ignore[arg-type]


class TestOtherBuilders:
    def test_line_suffix(self) -> None:
        assert line_suffix(text("# c")) == LineSuffix(Text("# c"))
        assert line_suffix(NIL) is NIL

    def test_flat_or_break(self) -> None:
        assert flat_or_break(NIL, text(",")) == FlatOrBreak(NIL, Text(","))

    def test_union(self) -> None:
        assert union(text("a"), text("b")) == Union(Text("a"), Text("b"))
