"""Tests for StringBuilder, including mark/truncate rollback."""

from prettydoc.stringbuilder import StringBuilder


class TestStringBuilder:
    def test_build_joins_parts(self) -> None:
        sb = StringBuilder()
        sb.append("a").append("b").append("c")
        assert sb.build() == "abc"

    def test_empty_strings_take_no_mark(self) -> None:
        sb = StringBuilder()
        sb.append("")
        assert sb.mark() == 0
        assert sb.build() == ""


class TestRollback:
    def test_truncate_to_mark(self) -> None:
        sb = StringBuilder()
        sb.append("keep")
        mark = sb.mark()
        sb.append(" drop").append(" this")
        sb.truncate(mark)
        assert sb.build() == "keep"

    def test_nested_marks(self) -> None:
        sb = StringBuilder()
        outer = sb.mark()
        sb.append("a")
        inner = sb.mark()
        sb.append("b")
        sb.truncate(inner)
        sb.append("c")
        assert sb.build() == "ac"
        sb.truncate(outer)
        assert sb.build() == ""

    def test_truncate_at_end_is_noop(self) -> None:
        sb = StringBuilder()
        sb.append("x")
        sb.truncate(sb.mark())
        assert sb.build() == "x"
