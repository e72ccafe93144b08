"""Tests for prettydoc.profiling: render profiling API."""

from prettydoc import concat, group, line, render, text, union
from prettydoc.config import RenderConfig
from prettydoc.profiling import (
    RenderAccumulator,
    get_render_accumulator,
    profiled_render,
)


def _doc():
    return group(concat(text("foo"), line(), text("bar")))


class TestGetRenderAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_render_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_render():
            pass
        assert get_render_accumulator() is None


class TestProfiledRender:
    def test_yields_accumulator(self) -> None:
        with profiled_render() as acc:
            assert isinstance(acc, RenderAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_render() as acc:
            assert get_render_accumulator() is acc

    def test_records_render_call(self) -> None:
        with profiled_render() as acc:
            output = render(_doc())
        assert acc.render_calls == 1
        assert acc.output_length == len(output)
        assert acc.node_count > 0
        assert acc.fits_checks == 1
        assert acc.groups_flat == 1
        assert acc.groups_broken == 0

    def test_records_broken_group(self) -> None:
        with profiled_render() as acc:
            render(_doc(), RenderConfig(max_width=3))
        assert acc.groups_flat == 0
        assert acc.groups_broken == 1

    def test_records_multiple_render_calls(self) -> None:
        with profiled_render() as acc:
            render(text("one"))
            render(text("two"))
            render(text("three"))
        assert acc.render_calls == 3
        assert acc.output_length == len("onetwothree")

    def test_records_union_rollbacks(self) -> None:
        doc = union(text("aaaaaaaaaa"), text("b"))
        with profiled_render() as acc:
            render(doc, RenderConfig(max_width=5))
            render(doc, RenderConfig(max_width=50))
        assert acc.union_rollbacks == 1

    def test_total_duration_non_negative(self) -> None:
        with profiled_render() as acc:
            render(_doc())
        assert acc.total_duration_ms >= 0

    def test_nested_contexts_restore_outer(self) -> None:
        with profiled_render() as outer:
            with profiled_render() as inner:
                render(text("x"))
            assert get_render_accumulator() is outer
        assert inner.render_calls == 1
        assert outer.render_calls == 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = RenderAccumulator().summary()
        assert summary["render_calls"] == 0
        assert summary["output_length"] == 0
        assert summary["node_count"] == 0
        assert summary["union_rollbacks"] == 0

    def test_summary_after_render(self) -> None:
        with profiled_render() as acc:
            render(_doc())
        summary = acc.summary()
        assert summary["render_calls"] == 1
        assert summary["output_length"] == len("foo bar")
        assert summary["groups_flat"] == 1
        assert "total_ms" in summary
