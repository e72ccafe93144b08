"""Layout renderer: lays a document tree out as text.

The walk is a depth-first traversal driven by an explicit work stack of
``(indent, mode, node)`` frames instead of native recursion, so documents
of any depth (long method chains, deeply nested data) render without
growing the Python call stack.

Per-render state (column, work stack, output buffer, pending line suffixes,
active union checkpoints) lives in a ``LayoutState`` created fresh for each
render() call.

Thread Safety:
A LayoutRenderer only holds its immutable RenderConfig. Multiple threads can
share one instance, and one document tree, and call render() concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from prettydoc.config import RenderConfig
from prettydoc.errors import InvalidArgumentError
from prettydoc.nodes import (
    Concat,
    Doc,
    FlatOrBreak,
    Group,
    Indent,
    Line,
    LineKind,
    LineSuffix,
    Text,
    Union,
)
from prettydoc.profiling import get_render_accumulator
from prettydoc.renderers.fits import fits
from prettydoc.renderers.frames import SUFFIX_END, Checkpoint, Frame, Mode, SuffixEnd
from prettydoc.stringbuilder import StringBuilder
from prettydoc.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class LayoutState:
    """Per-render mutable state.

    Created fresh for each render() call, so no state is shared between
    concurrent renders.
    """

    column: int = 0
    stack: list[Frame] = field(default_factory=list)
    out: StringBuilder = field(default_factory=StringBuilder)
    pending_suffixes: list[tuple[int, Doc]] = field(default_factory=list)
    checkpoints: list[Checkpoint] = field(default_factory=list)
    # Nesting depth of line-suffix flushes in progress; suffix text does not
    # count as union overflow.
    suffix_depth: int = 0

    # Counters for logging and profiling.
    node_count: int = 0
    groups_flat: int = 0
    groups_broken: int = 0
    fits_checks: int = 0
    union_rollbacks: int = 0


class LayoutRenderer:
    """Render a document tree to a string.

    Usage:
        >>> from prettydoc import group, concat, line, text
        >>> renderer = LayoutRenderer(RenderConfig(max_width=5))
        >>> renderer.render(group(concat(text("foo"), line(), text("bar"))))
        'foo\\nbar'

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        if config is None:
            config = RenderConfig()
        elif not isinstance(config, RenderConfig):
            raise InvalidArgumentError(
                "config", f"expected RenderConfig, got {type(config).__name__}"
            )
        self._config = config

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, doc: Doc) -> str:
        """Lay ``doc`` out and return the text.

        Raises:
            InvalidArgumentError: If ``doc`` is not a document node.
        """
        if not isinstance(doc, Doc):
            raise InvalidArgumentError(
                "doc", f"expected a document node, got {type(doc).__name__}"
            )

        debug = logger.isEnabledFor(logging.DEBUG)
        if debug:
            logger.debug(
                "render start: max_width=%d indent_unit=%d indent_kind=%s line_break=%s",
                self._config.max_width,
                self._config.indent_unit,
                self._config.indent_kind.name,
                self._config.line_break.name,
            )

        state = LayoutState()
        state.stack.append((0, Mode.BREAK, doc))
        self._walk(state)
        result = state.out.build()

        if debug:
            logger.debug(
                "render done: %d chars, %d lines, groups flat=%d broken=%d, "
                "union rollbacks=%d",
                len(result),
                result.count(self._config.newline) + 1,
                state.groups_flat,
                state.groups_broken,
                state.union_rollbacks,
            )

        acc = get_render_accumulator()
        if acc is not None:
            acc.record_render(
                node_count=state.node_count,
                output_length=len(result),
                groups_flat=state.groups_flat,
                groups_broken=state.groups_broken,
                fits_checks=state.fits_checks,
                union_rollbacks=state.union_rollbacks,
            )
        return result

    # =========================================================================
    # Walk
    # =========================================================================

    def _walk(self, state: LayoutState) -> None:
        config = self._config
        max_width = config.max_width
        newline = config.newline
        stack = state.stack
        out = state.out

        while True:
            if not stack:
                if not state.pending_suffixes:
                    return
                # End of output: pending suffixes still get printed.
                self._flush_suffixes(state)
                continue

            indent, mode, node = stack.pop()
            state.node_count += 1

            match node:
                case Text(content=content, width=width):
                    out.append(content)
                    state.column += width

                case Concat(left=left, right=right):
                    stack.append((indent, mode, right))
                    stack.append((indent, mode, left))
                    continue

                case Indent(amount=amount, child=child):
                    stack.append((indent + amount, mode, child))
                    continue

                case Line(kind=kind):
                    if mode is Mode.FLAT and not kind.forced:
                        if kind is LineKind.SOFT:
                            out.append(" ")
                            state.column += 1
                    elif state.pending_suffixes:
                        # Print the suffixes first, then come back to this line.
                        stack.append((indent, mode, node))
                        self._flush_suffixes(state)
                        continue
                    else:
                        level = 0 if kind is LineKind.LITERAL else indent
                        out.append(newline)
                        out.append(config.indent_text(level))
                        state.column = config.indent_columns(level)

                case Group(child=child):
                    if mode is Mode.FLAT:
                        stack.append((indent, Mode.FLAT, child))
                        continue
                    state.fits_checks += 1
                    if not child.forced_break and fits(
                        (indent, Mode.FLAT, child), stack, max_width - state.column
                    ):
                        state.groups_flat += 1
                        stack.append((indent, Mode.FLAT, child))
                    else:
                        state.groups_broken += 1
                        stack.append((indent, Mode.BREAK, child))
                    continue

                case LineSuffix(child=child):
                    state.pending_suffixes.append((indent, child))
                    continue

                case FlatOrBreak(flat=flat, broken=broken):
                    stack.append((indent, mode, flat if mode is Mode.FLAT else broken))
                    continue

                case Union(attempt=attempt, alternate=alternate):
                    if mode is Mode.FLAT:
                        stack.append((indent, mode, attempt))
                        continue
                    checkpoint = Checkpoint(
                        stack_depth=len(stack),
                        output_mark=out.mark(),
                        column=state.column,
                        pending_suffixes=tuple(state.pending_suffixes),
                        fallback=(indent, mode, alternate),
                    )
                    stack.append((indent, mode, checkpoint))
                    stack.append((indent, mode, attempt))
                    state.checkpoints.append(checkpoint)
                    continue

                case Checkpoint():
                    # The attempt above this marker rendered without overflow.
                    state.checkpoints.pop()
                    continue

                case SuffixEnd():
                    state.suffix_depth -= 1
                    continue

                case _:
                    # Nil
                    continue

            if state.column > max_width and state.checkpoints and not state.suffix_depth:
                self._rollback(state)

    def _flush_suffixes(self, state: LayoutState) -> None:
        """Schedule pending line suffixes, first registered on top."""
        pending = state.pending_suffixes
        state.stack.append((0, Mode.FLAT, SUFFIX_END))
        state.suffix_depth += 1
        for suffix_indent, suffix in reversed(pending):
            state.stack.append((suffix_indent, Mode.FLAT, suffix))
        pending.clear()

    def _rollback(self, state: LayoutState) -> None:
        """Discard the innermost union attempt and schedule its alternate."""
        checkpoint = state.checkpoints.pop()
        del state.stack[checkpoint.stack_depth :]
        state.out.truncate(checkpoint.output_mark)
        state.column = checkpoint.column
        state.pending_suffixes[:] = checkpoint.pending_suffixes
        state.stack.append(checkpoint.fallback)
        state.union_rollbacks += 1


__all__ = ["LayoutRenderer", "LayoutState"]
