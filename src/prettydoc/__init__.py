"""
prettydoc: Wadler-style document layout for Python

Build a document tree that says what may be concatenated, indented and
broken onto new lines; prettydoc decides where the breaks go so the output
respects a maximum width.

Quick Start:
    >>> from prettydoc import RenderConfig, concat, group, indent, join, line, line_or_nil, render, text
    >>> def call(name, args):
    ...     body = join(concat(text(","), line()), [text(a) for a in args])
    ...     return concat(
    ...         text(f"{name}("),
    ...         group(concat(indent(concat(line_or_nil(), body)), line_or_nil())),
    ...         text(")"),
    ...     )
    >>> render(call("foo", ["a", "b"]))
    'foo(a, b)'
    >>> print(render(call("foo", ["alpha", "beta"]), RenderConfig(max_width=10)))
    foo(
      alpha,
      beta
    )

Configuration:
    >>> from prettydoc import IndentKind, hardline, render_config_context
    >>> doc = indent(concat(text("a"), hardline(), text("b")))
    >>> with render_config_context(RenderConfig(indent_kind=IndentKind.TABS)):
    ...     output = render(doc)
    >>> output
    'a\\n\\t\\tb'

Installation:
    pip install prettydoc
"""

from prettydoc.builders import (
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
    softline,
    space,
    text,
    union,
)
from prettydoc.config import (
    IndentKind,
    LineBreakKind,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from prettydoc.errors import InvalidArgumentError, PrettyDocError
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
from prettydoc.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from prettydoc.renderers.layout import LayoutRenderer
from prettydoc.renderers.protocol import DocRenderer
from prettydoc.utils.text import display_width

__version__ = "0.1.0"


def render(doc: Doc, config: RenderConfig | None = None) -> str:
    """Lay a document out as text.

    Args:
        doc: Document tree built with the prettydoc builders
        config: Layout options. Defaults to the ambient config
            (see ``render_config_context``), itself ``RenderConfig()``
            unless changed.

    Returns:
        The rendered text

    Raises:
        InvalidArgumentError: If ``doc`` is not a document node or
            ``config`` is not a RenderConfig.

    Example:
        >>> doc = group(concat(text("foo"), line(), text("bar")))
        >>> render(doc, RenderConfig(max_width=10))
        'foo bar'
        >>> render(doc, RenderConfig(max_width=5))
        'foo\\nbar'

    """
    if config is None:
        config = get_render_config()
    return LayoutRenderer(config).render(doc)


__all__ = [
    # Main API
    "render",
    "LayoutRenderer",
    "DocRenderer",
    # Builders
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
    # Nodes
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
    # Configuration
    "IndentKind",
    "LineBreakKind",
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Errors
    "InvalidArgumentError",
    "PrettyDocError",
    # Profiling
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
    # Utilities
    "display_width",
    "__version__",
]
