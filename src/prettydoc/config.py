"""Render configuration for prettydoc.

``RenderConfig`` is an immutable record of the layout options. It can be
passed to ``render()`` explicitly, or installed as the ambient config for
the current context using ContextVars (PEP 567).

Thread Safety:
    RenderConfig is frozen. ContextVars are thread-local by design, so each
    thread (and each asyncio task) sees its own ambient config.

Usage:
    from prettydoc import render
    from prettydoc.config import RenderConfig, render_config_context

    render(doc, RenderConfig(max_width=100))

    with render_config_context(RenderConfig(indent_kind=IndentKind.TABS)):
        render(doc)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from prettydoc.errors import InvalidArgumentError


class IndentKind(Enum):
    """Character used to fill indentation."""

    SPACES = "spaces"
    TABS = "tabs"

    @property
    def char(self) -> str:
        return " " if self is IndentKind.SPACES else "\t"


class LineBreakKind(Enum):
    """Byte sequence emitted for a line break."""

    LF = "\n"
    CRLF = "\r\n"


E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_type: type[E], name: str, value: Any) -> E:
    """Accept an enum member, its name, or its value (names case-insensitive)."""
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        member = enum_type.__members__.get(value.upper())
        if member is not None:
            return member
        try:
            return enum_type(value)
        except ValueError:
            pass
    choices = ", ".join(m.name.lower() for m in enum_type)
    raise InvalidArgumentError(name, f"expected one of {choices}, got {value!r}")


def _require_int(name: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, f"expected int, got {type(value).__name__}")
    if value < minimum:
        raise InvalidArgumentError(name, f"must be >= {minimum}, got {value}")


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable layout configuration.

    Attributes:
        max_width: Column budget used by fitting decisions. Lines may still
            exceed it when a single piece of text is wider than the budget.
        indent_unit: Indentation characters emitted per indent level.
        indent_kind: Fill indentation with spaces or tabs.
        line_break: Line ending emitted by every line break.
        tab_width: Columns one tab counts for when measuring indentation.
            Ignored for space indentation.

    """

    max_width: int = 80
    indent_unit: int = 2
    indent_kind: IndentKind = IndentKind.SPACES
    line_break: LineBreakKind = LineBreakKind.LF
    tab_width: int = 4

    def __post_init__(self) -> None:
        _require_int("max_width", self.max_width, 0)
        _require_int("indent_unit", self.indent_unit, 0)
        _require_int("tab_width", self.tab_width, 1)
        if not isinstance(self.indent_kind, IndentKind):
            raise InvalidArgumentError(
                "indent_kind", f"expected IndentKind, got {self.indent_kind!r}"
            )
        if not isinstance(self.line_break, LineBreakKind):
            raise InvalidArgumentError(
                "line_break", f"expected LineBreakKind, got {self.line_break!r}"
            )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a mapping.

        Useful when options come from a formatter's own settings file.
        Unknown keys are silently ignored. Enum options accept members,
        names ("tabs", "CRLF") or values ("\\r\\n").

        Example:
            >>> config = RenderConfig.from_dict({"max_width": 100, "indent_kind": "tabs"})
            >>> config.indent_kind
            <IndentKind.TABS: 'tabs'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "indent_kind" in filtered:
            filtered["indent_kind"] = _coerce_enum(
                IndentKind, "indent_kind", filtered["indent_kind"]
            )
        if "line_break" in filtered:
            filtered["line_break"] = _coerce_enum(
                LineBreakKind, "line_break", filtered["line_break"]
            )
        return cls(**filtered)

    @property
    def newline(self) -> str:
        return self.line_break.value

    def indent_text(self, level: int) -> str:
        """Indentation emitted after a line break at ``level``."""
        return self.indent_kind.char * (level * self.indent_unit)

    def indent_columns(self, level: int) -> int:
        """Columns occupied by ``indent_text(level)``."""
        chars = level * self.indent_unit
        if self.indent_kind is IndentKind.TABS:
            return chars * self.tab_width
        return chars


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the ambient render configuration for this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the ambient render configuration for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the ambient configuration to the defaults."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with render_config_context(RenderConfig(max_width=40)):
        ...     narrow = render(doc)
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "IndentKind",
    "LineBreakKind",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
