"""Tests for RenderConfig.from_dict() method.

The from_dict() method lets formatters build a config from their own
settings (TOML, JSON, command-line dicts).
"""

import pytest

from prettydoc.config import IndentKind, LineBreakKind, RenderConfig
from prettydoc.errors import InvalidArgumentError


class TestRenderConfigFromDict:
    """Test RenderConfig.from_dict() factory method."""

    def test_from_dict_basic(self):
        """from_dict should create config with specified values."""
        config = RenderConfig.from_dict({"max_width": 100, "indent_unit": 4})

        assert config.max_width == 100
        assert config.indent_unit == 4
        # Defaults should still apply
        assert config.indent_kind is IndentKind.SPACES

    def test_from_dict_ignores_unknown_keys(self):
        """from_dict should silently ignore unknown keys."""
        config = RenderConfig.from_dict({
            "max_width": 60,
            "unknown_key": "ignored",
            "another_unknown": 42,
        })

        assert config.max_width == 60

    def test_from_dict_empty(self):
        """from_dict with empty dict should return default config."""
        assert RenderConfig.from_dict({}) == RenderConfig()

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("tabs", IndentKind.TABS),
            ("TABS", IndentKind.TABS),
            ("spaces", IndentKind.SPACES),
            (IndentKind.TABS, IndentKind.TABS),
        ],
    )
    def test_indent_kind_coercion(self, value, expected):
        assert RenderConfig.from_dict({"indent_kind": value}).indent_kind is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("lf", LineBreakKind.LF),
            ("CRLF", LineBreakKind.CRLF),
            ("\r\n", LineBreakKind.CRLF),
            (LineBreakKind.LF, LineBreakKind.LF),
        ],
    )
    def test_line_break_coercion(self, value, expected):
        assert RenderConfig.from_dict({"line_break": value}).line_break is expected

    def test_unknown_enum_value_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            RenderConfig.from_dict({"indent_kind": "dots"})
        assert exc_info.value.argument == "indent_kind"
        assert "spaces" in str(exc_info.value)

    def test_invalid_value_still_validated(self):
        with pytest.raises(InvalidArgumentError):
            RenderConfig.from_dict({"max_width": -5})

    def test_from_dict_all_fields(self):
        config = RenderConfig.from_dict({
            "max_width": 120,
            "indent_unit": 1,
            "indent_kind": "tabs",
            "line_break": "crlf",
            "tab_width": 8,
        })
        assert config == RenderConfig(
            max_width=120,
            indent_unit=1,
            indent_kind=IndentKind.TABS,
            line_break=LineBreakKind.CRLF,
            tab_width=8,
        )
