"""Tests for FormatConfig.from_dict() method.

The from_dict() method lets rules come from TOML or JSON files.
"""

import pytest

from prettytags.config import FormatConfig


class TestFormatConfigFromDict:
    """Test FormatConfig.from_dict() factory method."""

    def test_from_dict_basic(self):
        """from_dict should create config with specified values."""
        config = FormatConfig.from_dict({
            "indent_step": 2,
            "indent_always": ["head", "body"],
        })

        assert config.indent_step == 2
        assert config.indent_always == frozenset({"head", "body"})
        # Defaults should still apply
        assert config.lf_always == frozenset()

    def test_from_dict_ignores_unknown_keys(self):
        """from_dict should silently ignore unknown keys."""
        config = FormatConfig.from_dict({
            "lf_closing": ["p"],
            "unknown_key": "ignored",
            "another_unknown": 42,
        })

        assert config.lf_closing == frozenset({"p"})

    def test_from_dict_empty(self):
        """from_dict with empty dict should return default config."""
        assert FormatConfig.from_dict({}) == FormatConfig()

    def test_from_dict_all_fields(self):
        """from_dict should support all FormatConfig fields."""
        config = FormatConfig.from_dict({
            "indent_step": 3,
            "indent_always": ("body",),
            "lf_always": {"html"},
            "lf_closing": ["div", "div"],
        })

        assert config.indent_step == 3
        assert config.indent_always == frozenset({"body"})
        assert config.lf_always == frozenset({"html"})
        assert config.lf_closing == frozenset({"div"})

    def test_from_dict_rejects_bare_string(self):
        """A single string is not a list of tags."""
        with pytest.raises(TypeError, match="indent_always"):
            FormatConfig.from_dict({"indent_always": "body"})

    def test_from_dict_returns_frozen_config(self):
        """from_dict should return a frozen (immutable) config."""
        config = FormatConfig.from_dict({"indent_step": 2})

        with pytest.raises(AttributeError):
            config.indent_step = 4

    def test_from_dict_builds_formatter(self):
        """Rules read from a dict drive the formatter."""
        from prettytags import FmtRule

        fmtr = FormatConfig.from_dict({"lf_always": ["html"]}).build_formatter()

        assert fmtr.tags(FmtRule.LF_ALWAYS) == frozenset({"html"})
