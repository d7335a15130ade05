"""ContextVar-based format configuration for prettytags.

Provides context-local configuration using Python's ContextVars (PEP 567).
A MarkupWriter created without an explicit formatter builds its AutoIndent
from the active FormatConfig.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Explicit formatter built from a config
    config = FormatConfig(indent_step=2, indent_always=frozenset({"body"}))
    writer = MarkupWriter(formatter=config.build_formatter())

    # Or set the config for every writer created in this context
    with format_config_context(FormatConfig.html_defaults()):
        writer = MarkupWriter()

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from prettytags.events import DEFAULT_INDENT
from prettytags.formatters.auto_indent import (
    HTML_INDENT_ALWAYS,
    HTML_LF_ALWAYS,
    HTML_LF_CLOSING,
    AutoIndent,
    FmtRule,
)


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable AutoIndent configuration.

    Attributes:
        indent_step: Columns per indentation level
        indent_always: Tags whose content is always indented
        lf_always: Tags always surrounded by linefeeds, content not indented
        lf_closing: Tags followed by a linefeed once they end

    Rule conflicts are detected when the formatter is built, not here.

    """

    indent_step: int = DEFAULT_INDENT
    indent_always: frozenset[str] = field(default_factory=frozenset)
    lf_always: frozenset[str] = field(default_factory=frozenset)
    lf_closing: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> FormatConfig:
        """Create FormatConfig from dictionary.

        Useful when rules come from external sources such as TOML or JSON
        files. Only keys that are valid FormatConfig fields are used; unknown
        keys are silently ignored. Tag lists may be any iterable of strings.

        Args:
            config_dict: Dictionary with config values. Keys should match
                FormatConfig attribute names.

        Returns:
            New FormatConfig instance with values from dict.

        Example:
            >>> config = FormatConfig.from_dict({
            ...     "indent_step": 2,
            ...     "indent_always": ["head", "body"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.indent_always)
            ['body', 'head']

        """
        valid_fields = {f for f in cls.__dataclass_fields__}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for name in ("indent_always", "lf_always", "lf_closing"):
            if name in filtered:
                filtered[name] = _tag_set(name, filtered[name])
        return cls(**filtered)

    @classmethod
    def html_defaults(cls) -> FormatConfig:
        """Rule setup giving readable HTML."""
        return cls(
            indent_always=frozenset(HTML_INDENT_ALWAYS),
            lf_always=frozenset(HTML_LF_ALWAYS),
            lf_closing=frozenset(HTML_LF_CLOSING),
        )

    def build_formatter(self) -> AutoIndent:
        """Build a fresh AutoIndent with these rules.

        Raises:
            ConfigConflictError: If a tag is in LF_ALWAYS and another rule set
        """
        fmtr = AutoIndent(self.indent_step)
        fmtr.register(sorted(self.indent_always), FmtRule.INDENT_ALWAYS)
        fmtr.register(sorted(self.lf_always), FmtRule.LF_ALWAYS)
        fmtr.register(sorted(self.lf_closing), FmtRule.LF_CLOSING)
        return fmtr


def _tag_set(name: str, value: Iterable[str]) -> frozenset[str]:
    if isinstance(value, str):
        msg = f"{name} must be a list of tag names, not a string"
        raise TypeError(msg)
    return frozenset(value)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get current format configuration (context-local)."""
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for current context.

    Args:
        config: FormatConfig instance to use for this context.

    """
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to default configuration."""
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: FormatConfig to use within the context.

    Yields:
        None

    Example:
        >>> with format_config_context(FormatConfig.html_defaults()):
        ...     writer = MarkupWriter()
        >>> # Automatically reset to previous config

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
]
