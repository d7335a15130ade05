"""
prettytags — Streaming pretty-printer for HTML, XML and other markup

Write markup call by call and get well-formed, readably indented output
without building a tree first. Formatting is decided on the fly by a
pluggable formatter; the rule-based AutoIndent covers most needs.

Quick Start:
    >>> from prettytags import AutoIndent, FmtRule, MarkupWriter
    >>> fmtr = AutoIndent()
    >>> fmtr.register(["body"], FmtRule.INDENT_ALWAYS)
    >>> fmtr.register(["html"], FmtRule.LF_ALWAYS)
    >>> fmtr.register(["p"], FmtRule.LF_CLOSING)
    >>> writer = MarkupWriter(formatter=fmtr)
    >>> writer.open("html")
    >>> writer.open("body")
    >>> writer.element("p", "This is HTML")
    >>> writer.self_closing("img")
    >>> writer.properties(("src", "image.jpg"))
    >>> writer.close_all()
    >>> writer.finalize()
    >>> print(writer.getvalue())
    <!DOCTYPE html>
    <html>
    <body>
        <p>This is HTML</p>
        <img src="image.jpg">
    </body>
    </html>

XML and custom languages:
    >>> from prettytags import Language
    >>> writer = MarkupWriter(language=Language.XML)

Installation:
    pip install prettytags              # zero runtime dependencies
"""

from prettytags.config import (
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from prettytags.document import Document, FileDocument, StringDocument
from prettytags.errors import (
    CapabilityError,
    ConfigConflictError,
    ConsistencyViolation,
    PrettyTagsError,
    UsageError,
)
from prettytags.events import (
    DEFAULT_INDENT,
    FormatDecision,
    SequenceState,
    TagEvent,
    TagEventKind,
)
from prettytags.formatters import (
    AlwaysIndentAlwaysLf,
    AutoIndent,
    FmtRule,
    Formatter,
    NoFormatting,
    RuleFormatter,
)
from prettytags.syntax import (
    Language,
    PropertyConfig,
    SelfClosingTagConfig,
    SyntaxConfig,
    TagPairConfig,
    syntax_for,
)
from prettytags.writer import MarkupWriter, Pending, PendingTerminator

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Writer
    "MarkupWriter",
    "Pending",
    "PendingTerminator",
    # Events
    "DEFAULT_INDENT",
    "FormatDecision",
    "SequenceState",
    "TagEvent",
    "TagEventKind",
    # Formatters
    "AlwaysIndentAlwaysLf",
    "AutoIndent",
    "FmtRule",
    "Formatter",
    "NoFormatting",
    "RuleFormatter",
    # Syntax
    "Language",
    "PropertyConfig",
    "SelfClosingTagConfig",
    "SyntaxConfig",
    "TagPairConfig",
    "syntax_for",
    # Documents
    "Document",
    "FileDocument",
    "StringDocument",
    # Configuration (ContextVar-based)
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
    # Errors
    "CapabilityError",
    "ConfigConflictError",
    "ConsistencyViolation",
    "PrettyTagsError",
    "UsageError",
]
