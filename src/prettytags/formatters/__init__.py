"""prettytags formatters.

Formatters decide where linefeeds and indentation go between two events.

Available Formatters:
- NoFormatting: never adds whitespace
- AlwaysIndentAlwaysLf: one element per line, every level indented
- AutoIndent: rule-driven formatting (INDENT_ALWAYS, LF_ALWAYS, LF_CLOSING)

Thread Safety:
Formatters carry per-document bookkeeping. Use one instance per writer.

"""

from prettytags.formatters.auto_indent import AutoIndent, FmtRule
from prettytags.formatters.protocol import Formatter, RuleFormatter
from prettytags.formatters.simple import AlwaysIndentAlwaysLf, NoFormatting

__all__ = [
    "AlwaysIndentAlwaysLf",
    "AutoIndent",
    "FmtRule",
    "Formatter",
    "NoFormatting",
    "RuleFormatter",
]
