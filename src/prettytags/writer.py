"""Streaming markup writer.

MarkupWriter turns intent calls (open, close, self-closing, text, explicit
linefeed, properties) into formatted markup, written straight to a
document without building a tree.

Deferred Terminators:
Properties can be added to a tag after it was opened, so the terminating
delimiter of a tag (``>`` of ``<div>``) is not written together with the
tag name. It stays pending until the next call that writes anything, which
flushes it first. Exactly one terminator is pending at any time, except
before the first tag and after finalize().

Per event the writer:
1. validates the call (a rejected call writes nothing)
2. flushes the pending terminator
3. asks the formatter for a decision on (last event, next event)
4. applies it: new indentation and/or linefeed plus indentation
5. writes the event's own content
6. records the event as last and sets the new pending terminator

Thread Safety:
A writer, its formatter and its document form one unit owned by a single
thread. Create one writer per document.

"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum, auto

from prettytags.config import FormatConfig, get_format_config
from prettytags.document import Document, StringDocument
from prettytags.errors import UsageError
from prettytags.events import FormatDecision, SequenceState, TagEvent, TagEventKind
from prettytags.formatters.protocol import Formatter, RuleFormatter
from prettytags.syntax import Language, SyntaxConfig, syntax_for
from prettytags.utils.logger import get_logger

logger = get_logger(__name__)


class Pending(Enum):
    """What the writer still owes the document."""

    NOTHING = auto()
    OPEN = auto()
    SELF_CLOSING = auto()
    CLOSE = auto()
    CLOSED = auto()  # finalized, no further output


@dataclass(frozen=True, slots=True)
class PendingTerminator:
    """The pending state of the writer and the text that will settle it.

    Attributes:
        kind: Which kind of tag is waiting for its terminator
        tag: Name of that tag ("" for NOTHING and CLOSED)
        terminator: Text to write when the next event arrives

    """

    kind: Pending
    tag: str = ""
    terminator: str = ""

    @property
    def accepts_properties(self) -> bool:
        return self.kind is Pending.OPEN or self.kind is Pending.SELF_CLOSING


NOTHING_PENDING = PendingTerminator(Pending.NOTHING)
STREAM_CLOSED = PendingTerminator(Pending.CLOSED)

_PENDING_KINDS = {
    TagEventKind.OPENING: Pending.OPEN,
    TagEventKind.SELF_CLOSING: Pending.SELF_CLOSING,
    TagEventKind.CLOSING: Pending.CLOSE,
}


def pending_after(event: TagEvent, terminator: str = "") -> PendingTerminator:
    """Pending state once an event's leading content has been written.

    Args:
        event: The event just written
        terminator: Its deferred delimiter (ignored for tagless events)

    Returns:
        The new pending terminator
    """
    kind = _PENDING_KINDS.get(event.kind)
    if kind is None:
        return NOTHING_PENDING
    return PendingTerminator(kind, event.tag, terminator)


class MarkupWriter:
    """Write formatted markup call by call.

    Usage:
        >>> fmtr = AutoIndent()
        >>> fmtr.register(["head", "body"], FmtRule.INDENT_ALWAYS)
        >>> fmtr.register(["html"], FmtRule.LF_ALWAYS)
        >>> fmtr.register(["title"], FmtRule.LF_CLOSING)
        >>> writer = MarkupWriter(formatter=fmtr)
        >>> writer.open("html")
        >>> writer.open("head")
        >>> writer.element("title", "New Website")
        >>> writer.close_all()
        >>> writer.finalize()
        >>> print(writer.getvalue())
        <!DOCTYPE html>
        <html>
        <head>
            <title>New Website</title>
        </head>
        </html>

    Errors:
        UsageError and CapabilityError are raised before anything is
        written; the writer stays usable. Errors raised by the document
        (e.g. OSError) propagate and leave partial output behind.
    """

    __slots__ = (
        "_document",
        "_syntax",
        "_formatter",
        "_state",
        "_pending",
        "_indent_str",
        "_has_preamble",
    )

    def __init__(
        self,
        document: Document | None = None,
        language: Language | SyntaxConfig = Language.HTML,
        *,
        formatter: Formatter | None = None,
        config: FormatConfig | None = None,
    ) -> None:
        """Create a writer and write the document preamble.

        Args:
            document: Output target (a new StringDocument if None)
            language: Built-in language or custom syntax table
            formatter: Formatting strategy; if None an AutoIndent is built
                from ``config`` or, without one, the active FormatConfig
            config: Format configuration for the default AutoIndent

        Raises:
            TypeError: If both formatter and config are given
            UsageError: If the formatter is still tracking open blocks
        """
        if formatter is not None and config is not None:
            msg = "Pass either a formatter or a config, not both"
            raise TypeError(msg)
        if formatter is None:
            formatter = (config or get_format_config()).build_formatter()
        elif formatter.depth:
            raise UsageError("MarkupWriter", "formatter is tracking blocks of another document")

        self._document: Document = document if document is not None else StringDocument()
        self._syntax = syntax_for(language)
        self._formatter: Formatter = formatter
        self._state = SequenceState()
        self._pending = NOTHING_PENDING
        self._indent_str = ""
        self._has_preamble = bool(self._syntax.doctype)

        if self._syntax.doctype:
            self._document.write(self._syntax.doctype)

    # =========================================================================
    # Events
    # =========================================================================

    def open(self, tag: str) -> None:
        """Open a tag pair; its terminator waits for possible properties."""
        self._ensure_writable("open", tag)
        before, after = self._syntax.lookup(TagEventKind.OPENING, "open")
        self._emit(TagEvent.opening(tag), before + tag, after)
        self._state.tag_stack.append(tag)

    def close(self) -> None:
        """Close the innermost open tag.

        Raises:
            UsageError: If no tag is open
        """
        self._ensure_writable("close")
        before, after = self._syntax.lookup(TagEventKind.CLOSING, "close")
        if not self._state.tag_stack:
            raise UsageError("close", "no open tag to close")
        tag = self._state.tag_stack[-1]
        self._emit(TagEvent.closing(tag), before + tag, after)
        self._state.tag_stack.pop()

    def close_all(self) -> None:
        """Close every open tag, innermost first."""
        while self._state.tag_stack:
            self.close()

    def self_closing(self, tag: str) -> None:
        """Write a self-closing tag; its terminator waits for possible properties."""
        self._ensure_writable("self_closing", tag)
        before, after = self._syntax.lookup(TagEventKind.SELF_CLOSING, "self_closing")
        self._emit(TagEvent.self_closing(tag), before + tag, after)

    def text(self, content: str) -> None:
        """Write text content as is."""
        self._ensure_writable("text")
        self._emit(TagEvent.text(), content)

    def new_line(self) -> None:
        """Request a linefeed.

        Exactly one linefeed is written: if the formatter already inserts
        one at this point, no second one follows. A linefeed requested
        right after an opening tag makes AutoIndent indent the block.
        """
        self._ensure_writable("new_line")
        if not self._emit(TagEvent.linefeed(), ""):
            self._document.write("\n" + self._indent_str)

    def element(self, tag: str, content: str = "") -> None:
        """Write a complete tag pair with optional text content."""
        self.open(tag)
        if content:
            self.text(content)
        self.close()

    # =========================================================================
    # Properties
    # =========================================================================

    def properties(self, *pairs: tuple[str, str]) -> None:
        """Add properties to the tag written last.

        Args:
            *pairs: (name, value) pairs in output order

        Raises:
            UsageError: If the last call did not write an opening or
                self-closing tag
            CapabilityError: If the syntax has no properties
        """
        self._ensure_writable("properties")
        if not self._pending.accepts_properties:
            raise UsageError("properties", "no opening or self-closing tag to add properties to")
        self._document.write(self._syntax.format_properties(pairs))

    def add_property(self, name: str, value: str) -> None:
        """Add a single property to the tag written last."""
        self.properties((name, value))

    # =========================================================================
    # Stream control
    # =========================================================================

    def finalize(self) -> None:
        """Flush the pending terminator and close the stream.

        Open tags are not closed automatically; call close_all() first for a
        balanced document.

        Raises:
            UsageError: If the writer was already finalized
        """
        self._ensure_writable("finalize")
        self._flush_pending()
        self._pending = STREAM_CLOSED
        if self._state.tag_stack:
            logger.warning("Finalized with unclosed tags: %s", self._state.tag_stack)
        flush = getattr(self._document, "flush", None)
        if callable(flush):
            flush()
        logger.debug("Finalized document")

    def set_formatter(self, formatter: Formatter) -> None:
        """Replace the formatter.

        Raises:
            UsageError: If tags are open or the new formatter tracks open blocks
        """
        self._ensure_writable("set_formatter")
        if self._state.tag_stack:
            raise UsageError("set_formatter", f"{len(self._state.tag_stack)} tag(s) still open")
        if formatter.depth:
            raise UsageError("set_formatter", "formatter is tracking blocks of another document")
        logger.debug("Formatter %r replaced by %r", self._formatter, formatter)
        self._formatter = formatter

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    @property
    def rule_formatter(self) -> RuleFormatter:
        """The formatter, if it is configured by rule sets.

        Raises:
            UsageError: If the formatter has no rule sets
        """
        if not isinstance(self._formatter, RuleFormatter):
            msg = f"{type(self._formatter).__name__} has no rule sets"
            raise UsageError("rule_formatter", msg)
        return self._formatter

    @property
    def document(self) -> Document:
        return self._document

    @property
    def syntax(self) -> SyntaxConfig:
        return self._syntax

    @property
    def depth(self) -> int:
        """Number of open tags."""
        return len(self._state.tag_stack)

    @property
    def open_tags(self) -> tuple[str, ...]:
        """Names of the open tags, outermost first."""
        return tuple(self._state.tag_stack)

    @property
    def state(self) -> SequenceState:
        """A copy of the current sequence state."""
        return dataclasses.replace(self._state, tag_stack=list(self._state.tag_stack))

    @property
    def pending(self) -> PendingTerminator:
        return self._pending

    @property
    def finalized(self) -> bool:
        return self._pending.kind is Pending.CLOSED

    def getvalue(self) -> str:
        """Return the output written so far (in-memory documents only).

        Raises:
            UsageError: If the document is not a StringDocument
        """
        if not isinstance(self._document, StringDocument):
            raise UsageError("getvalue", f"{type(self._document).__name__} is not in memory")
        return self._document.build()

    # =========================================================================
    # Internals
    # =========================================================================

    def _ensure_writable(self, operation: str, tag: str | None = None) -> None:
        if self._pending.kind is Pending.CLOSED:
            raise UsageError(operation, "document already finalized", tag)

    def _flush_pending(self) -> None:
        if self._pending.terminator:
            self._document.write(self._pending.terminator)
        self._pending = NOTHING_PENDING

    def _emit(self, event: TagEvent, content: str, terminator: str = "") -> bool:
        """Write one event; return whether a formatting linefeed was written."""
        self._flush_pending()
        self._state.next = event
        decision = self._formatter.decide(self._state)
        wrote_lf = self._apply(decision)
        self._document.write(content)
        self._state.last = event
        self._pending = pending_after(event, terminator)
        return wrote_lf

    def _apply(self, decision: FormatDecision) -> bool:
        if decision.new_indent is not None:
            self._state.indent = decision.new_indent
            self._indent_str = " " * decision.new_indent
        if not decision.new_line:
            return False
        if self._state.last.kind is TagEventKind.INITIAL and not self._has_preamble:
            # Nothing to separate the first element from
            return False
        self._document.write("\n" + self._indent_str)
        return True

    def __repr__(self) -> str:
        return (
            f"MarkupWriter(depth={self.depth}, pending={self._pending.kind.name}, "
            f"formatter={self._formatter!r})"
        )


__all__ = [
    "MarkupWriter",
    "NOTHING_PENDING",
    "Pending",
    "PendingTerminator",
    "STREAM_CLOSED",
    "pending_after",
]
