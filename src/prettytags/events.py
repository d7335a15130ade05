"""Tag events, sequence state and format decisions.

The writer turns every intent call into a TagEvent. Formatters look at the
pair of the last fully written event and the upcoming one (bundled in a
SequenceState) and answer with a FormatDecision.

Thread Safety:
TagEvent and FormatDecision are frozen (immutable) and safe to share.
SequenceState is owned and mutated by exactly one MarkupWriter.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

# Indent step size every formatter starts with
DEFAULT_INDENT = 4


class TagEventKind(Enum):
    """Kinds of events in the output stream."""

    INITIAL = auto()  # document start, exactly once
    OPENING = auto()  # <section>
    CLOSING = auto()  # </section>
    SELF_CLOSING = auto()  # <img>
    TEXT = auto()
    LINE_FEED = auto()  # requested explicitly by the caller

    @property
    def has_tag(self) -> bool:
        """Whether events of this kind carry a tag name."""
        return self in _TAG_KINDS


_TAG_KINDS = frozenset({TagEventKind.OPENING, TagEventKind.CLOSING, TagEventKind.SELF_CLOSING})


@dataclass(frozen=True, slots=True)
class TagEvent:
    """One event in the output stream: a kind plus its tag name.

    The tag name is always empty for INITIAL, TEXT and LINE_FEED events;
    use the shortcut constructors (or ``of``) to get that normalisation.

    Attributes:
        kind: What happened
        tag: Tag name for OPENING, CLOSING and SELF_CLOSING, otherwise ""

    """

    kind: TagEventKind
    tag: str = ""

    @classmethod
    def of(cls, kind: TagEventKind, tag: str = "") -> TagEvent:
        """Create an event, dropping the tag name for tagless kinds."""
        return cls(kind, tag if kind.has_tag else "")

    @classmethod
    def initial(cls) -> TagEvent:
        return cls(TagEventKind.INITIAL)

    @classmethod
    def opening(cls, tag: str) -> TagEvent:
        return cls(TagEventKind.OPENING, tag)

    @classmethod
    def closing(cls, tag: str) -> TagEvent:
        return cls(TagEventKind.CLOSING, tag)

    @classmethod
    def self_closing(cls, tag: str) -> TagEvent:
        return cls(TagEventKind.SELF_CLOSING, tag)

    @classmethod
    def text(cls) -> TagEvent:
        return cls(TagEventKind.TEXT)

    @classmethod
    def linefeed(cls) -> TagEvent:
        return cls(TagEventKind.LINE_FEED)

    def __repr__(self) -> str:
        if self.tag:
            return f"TagEvent({self.kind.name}, {self.tag!r})"
        return f"TagEvent({self.kind.name})"


@dataclass(slots=True)
class SequenceState:
    """Everything a formatter may look at to make its decision.

    Attributes:
        tag_stack: Names of the currently open tags, innermost last
        last: The last event whose content has been fully written
        next: The event about to be written
        indent: Current indentation in columns

    The writer keeps ``len(tag_stack)`` equal to the number of OPENING
    events not yet matched by a CLOSING event. Formatters must treat the
    state as read-only.
    """

    tag_stack: list[str] = field(default_factory=list)
    last: TagEvent = field(default_factory=TagEvent.initial)
    next: TagEvent = field(default_factory=TagEvent.text)
    indent: int = 0


@dataclass(frozen=True, slots=True)
class FormatDecision:
    """Formatting changes to apply between two adjacent events.

    If ``new_indent`` is set, the current indentation becomes that many
    columns. If ``new_line`` is set, a linefeed followed by the (possibly
    updated) indentation is written. Both are applied before the next
    event's own content.

    Attributes:
        new_line: Insert a linefeed plus indentation
        new_indent: New indentation in columns, or None to keep it

    """

    new_line: bool = False
    new_indent: int | None = None

    @classmethod
    def nothing(cls) -> FormatDecision:
        """No linefeed, no change of indentation."""
        return _NOTHING

    @classmethod
    def lf(cls) -> FormatDecision:
        """A linefeed at the current indentation."""
        return _LINEFEED

    @classmethod
    def may_lf(cls, new_line: bool) -> FormatDecision:
        return _LINEFEED if new_line else _NOTHING

    @classmethod
    def indent_more(cls, indent: int, step: int) -> FormatDecision:
        """An indented block follows: linefeed at one more step."""
        return cls(new_line=True, new_indent=indent + step)

    @classmethod
    def indent_less(cls, indent: int, step: int) -> FormatDecision:
        """An indented block ends: linefeed at one step less, never below 0."""
        return cls(new_line=True, new_indent=max(0, indent - step))

    @property
    def is_nothing(self) -> bool:
        return not self.new_line and self.new_indent is None


_NOTHING = FormatDecision()
_LINEFEED = FormatDecision(new_line=True)
