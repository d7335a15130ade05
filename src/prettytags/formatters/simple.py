"""Simple formatting strategies without rule configuration.

- NoFormatting: output exactly as written, no whitespace is ever added
- AlwaysIndentAlwaysLf: every element on its own line, every level indented

Neither keeps track of open blocks, so both report a depth of 0.
"""

from __future__ import annotations

from prettytags.events import DEFAULT_INDENT, FormatDecision, SequenceState, TagEventKind


def _checked_step(step_size: int) -> int:
    if step_size < 0:
        msg = f"Indent step size must not be negative, got {step_size}"
        raise ValueError(msg)
    return step_size


class NoFormatting:
    """Formatter that never inserts linefeeds or indentation."""

    __slots__ = ()

    @property
    def depth(self) -> int:
        return 0

    def decide(self, state: SequenceState) -> FormatDecision:
        return FormatDecision.nothing()

    def set_step_size(self, step_size: int) -> None:
        _checked_step(step_size)

    def get_step_size(self) -> int:
        return DEFAULT_INDENT

    def reset_to_defaults(self) -> None:
        pass

    def __repr__(self) -> str:
        return "NoFormatting()"


class AlwaysIndentAlwaysLf:
    """Formatter putting every tag on its own line and indenting every level.

    Content of any element is indented by one step; the closing tag goes
    back one step. An element opened and closed right away gets its
    closing tag on the next line, at the same level.

    Usage:
        >>> writer = MarkupWriter(formatter=AlwaysIndentAlwaysLf())
        >>> writer.open("body")
        >>> writer.text("Text")
        >>> writer.close()
        >>> writer.finalize()
        >>> print(writer.getvalue())
        <!DOCTYPE html>
        <body>
            Text
        </body>
    """

    __slots__ = ("_step",)

    def __init__(self, step_size: int = DEFAULT_INDENT) -> None:
        self._step = _checked_step(step_size)

    @property
    def depth(self) -> int:
        return 0

    def decide(self, state: SequenceState) -> FormatDecision:
        last = state.last.kind
        nxt = state.next.kind

        if nxt is TagEventKind.CLOSING:
            if last is TagEventKind.OPENING:
                return FormatDecision.lf()
            return FormatDecision.indent_less(state.indent, self._step)

        if last is TagEventKind.OPENING:
            # Opening followed by LINE_FEED indents too, so the matching
            # CLOSING always has a level to step back from.
            return FormatDecision.indent_more(state.indent, self._step)
        if last in (TagEventKind.INITIAL, TagEventKind.CLOSING, TagEventKind.SELF_CLOSING):
            return FormatDecision.lf()
        return FormatDecision.nothing()

    def set_step_size(self, step_size: int) -> None:
        self._step = _checked_step(step_size)

    def get_step_size(self) -> int:
        return self._step

    def reset_to_defaults(self) -> None:
        self._step = DEFAULT_INDENT

    def __repr__(self) -> str:
        return f"AlwaysIndentAlwaysLf(step_size={self._step})"
