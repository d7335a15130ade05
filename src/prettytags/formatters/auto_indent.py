"""Rule-based automatic indentation and linefeeds.

AutoIndent decides the formatting from three named rule sets of tag names:

- INDENT_ALWAYS: content is always put on new lines and indented,
  e.g. ``<body>``, ``<head>``
- LF_ALWAYS: linefeeds around the element, content is not indented,
  e.g. ``<html>``
- LF_CLOSING: a linefeed after the element ends, e.g. ``</div>``, ``<img>``

Tags that are in no rule set get no automatic formatting, but a block is
still indented when the caller requests a linefeed right after its opening
tag.

A tag may be in INDENT_ALWAYS and LF_CLOSING at the same time, but never in
LF_ALWAYS together with either of the others.

Indent Decisions:
For every opening tag one flag is pushed recording whether its content was
indented. The flag is pushed when the event following the opening tag is
decided, and popped when its closing tag is decided, so the closing tag
steps back exactly when the opening tag stepped in. An element closed right
after it was opened pushes nothing and pops nothing.

Example:
    >>> fmtr = AutoIndent()
    >>> fmtr.register(["head", "body"], FmtRule.INDENT_ALWAYS)
    >>> fmtr.register(["html"], FmtRule.LF_ALWAYS)
    >>> fmtr.register(["title", "div"], FmtRule.LF_CLOSING)

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from prettytags.errors import ConfigConflictError, ConsistencyViolation, UsageError
from prettytags.events import DEFAULT_INDENT, FormatDecision, SequenceState, TagEvent, TagEventKind
from prettytags.utils.logger import get_logger

logger = get_logger(__name__)


class FmtRule(Enum):
    """Named rule sets of AutoIndent."""

    INDENT_ALWAYS = "indent_always"
    LF_ALWAYS = "lf_always"
    LF_CLOSING = "lf_closing"


# Rules a tag must not already belong to when it is added to the key rule
_EXCLUSIONS: dict[FmtRule, tuple[FmtRule, ...]] = {
    FmtRule.INDENT_ALWAYS: (FmtRule.LF_ALWAYS,),
    FmtRule.LF_ALWAYS: (FmtRule.INDENT_ALWAYS, FmtRule.LF_CLOSING),
    FmtRule.LF_CLOSING: (FmtRule.LF_ALWAYS,),
}

HTML_INDENT_ALWAYS = ("head", "body", "section", "header", "footer", "nav")
HTML_LF_ALWAYS = ("html",)
HTML_LF_CLOSING = ("title", "link", "div")


class AutoIndent:
    """Formatter driven by INDENT_ALWAYS, LF_ALWAYS and LF_CLOSING rules.

    Usage:
        >>> fmtr = AutoIndent()
        >>> fmtr.register(["directory", "entry"], FmtRule.INDENT_ALWAYS)
        >>> fmtr.register(["title", "keyword"], FmtRule.LF_CLOSING)
        >>> writer = MarkupWriter(language=Language.XML, formatter=fmtr)

    The formatter belongs to one document: its indent-decision stack
    mirrors the writer's open tags and must not be shared.
    """

    __slots__ = ("_rules", "_indent_stack", "_step")

    def __init__(self, step_size: int = DEFAULT_INDENT) -> None:
        if step_size < 0:
            msg = f"Indent step size must not be negative, got {step_size}"
            raise ValueError(msg)
        self._rules: dict[FmtRule, set[str]] = {rule: set() for rule in FmtRule}
        self._indent_stack: list[bool] = []
        self._step = step_size

    # =========================================================================
    # Configuration
    # =========================================================================

    def register(self, tags: Iterable[str], rule: FmtRule) -> None:
        """Add tags to a rule set.

        Either all tags are added or none: if any tag already belongs to a
        rule set that excludes ``rule``, nothing changes.

        Args:
            tags: Tag names to add
            rule: Target rule set

        Raises:
            TypeError: If tags is a single string
            ConfigConflictError: Listing every tag that conflicts
        """
        if isinstance(tags, str):
            msg = "tags must be a list of tag names, not a string"
            raise TypeError(msg)
        candidates = list(dict.fromkeys(tags))
        offending: list[str] = []
        conflicting: list[FmtRule] = []
        for other in _EXCLUSIONS[rule]:
            clashes = [t for t in candidates if t in self._rules[other]]
            if clashes:
                conflicting.append(other)
                offending.extend(t for t in clashes if t not in offending)

        if offending:
            logger.debug("Rejected %s for %s: %s", offending, rule.name, conflicting)
            raise ConfigConflictError(rule, offending, conflicting)

        self._rules[rule].update(candidates)
        logger.debug("Registered %s for %s", candidates, rule.name)

    def reset(self) -> None:
        """Clear all rule sets.

        The check only sees blocks whose content has started: a tag opened
        by the last writer call has no flag on the stack yet, so a reset
        right after ``open()`` passes and changes the rules for that element.
        Reset between documents.

        Raises:
            UsageError: If blocks are still open
        """
        if self._indent_stack:
            raise UsageError("reset", f"{len(self._indent_stack)} block(s) still open")
        for tags in self._rules.values():
            tags.clear()
        logger.debug("Cleared all rule sets")

    def reset_to_defaults(self) -> None:
        """Clear all rule sets and restore the default step size."""
        self.reset()
        self._step = DEFAULT_INDENT

    def use_html_defaults(self) -> None:
        """Register a rule setup that gives readable HTML."""
        self.register(HTML_INDENT_ALWAYS, FmtRule.INDENT_ALWAYS)
        self.register(HTML_LF_ALWAYS, FmtRule.LF_ALWAYS)
        self.register(HTML_LF_CLOSING, FmtRule.LF_CLOSING)

    def set_step_size(self, step_size: int) -> None:
        if step_size < 0:
            msg = f"Indent step size must not be negative, got {step_size}"
            raise ValueError(msg)
        self._step = step_size

    def get_step_size(self) -> int:
        return self._step

    def is_in_rule(self, tag: str, rule: FmtRule) -> bool:
        return tag in self._rules[rule]

    def tags(self, rule: FmtRule) -> frozenset[str]:
        """Get the tag names registered for a rule."""
        return frozenset(self._rules[rule])

    @property
    def depth(self) -> int:
        return len(self._indent_stack)

    # =========================================================================
    # Decision
    # =========================================================================

    def decide(self, state: SequenceState) -> FormatDecision:
        last = state.last
        nxt = state.next.kind

        if nxt is TagEventKind.CLOSING:
            return self._decide_closing(last, state.indent)

        match last.kind:
            case TagEventKind.OPENING:
                lf_always = self._is(last, FmtRule.LF_ALWAYS)
                # LF_ALWAYS tags already get their linefeed, a manual one
                # must not also indent them.
                explicit_lf = nxt is TagEventKind.LINE_FEED and not lf_always
                do_indent = explicit_lf or self._is(last, FmtRule.INDENT_ALWAYS)
                self._indent_stack.append(do_indent)
                if do_indent:
                    return FormatDecision.indent_more(state.indent, self._step)
                return FormatDecision.may_lf(lf_always)
            case TagEventKind.CLOSING:
                return FormatDecision.may_lf(
                    self._is(last, FmtRule.INDENT_ALWAYS)
                    or self._is(last, FmtRule.LF_ALWAYS)
                    or self._is(last, FmtRule.LF_CLOSING)
                )
            case TagEventKind.SELF_CLOSING:
                return FormatDecision.may_lf(self._is(last, FmtRule.LF_CLOSING))
            case TagEventKind.INITIAL:
                return FormatDecision.lf()
            case _:
                return FormatDecision.nothing()

    def _decide_closing(self, last: TagEvent, indent: int) -> FormatDecision:
        if last.kind is TagEventKind.OPENING:
            # Empty element: no flag was pushed for it, so none is popped.
            return FormatDecision.may_lf(self._is(last, FmtRule.LF_ALWAYS))

        if not self._indent_stack:
            msg = f"Indent-decision stack underflow when closing after {last!r}"
            raise ConsistencyViolation(msg)

        if self._indent_stack.pop():
            return FormatDecision.indent_less(indent, self._step)

        return FormatDecision.may_lf(
            (last.kind is TagEventKind.CLOSING and self._is(last, FmtRule.INDENT_ALWAYS))
            or self._is(last, FmtRule.LF_ALWAYS)
            or (
                last.kind in (TagEventKind.CLOSING, TagEventKind.SELF_CLOSING)
                and self._is(last, FmtRule.LF_CLOSING)
            )
        )

    def _is(self, event: TagEvent, rule: FmtRule) -> bool:
        return event.tag in self._rules[rule]

    def __repr__(self) -> str:
        sets = ", ".join(f"{rule.value}={sorted(self._rules[rule])}" for rule in FmtRule)
        return f"AutoIndent(step_size={self._step}, {sets})"
