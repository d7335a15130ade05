"""Formatter protocols — stable interface for formatting strategies.

Any object that implements ``decide(state) -> FormatDecision`` plus the
step-size accessors conforms to ``Formatter``. The writer holds exactly one
formatter per document and asks it for a decision between every pair of
adjacent events.

Example:
    from prettytags.formatters.protocol import Formatter

    def preview(formatter: Formatter, state: SequenceState) -> str:
        decision = formatter.decide(state)
        return "\\n" if decision.new_line else ""

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from prettytags.events import FormatDecision, SequenceState
    from prettytags.formatters.auto_indent import FmtRule


@runtime_checkable
class Formatter(Protocol):
    """Protocol for formatting strategies.

    Implementations decide, for the pair (state.last, state.next), whether
    a linefeed is inserted and whether the indentation changes.

    Contract:
        - ``decide`` must not mutate ``state``. It may update the
          formatter's own bookkeeping, which is why every adjacent pair is
          passed exactly once and in stream order.
        - For a fixed configuration and call history the decision depends
          only on the kinds and tag names of ``last`` and ``next`` and the
          formatter's own bookkeeping; ``state.indent`` is only ever
          increased or decreased by the step size.

    """

    @property
    def depth(self) -> int:
        """Number of open blocks the formatter is tracking (0 if stateless)."""
        ...

    def decide(self, state: SequenceState) -> FormatDecision:
        """Return the formatting changes to apply before ``state.next``.

        Args:
            state: The current sequence state (read-only).

        Returns:
            The FormatDecision for this pair of events.

        """
        ...

    def set_step_size(self, step_size: int) -> None:
        """Set the indentation step used by subsequent decisions."""
        ...

    def get_step_size(self) -> int:
        """Return the indentation step size."""
        ...

    def reset_to_defaults(self) -> None:
        """Restore every configurable setting to its default."""
        ...


@runtime_checkable
class RuleFormatter(Formatter, Protocol):
    """Protocol for formatters driven by named tag rule sets."""

    def register(self, tags: Iterable[str], rule: FmtRule) -> None:
        """Add tags to a rule set, all or nothing."""
        ...

    def reset(self) -> None:
        """Clear every rule set."""
        ...

    def is_in_rule(self, tag: str, rule: FmtRule) -> bool:
        """Check whether a tag belongs to a rule set."""
        ...
