"""Exception classes for prettytags.

Provides standardized exceptions for error handling throughout prettytags.

Recoverable errors (UsageError, CapabilityError, ConfigConflictError) are
raised before anything is written, so the writer stays usable afterwards.
ConsistencyViolation signals broken internal bookkeeping and is not meant
to be caught and retried.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prettytags.formatters.auto_indent import FmtRule


class PrettyTagsError(Exception):
    """Base exception for all prettytags errors.

    Subclass this for specific error categories.
    """

    pass


class UsageError(PrettyTagsError):
    """A writer or formatter operation was called in the wrong situation.

    Examples are closing a tag while none is open, or adding properties
    when no tag head is waiting for its terminator.
    """

    def __init__(self, operation: str, message: str, tag: str | None = None) -> None:
        """Initialize usage error.

        Args:
            operation: Name of the rejected operation (e.g., "close")
            message: Description of the misuse
            tag: Tag name involved, if any
        """
        self.operation = operation
        self.tag = tag

        subject = f"{operation}({tag!r})" if tag else f"{operation}()"
        super().__init__(f"{subject}: {message}")


class CapabilityError(UsageError):
    """The configured markup syntax does not provide a required construct.

    Raised instead of emitting malformed output, e.g. when self-closing
    tags are requested for a syntax without them.
    """

    def __init__(self, operation: str, capability: str, tag: str | None = None) -> None:
        self.capability = capability
        super().__init__(operation, f"syntax provides no {capability}", tag)


class ConfigConflictError(PrettyTagsError, ValueError):
    """Rule registration would put a tag into mutually exclusive rule sets.

    Nothing is registered when this is raised.
    """

    def __init__(
        self,
        rule: FmtRule,
        tags: Iterable[str],
        conflicting_rules: Iterable[FmtRule],
    ) -> None:
        """Initialize conflict error.

        Args:
            rule: Rule the tags were being registered for
            tags: Every offending tag name
            conflicting_rules: Rules already holding one of the offending tags
        """
        self.rule = rule
        self.tags = tuple(tags)
        self.conflicting_rules = tuple(conflicting_rules)

        others = ", ".join(r.name for r in self.conflicting_rules)
        super().__init__(
            f"Cannot add {list(self.tags)} to {rule.name}: already registered for {others}"
        )


class ConsistencyViolation(PrettyTagsError, RuntimeError):
    """Internal bookkeeping of a formatter went out of balance.

    Only reachable through a defect in prettytags itself (or a formatter
    driven by hand with an inconsistent sequence), never through
    ordinary writer calls.
    """

    pass
