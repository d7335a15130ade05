"""Error class construction and formatting.

The writer-level error paths are in test_writer.py; these tests pin the
exception hierarchy and messages.
"""

import pytest

from prettytags import (
    AutoIndent,
    CapabilityError,
    ConfigConflictError,
    ConsistencyViolation,
    FmtRule,
    PrettyTagsError,
    UsageError,
)

# =========================================================================
# UsageError
# =========================================================================


class TestUsageErrorFormatting:
    """Verify UsageError produces well-formatted messages."""

    def test_without_tag(self) -> None:
        err = UsageError("close", "no open tag to close")
        assert str(err) == "close(): no open tag to close"
        assert err.operation == "close"
        assert err.tag is None

    def test_with_tag(self) -> None:
        err = UsageError("open", "document already finalized", "div")
        assert str(err) == "open('div'): document already finalized"
        assert err.tag == "div"

    def test_is_prettytags_error(self) -> None:
        assert isinstance(UsageError("x", "y"), PrettyTagsError)


class TestCapabilityError:
    """CapabilityError is a kind of usage error."""

    def test_message(self) -> None:
        err = CapabilityError("self_closing", "self-closing tags")
        assert str(err) == "self_closing(): syntax provides no self-closing tags"
        assert err.capability == "self-closing tags"

    def test_caught_as_usage_error(self) -> None:
        with pytest.raises(UsageError):
            raise CapabilityError("properties", "tag properties")


# =========================================================================
# Configuration and consistency
# =========================================================================


class TestConfigConflictError:
    """Conflicting rule registration."""

    def test_attributes(self) -> None:
        err = ConfigConflictError(FmtRule.LF_ALWAYS, ["html"], [FmtRule.INDENT_ALWAYS])
        assert err.rule is FmtRule.LF_ALWAYS
        assert err.tags == ("html",)
        assert err.conflicting_rules == (FmtRule.INDENT_ALWAYS,)
        assert "html" in str(err)
        assert "INDENT_ALWAYS" in str(err)

    def test_is_value_error(self) -> None:
        fmtr = AutoIndent()
        fmtr.register(["html"], FmtRule.LF_ALWAYS)
        with pytest.raises(ValueError):
            fmtr.register(["html"], FmtRule.LF_CLOSING)

    def test_is_not_usage_error(self) -> None:
        err = ConfigConflictError(FmtRule.LF_ALWAYS, ["a"], [FmtRule.LF_CLOSING])
        assert isinstance(err, PrettyTagsError)
        assert not isinstance(err, UsageError)


class TestConsistencyViolation:
    """Internal bookkeeping errors."""

    def test_hierarchy(self) -> None:
        err = ConsistencyViolation("stack underflow")
        assert isinstance(err, PrettyTagsError)
        assert isinstance(err, RuntimeError)
        assert not isinstance(err, UsageError)
