"""Tests for NoFormatting and AlwaysIndentAlwaysLf."""

import pytest

from prettytags import (
    AlwaysIndentAlwaysLf,
    Formatter,
    MarkupWriter,
    NoFormatting,
    RuleFormatter,
)
from prettytags.events import DEFAULT_INDENT, FormatDecision, SequenceState, TagEvent


def pair(last: TagEvent, nxt: TagEvent, indent: int = DEFAULT_INDENT) -> SequenceState:
    return SequenceState(last=last, next=nxt, indent=indent)


# =========================================================================
# NoFormatting
# =========================================================================


class TestNoFormatting:
    """NoFormatting never adds whitespace."""

    def test_protocols(self) -> None:
        assert isinstance(NoFormatting(), Formatter)
        assert not isinstance(NoFormatting(), RuleFormatter)

    @pytest.mark.parametrize(
        ("last", "nxt"),
        [
            (TagEvent.initial(), TagEvent.opening("html")),
            (TagEvent.opening("html"), TagEvent.opening("body")),
            (TagEvent.opening("html"), TagEvent.closing("html")),
            (TagEvent.closing("p"), TagEvent.text()),
            (TagEvent.text(), TagEvent.closing("p")),
            (TagEvent.self_closing("img"), TagEvent.linefeed()),
        ],
    )
    def test_always_nothing(self, last: TagEvent, nxt: TagEvent) -> None:
        assert NoFormatting().decide(pair(last, nxt)) == FormatDecision.nothing()

    def test_step_size(self) -> None:
        fmtr = NoFormatting()
        fmtr.set_step_size(2)
        assert fmtr.get_step_size() == DEFAULT_INDENT
        assert fmtr.depth == 0

    def test_simple_document(self) -> None:
        writer = MarkupWriter(formatter=NoFormatting())
        writer.open("html")
        writer.text("This is HTML")
        writer.close()
        writer.finalize()

        assert writer.getvalue() == "<!DOCTYPE html><html>This is HTML</html>"

    def test_document_with_properties(self) -> None:
        writer = MarkupWriter(formatter=NoFormatting())
        writer.open("body")
        writer.open("section")
        writer.properties(("class", "class"))
        writer.open("div")
        writer.properties(("keya", "value1"), ("keyb", "value2"))
        writer.text("Text")
        writer.self_closing("img")
        writer.properties(("src", "img.jpg"))
        writer.close_all()
        writer.finalize()

        assert writer.getvalue() == (
            "<!DOCTYPE html><body><section class=\"class\">"
            "<div keya=\"value1\" keyb=\"value2\">Text<img src=\"img.jpg\">"
            "</div></section></body>"
        )


# =========================================================================
# AlwaysIndentAlwaysLf
# =========================================================================


class TestAlwaysIndentAlwaysLf:
    """AlwaysIndentAlwaysLf puts every tag on its own line."""

    def test_protocols(self) -> None:
        assert isinstance(AlwaysIndentAlwaysLf(), Formatter)
        assert not isinstance(AlwaysIndentAlwaysLf(), RuleFormatter)

    def test_decisions(self) -> None:
        fmtr = AlwaysIndentAlwaysLf()
        lf = FormatDecision.lf()

        assert fmtr.decide(pair(TagEvent.initial(), TagEvent.opening("html"))) == lf
        assert fmtr.decide(
            pair(TagEvent.opening("html"), TagEvent.opening("body"))
        ) == FormatDecision(True, 8)
        assert fmtr.decide(
            pair(TagEvent.text(), TagEvent.closing("body"))
        ) == FormatDecision(True, 0)
        assert fmtr.decide(pair(TagEvent.opening("p"), TagEvent.closing("p"))) == lf
        assert fmtr.decide(pair(TagEvent.closing("p"), TagEvent.opening("p"))) == lf
        assert fmtr.decide(pair(TagEvent.self_closing("img"), TagEvent.text())) == lf
        assert fmtr.decide(pair(TagEvent.text(), TagEvent.text())).is_nothing

    def test_nested_document(self) -> None:
        writer = MarkupWriter(formatter=AlwaysIndentAlwaysLf())
        writer.open("html")
        writer.open("body")
        writer.text("Text")
        writer.self_closing("img")
        writer.close_all()
        writer.finalize()

        assert writer.getvalue() == (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "    <body>\n"
            "        Text<img>\n"
            "    </body>\n"
            "</html>"
        )

    def test_empty_element_stays_level(self) -> None:
        writer = MarkupWriter(formatter=AlwaysIndentAlwaysLf(step_size=2))
        writer.open("div")
        writer.open("p")
        writer.close()
        writer.close()
        writer.finalize()

        assert writer.getvalue() == "<!DOCTYPE html>\n<div>\n  <p>\n  </p>\n</div>"

    def test_explicit_linefeed_after_opening(self) -> None:
        writer = MarkupWriter(formatter=AlwaysIndentAlwaysLf())
        writer.open("div")
        writer.new_line()
        writer.text("x")
        writer.close()
        writer.finalize()

        assert writer.getvalue() == "<!DOCTYPE html>\n<div>\n    x\n</div>"

    def test_step_size(self) -> None:
        fmtr = AlwaysIndentAlwaysLf(step_size=2)
        assert fmtr.get_step_size() == 2
        fmtr.reset_to_defaults()
        assert fmtr.get_step_size() == DEFAULT_INDENT

    def test_negative_step_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            AlwaysIndentAlwaysLf(step_size=-2)
