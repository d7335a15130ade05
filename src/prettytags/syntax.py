"""Syntax tables for markup languages.

A SyntaxConfig holds the literal delimiters the writer puts around tag
names and properties. Presets exist for HTML and XML; any other markup
language can be described by building a SyntaxConfig directly.

Constructs a language does not have are set to None. The writer then
refuses the matching calls with a CapabilityError instead of emitting
malformed output.

Example:
    >>> from prettytags.syntax import SyntaxConfig, TagPairConfig
    >>> cfg = SyntaxConfig(
    ...     tag_pairs=TagPairConfig(
    ...         opener_before="|", opener_after="|",
    ...         closer_before="|!", closer_after="|",
    ...     ),
    ... )
    >>> writer = MarkupWriter(language=cfg)

Thread Safety:
All configs are frozen dataclasses and safe to share.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from prettytags.errors import CapabilityError
from prettytags.events import TagEventKind


@dataclass(frozen=True, slots=True)
class SelfClosingTagConfig:
    """Delimiters of a self-closing element, e.g. HTML ``<img>``."""

    before: str = "<"
    after: str = ">"


@dataclass(frozen=True, slots=True)
class TagPairConfig:
    """Delimiters of an element with opening and closing tag, e.g. ``<p></p>``."""

    opener_before: str = "<"
    opener_after: str = ">"
    closer_before: str = "</"
    closer_after: str = ">"


@dataclass(frozen=True, slots=True)
class PropertyConfig:
    """Syntax of tag properties (attributes).

    Attributes:
        initiator: Written between the tag name and the first property
        name_before: Written before each property name
        name_after: Written after each property name
        value_before: Written before each value
        value_after: Written after each value
        name_separator: Written between name and value
        value_separator: Written between two properties

    """

    initiator: str = " "
    name_before: str = ""
    name_after: str = ""
    value_before: str = '"'
    value_after: str = '"'
    name_separator: str = "="
    value_separator: str = " "


@dataclass(frozen=True, slots=True)
class SyntaxConfig:
    """Complete syntax of one markup language.

    Attributes:
        doctype: Preamble written once at document start, e.g. ``<!DOCTYPE html>``
        self_closing: Self-closing element syntax, None if unsupported
        tag_pairs: Tag pair syntax, None if unsupported
        properties: Property syntax, None if unsupported

    """

    doctype: str | None = None
    self_closing: SelfClosingTagConfig | None = None
    tag_pairs: TagPairConfig | None = None
    properties: PropertyConfig | None = None

    def lookup(self, kind: TagEventKind, operation: str = "lookup") -> tuple[str, str]:
        """Get the (before, after) delimiters for a tag event kind.

        Args:
            kind: OPENING, CLOSING or SELF_CLOSING
            operation: Name of the calling operation, for the error message

        Returns:
            Text written before the tag name and the deferred terminator

        Raises:
            CapabilityError: If the language has no such construct
        """
        match kind:
            case TagEventKind.OPENING | TagEventKind.CLOSING:
                if self.tag_pairs is None:
                    raise CapabilityError(operation, "tag pairs")
                if kind is TagEventKind.OPENING:
                    return self.tag_pairs.opener_before, self.tag_pairs.opener_after
                return self.tag_pairs.closer_before, self.tag_pairs.closer_after
            case TagEventKind.SELF_CLOSING:
                if self.self_closing is None:
                    raise CapabilityError(operation, "self-closing tags")
                return self.self_closing.before, self.self_closing.after
            case _:
                raise CapabilityError(operation, f"delimiters for {kind.name} events")

    def format_properties(self, pairs: Iterable[tuple[str, str]]) -> str:
        """Render a run of properties, including the leading initiator.

        Args:
            pairs: (name, value) pairs in output order

        Returns:
            The property text, or "" if there are no pairs

        Raises:
            CapabilityError: If the language has no properties
        """
        cfg = self.properties
        if cfg is None:
            raise CapabilityError("properties", "tag properties")
        rendered = [
            f"{cfg.name_before}{name}{cfg.name_after}{cfg.name_separator}"
            f"{cfg.value_before}{value}{cfg.value_after}"
            for name, value in pairs
        ]
        if not rendered:
            return ""
        return cfg.initiator + cfg.value_separator.join(rendered)


class Language(Enum):
    """Markup languages with a built-in syntax table."""

    HTML = "html"
    XML = "xml"


HTML_SYNTAX = SyntaxConfig(
    doctype="<!DOCTYPE html>",
    self_closing=SelfClosingTagConfig(before="<", after=">"),
    tag_pairs=TagPairConfig(),
    properties=PropertyConfig(),
)

XML_SYNTAX = SyntaxConfig(
    doctype='<?xml version="1.0" encoding="UTF-8"?>',
    self_closing=SelfClosingTagConfig(before="<", after=" />"),
    tag_pairs=TagPairConfig(),
    properties=PropertyConfig(),
)

_PRESETS: dict[Language, SyntaxConfig] = {
    Language.HTML: HTML_SYNTAX,
    Language.XML: XML_SYNTAX,
}


def syntax_for(language: Language | SyntaxConfig) -> SyntaxConfig:
    """Resolve a language selector to its syntax table.

    Args:
        language: A built-in Language or a custom SyntaxConfig

    Returns:
        The preset for a Language; a SyntaxConfig is passed through
    """
    if isinstance(language, SyntaxConfig):
        return language
    return _PRESETS[language]


__all__ = [
    "HTML_SYNTAX",
    "XML_SYNTAX",
    "Language",
    "PropertyConfig",
    "SelfClosingTagConfig",
    "SyntaxConfig",
    "TagPairConfig",
    "syntax_for",
]
