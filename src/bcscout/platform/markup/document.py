"""Where: src/bcscout/platform/markup/document.py
What: Selector-based markup node protocol and its BeautifulSoup adapter.
Why: Extractors depend on four query capabilities, not on a parser library.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from bcscout.errors import ParseError


@runtime_checkable
class MarkupNode(Protocol):
    """Queryable node of a parsed HTML document."""

    def find_first(self, selector: str) -> "MarkupNode | None":
        """Return the first descendant matching a CSS selector, if any."""
        ...

    def find_all(self, selector: str) -> list["MarkupNode"]:
        """Return every descendant matching a CSS selector in document order."""
        ...

    def text(self) -> str:
        """Return the concatenated text content of the node."""
        ...

    def attr(self, name: str, default: str = "") -> str:
        """Return an attribute value, or ``default`` when it is absent."""
        ...


class SoupNode:
    """``MarkupNode`` backed by a BeautifulSoup ``Tag``."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def find_first(self, selector: str) -> SoupNode | None:
        match = self._tag.select_one(selector)
        if match is None:
            return None
        return SoupNode(match)

    def find_all(self, selector: str) -> list[MarkupNode]:
        return [SoupNode(match) for match in self._tag.select(selector)]

    def text(self) -> str:
        return self._tag.get_text()

    def attr(self, name: str, default: str = "") -> str:
        value = self._tag.get(name)
        if value is None:
            return default
        # Multi-valued attributes such as ``class`` come back as lists.
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def __repr__(self) -> str:
        return f"SoupNode({self._tag.name!r})"


def parse_document(raw: bytes | str) -> MarkupNode:
    """Parse raw HTML into a queryable document.

    Raises:
        ParseError: If the parser rejects the markup.
    """
    try:
        soup = BeautifulSoup(raw, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Failed to parse markup: {exc}") from exc
    return SoupNode(soup)


def first_text(node: MarkupNode, selector: str) -> str:
    """Trimmed text of the first match, or ``""`` when nothing matches."""

    match = node.find_first(selector)
    if match is None:
        return ""
    return match.text().strip()


def first_attr(node: MarkupNode, selector: str, name: str, default: str = "") -> str:
    """Attribute of the first match, or ``default`` when nothing matches."""

    match = node.find_first(selector)
    if match is None:
        return default
    return match.attr(name, default)


__all__ = [
    "MarkupNode",
    "SoupNode",
    "first_attr",
    "first_text",
    "parse_document",
]
