"""Markup document adapters."""

from __future__ import annotations

from .document import MarkupNode, SoupNode, first_attr, first_text, parse_document

__all__ = [
    "MarkupNode",
    "SoupNode",
    "first_attr",
    "first_text",
    "parse_document",
]
