"""Summary: Convert one search-result node into a ``ResultDraft``.
Why: Keep selector knowledge for result markup in a single place.
"""

from __future__ import annotations

from typing import Final

from bcscout.platform.markup import MarkupNode, first_attr, first_text

from ..domain.models import ResultDraft

HEADING_SELECTOR: Final[str] = ".heading"
SUBHEAD_SELECTOR: Final[str] = ".subhead"
ITEM_URL_SELECTOR: Final[str] = ".itemurl"
GENRE_SELECTOR: Final[str] = ".genre"
TAGS_SELECTOR: Final[str] = ".tags"
ART_SELECTOR: Final[str] = ".artcont .art img"

GENRE_LABEL: Final[str] = "genre:"
TAGS_LABEL: Final[str] = "tags:"


def split_tags(raw: str) -> tuple[str, ...]:
    """Split a comma separated tag field, trimming each element.

    An empty field yields ``("",)``, mirroring a plain string split.
    """
    return tuple(tag.strip() for tag in raw.split(","))


def extract_result(node: MarkupNode, position: int) -> ResultDraft:
    """Build a draft from a result node found at ``position`` in the page.

    Every field is optional; missing sub-nodes degrade to empty strings.
    """
    # Only the label is removed; whitespace following it is kept.
    genre = first_text(node, GENRE_SELECTOR).removeprefix(GENRE_LABEL)
    tags = first_text(node, TAGS_SELECTOR).removeprefix(TAGS_LABEL)

    return ResultDraft(
        name=first_text(node, HEADING_SELECTOR),
        location=first_text(node, SUBHEAD_SELECTOR),
        url=first_text(node, ITEM_URL_SELECTOR),
        genre=genre,
        tags=split_tags(tags),
        art=first_attr(node, ART_SELECTOR, "src").strip(),
        position=position,
    )


__all__ = ["extract_result", "split_tags"]
