"""Summary: Convert an artist-page document into an ``ArtistPage``.
Why: Keep selector knowledge for artist markup in a single place.
"""

from __future__ import annotations

from typing import Final

from bcscout.platform.markup import MarkupNode, first_attr

from ..domain.models import ArtistPage, Link

BIO_CONTAINER_SELECTOR: Final[str] = "#bio-container"
BIO_META_SELECTOR: Final[str] = ".signed-out-artists-bio-text meta"
BAND_LINK_SELECTOR: Final[str] = "#band-links li a"
EMBED_META_SELECTOR: Final[str] = 'meta[property="og:video"]'


def extract_artist_page(document: MarkupNode) -> ArtistPage:
    """Extract bio, links and embed URL from a parsed artist page.

    Bio and embed take the last match when the page repeats them; links keep
    document order without de-duplication.
    """
    page = ArtistPage()

    for container in document.find_all(BIO_CONTAINER_SELECTOR):
        page.bio = first_attr(container, BIO_META_SELECTOR, "content").strip()

    for anchor in document.find_all(BAND_LINK_SELECTOR):
        page.links.append(Link(uri=anchor.attr("href"), text=anchor.text().strip()))

    for meta in document.find_all(EMBED_META_SELECTOR):
        page.embed = meta.attr("content")

    return page


__all__ = ["extract_artist_page"]
