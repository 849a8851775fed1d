"""Summary: Fetch an artist page and extract its profile.
Why: Pair input validation and error wrapping with the pure extractor.
"""

from __future__ import annotations

from bcscout.errors import (
    ArtistPageParseError,
    ArtistPageTransportError,
    ArtistPageValidationError,
    ParseError,
    TransportError,
)
from bcscout.platform.http import PageFetcher
from bcscout.platform.logging import logger

from ..domain.models import ArtistPage
from .extractor import extract_artist_page


class ArtistPageService:
    """Retrieve artist profile information."""

    def __init__(self, fetcher: PageFetcher) -> None:
        self.fetcher: PageFetcher = fetcher

    def get_artist_page_info(self, artist_url: str) -> ArtistPage:
        """Fetch ``artist_url`` and return its profile.

        Every error raised here is an ``ArtistPageError`` whose ``page`` is an
        empty profile.

        Raises:
            ArtistPageValidationError: If the URL is blank; no request is made.
            ArtistPageTransportError: If the page cannot be fetched.
            ArtistPageParseError: If the page cannot be parsed.
        """
        if not artist_url.strip():
            raise ArtistPageValidationError("Artist URL cannot be blank", page=ArtistPage())

        logger.info("Fetching artist page", extra={"scout_event": "artist.fetch", "url": artist_url})
        try:
            document = self.fetcher.fetch(artist_url)
        except ParseError as exc:
            logger.warning(
                "Failed to read artist page: %s",
                exc,
                extra={"scout_event": "artist.error", "url": artist_url},
            )
            raise ArtistPageParseError(f"Failed to read artist page: {exc}", page=ArtistPage()) from exc
        except TransportError as exc:
            logger.warning(
                "Failed to fetch artist page: %s",
                exc,
                extra={"scout_event": "artist.error", "url": artist_url},
            )
            raise ArtistPageTransportError(
                f"Failed to fetch artist page: {exc}", page=ArtistPage()
            ) from exc

        page = extract_artist_page(document)
        logger.info(
            "Artist page has %d links",
            len(page.links),
            extra={"scout_event": "artist.complete", "url": artist_url},
        )
        return page


__all__ = ["ArtistPageService"]
