"""Summary: Search Bandcamp for an artist and rank the candidates.
Why: Orchestrate fetch, extraction and scoring behind one call.
"""

from __future__ import annotations

from typing import Final
from urllib.parse import quote_plus

from bcscout.config.settings import DEFAULT_SEARCH_URL
from bcscout.platform.http import PageFetcher
from bcscout.platform.logging import logger

from ..domain.models import Result
from .extractor import extract_result
from .scoring import score_result

RESULT_SELECTOR: Final[str] = "#pgBd > div.search > div.leftcol > div > ul > .band"


def build_search_url(search_url: str, name: str, location: str) -> str:
    """Return the query URL for ``name`` and ``location`` joined by a space."""

    return f"{search_url}?q={quote_plus(name + ' ' + location)}"


class SearchService:
    """Search the artist index and return ranked matches."""

    def __init__(self, fetcher: PageFetcher, search_url: str = DEFAULT_SEARCH_URL) -> None:
        self.fetcher: PageFetcher = fetcher
        self.search_url: str = search_url

    def search(self, name: str, location: str, max_score: int) -> list[Result]:
        """Return results scoring at most ``max_score``, best match first.

        Ties keep their page order.

        Raises:
            TransportError: If the search page cannot be fetched.
            ParseError: If the search page cannot be parsed.
        """
        url = build_search_url(self.search_url, name, location)
        logger.info(
            "Searching for %r",
            f"{name} {location}".strip(),
            extra={"scout_event": "search.start", "url": url},
        )
        document = self.fetcher.fetch(url)

        nodes = document.find_all(RESULT_SELECTOR)
        results: list[Result] = []
        for position, node in enumerate(nodes):
            result = score_result(name, extract_result(node, position))
            if result.score <= max_score:
                results.append(result)
            else:
                logger.debug("Dropping %r (score %d > %d)", result.name, result.score, max_score)

        results.sort(key=lambda result: result.score)
        logger.info(
            "Search complete",
            extra={"scout_event": "search.complete", "kept": len(results), "total": len(nodes)},
        )
        return results


__all__ = ["RESULT_SELECTOR", "SearchService", "build_search_url"]
