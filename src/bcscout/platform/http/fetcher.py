"""Where: src/bcscout/platform/http/fetcher.py
What: Fetch-and-parse collaborator turning a URL into a markup document.
Why: Decouple network concerns from extraction so tests can inject fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import requests

from bcscout.config.settings import APP_NAME, APP_VERSION, DEFAULT_REQUEST_TIMEOUT
from bcscout.errors import TransportError
from bcscout.platform.logging import logger
from bcscout.platform.markup import MarkupNode, parse_document

from .user_agent import format_user_agent


@runtime_checkable
class PageFetcher(Protocol):
    """Protocol for collaborators able to fetch and parse an HTML page."""

    def fetch(self, url: str) -> MarkupNode:
        """Return the parsed document at ``url``.

        Raises:
            TransportError: If the page cannot be retrieved.
            ParseError: If the body cannot be parsed.
        """
        ...


class RequestsPageFetcher:
    """Perform a single GET with ``requests`` and parse the body.

    The session is owned by the caller when supplied; no retries are made.
    A session created here is closed by ``close()`` or on leaving a ``with``
    block.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        user_agent: str | None = None,
    ) -> None:
        self._owns_session: bool = session is None
        self.session: requests.Session = session if session is not None else requests.Session()
        self.timeout: float = timeout
        self.user_agent: str = user_agent or format_user_agent(APP_NAME, APP_VERSION, "")

    def fetch(self, url: str) -> MarkupNode:
        headers = {
            "Accept": "text/html",
            "User-Agent": self.user_agent,
        }
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            raise TransportError(f"GET {url} failed: {exc}") from exc

        return parse_document(response.content)

    def close(self) -> None:
        """Release the underlying session unless it was supplied by the caller."""

        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "RequestsPageFetcher":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


__all__ = [
    "PageFetcher",
    "RequestsPageFetcher",
]
