"""Shared pytest fixtures: fixture pages and an in-process fake fetcher."""

from __future__ import annotations

from pathlib import Path

import pytest

from bcscout.errors import TransportError
from bcscout.platform.markup import MarkupNode, parse_document

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Return the text of an HTML fixture file."""

    return (FIXTURE_DIR / name).read_text(encoding="utf-8")


class FakeFetcher:
    """Serve a canned page for every URL and remember what was requested."""

    def __init__(self, html: str | None = None, error: Exception | None = None) -> None:
        self.html = html
        self.error = error
        self.requested: list[str] = []
        self.closed = False

    def fetch(self, url: str) -> MarkupNode:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        if self.html is None:
            raise TransportError(f"GET {url} failed: no page")
        return parse_document(self.html)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def search_page() -> str:
    return load_fixture("turboinferno-search-page.html")


@pytest.fixture
def artist_page() -> str:
    return load_fixture("turboinferno-artist-page.html")


@pytest.fixture
def empty_artist_page() -> str:
    return load_fixture("empty-artist-page.html")


@pytest.fixture
def fake_fetcher() -> type[FakeFetcher]:
    """Expose the fake fetcher class to test modules."""

    return FakeFetcher
