"""bcscout: search Bandcamp artists, read artist pages and rewrite embed URLs."""

from __future__ import annotations

from bcscout.features.artist import ArtistPage, ArtistPageService, Link, extract_artist_page
from bcscout.features.embed import EMBED_PREFIX, parse_embed_attributes, transform_embed
from bcscout.features.search import Result, ResultDraft, SearchService, extract_result, score_result
from bcscout.platform.http import PageFetcher, RequestsPageFetcher

__version__ = "0.1.0"

__all__ = [
    "EMBED_PREFIX",
    "ArtistPage",
    "ArtistPageService",
    "Link",
    "PageFetcher",
    "RequestsPageFetcher",
    "Result",
    "ResultDraft",
    "SearchService",
    "extract_artist_page",
    "extract_result",
    "parse_embed_attributes",
    "score_result",
    "transform_embed",
]
