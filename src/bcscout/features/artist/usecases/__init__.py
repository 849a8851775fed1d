"""Summary: Artist page use cases.
Why: Offer a stable import path for the CLI and library callers.
"""

from __future__ import annotations

from .artist_page import ArtistPageService
from .extractor import extract_artist_page

__all__ = ["ArtistPageService", "extract_artist_page"]
