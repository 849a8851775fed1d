"""Summary: Artist profile feature package.
Why: Group profile records with the use cases that produce them.
"""

from __future__ import annotations

from .domain import ArtistPage, Link
from .usecases import ArtistPageService, extract_artist_page

__all__ = ["ArtistPage", "ArtistPageService", "Link", "extract_artist_page"]
