"""Summary: Domain records for artist pages.
Why: Keep profile types independent of the fetch machinery.
"""

from __future__ import annotations

from .models import ArtistPage, Link

__all__ = ["ArtistPage", "Link"]
