# Where: bcscout.features.artist.domain.models
# What: Artist profile records extracted from an artist page.
# Why: Give the CLI and library callers a plain value object to work with.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Link:
    """An external link listed on the artist page."""

    uri: str = ""
    text: str = ""


@dataclass(slots=True)
class ArtistPage:
    """Profile information for one artist."""

    bio: str = ""
    links: list[Link] = field(default_factory=list)
    embed: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "bio": self.bio,
            "links": [{"uri": link.uri, "text": link.text} for link in self.links],
            "embed": self.embed,
        }


__all__ = ["ArtistPage", "Link"]
