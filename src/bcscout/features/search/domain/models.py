# Where: bcscout.features.search.domain.models
# What: Draft and scored search result records.
# Why: Scoring produces a new record instead of mutating the extracted one.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ResultDraft:
    """A search hit as extracted from the page, before ranking."""

    name: str = ""
    location: str = ""
    url: str = ""
    genre: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    art: str = ""
    position: int = 0


@dataclass(frozen=True, slots=True)
class Result:
    """A ranked search hit; lower ``score`` is a better match."""

    name: str
    location: str
    url: str
    genre: str
    tags: tuple[str, ...]
    art: str
    score: int

    def to_dict(self) -> dict[str, Any]:
        """Return the interchange representation used for JSON output."""

        return {
            "name": self.name,
            "location": self.location,
            "url": self.url,
            "genre": self.genre,
            "tags": list(self.tags),
            "art_url": self.art,
            "match_score": self.score,
        }


__all__ = ["Result", "ResultDraft"]
