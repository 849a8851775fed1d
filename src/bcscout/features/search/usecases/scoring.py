"""Summary: Rank search results by page position and name similarity.
Why: Favour close name matches while respecting the site's own ordering.
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from ..domain.models import Result, ResultDraft


def _fold(value: str) -> str:
    """Lower-case each character independently, keeping the length intact.

    Characters whose lower-case form expands (``"İ"`` lowers to ``"i"`` plus a
    combining dot) keep only the leading code point.
    """
    return "".join(ch.lower()[0] for ch in value)


def name_distance(query_name: str, candidate_name: str) -> int:
    """Case-insensitive Levenshtein distance between two names.

    Insertions, deletions and substitutions each cost 1; transpositions are
    not recognised.
    """
    return Levenshtein.distance(query_name, candidate_name, processor=_fold)


def score_result(query_name: str, draft: ResultDraft) -> Result:
    """Return a ranked ``Result`` whose score is position plus name distance."""

    return Result(
        name=draft.name,
        location=draft.location,
        url=draft.url,
        genre=draft.genre,
        tags=draft.tags,
        art=draft.art,
        score=draft.position + name_distance(query_name, draft.name),
    )


__all__ = ["name_distance", "score_result"]
