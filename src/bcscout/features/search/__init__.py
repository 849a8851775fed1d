"""Summary: Artist search feature package.
Why: Group result records with the use cases that produce them.
"""

from __future__ import annotations

from .domain import Result, ResultDraft
from .usecases import SearchService, extract_result, name_distance, score_result

__all__ = [
    "Result",
    "ResultDraft",
    "SearchService",
    "extract_result",
    "name_distance",
    "score_result",
]
