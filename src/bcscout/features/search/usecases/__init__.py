"""Summary: Search use cases: extraction, scoring and orchestration.
Why: Offer a stable import path for the CLI and library callers.
"""

from __future__ import annotations

from .extractor import extract_result, split_tags
from .scoring import name_distance, score_result
from .search import RESULT_SELECTOR, SearchService, build_search_url

__all__ = [
    "RESULT_SELECTOR",
    "SearchService",
    "build_search_url",
    "extract_result",
    "name_distance",
    "score_result",
    "split_tags",
]
