"""HTTP infrastructure package.

Provides the page fetcher protocol and its ``requests`` implementation.
"""

from __future__ import annotations

from .fetcher import PageFetcher, RequestsPageFetcher
from .user_agent import format_user_agent

__all__ = [
    "PageFetcher",
    "RequestsPageFetcher",
    "format_user_agent",
]
