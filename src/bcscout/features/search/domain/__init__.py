"""Summary: Domain records for artist search.
Why: Share result types between extraction, scoring and display code.
"""

from __future__ import annotations

from .models import Result, ResultDraft

__all__ = ["Result", "ResultDraft"]
