"""Summary: Embedded player URL helpers.
Why: Expose the pure URL transform without pulling in network code.
"""

from __future__ import annotations

from .transform import EMBED_PREFIX, parse_embed_attributes, transform_embed

__all__ = ["EMBED_PREFIX", "parse_embed_attributes", "transform_embed"]
