"""Summary: Read and rewrite the ``key=value`` attributes of an embed URL.
Why: Let callers resize or restyle a player without hand-editing URLs.
"""

from __future__ import annotations

from collections.abc import Mapping

from bcscout.config.settings import EMBED_PREFIX


def parse_embed_attributes(embed_url: str) -> dict[str, str]:
    """Collect ``key=value`` path segments from an embed URL.

    The whole URL is split on ``/``; segments with zero or several ``=`` are
    ignored, so the scheme, host and player path never yield attributes.
    """
    attrs: dict[str, str] = {}
    for segment in embed_url.split("/"):
        parts = segment.split("=")
        if len(parts) == 2:
            attrs[parts[0]] = parts[1]
    return attrs


def transform_embed(original_embed: str, updated_attrs: Mapping[str, str]) -> str:
    """Return ``original_embed`` with ``updated_attrs`` merged into its attributes.

    Existing keys are overwritten and new keys appended. The result is
    rebuilt as ``EMBED_PREFIX + "/"`` followed by ``key=value/`` segments, so
    the prefix appears exactly once whatever host the input used.
    """
    attrs = parse_embed_attributes(original_embed)
    attrs.update(updated_attrs)

    segments = "".join(f"{key}={value}/" for key, value in attrs.items())
    return f"{EMBED_PREFIX}/{segments}"


__all__ = ["EMBED_PREFIX", "parse_embed_attributes", "transform_embed"]
