"""Where: src/bcscout/config/settings.py
What: Built-in defaults for endpoints, scoring thresholds and HTTP identity.
Why: Expose constants to feature layers without touching the filesystem.
"""

from __future__ import annotations

from typing import Final

# Bandcamp endpoints ----------------------------------------------------------

DEFAULT_SEARCH_URL: Final[str] = "https://bandcamp.com/search"

# Embedded players are addressed as ``EMBED_PREFIX`` followed by ``key=value/``
# path segments, e.g.
#   http://bandcamp.com/EmbeddedPlayer/album=905056075/size=small/bgcol=ffffff/
EMBED_PREFIX: Final[str] = "http://bandcamp.com/EmbeddedPlayer/"


# Search ranking --------------------------------------------------------------

# Results whose combined position + name distance exceeds this are dropped.
DEFAULT_MAX_SCORE: Final[int] = 10


# HTTP identity ---------------------------------------------------------------

APP_NAME: Final[str] = "bcscout"
APP_VERSION: Final[str] = "0.1.0"

# (connect, read) timeout in seconds handed to ``requests``.
DEFAULT_REQUEST_TIMEOUT: Final[float] = 15.0


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_MAX_SCORE",
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_SEARCH_URL",
    "EMBED_PREFIX",
]
