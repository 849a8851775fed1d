"""Where: src/bcscout/errors.py
What: Exception hierarchy shared by fetchers, extractors and the CLI.
Why: Callers catch one base class while tests assert on precise failure kinds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bcscout.features.artist.domain.models import ArtistPage


class BcscoutError(Exception):
    """Base exception for all bcscout failures."""


class ValidationError(BcscoutError):
    """Raised when a required input is blank or malformed before any I/O."""


class TransportError(BcscoutError):
    """Raised when a page cannot be fetched."""


class ParseError(BcscoutError):
    """Raised when a fetched page cannot be parsed into a document."""


class ConfigError(BcscoutError):
    """Raised when the TOML configuration cannot be read or is invalid."""


class ArtistPageError(BcscoutError):
    """Raised when an artist page cannot be retrieved.

    The ``page`` attribute always holds an empty but valid ``ArtistPage`` so
    callers that ignore the failure still get a usable record.
    """

    page: ArtistPage

    def __init__(self, message: str, page: ArtistPage) -> None:
        super().__init__(message)
        self.page = page


class ArtistPageValidationError(ArtistPageError, ValidationError):
    """Raised when the artist URL is blank."""


class ArtistPageTransportError(ArtistPageError, TransportError):
    """Raised when the artist page cannot be fetched."""


class ArtistPageParseError(ArtistPageError, ParseError):
    """Raised when the artist page cannot be parsed."""


__all__ = [
    "ArtistPageError",
    "ArtistPageParseError",
    "ArtistPageTransportError",
    "ArtistPageValidationError",
    "BcscoutError",
    "ConfigError",
    "ParseError",
    "TransportError",
    "ValidationError",
]
