"""Command line argument options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, final

from bcscout.config import Config


@final
@dataclass(slots=True)
class SearchArgs:
    """Command line arguments for the ``search`` subcommand."""

    command: Literal["search"]
    name: str
    location: str
    max_score: int
    as_json: bool
    config: Config


@final
@dataclass(slots=True)
class ArtistArgs:
    """Command line arguments for the ``artist`` subcommand."""

    command: Literal["artist"]
    artist_url: str
    as_json: bool
    config: Config


@final
@dataclass(slots=True)
class EmbedArgs:
    """Command line arguments for the ``embed`` subcommand."""

    command: Literal["embed"]
    embed_url: str
    updates: dict[str, str] = field(default_factory=dict)


CLIArgs = SearchArgs | ArtistArgs | EmbedArgs


__all__ = ["ArtistArgs", "CLIArgs", "EmbedArgs", "SearchArgs"]
