"""Command execution package for CLI."""

from bcscout.ui.cli.commands.executor import (
    ArtistCommand,
    CommandExecutor,
    EmbedCommand,
    SearchCommand,
)

__all__ = [
    "ArtistCommand",
    "CommandExecutor",
    "EmbedCommand",
    "SearchCommand",
]
