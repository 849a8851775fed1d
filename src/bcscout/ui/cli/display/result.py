"""src/bcscout/ui/cli/display/result.py
What: Render search results, artist profiles and embed URLs.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bcscout.features.artist import ArtistPage
from bcscout.features.search import Result


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize result display."""
        self.console = Console()

    def show_results(self, results: Sequence[Result], as_json: bool = False) -> None:
        """Display ranked search results.

        Args:
            results: Results sorted best match first.
            as_json: Print the interchange JSON instead of a table.
        """
        if as_json:
            payload = [result.to_dict() for result in results]
            self.console.print_json(json.dumps(payload, ensure_ascii=False))
            return

        if not results:
            self.console.print("[yellow]No matching artists found.[/yellow]")
            return

        table = Table(title="Search Results")
        table.add_column("Score", justify="right", style="cyan")
        table.add_column("Name", style="bold")
        table.add_column("Location")
        table.add_column("Genre")
        table.add_column("Tags")
        table.add_column("URL", style="blue")
        for result in results:
            table.add_row(
                str(result.score),
                escape(result.name),
                escape(result.location),
                escape(result.genre.strip()),
                escape(", ".join(tag for tag in result.tags if tag)),
                escape(result.url),
            )
        self.console.print(table)

    def show_artist(self, page: ArtistPage, as_json: bool = False) -> None:
        """Display an artist profile."""

        if as_json:
            self.console.print_json(json.dumps(page.to_dict(), ensure_ascii=False))
            return

        self.console.print("\n[bold]Bio:[/bold]")
        if page.bio:
            self.console.print(page.bio, markup=False)
        else:
            self.console.print("[dim](none)[/dim]")

        self.console.print("\n[bold]Links:[/bold]")
        if not page.links:
            self.console.print("[dim](none)[/dim]")
        for link in page.links:
            self.console.print(f"  • {escape(link.text)}: [blue]{escape(link.uri)}[/blue]")

        self.console.print("\n[bold]Embed:[/bold]")
        if page.embed:
            self.console.print(page.embed, markup=False, soft_wrap=True)
        else:
            self.console.print("[dim](none)[/dim]")

    def show_embed(self, embed_url: str) -> None:
        """Print a rewritten embed URL on its own line."""

        self.console.print(embed_url, markup=False, soft_wrap=True)


__all__ = ["ResultDisplay"]
