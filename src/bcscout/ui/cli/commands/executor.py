"""src/bcscout/ui/cli/commands/executor.py
What: Command objects wiring CLI arguments to the feature services.
Why: Reuse fetcher construction and presentation helpers across commands.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bcscout.config import Config
from bcscout.features.artist import ArtistPageService
from bcscout.features.embed import transform_embed
from bcscout.features.search import SearchService
from bcscout.platform.http import RequestsPageFetcher, format_user_agent
from bcscout.ui.cli.args.options import ArtistArgs, EmbedArgs, SearchArgs
from bcscout.ui.cli.display.result import ResultDisplay


def build_fetcher(config: Config) -> RequestsPageFetcher:
    """Create the HTTP fetcher described by ``config``."""

    return RequestsPageFetcher(
        timeout=config.request_timeout,
        user_agent=format_user_agent(config.app_name, config.app_version, config.contact),
    )


class CommandExecutor(ABC):
    """Base class for command execution."""

    result_display: ResultDisplay

    def __init__(self) -> None:
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> None:
        """Execute the command.

        Raises:
            BcscoutError: If the underlying operation fails.
        """


class SearchCommand(CommandExecutor):
    """Run an artist search and print the ranked matches."""

    def __init__(self, args: SearchArgs) -> None:
        super().__init__()
        self.args = args
        self.fetcher = build_fetcher(args.config)
        self.service = SearchService(self.fetcher, search_url=args.config.search_url)

    def execute(self) -> None:
        try:
            results = self.service.search(self.args.name, self.args.location, self.args.max_score)
        finally:
            self.fetcher.close()
        self.result_display.show_results(results, as_json=self.args.as_json)


class ArtistCommand(CommandExecutor):
    """Fetch an artist page and print its profile."""

    def __init__(self, args: ArtistArgs) -> None:
        super().__init__()
        self.args = args
        self.fetcher = build_fetcher(args.config)
        self.service = ArtistPageService(self.fetcher)

    def execute(self) -> None:
        try:
            page = self.service.get_artist_page_info(self.args.artist_url)
        finally:
            self.fetcher.close()
        self.result_display.show_artist(page, as_json=self.args.as_json)


class EmbedCommand(CommandExecutor):
    """Rewrite an embed URL; no network access."""

    def __init__(self, args: EmbedArgs) -> None:
        super().__init__()
        self.args = args

    def execute(self) -> None:
        self.result_display.show_embed(transform_embed(self.args.embed_url, self.args.updates))


__all__ = [
    "ArtistCommand",
    "CommandExecutor",
    "EmbedCommand",
    "SearchCommand",
    "build_fetcher",
]
