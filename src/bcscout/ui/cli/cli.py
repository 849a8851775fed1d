"""Command line interface for bcscout."""

import sys
from typing import final

from bcscout.errors import BcscoutError
from bcscout.platform.logging import logger
from bcscout.ui.cli.args import ArgumentParser, ArtistArgs, CLIArgs, SearchArgs
from bcscout.ui.cli.commands import ArtistCommand, CommandExecutor, EmbedCommand, SearchCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Pick the command object for the parsed arguments."""

        if isinstance(args, SearchArgs):
            return SearchCommand(args)
        if isinstance(args, ArtistArgs):
            return ArtistCommand(args)
        return EmbedCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            CommandProcessor.build_command(args).execute()
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except BcscoutError as e:
            logger.error("%s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``process_command``.
    """
    CommandProcessor.process_command()
    return 0
