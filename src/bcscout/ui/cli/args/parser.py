"""Command line argument parser."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from bcscout.config import Config
from bcscout.config.paths import default_log_file
from bcscout.errors import ConfigError
from bcscout.platform.logging import logger, setup_logger
from bcscout.ui.cli.args.options import ArtistArgs, CLIArgs, EmbedArgs, SearchArgs


def parse_attribute(value: str) -> tuple[str, str]:
    """Parse a ``key=value`` embed attribute argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not a single ``key=value`` pair.
    """
    parts = value.split("=")
    if len(parts) != 2 or not parts[0]:
        raise argparse.ArgumentTypeError(f"expected key=value, got {value!r}")
    return parts[0], parts[1]


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="bcscout",
            description="bcscout - search Bandcamp artists, read artist pages and rewrite embed URLs.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Path to a TOML configuration file",
            metavar="CONFIG",
        )
        log_target = parser.add_mutually_exclusive_group()
        _ = log_target.add_argument(
            "--log-file",
            type=str,
            help="Write a debug log to this file",
            metavar="LOG_FILE",
        )
        _ = log_target.add_argument(
            "--log",
            action="store_true",
            help="Write a debug log to the default log file (logs/bcscout.log)",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed progress information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        search_parser = subparsers.add_parser(
            "search",
            help="Search for an artist and rank the matches",
        )
        _ = search_parser.add_argument("name", type=str, help="Artist name", metavar="NAME")
        _ = search_parser.add_argument(
            "location",
            type=str,
            nargs="?",
            default="",
            help="Optional location to narrow the search",
            metavar="LOCATION",
        )
        _ = search_parser.add_argument(
            "--max-score",
            type=int,
            help="Drop results scoring above this value (lower is better)",
            metavar="N",
        )
        _ = search_parser.add_argument(
            "--json",
            action="store_true",
            dest="as_json",
            help="Print results as JSON",
        )

        artist_parser = subparsers.add_parser(
            "artist",
            help="Show the bio, links and player of an artist page",
        )
        _ = artist_parser.add_argument("artist_url", type=str, help="Artist page URL", metavar="URL")
        _ = artist_parser.add_argument(
            "--json",
            action="store_true",
            dest="as_json",
            help="Print the profile as JSON",
        )

        embed_parser = subparsers.add_parser(
            "embed",
            help="Rewrite attributes of an embedded player URL",
        )
        _ = embed_parser.add_argument("embed_url", type=str, help="Embedded player URL", metavar="URL")
        _ = embed_parser.add_argument(
            "updates",
            type=parse_attribute,
            nargs="*",
            help="Attributes to set, e.g. size=large artwork=small",
            metavar="KEY=VALUE",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the configuration cannot be loaded.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        try:
            configuration = Config.load(Path(parsed_args.config) if parsed_args.config else None)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(1)

        if parsed_args.log_file:
            log_file: Path | None = Path(parsed_args.log_file)
        elif parsed_args.log:
            log_file = default_log_file()
        else:
            log_file = configuration.log_file
        _ = setup_logger(log_file=log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "search":
            max_score = parsed_args.max_score
            return SearchArgs(
                command="search",
                name=parsed_args.name,
                location=parsed_args.location,
                max_score=configuration.max_score if max_score is None else max_score,
                as_json=parsed_args.as_json,
                config=configuration,
            )

        if command == "artist":
            return ArtistArgs(
                command="artist",
                artist_url=parsed_args.artist_url,
                as_json=parsed_args.as_json,
                config=configuration,
            )

        if command == "embed":
            return EmbedArgs(
                command="embed",
                embed_url=parsed_args.embed_url,
                updates=dict(parsed_args.updates),
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)


__all__ = ["ArgumentParser", "parse_attribute"]
