"""Command line argument handling package."""

from bcscout.ui.cli.args.options import ArtistArgs, CLIArgs, EmbedArgs, SearchArgs
from bcscout.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "ArtistArgs", "CLIArgs", "EmbedArgs", "SearchArgs"]
