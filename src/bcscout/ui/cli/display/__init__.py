"""Display helpers for the CLI."""

from bcscout.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
