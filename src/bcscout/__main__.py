"""Main entry point for bcscout."""

import sys

from bcscout.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
