"""CLI entrypoint for progress reporting."""

import sys

from tick_eta.cli import main

if __name__ == "__main__":
    sys.exit(main())
