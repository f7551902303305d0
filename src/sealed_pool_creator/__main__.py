"""Main entry point for the Sealed Pool Creator."""

import sys

from sealed_pool_creator.cli import main

if __name__ == "__main__":
    sys.exit(main())
