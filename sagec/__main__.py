"""Package entry point for ``python -m sagec``."""

import sys

from sagec.cli import main

if __name__ == "__main__":
    sys.exit(main())
