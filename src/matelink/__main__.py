"""Allow ``python -m matelink``."""

import sys

from matelink.cli import main

if __name__ == "__main__":
    sys.exit(main())
