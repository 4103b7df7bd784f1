"""Allow running as ``python -m tileworld``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
