"""Entry point for ``python -m playmeta``."""

import sys

from playmeta.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
