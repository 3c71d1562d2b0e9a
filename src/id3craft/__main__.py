"""Allow ``python -m id3craft``."""

import sys

from id3craft.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
