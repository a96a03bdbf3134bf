"""Entry point for running as a module: python -m oneliners"""

import sys

from oneliners.cli import main

if __name__ == "__main__":
    sys.exit(main())
