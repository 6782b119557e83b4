"""
Entry point for module execution (``python -m lombokify``).

This module delegates execution to the CLI handler in ``lombokify.cli.__main__``.
"""

import sys
from lombokify.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
