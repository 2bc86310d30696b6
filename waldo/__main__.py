"""
Waldo CLI entry point.

Usage:
    python -m waldo data.json --name port
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
