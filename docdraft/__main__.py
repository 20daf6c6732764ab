"""
Entry point for running docdraft as a module.

Usage:
    python -m docdraft render draft.json --format html
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
