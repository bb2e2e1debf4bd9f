"""Allows `python -m trampolinedig`."""
import sys

from trampolinedig.cli import main

if __name__ == "__main__":
    sys.exit(main())
