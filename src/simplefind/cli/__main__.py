"""
CLI entry point for simplefind.

This module serves as the entry point when simplefind.cli is executed as a module
with `python -m simplefind.cli`.
"""

from .main import main

if __name__ == "__main__":
    main()
