"""
Command-line interface implementation.

Exposes the click ``cli`` group and the ``main`` console-script entry point.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
