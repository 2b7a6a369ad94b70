"""
Core functionality for the simplefind package.

This module contains the engine facade, its configuration and the data types
shared by every layer (FileInput, MatchResult and the facade's result types).
"""

from .api import SimpleFind
from .config import SearchConfig
from .types import FileInput, MatchResult, OutputFormat, Query, SearchResult, SearchStats

__all__ = [
    # Main classes
    "SimpleFind",
    "SearchConfig",
    # Data types
    "FileInput",
    "MatchResult",
    "OutputFormat",
    "Query",
    "SearchResult",
    "SearchStats",
]
