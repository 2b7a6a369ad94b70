"""
simplefind: in-memory multi-file regular expression search.

Given a pattern, an ordered collection of (path, content) pairs and a
case-sensitivity flag, simplefind returns the location of every match (path,
1-based line, 1-based column) together with the full text of the matching line.
It is a search primitive for editors, CLIs and indexers that already own file
discovery and I/O; it never touches the file system itself.

Main Entry Points:
    search: Pure function. Compile once, scan every file, return matches
    compile_pattern: Compile a pattern under a case policy
    scan: Scan files with an already compiled matcher
    SimpleFind: Engine facade adding statistics, logging and optional thread fan-out

Data Types:
    FileInput: One file to search (path, content)
    MatchResult: One match (path, line, column, line_text)
    SearchResult / SearchStats: Facade results with timing and counters

Errors:
    PatternCompileError: The only failure the search core can raise

Example Usage:
    >>> from simplefind import FileInput, search
    >>> files = [FileInput("greeting.txt", "Hello, world!")]
    >>> search("world", files)
    [MatchResult(path='greeting.txt', line=1, column=8, line_text='Hello, world!')]

    Case-insensitive search:
        >>> search("WORLD", files, case_sensitive=False)[0].column
        8

    CLI usage:
        $ simplefind find "def \\w+" app.py util.py
        $ simplefind find -i todo notes.txt --format json
"""

from .core.api import SimpleFind
from .core.config import SearchConfig
from .core.types import FileInput, MatchResult, OutputFormat, Query, SearchResult, SearchStats
from .search.matchers import Matcher, compile_pattern, scan, scan_file, search, split_lines
from .utils.error_handling import (
    ConfigurationError,
    InputValidationError,
    PatternCompileError,
    SearchError,
)
from .utils.logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "In-memory multi-file regular expression search"

# Public API
__all__ = [
    # Core functions
    "search",
    "compile_pattern",
    "scan",
    "scan_file",
    "split_lines",
    "Matcher",
    # Engine
    "SimpleFind",
    "SearchConfig",
    # Data types
    "FileInput",
    "MatchResult",
    "OutputFormat",
    "Query",
    "SearchResult",
    "SearchStats",
    # Logging and configuration
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "SearchError",
    "PatternCompileError",
    "ConfigurationError",
    "InputValidationError",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
