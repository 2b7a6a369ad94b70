"""
Pattern compilation and line scanning.

The pure search core. See ``simplefind.search.matchers`` for the matching
semantics (leftmost-first, non-overlapping, per-line, code-point columns).
"""

from .matchers import Matcher, compile_pattern, scan, scan_file, search, split_lines

__all__ = [
    "Matcher",
    "compile_pattern",
    "scan",
    "scan_file",
    "search",
    "split_lines",
]
