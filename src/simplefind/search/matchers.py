"""
Pattern matching module for simplefind.

This module is the search core: it compiles a pattern under a case-sensitivity
policy and scans in-memory file contents line by line, producing one
MatchResult per match occurrence.

Functions:
    compile_pattern: Compile a pattern into an immutable Matcher
    split_lines: Split file content into lines without their terminators
    scan_file: Yield every match in a single file
    scan: Scan an ordered sequence of files with one compiled matcher
    search: Compile once, then scan every file

Matching semantics:
    - The engine is the third-party ``regex`` package in its default
      (``re``-compatible) mode, so scanning is leftmost-first: the first
      alternative that matches at the leftmost position wins.
    - Matches on a line never overlap. After an empty match the engine moves
      on by one character, so an empty pattern matches at every position,
      including the end of the line.
    - Lines are split on ``\\n`` only; a ``\\r`` directly before it is treated
      as part of the terminator. A trailing terminator does not start an
      extra empty line, and empty content has no lines at all. A ``\\r``
      ending the content with no ``\\n`` after it stays in the line.
    - Because each line is matched on its own, a match can never span a line
      boundary. Patterns that need multi-line context (``\\n`` in the pattern,
      ``(?s)`` tricks) simply do not match across lines.
    - Columns count code points, not bytes: "é" is one column.

Example:
    >>> from simplefind.search.matchers import search
    >>> from simplefind.core.types import FileInput
    >>>
    >>> files = [FileInput("a.txt", "foo\\nbar\\nfoo"), FileInput("b.txt", "xfoo")]
    >>> [(m.path, m.line, m.column) for m in search("foo", files)]
    [('a.txt', 1, 1), ('a.txt', 3, 1), ('b.txt', 1, 2)]

Nothing here performs I/O, logs, caches or keeps state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import regex as regex_mod

from ..core.types import FileInput, MatchResult
from ..utils.error_handling import PatternCompileError

Matcher = regex_mod.Pattern


def compile_pattern(pattern: str, case_sensitive: bool = True) -> Matcher:
    """
    Compile ``pattern`` into a Matcher.

    Args:
        pattern: Regular expression in the ``regex`` package's default dialect.
            The empty string is valid and matches everywhere.
        case_sensitive: When False the pattern is compiled with IGNORECASE;
            the pattern text itself is left untouched.

    Returns:
        An immutable compiled pattern, safe to share between threads.

    Raises:
        PatternCompileError: If the engine rejects the pattern.
    """
    flags = 0 if case_sensitive else regex_mod.IGNORECASE
    try:
        return regex_mod.compile(pattern, flags=flags)
    except regex_mod.error as e:
        detail = getattr(e, "msg", None) or str(e)
        raise PatternCompileError(pattern, detail, position=getattr(e, "pos", None)) from e


def split_lines(content: str) -> list[str]:
    """Split ``content`` on ``\\n``, dropping the terminators."""
    if not content:
        return []
    lines = content.split("\n")
    # every segment but the last was followed by "\n"
    terminated = len(lines) - 1
    # "a\nb\n" ends the last line rather than starting a new one
    if lines[-1] == "":
        lines.pop()
    return [
        line[:-1] if i < terminated and line.endswith("\r") else line
        for i, line in enumerate(lines)
    ]


def scan_file(matcher: Matcher, file: FileInput) -> Iterator[MatchResult]:
    """Yield matches in ``file`` ordered by line, then by column."""
    for line_no, line in enumerate(split_lines(file.content), start=1):
        for m in matcher.finditer(line):
            yield MatchResult(
                path=file.path,
                line=line_no,
                column=m.start() + 1,
                line_text=line,
            )


def scan(matcher: Matcher, files: Iterable[FileInput]) -> list[MatchResult]:
    """Scan ``files`` in order and concatenate their matches."""
    results: list[MatchResult] = []
    for f in files:
        results.extend(scan_file(matcher, f))
    return results


def search(
    pattern: str,
    files: Iterable[FileInput],
    case_sensitive: bool = True,
) -> list[MatchResult]:
    """
    Search ``files`` for ``pattern`` and return every match.

    The pattern is compiled exactly once. If it does not compile, the
    PatternCompileError propagates and no file is looked at.

    Args:
        pattern: Regular expression to search for
        files: Files to search, in the order results should be reported
        case_sensitive: Whether matching distinguishes letter case

    Returns:
        Matches ordered by input file, then line, then column.

    Raises:
        PatternCompileError: If ``pattern`` is not a valid regular expression.
    """
    matcher = compile_pattern(pattern, case_sensitive)
    return scan(matcher, files)
