"""
Output formatting module for simplefind.

Renders a SearchResult as grep-style text or as JSON. Used by the command line;
library callers normally consume MatchResult objects directly.

Supported Output Formats:
    - TEXT: ``path:line:column:line_text``, one match per line
    - JSON: ``{"matches": [...], "stats": {...}}`` serialized with orjson

Example:
    >>> from simplefind.utils.formatter import format_result
    >>> from simplefind.core.types import OutputFormat
    >>>
    >>> print(format_result(result, OutputFormat.TEXT))
    notes.txt:3:5:the fox jumps
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

import orjson

from ..core.types import MatchResult, OutputFormat, SearchResult, SearchStats


def match_to_dict(m: MatchResult) -> dict[str, Any]:
    return {
        "path": m.path,
        "line": m.line,
        "column": m.column,
        "line_text": m.line_text,
    }


def to_json_bytes(result: SearchResult) -> bytes:
    """
    Serialize search results to indented JSON bytes using orjson.

    Args:
        result: SearchResult object containing matches and statistics

    Returns:
        JSON-encoded bytes with a ``matches`` list and a ``stats`` object
    """
    payload = {
        "matches": [match_to_dict(m) for m in result.items],
        "stats": asdict(result.stats),
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_stats(stats: SearchStats) -> str:
    return (
        f"# files_scanned={stats.files_scanned} files_matched={stats.files_matched} "
        f"items={stats.items} elapsed_ms={stats.elapsed_ms:.2f}"
    )


def format_text(result: SearchResult) -> str:
    """Format matches as ``path:line:column:line_text`` lines."""
    return "\n".join(f"{m.path}:{m.line}:{m.column}:{m.line_text}" for m in result.items)


def format_result(result: SearchResult, fmt: OutputFormat) -> str:
    """Format search results according to the specified output format."""
    if fmt == OutputFormat.JSON:
        return to_json_bytes(result).decode("utf-8")
    return format_text(result)
