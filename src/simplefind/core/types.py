from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class FileInput:
    """One logical file to search. ``path`` is opaque and echoed back verbatim."""

    path: str
    content: str


@dataclass(frozen=True, slots=True)
class MatchResult:
    """One match occurrence. ``line`` and ``column`` are 1-based."""

    path: str
    line: int
    column: int
    line_text: str


@dataclass(slots=True)
class SearchStats:
    files_scanned: int = 0
    files_matched: int = 0
    items: int = 0
    elapsed_ms: float = 0.0


@dataclass(slots=True)
class SearchResult:
    items: List[MatchResult] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)


@dataclass(slots=True)
class Query:
    pattern: str
    # None = use SearchConfig.case_sensitive
    case_sensitive: Optional[bool] = None
    output: OutputFormat = OutputFormat.TEXT
