"""
Engine facade for simplefind.

SimpleFind wraps the pure search core with the pieces a host usually wants
around it: a default case policy, optional thread fan-out over files, timing
statistics and logging. It adds no matching logic of its own; every match
comes from ``simplefind.search.matchers``.

Example:
    >>> from simplefind import SimpleFind, SearchConfig, FileInput
    >>>
    >>> engine = SimpleFind(SearchConfig(case_sensitive=False))
    >>> result = engine.search("todo", [FileInput("a.py", "# TODO: fix")])
    >>> result.items[0].column
    3
    >>> result.stats.files_matched
    1
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

from ..search.matchers import compile_pattern, scan_file
from ..utils.error_handling import PatternCompileError
from ..utils.logging_config import get_logger
from .config import SearchConfig
from .types import FileInput, MatchResult, Query, SearchResult, SearchStats


class SimpleFind:
    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.cfg = config or SearchConfig()
        self.cfg.validate()
        self.logger = get_logger()

    def run(self, query: Query, files: Sequence[FileInput]) -> SearchResult:
        t0 = time.perf_counter()
        case_sensitive = (
            self.cfg.case_sensitive if query.case_sensitive is None else query.case_sensitive
        )
        self.logger.log_search_start(query.pattern, len(files), case_sensitive)

        try:
            matcher = compile_pattern(query.pattern, case_sensitive)
        except PatternCompileError as e:
            self.logger.log_compile_error(query.pattern, e.message)
            raise

        per_file: List[List[MatchResult]]
        if self.cfg.parallel and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.cfg.resolve_workers()) as ex:
                # map() yields in submission order, which keeps input file order
                per_file = list(ex.map(lambda f: list(scan_file(matcher, f)), files))
        else:
            per_file = [list(scan_file(matcher, f)) for f in files]
        items: List[MatchResult] = [m for chunk in per_file for m in chunk]

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        stats = SearchStats(
            files_scanned=len(files),
            # paths may repeat; count inputs, not names
            files_matched=sum(1 for chunk in per_file if chunk),
            items=len(items),
            elapsed_ms=elapsed_ms,
        )
        self.logger.log_search_complete(query.pattern, len(items), elapsed_ms)
        return SearchResult(items=items, stats=stats)

    # Convenience api
    def search(
        self,
        pattern: str,
        files: Iterable[FileInput],
        case_sensitive: Optional[bool] = None,
    ) -> SearchResult:
        q = Query(
            pattern=pattern,
            case_sensitive=case_sensitive,
            output=self.cfg.output_format,
        )
        return self.run(q, list(files))
