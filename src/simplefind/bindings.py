"""
JSON host binding for simplefind.

Hosts that talk to the search core across a process or language boundary
exchange plain JSON: a list of ``{"path", "content"}`` objects in, a list of
``{"path", "line", "column", "line_text"}`` objects out. This module only
translates between that shape and FileInput/MatchResult; all matching is done
by ``simplefind.search.matchers.search``.

Example:
    >>> from simplefind.bindings import search_json
    >>> search_json("b", '[{"path": "x", "content": "abc"}]', True)
    [{'path': 'x', 'line': 1, 'column': 2, 'line_text': 'abc'}]
"""

from __future__ import annotations

from typing import Any, Union

import orjson

from .core.types import FileInput
from .search.matchers import search
from .utils.error_handling import InputValidationError
from .utils.formatter import match_to_dict

FilesPayload = Union[str, bytes, list]


def parse_files(payload: FilesPayload) -> list[FileInput]:
    """
    Decode a host payload into FileInput records.

    Raises:
        InputValidationError: If the payload is not valid JSON or not a list of
            objects with string ``path`` and ``content`` fields.
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = orjson.loads(payload)
        except orjson.JSONDecodeError as e:
            raise InputValidationError(f"Files payload is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise InputValidationError(
            f"Files payload must be a list, got {type(payload).__name__}",
            context={"type": type(payload).__name__},
        )

    files: list[FileInput] = []
    for i, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise InputValidationError(
                f"File entry {i} must be an object, got {type(entry).__name__}",
                context={"index": i},
            )
        for key in ("path", "content"):
            if key not in entry:
                raise InputValidationError(
                    f"File entry {i} is missing '{key}'", context={"index": i, "field": key}
                )
            if not isinstance(entry[key], str):
                raise InputValidationError(
                    f"File entry {i} field '{key}' must be a string",
                    context={"index": i, "field": key},
                )
        files.append(FileInput(path=entry["path"], content=entry["content"]))
    return files


def search_json(
    pattern: str, files: FilesPayload, case_sensitive: bool = True
) -> list[dict[str, Any]]:
    """Search a JSON files payload and return matches as plain dicts.

    PatternCompileError from the core propagates unchanged.
    """
    return [match_to_dict(m) for m in search(pattern, parse_files(files), case_sensitive)]


def search_json_bytes(pattern: str, files: FilesPayload, case_sensitive: bool = True) -> bytes:
    """Like search_json, but returns the matches serialized with orjson."""
    return orjson.dumps(search_json(pattern, files, case_sensitive))
