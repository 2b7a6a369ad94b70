"""
Error types for simplefind.

The search core has exactly one failure mode: a pattern that the regex engine
refuses to compile. Everything else defined here belongs to the layers that
wrap the core (engine configuration and host payload validation).

Error Categories:
    - PATTERN: The search pattern could not be compiled
    - CONFIGURATION: Invalid engine configuration
    - VALIDATION: Malformed input handed over by a host adapter

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    ErrorInfo: Structured, serializable error description
    SearchError: Base exception class for simplefind errors
    PatternCompileError: Raised when a pattern is not a valid regex
    ConfigurationError: Raised by SearchConfig.validate()
    InputValidationError: Raised by host adapters on malformed payloads

Example:
    >>> from simplefind import search, FileInput
    >>> from simplefind.utils.error_handling import PatternCompileError
    >>>
    >>> try:
    ...     search("(unclosed", [FileInput("a.txt", "text")])
    ... except PatternCompileError as e:
    ...     print(e.message)
    Invalid regex pattern '(unclosed': missing ) at position 9
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    PATTERN = "pattern"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


@dataclass
class ErrorInfo:
    """Detailed error information."""

    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    exception_type: str | None = None
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["category"] = self.category.value
        data["severity"] = self.severity.value
        return data


class SearchError(Exception):
    """Base exception for search-related errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()

    def to_info(self) -> ErrorInfo:
        """Snapshot this error as an ErrorInfo record."""
        return ErrorInfo(
            category=self.category,
            severity=self.severity,
            message=self.message,
            exception_type=type(self).__name__,
            timestamp=self.timestamp,
            context=dict(self.context),
            suggestions=list(self.suggestions),
        )


class PatternCompileError(SearchError):
    """The search pattern is not a valid regular expression.

    ``message`` is meant to be shown to the end user as is. It always contains
    the offending pattern and the engine's description of the problem, plus
    the 0-based position when the engine reports one.
    """

    def __init__(
        self,
        pattern: str,
        detail: str,
        position: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        message = f"Invalid regex pattern '{pattern}': {detail}"
        if position is not None:
            message += f" at position {position}"

        merged_context: dict[str, Any] = {"pattern": pattern, "position": position}
        if context:
            merged_context.update(context)

        super().__init__(
            message,
            category=ErrorCategory.PATTERN,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Check for unbalanced parentheses or brackets",
                "Escape regex metacharacters to match them literally",
            ],
            context=merged_context,
        )
        self.pattern: str = pattern
        self.detail: str = detail
        self.position: int | None = position


class ConfigurationError(SearchError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Verify all required settings",
                "Use default configuration",
            ],
            context=context,
        )


class InputValidationError(SearchError):
    """A host adapter received a payload it cannot translate into FileInput records."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            suggestions=['Pass a list of {"path": str, "content": str} objects'],
            context=context,
        )
