"""
Utility modules: error types, logging configuration and output formatting.
"""

from .error_handling import (
    ConfigurationError,
    ErrorCategory,
    ErrorInfo,
    ErrorSeverity,
    InputValidationError,
    PatternCompileError,
    SearchError,
)
from .formatter import format_result, to_json_bytes
from .logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

__all__ = [
    # Error handling
    "ConfigurationError",
    "ErrorCategory",
    "ErrorInfo",
    "ErrorSeverity",
    "InputValidationError",
    "PatternCompileError",
    "SearchError",
    # Formatting
    "format_result",
    "to_json_bytes",
    # Logging
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
]
