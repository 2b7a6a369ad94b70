"""
Configuration module for simplefind.

SearchConfig holds the settings of the SimpleFind engine facade. The pure
``search()`` function takes no configuration at all; everything here is about
how the facade runs it (default case policy, optional thread fan-out) and how
hosts present the results.

Example:
    >>> from simplefind.core.config import SearchConfig
    >>> from simplefind.core.types import OutputFormat
    >>>
    >>> config = SearchConfig(
    ...     case_sensitive=False,
    ...     parallel=True,
    ...     workers=4,
    ...     output_format=OutputFormat.JSON,
    ... )
    >>> config.validate()
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..utils.error_handling import ConfigurationError
from .types import OutputFormat


@dataclass(slots=True)
class SearchConfig:
    # Behavior
    case_sensitive: bool = True
    output_format: OutputFormat = OutputFormat.TEXT

    # Performance
    parallel: bool = False
    workers: int = 0  # 0 = auto(cpu_count)

    def resolve_workers(self) -> int:
        return self.workers or min(32, (os.cpu_count() or 4))

    def validate(self) -> None:
        """Validate configuration and raise ConfigurationError on issues.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        if self.workers < 0:
            raise ConfigurationError(
                "Worker count must be non-negative (0 = auto-detect CPU count)",
                context={"field": "workers", "value": self.workers},
            )

        if not isinstance(self.output_format, OutputFormat):
            raise ConfigurationError(
                f"Unknown output format: {self.output_format!r}",
                context={"field": "output_format", "value": self.output_format},
            )
