"""Engine configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class EngineConfig:
    """Runtime configuration for the CLI and batch checks.

    Attributes:
        log_level: Logging level name (e.g. "WARNING", "DEBUG")
        errors_as_invalid: Count requirement/dispatch errors as failed checks
            instead of aborting the run
    """

    log_level: str = "WARNING"
    errors_as_invalid: bool = False

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Create config from environment variables.

        Variables:
        1. RULEFORGE_LOG_LEVEL (default: WARNING)
        2. RULEFORGE_ERRORS_AS_INVALID (1/true/yes/on, default: off)
        """
        log_level = os.environ.get("RULEFORGE_LOG_LEVEL", "WARNING")
        errors_as_invalid = (
            os.environ.get("RULEFORGE_ERRORS_AS_INVALID", "").strip().lower() in _TRUTHY
        )
        return cls(log_level=log_level.upper(), errors_as_invalid=errors_as_invalid)

    @property
    def logging_level(self) -> int:
        """Numeric logging level for `log_level`.

        Raises:
            ValueError: For an unknown level name
        """
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level
