import os
from dataclasses import dataclass
from typing import Optional

from .logging import LOG_LEVEL_ENV, parse_level
from .registry import DEFAULT_IMPLEMENTATION, IMPLEMENTATIONS


class ConfigError(ValueError):
    """Raised when the environment holds an unusable setting."""


@dataclass
class Settings:
    implementation: str = DEFAULT_IMPLEMENTATION
    # None keeps each logger's own default (INFO for the CLI, WARNING otherwise)
    log_level: Optional[str] = None

    @property
    def log_level_value(self) -> Optional[int]:
        return parse_level(self.log_level)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from KEYSTORE_* environment variables."""
        implementation = os.getenv("KEYSTORE_IMPLEMENTATION", DEFAULT_IMPLEMENTATION)
        if implementation not in IMPLEMENTATIONS:
            raise ConfigError(
                f"KEYSTORE_IMPLEMENTATION={implementation!r} is not one of {sorted(IMPLEMENTATIONS)}"
            )

        log_level = os.getenv(LOG_LEVEL_ENV)
        if log_level is not None:
            if parse_level(log_level) is None:
                raise ConfigError(f"{LOG_LEVEL_ENV}={log_level!r} is not a logging level name")
            log_level = log_level.strip().upper()
        return cls(implementation=implementation, log_level=log_level)
