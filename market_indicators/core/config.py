"""
Indicator service configuration.

Centralizes defaults for the tool layer and CLI. The indicator functions
themselves take every parameter explicitly and never read settings.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_PREFIX = "INDICATORS_"


@dataclass
class IndicatorSettings:
    """Configuration for the indicator tools and their runtime.

    Environment variables (see from_env):
    - INDICATORS_DEFAULT_NUM_BINS: bins used when a caller omits numBins
    - INDICATORS_VALUE_AREA_PERCENT: share of volume the value area covers
    - INDICATORS_LOG_LEVEL: logging level name
    - INDICATORS_LOG_FILE: optional log file (stderr is always used)
    """

    # Volume Profile bins when the caller does not specify numBins
    default_num_bins: int = 10

    # Value Area target, in percent of total volume
    value_area_percent: float = 70.0

    log_level: str = "INFO"
    log_file: str | None = None

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.default_num_bins <= 0:
            raise ValueError("default_num_bins must be positive")
        if not 0 < self.value_area_percent <= 100:
            raise ValueError("value_area_percent must be between 0 and 100")
        self.log_level = self.log_level.upper()
        # getLevelName maps known names to ints and anything else to a string
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"log_level must be a logging level name, got: {self.log_level!r}")

    @classmethod
    def from_env(cls, env_path: str | None = None) -> "IndicatorSettings":
        """
        Create settings from environment variables.

        Loads a .env file first (env_path, or the default lookup) without
        overriding variables that are already set.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        defaults = cls()
        return cls(
            default_num_bins=_read_int("DEFAULT_NUM_BINS", defaults.default_num_bins),
            value_area_percent=_read_float("VALUE_AREA_PERCENT", defaults.value_area_percent),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level),
            log_file=os.getenv(f"{ENV_PREFIX}LOG_FILE") or None,
        )


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got: {raw!r}") from e


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got: {raw!r}") from e


# Default settings instance
DEFAULT_SETTINGS = IndicatorSettings()
