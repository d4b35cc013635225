"""
Core runtime support for the indicator tools.

Modules:
- config: Settings loaded from the environment
- logging_setup: Logging configuration for entry points
"""

from market_indicators.core.config import DEFAULT_SETTINGS, IndicatorSettings
from market_indicators.core.logging_setup import configure_logging

__all__ = [
    "DEFAULT_SETTINGS",
    "IndicatorSettings",
    "configure_logging",
]
