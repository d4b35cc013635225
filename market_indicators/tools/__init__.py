"""
Indicator tools exposed to callers.

Each tool validates JSON-style arguments, runs an indicator and returns a
serializable result.
"""

from .atr import ATRInput, atr_tool
from .base import ToolDefinition, ToolInputError, UnknownToolError, align_series
from .macd import MACDInput, macd_tool
from .moving_averages import SeriesPeriodInput, ema_tool, sma_tool
from .registry import ToolRegistry, build_default_registry
from .rsi import rsi_tool
from .volume_profile import VolumeProfileInput, make_volume_profile_tool, volume_profile_tool

__all__ = [
    "ToolDefinition",
    "ToolInputError",
    "UnknownToolError",
    "align_series",
    "ToolRegistry",
    "build_default_registry",
    "SeriesPeriodInput",
    "sma_tool",
    "ema_tool",
    "rsi_tool",
    "MACDInput",
    "macd_tool",
    "ATRInput",
    "atr_tool",
    "VolumeProfileInput",
    "make_volume_profile_tool",
    "volume_profile_tool",
]
