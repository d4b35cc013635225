"""
Technical Indicators Module - Pure math functions for market analysis.

All functions are stateless and operate on aligned price/volume series.
"""

from .atr import Candle, atr_series, candles_from_series, true_range
from .errors import (
    IndicatorError,
    InsufficientDataError,
    InvalidConfigurationError,
    require_positive_int,
)
from .macd import MACDResult, macd_series
from .moving_averages import ema_series, sma_series
from .rsi import rsi_series
from .volume_profile import (
    ProfileBin,
    VolumeProfileResult,
    compute_volume_profile,
    get_poc,
    get_value_area,
)

__all__ = [
    # Errors
    "IndicatorError",
    "InsufficientDataError",
    "InvalidConfigurationError",
    "require_positive_int",
    # Moving Averages
    "sma_series",
    "ema_series",
    # RSI
    "rsi_series",
    # MACD
    "macd_series",
    "MACDResult",
    # ATR
    "Candle",
    "candles_from_series",
    "true_range",
    "atr_series",
    # Volume Profile
    "ProfileBin",
    "VolumeProfileResult",
    "compute_volume_profile",
    "get_poc",
    "get_value_area",
]
