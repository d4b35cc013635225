"""
ATR Indicator - Average True Range.

Measures market volatility by calculating the average of true ranges
over a specified period. Used for position sizing and stop-loss placement.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .errors import InsufficientDataError, require_positive_int


class CandleLike(Protocol):
    """Protocol for candle-like objects with HLC data."""

    high: float
    low: float
    close: float


@dataclass(frozen=True)
class Candle:
    """Minimal candle structure for ATR calculation."""

    high: float
    low: float
    close: float


def candles_from_series(
    high: Sequence[float], low: Sequence[float], close: Sequence[float]
) -> list[Candle]:
    """Zip parallel high/low/close series (already aligned) into candles."""
    return [Candle(high=h, low=l, close=c) for h, l, c in zip(high, low, close)]


def true_range(current: CandleLike, previous_close: float | None = None) -> float:
    """
    Calculate True Range for a single candle.

    True Range is the greatest of:
    1. Current High - Current Low
    2. |Current High - Previous Close|
    3. |Current Low - Previous Close|

    Args:
        current: Current candle with high, low, close
        previous_close: Previous candle's close price (None for first candle)

    Returns:
        True Range value
    """
    high_low = current.high - current.low

    if previous_close is None:
        return high_low

    return max(high_low, abs(current.high - previous_close), abs(current.low - previous_close))


def atr_series(candles: Sequence[CandleLike], period: int = 14) -> list[float]:
    """
    Calculate the ATR series.

    The first value is the mean of the first `period` true ranges; later
    values use Wilder's smoothing, as RSI does.

    Args:
        candles: Candles with high, low, close (oldest first)
        period: Lookback period (default 14)

    Returns:
        len(candles) - period + 1 ATR values

    Raises:
        InvalidConfigurationError: If period is not a positive integer
        InsufficientDataError: If period is greater than the number of candles
    """
    require_positive_int("period", period)
    if period > len(candles):
        raise InsufficientDataError(
            period,
            len(candles),
            f"Period ({period}) cannot be greater than the number of values ({len(candles)})",
        )

    # First candle has no previous close
    true_ranges = [true_range(candles[0])]
    for i in range(1, len(candles)):
        true_ranges.append(true_range(candles[i], candles[i - 1].close))

    current_atr = sum(true_ranges[:period]) / period
    result = [current_atr]
    for tr in true_ranges[period:]:
        current_atr = (current_atr * (period - 1) + tr) / period
        result.append(current_atr)

    return result
