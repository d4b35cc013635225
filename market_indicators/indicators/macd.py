"""
MACD Indicator - Moving Average Convergence Divergence.

Trend-following momentum indicator showing the relationship
between two exponential moving averages of price.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .errors import InsufficientDataError, InvalidConfigurationError, require_positive_int
from .moving_averages import ema_series


@dataclass(frozen=True)
class MACDResult:
    """MACD components at one point in time."""

    macd_line: float  # Fast EMA - Slow EMA
    signal_line: float  # EMA of MACD line
    histogram: float  # MACD line - Signal line

    @property
    def is_bullish(self) -> bool:
        """True if MACD is above signal line."""
        return self.histogram > 0

    @property
    def is_bearish(self) -> bool:
        """True if MACD is below signal line."""
        return self.histogram < 0


def macd_series(
    prices: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> list[MACDResult]:
    """
    Calculate the MACD series.

    MACD Line = Fast EMA - Slow EMA
    Signal Line = EMA of MACD Line
    Histogram = MACD Line - Signal Line

    Args:
        prices: Prices (oldest first)
        fast: Fast EMA period (default 12)
        slow: Slow EMA period (default 26)
        signal: Signal line EMA period (default 9)

    Returns:
        len(prices) - slow - signal + 2 MACDResult values, one per point
        where all three components exist

    Raises:
        InvalidConfigurationError: If a period is not a positive integer or
            fast is not less than slow
        InsufficientDataError: If fewer than slow + signal - 1 prices are given
    """
    require_positive_int("fastPeriod", fast)
    require_positive_int("slowPeriod", slow)
    require_positive_int("signalPeriod", signal)
    if fast >= slow:
        raise InvalidConfigurationError(
            "fastPeriod", fast, f"must be less than slowPeriod ({slow})"
        )

    min_required = slow + signal - 1
    if len(prices) < min_required:
        raise InsufficientDataError(
            min_required,
            len(prices),
            "MACD requires at least slowPeriod + signalPeriod - 1 values "
            f"({min_required}). Provided: {len(prices)}",
        )

    fast_ema = ema_series(prices, fast)
    slow_ema = ema_series(prices, slow)

    # Fast EMA starts slow - fast points earlier
    aligned_fast_ema = fast_ema[slow - fast :]
    macd_line = [f - s for f, s in zip(aligned_fast_ema, slow_ema)]

    signal_line = ema_series(macd_line, signal)
    aligned_macd = macd_line[signal - 1 :]

    return [
        MACDResult(macd_line=m, signal_line=s, histogram=m - s)
        for m, s in zip(aligned_macd, signal_line)
    ]
