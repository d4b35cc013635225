"""
Moving Average Indicators - SMA and EMA series.

Pure math functions over a price series ordered oldest to latest. Each
series starts at the first index where a full period is available, so a
series of n prices yields n - period + 1 values.
"""

from collections.abc import Sequence

from .errors import InsufficientDataError, require_positive_int


def check_period_fits(period: int, values: Sequence[float]) -> None:
    """
    Check a period against the number of values.

    Raises:
        InvalidConfigurationError: If period is not a positive integer
        InsufficientDataError: If period is greater than the number of values
    """
    require_positive_int("period", period)
    if period > len(values):
        raise InsufficientDataError(
            period,
            len(values),
            f"Period ({period}) cannot be greater than the number of values ({len(values)})",
        )


def sma_series(prices: Sequence[float], period: int) -> list[float]:
    """
    Calculate the Simple Moving Average series.

    Uses a running window sum, so each value costs O(1).

    Args:
        prices: Prices (oldest first)
        period: Number of periods to average

    Returns:
        len(prices) - period + 1 SMA values
    """
    check_period_fits(period, prices)

    window_sum = sum(prices[:period])
    result = [window_sum / period]
    for i in range(period, len(prices)):
        window_sum += prices[i] - prices[i - period]
        result.append(window_sum / period)

    return result


def ema_series(prices: Sequence[float], period: int) -> list[float]:
    """
    Calculate the Exponential Moving Average series.

    Uses the standard multiplier 2 / (period + 1). The first value is
    seeded with the SMA of the first `period` prices.

    Args:
        prices: Prices (oldest first)
        period: Number of periods for the EMA

    Returns:
        len(prices) - period + 1 EMA values
    """
    check_period_fits(period, prices)

    multiplier = 2 / (period + 1)
    result = [sum(prices[:period]) / period]

    for price in prices[period:]:
        prev_ema = result[-1]
        result.append((price - prev_ema) * multiplier + prev_ema)

    return result
