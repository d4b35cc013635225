"""
RSI Indicator - Relative Strength Index.

Measures the speed and magnitude of recent price changes
to evaluate overbought or oversold conditions.
"""

from collections.abc import Sequence

from .errors import InsufficientDataError, require_positive_int


def _rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    # No losses in the window: fully overbought, or neutral when flat
    if avg_loss == 0:
        return 100.0 if avg_gain > 0 else 50.0

    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))


def rsi_series(prices: Sequence[float], period: int) -> list[float]:
    """
    Calculate the RSI series with Wilder's smoothing.

    RSI = 100 - (100 / (1 + RS)), RS = average gain / average loss.
    The first averages are plain means of the first `period` changes;
    later ones use (prev_avg * (period - 1) + current) / period.

    Args:
        prices: Prices (oldest first), at least period + 1 of them
        period: Lookback period

    Returns:
        len(prices) - period RSI values in [0, 100]

    Raises:
        InvalidConfigurationError: If period is not a positive integer
        InsufficientDataError: If fewer than period + 1 prices are given
    """
    require_positive_int("period", period)
    if len(prices) < period + 1:
        raise InsufficientDataError(
            period + 1,
            len(prices),
            "RSI requires at least period + 1 values. "
            f"Period: {period}, Values provided: {len(prices)}",
        )

    changes = [prices[i] - prices[i - 1] for i in range(1, len(prices))]

    avg_gain = sum(c for c in changes[:period] if c > 0) / period
    avg_loss = sum(-c for c in changes[:period] if c < 0) / period
    result = [_rsi_from_averages(avg_gain, avg_loss)]

    for change in changes[period:]:
        gain = change if change > 0 else 0.0
        loss = -change if change < 0 else 0.0

        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period
        result.append(_rsi_from_averages(avg_gain, avg_loss))

    return result
