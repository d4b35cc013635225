"""
RSI tool.
"""

from market_indicators.indicators.rsi import rsi_series

from .base import ToolDefinition
from .moving_averages import SeriesPeriodInput


def _rsi_handler(params: SeriesPeriodInput) -> dict:
    return {"rsi": rsi_series(params.values, params.period)}


rsi_tool = ToolDefinition(
    name="calculate_rsi",
    description="Calculates the Relative Strength Index (RSI) for a given set of values and period.",
    input_model=SeriesPeriodInput,
    handler=_rsi_handler,
)
