"""
MACD tool.

Returns the MACD line, signal line and histogram as three aligned arrays.
"""

from pydantic import BaseModel, ConfigDict, Field

from market_indicators.indicators.macd import macd_series

from .base import NonEmptySeries, PositiveInt, ToolDefinition


class MACDInput(BaseModel):
    """Arguments for calculate_macd."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    values: NonEmptySeries = Field(
        description=(
            "Array of numbers (e.g., closing prices), ordered oldest to latest. "
            "Must contain at least one value."
        )
    )
    fast_period: PositiveInt = Field(
        alias="fastPeriod",
        description="The time period for the fast EMA (must be a positive integer).",
    )
    slow_period: PositiveInt = Field(
        alias="slowPeriod",
        description="The time period for the slow EMA (must be a positive integer).",
    )
    signal_period: PositiveInt = Field(
        alias="signalPeriod",
        description="The time period for the signal line EMA (must be a positive integer).",
    )


def _macd_handler(params: MACDInput) -> dict:
    results = macd_series(
        params.values,
        fast=params.fast_period,
        slow=params.slow_period,
        signal=params.signal_period,
    )
    return {
        "macd": [r.macd_line for r in results],
        "signal": [r.signal_line for r in results],
        "histogram": [r.histogram for r in results],
    }


macd_tool = ToolDefinition(
    name="calculate_macd",
    description=(
        "Calculates the Moving Average Convergence Divergence (MACD) components "
        "(MACD line, signal line, histogram)."
    ),
    input_model=MACDInput,
    handler=_macd_handler,
)
