"""
ATR tool.

Aligns high/low/close to a common length, like the volume profile tool,
before computing the Average True Range series.
"""

from pydantic import BaseModel, ConfigDict, Field

from market_indicators.indicators.atr import atr_series, candles_from_series

from .base import NonEmptySeries, PositiveInt, ToolDefinition, align_series


class ATRInput(BaseModel):
    """Arguments for calculate_atr."""

    model_config = ConfigDict(extra="forbid")

    high: NonEmptySeries = Field(
        description="Array of high prices, ordered oldest to latest. Must contain at least one value."
    )
    low: NonEmptySeries = Field(
        description="Array of low prices, ordered oldest to latest. Must contain at least one value."
    )
    close: NonEmptySeries = Field(
        description=(
            "Array of closing prices, ordered oldest to latest. Must contain at least one value."
        )
    )
    period: PositiveInt = Field(
        description="The time period for the ATR calculation (must be a positive integer)."
    )


def _atr_handler(params: ATRInput) -> dict:
    high, low, close = align_series("ATR", params.high, params.low, params.close)
    return {"atr": atr_series(candles_from_series(high, low, close), params.period)}


atr_tool = ToolDefinition(
    name="calculate_atr",
    description=(
        "Calculates the Average True Range (ATR) for given high, low, and close prices and period."
    ),
    input_model=ATRInput,
    handler=_atr_handler,
)
