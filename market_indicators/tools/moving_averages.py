"""
SMA and EMA tools.

Both take one price series and a period and return the moving average
series, which is shorter than the input by period - 1 values.
"""

from pydantic import BaseModel, ConfigDict, Field

from market_indicators.indicators.moving_averages import ema_series, sma_series

from .base import NonEmptySeries, PositiveInt, ToolDefinition


class SeriesPeriodInput(BaseModel):
    """Arguments for tools over one value series and a period."""

    model_config = ConfigDict(extra="forbid")

    values: NonEmptySeries = Field(
        description=(
            "Array of numbers (e.g., closing prices), ordered oldest to latest. "
            "Must contain at least one value."
        )
    )
    period: PositiveInt = Field(
        description="The time period for the calculation (must be a positive integer)."
    )


def _sma_handler(params: SeriesPeriodInput) -> dict:
    return {"sma": sma_series(params.values, params.period)}


def _ema_handler(params: SeriesPeriodInput) -> dict:
    return {"ema": ema_series(params.values, params.period)}


sma_tool = ToolDefinition(
    name="calculate_sma",
    description="Calculates the Simple Moving Average (SMA) for a given set of values and period.",
    input_model=SeriesPeriodInput,
    handler=_sma_handler,
)

ema_tool = ToolDefinition(
    name="calculate_ema",
    description=(
        "Calculates the Exponential Moving Average (EMA) for a given set of values and period."
    ),
    input_model=SeriesPeriodInput,
    handler=_ema_handler,
)
