"""
Volume Profile tool.

Wraps compute_volume_profile for callers that speak JSON: validates the
input arrays, aligns them to a common length and serializes the result
with camelCase field names.
"""

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, StrictInt

from market_indicators.core.config import DEFAULT_SETTINGS, IndicatorSettings
from market_indicators.indicators.volume_profile import compute_volume_profile

from .base import ToolDefinition, align_series

TOOL_NAME = "calculate_volume_profile"

TOOL_DESCRIPTION = (
    "Calculates the Volume Profile indicator and returns volume distribution by price bins, "
    "Point of Control (POC), and Value Area High/Low (VAH/VAL)"
)


class VolumeProfileInput(BaseModel):
    """Arguments for calculate_volume_profile."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    high: list[FiniteFloat] = Field(description="Array of high prices, ordered oldest to latest")
    low: list[FiniteFloat] = Field(description="Array of low prices, ordered oldest to latest")
    volume: list[FiniteFloat] = Field(
        description="Array of volume values, ordered oldest to latest"
    )
    # Strict: no bool or string coercion. The range is left to the indicator
    # so its InvalidConfigurationError reaches the caller as-is
    num_bins: StrictInt | None = Field(
        default=None,
        alias="numBins",
        description="Optional number of price bins (default 10)",
    )


def make_volume_profile_tool(settings: IndicatorSettings = DEFAULT_SETTINGS) -> ToolDefinition:
    """
    Build the calculate_volume_profile tool.

    Args:
        settings: Supplies the default bin count and value area percent

    Returns:
        ToolDefinition ready for registration
    """

    def handler(params: VolumeProfileInput) -> dict:
        high, low, volume = align_series("VolumeProfile", params.high, params.low, params.volume)
        num_bins = params.num_bins if params.num_bins is not None else settings.default_num_bins

        result = compute_volume_profile(
            high,
            low,
            volume,
            num_bins,
            value_area_percent=settings.value_area_percent,
        )
        return result.to_dict()

    return ToolDefinition(
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        input_model=VolumeProfileInput,
        handler=handler,
    )


volume_profile_tool = make_volume_profile_tool()
