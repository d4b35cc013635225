"""
Volume Profile Module.

Provides bar-based Volume Profile analysis:
- Data models (ProfileBin, VolumeProfileResult)
- Step functions (price domain, bin accumulation, POC, Value Area)
- compute_volume_profile, which runs all steps over one window
"""

from .indicator import (
    DEFAULT_NUM_BINS,
    MIN_BARS,
    VALUE_AREA_PERCENT,
    BinTally,
    PriceDomain,
    build_bins,
    compute_volume_profile,
    get_poc,
    get_price_domain,
    get_value_area,
)
from .models import ProfileBin, VolumeProfileResult

__all__ = [
    # Data models
    "ProfileBin",
    "VolumeProfileResult",
    # Intermediate values
    "PriceDomain",
    "BinTally",
    # Constants
    "DEFAULT_NUM_BINS",
    "MIN_BARS",
    "VALUE_AREA_PERCENT",
    # Indicator functions
    "compute_volume_profile",
    "get_price_domain",
    "build_bins",
    "get_poc",
    "get_value_area",
]
