"""
Volume Profile Indicator Functions.

Pure functions that turn aligned high/low/volume series into a
fixed-bin volume histogram with its Point of Control and Value Area.

Steps:
- get_price_domain: price range of the window and bin width
- build_bins: overlap test and full-precision volume accumulation
- get_poc: Point of Control (highest volume bin, lowest price on ties)
- get_value_area: bins ranked by volume until 70% of volume is covered

compute_volume_profile runs all four. Prices, volumes and percentages are
handled as Decimal throughout so bin-edge comparisons do not drift; floats
only appear in the returned VolumeProfileResult.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Protocol

from ..errors import InsufficientDataError, InvalidConfigurationError, require_positive_int
from .models import ProfileBin, VolumeProfileResult

# Minimum aligned bars for a meaningful profile
MIN_BARS = 20

DEFAULT_NUM_BINS = 10

# Share of total volume the value area must cover
VALUE_AREA_PERCENT = 70.0

# Significant digits for intermediate arithmetic
DECIMAL_PRECISION = 50

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)
_TWO = Decimal(2)


class BinLike(Protocol):
    """Protocol for bin-like objects ranked by volume."""

    price_low: float | Decimal
    price_high: float | Decimal
    price_mid: float | Decimal
    volume: int
    volume_percent: float | Decimal


@dataclass(frozen=True)
class PriceDomain:
    """Price range covered by a window of bars."""

    price_min: Decimal
    price_max: Decimal
    bin_width: Decimal


@dataclass(frozen=True)
class BinTally:
    """
    Full-precision state of one bin before conversion to ProfileBin.

    raw_volume is the unrounded accumulated volume; volume is its rounded
    integer, used for ranking.
    """

    price_low: Decimal
    price_high: Decimal
    price_mid: Decimal
    raw_volume: Decimal
    volume_percent: Decimal

    @property
    def volume(self) -> int:
        """Accumulated volume rounded to the nearest integer (halves up)."""
        return int(self.raw_volume.to_integral_value(rounding=ROUND_HALF_UP))

    def to_bin(self) -> ProfileBin:
        """Convert to the float-valued result bin."""
        return ProfileBin(
            price_low=float(self.price_low),
            price_high=float(self.price_high),
            price_mid=float(self.price_mid),
            volume=self.volume,
            volume_percent=float(self.volume_percent),
        )


def to_decimal(value: float | int | Decimal) -> Decimal:
    """
    Convert a number to Decimal via its shortest repr.

    Decimal(str(0.1)) is Decimal("0.1"), not the binary expansion of 0.1.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _as_decimals(values: Sequence[float | int | Decimal]) -> list[Decimal]:
    return [to_decimal(v) for v in values]


def get_price_domain(
    high: Sequence[float | Decimal],
    low: Sequence[float | Decimal],
    num_bins: int,
) -> PriceDomain:
    """
    Price range of the window and the resulting bin width.

    A flat window (max == min) gives a bin width of zero; every bin then
    collapses to the single price.

    Args:
        high: High prices (oldest first)
        low: Low prices (oldest first)
        num_bins: Number of bins (positive)

    Returns:
        PriceDomain with min(low), max(high) and (max - min) / num_bins
    """
    price_min = min(_as_decimals(low))
    price_max = max(_as_decimals(high))
    bin_width = (price_max - price_min) / Decimal(num_bins)
    return PriceDomain(price_min=price_min, price_max=price_max, bin_width=bin_width)


def build_bins(
    high: Sequence[float | Decimal],
    low: Sequence[float | Decimal],
    volume: Sequence[float | Decimal],
    domain: PriceDomain,
    num_bins: int,
) -> list[BinTally]:
    """
    Populate fixed-width bins with the volume of every overlapping bar.

    A bar overlaps a bin when low <= bin_high and high >= bin_low (both
    edges inclusive). The bar's whole volume is credited to each bin it
    overlaps, so a bar spanning three bins counts three times and bin
    volumes need not add up to the total.

    Args:
        high: High prices (oldest first)
        low: Low prices (oldest first)
        volume: Volumes (oldest first)
        domain: Result of get_price_domain for the same bars
        num_bins: Number of bins to build

    Returns:
        num_bins BinTally objects ordered by ascending price
    """
    highs = _as_decimals(high)
    lows = _as_decimals(low)
    volumes = _as_decimals(volume)

    total_volume = sum(volumes, _ZERO)

    tallies: list[BinTally] = []
    for i in range(num_bins):
        bin_low = domain.price_min + domain.bin_width * i
        bin_high = bin_low + domain.bin_width

        raw_volume = _ZERO
        for bar_high, bar_low, bar_volume in zip(highs, lows, volumes):
            if bar_low <= bin_high and bar_high >= bin_low:
                raw_volume += bar_volume

        if total_volume > 0:
            volume_percent = raw_volume / total_volume * _HUNDRED
        else:
            volume_percent = _ZERO

        tallies.append(
            BinTally(
                price_low=bin_low,
                price_high=bin_high,
                price_mid=(bin_low + bin_high) / _TWO,
                raw_volume=raw_volume,
                volume_percent=volume_percent,
            )
        )

    return tallies


def get_poc(bins: Sequence[BinLike]) -> float | None:
    """
    Point of Control - midpoint of the bin with the highest volume.

    A later bin replaces the current pick only when its volume is strictly
    greater, so ties go to the lower-priced bin.

    Args:
        bins: Bins ordered by ascending price

    Returns:
        price_mid of the winning bin, or None if there are no bins
    """
    if not bins:
        return None

    best = bins[0]
    for candidate in bins[1:]:
        if candidate.volume > best.volume:
            best = candidate

    return float(best.price_mid)


def get_value_area(
    bins: Sequence[BinLike],
    percentage: float = VALUE_AREA_PERCENT,
) -> tuple[float, float] | None:
    """
    Value Area - price span of the highest-volume bins covering a share of volume.

    Algorithm:
    1. Rank bins by volume, highest first (stable, so equal volumes keep
       ascending price order)
    2. Collect bins in that order, summing volume_percent
    3. Stop once the sum reaches percentage
    4. Span from the lowest collected price_low to the highest price_high

    If the target is never reached (e.g. zero total volume) every bin is
    collected.

    Args:
        bins: Bins ordered by ascending price
        percentage: Target share in percent (default 70)

    Returns:
        (value_area_low, value_area_high) or None if there are no bins
    """
    if not bins:
        return None

    target = to_decimal(percentage)
    ranked = sorted(bins, key=lambda b: b.volume, reverse=True)

    collected: list[BinLike] = []
    cumulative = _ZERO
    for candidate in ranked:
        collected.append(candidate)
        cumulative += to_decimal(candidate.volume_percent)
        if cumulative >= target:
            break

    va_low = min(to_decimal(b.price_low) for b in collected)
    va_high = max(to_decimal(b.price_high) for b in collected)
    return (float(va_low), float(va_high))


def compute_volume_profile(
    high: Sequence[float],
    low: Sequence[float],
    volume: Sequence[float],
    num_bins: int = DEFAULT_NUM_BINS,
    *,
    value_area_percent: float = VALUE_AREA_PERCENT,
) -> VolumeProfileResult:
    """
    Build a volume profile over a window of bars.

    The three series must already be aligned (same length, index i is the
    same bar in each). Nothing is logged or cached; every call recomputes
    from scratch.

    Args:
        high: High prices (oldest first)
        low: Low prices (oldest first)
        volume: Volumes (oldest first)
        num_bins: Number of price bins (default 10)
        value_area_percent: Share of volume the value area must cover

    Returns:
        VolumeProfileResult with bins, POC and Value Area

    Raises:
        ValueError: If the series lengths differ
        InsufficientDataError: If fewer than MIN_BARS bars are given
        InvalidConfigurationError: If num_bins is not a positive integer or
            value_area_percent is outside (0, 100]
    """
    if not len(high) == len(low) == len(volume):
        raise ValueError(
            "high, low and volume must have the same length "
            f"(got {len(high)}, {len(low)}, {len(volume)})"
        )

    if len(high) < MIN_BARS:
        raise InsufficientDataError(MIN_BARS, len(high))

    require_positive_int("numBins", num_bins)

    if not 0 < value_area_percent <= 100:
        raise InvalidConfigurationError(
            "valueAreaPercent", value_area_percent, "must be in (0, 100]"
        )

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION

        highs = _as_decimals(high)
        lows = _as_decimals(low)
        volumes = _as_decimals(volume)

        domain = get_price_domain(highs, lows, num_bins)
        tallies = build_bins(highs, lows, volumes, domain, num_bins)

        poc = get_poc(tallies)
        va = get_value_area(tallies, value_area_percent)

    return VolumeProfileResult(
        price_min=float(domain.price_min),
        price_max=float(domain.price_max),
        bin_width=float(domain.bin_width),
        bins=tuple(t.to_bin() for t in tallies),
        point_of_control=poc,
        value_area_low=va[0] if va else None,
        value_area_high=va[1] if va else None,
    )
