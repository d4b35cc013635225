"""
Volume Profile Data Models.

Result structures for Volume Profile analysis:
- ProfileBin: Volume attributed to one fixed-width price bucket
- VolumeProfileResult: Complete histogram with POC and Value Area

Both are immutable value objects, built once per computation.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProfileBin:
    """
    Volume data for a single price bin.

    Boundaries are half-open by convention: price_high of one bin equals
    price_low of the next.
    """

    price_low: float
    price_high: float
    price_mid: float
    volume: int  # Rounded once, after full-precision accumulation
    volume_percent: float  # Share of total volume, from the unrounded bin volume

    def contains(self, price: float) -> bool:
        """Check if a price falls inside this bin's inclusive range."""
        return self.price_low <= price <= self.price_high

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "priceLow": self.price_low,
            "priceHigh": self.price_high,
            "priceMid": self.price_mid,
            "volume": self.volume,
            "volumePercent": self.volume_percent,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileBin":
        """Create from dictionary."""
        return cls(
            price_low=float(data["priceLow"]),
            price_high=float(data["priceHigh"]),
            price_mid=float(data["priceMid"]),
            volume=int(data["volume"]),
            volume_percent=float(data["volumePercent"]),
        )


@dataclass(frozen=True)
class VolumeProfileResult:
    """
    Complete volume profile over one window of bars.

    Bins are ordered by ascending price. Because a bar's full volume is
    credited to every bin its range touches, bin volumes may sum to more
    than the window's total volume.
    """

    price_min: float
    price_max: float
    bin_width: float
    bins: tuple[ProfileBin, ...] = field(default_factory=tuple)
    point_of_control: float | None = None
    value_area_low: float | None = None
    value_area_high: float | None = None

    @property
    def bin_count(self) -> int:
        """Number of bins in the profile."""
        return len(self.bins)

    @property
    def value_area(self) -> tuple[float, float] | None:
        """(value_area_low, value_area_high) or None if there are no bins."""
        if self.value_area_low is None or self.value_area_high is None:
            return None
        return (self.value_area_low, self.value_area_high)

    @property
    def poc_bin(self) -> ProfileBin | None:
        """The bin whose midpoint is the Point of Control."""
        if self.point_of_control is None:
            return None
        for profile_bin in self.bins:
            if profile_bin.price_mid == self.point_of_control:
                return profile_bin
        return None

    def is_price_in_value_area(self, price: float) -> bool:
        """
        Check if a price is within the value area.

        Args:
            price: Price to check

        Returns:
            True if price is within [value_area_low, value_area_high]
        """
        va = self.value_area
        if va is None:
            return False

        va_low, va_high = va
        return va_low <= price <= va_high

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Field names are camelCase. pointOfControl is always present (None
        when absent); the value area keys are omitted when absent.
        """
        data = {
            "priceMin": self.price_min,
            "priceMax": self.price_max,
            "binWidth": self.bin_width,
            "bins": [b.to_dict() for b in self.bins],
            "pointOfControl": self.point_of_control,
        }
        if self.value_area_low is not None:
            data["valueAreaLow"] = self.value_area_low
        if self.value_area_high is not None:
            data["valueAreaHigh"] = self.value_area_high
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "VolumeProfileResult":
        """Create from dictionary."""
        poc = data.get("pointOfControl")
        va_low = data.get("valueAreaLow")
        va_high = data.get("valueAreaHigh")
        return cls(
            price_min=float(data["priceMin"]),
            price_max=float(data["priceMax"]),
            bin_width=float(data["binWidth"]),
            bins=tuple(ProfileBin.from_dict(b) for b in data["bins"]),
            point_of_control=float(poc) if poc is not None else None,
            value_area_low=float(va_low) if va_low is not None else None,
            value_area_high=float(va_high) if va_high is not None else None,
        )
