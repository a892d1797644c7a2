"""
Segment Decomposer — scaled magnitude → sexagesimal segments

The magnitude (degrees or hours, unsigned) is first scaled to an exact
integer in units of the last segment times 10**precision:

    SECONDS:  i = |v| * 3600 * 10**p   → (first, minute, last)
    MINUTES:  i = |v| * 60 * 10**p     → (first, last)
    HOUR_DEG: i = |v| * 10**p          → (first,)   fraction implied by p

Segments are ordered most significant first. Only the last segment carries
the fractional digits.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.directive import SegmentConvention
from src.core.math.numerical_safeguards import POW10_INT, scale_significant


# Multiplier from hours/degrees to the unit of the last segment
_LAST_SEGMENT_SCALE = {
    SegmentConvention.SECONDS: 3600,
    SegmentConvention.MINUTES: 60,
    SegmentConvention.HOUR_DEG: 1,
}


@dataclass(frozen=True)
class Segments:
    """
    Integer segments of one value.

    For HOUR_DEG only `first` is set and it still includes the fractional
    digits (first == scaled integer). For MINUTES `minute` is None and `last`
    holds minutes * 10**p. For SECONDS all three are set and `last` holds
    seconds * 10**p.
    """

    convention: SegmentConvention
    first: int
    minute: Optional[int] = None
    last: Optional[int] = None

    def recompose(self, precision: int) -> int:
        """Rebuild the scaled integer the segments were split from."""
        p60 = 60 * POW10_INT[precision]
        if self.convention is SegmentConvention.HOUR_DEG:
            return self.first
        if self.convention is SegmentConvention.MINUTES:
            return self.first * p60 + self.last
        return (self.first * 60 + self.minute) * p60 + self.last


def scaled_magnitude(magnitude: float, convention: SegmentConvention, precision: int) -> int:
    """
    Scale an unsigned hour/degree magnitude for a convention.

    Raises:
        LossOfPrecisionError: if the scaled value is not fully significant
    """
    return scale_significant(magnitude * _LAST_SEGMENT_SCALE[convention], precision)


def split_scaled(i: int, convention: SegmentConvention, precision: int) -> Segments:
    """
    Split an already scaled integer into segments.

    Examples:
        >>> split_scaled(50256, SegmentConvention.SECONDS, 1)
        Segments(convention=<SegmentConvention.SECONDS: 'seconds'>, first=1, minute=23, last=456)
    """
    if convention is SegmentConvention.HOUR_DEG:
        return Segments(convention, first=i)

    p60 = 60 * POW10_INT[precision]
    last = i % p60
    i //= p60
    if convention is SegmentConvention.MINUTES:
        return Segments(convention, first=i, last=last)

    return Segments(convention, first=i // 60, minute=i % 60, last=last)


def decompose(magnitude: float, convention: SegmentConvention, precision: int) -> Segments:
    """
    Decompose an unsigned magnitude into segments.

    Args:
        magnitude: |value| in degrees or hours
        convention: which segment carries the decimal fraction
        precision: digits after the decimal separator, 0..15

    Returns:
        Segments, most significant first

    Raises:
        LossOfPrecisionError: if the requested precision cannot be honored
    """
    return split_scaled(scaled_magnitude(magnitude, convention, precision), convention, precision)
