"""
Units — Angle and time value types

The formatting engine works on plain degrees (angles) or plain hours
(hour angles, right ascensions, times). The value types in this module hold
the canonical representation and provide those conversions:

- Angle: radians, formatted as degrees
- HourAngle: radians, formatted as hours
- RA: radians wrapped to [0, 2π), formatted as hours in [0, 24)
- Time: seconds, formatted as hours

Sexagesimal construction (from_sexa) treats the sign character and the
component signs independently: '-' negates the total, while negative
components simply contribute arithmetically.
"""

import math
from typing import Final

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import pmod

# =============================================================================
# CONSTANTS
# =============================================================================

SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 3600
SECONDS_PER_DAY: Final[int] = 86400
TWO_PI: Final[float] = 2 * math.pi


# =============================================================================
# SEXAGESIMAL CONVERSION
# =============================================================================


def from_sexa(neg: str, d: int, m: int, s: float) -> float:
    """
    Combine sexagesimal components into a decimal value.

    Args:
        neg: '-' for a negative result, anything else for positive
        d: degrees or hours
        m: minutes
        s: seconds

    Returns:
        Decimal degrees or hours

    Examples:
        >>> from_sexa("-", 20, 30, 0)
        -20.5
        >>> from_sexa(" ", -20, 30, 0)
        -19.5
        >>> from_sexa("-", 22, -90, 0)
        -20.5
    """
    value = (float((d * 60 + m) * 60) + s) / SECONDS_PER_HOUR
    if neg == "-":
        return -value
    return value


def dms_to_deg(neg: str, d: int, m: int, s: float) -> float:
    """Degrees, minutes, seconds to decimal degrees (see from_sexa)"""
    return from_sexa(neg, d, m, s)


def hms_to_hour(neg: str, h: int, m: int, s: float) -> float:
    """Hours, minutes, seconds to decimal hours (see from_sexa)"""
    return from_sexa(neg, h, m, s)


# =============================================================================
# VALUE TYPES
# =============================================================================


class Angle(BaseModel):
    """Angle in radians"""

    rad: float = Field(0.0, description="Radians")

    model_config = {"frozen": True}

    @classmethod
    def from_deg(cls, deg: float) -> "Angle":
        return cls(rad=deg * math.pi / 180)

    @classmethod
    def from_dms(cls, neg: str, d: int, m: int, s: float) -> "Angle":
        return cls.from_deg(from_sexa(neg, d, m, s))

    def deg(self) -> float:
        return self.rad * 180 / math.pi


class HourAngle(BaseModel):
    """Hour angle in radians"""

    rad: float = Field(0.0, description="Radians")

    model_config = {"frozen": True}

    @classmethod
    def from_hour(cls, hour: float) -> "HourAngle":
        return cls(rad=hour * math.pi / 12)

    @classmethod
    def from_hms(cls, neg: str, h: int, m: int, s: float) -> "HourAngle":
        return cls.from_hour(from_sexa(neg, h, m, s))

    def hour(self) -> float:
        return self.rad * 12 / math.pi


class RA(BaseModel):
    """
    Right ascension in radians.

    Constructors wrap to [0, 2π). A value assigned directly out of range is
    wrapped again by the formatter.
    """

    rad: float = Field(0.0, description="Radians")

    model_config = {"frozen": True}

    @classmethod
    def from_hour(cls, hour: float) -> "RA":
        return cls(rad=pmod(hour * math.pi / 12, TWO_PI))

    @classmethod
    def from_hms(cls, h: int, m: int, s: float) -> "RA":
        # right ascension has no sign
        return cls.from_hour(from_sexa(" ", h, m, s))

    def hour(self) -> float:
        return self.rad * 12 / math.pi


class Time(BaseModel):
    """Duration or relative time in seconds"""

    seconds: float = Field(0.0, description="Seconds")

    model_config = {"frozen": True}

    @classmethod
    def from_hms(cls, neg: str, h: int, m: int, s: float) -> "Time":
        return cls(seconds=from_sexa(neg, h, m, s) * SECONDS_PER_HOUR)

    def sec(self) -> float:
        return self.seconds

    def min(self) -> float:
        return self.seconds / SECONDS_PER_MINUTE

    def hour(self) -> float:
        return self.seconds / SECONDS_PER_HOUR

    def day(self) -> float:
        return self.seconds / SECONDS_PER_DAY

    @property
    def rad(self) -> float:
        """Radians, read like the rad field of the angle types"""
        return self.seconds * math.pi / 43200
