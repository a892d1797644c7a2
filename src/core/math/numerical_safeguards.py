"""
Numerical Safeguards — Significant digits of float64 magnitudes

The formatting engine never prints a digit the underlying float64 cannot
vouch for. A magnitude x at precision p is scaled to the integer

    i = floor(x * 10**p + 0.5)

and is trusted only while i <= 2**52, the exact-integer range of the float64
mantissa. Beyond that some requested digits would be fabricated.

CRITICAL INVARIANTS:
1. precision is limited to 0..15 (largest power of ten exact in float64)
2. scale_significant never returns an untrustworthy integer (it raises)
3. NaN/Inf are classified before scaling and never reach the segment math
4. All operations are deterministic and side-effect free
"""

import math
from typing import Final, Optional

from src.core.errors import ErrorKind, LossOfPrecisionError

# =============================================================================
# PRECISION LIMITS
# =============================================================================

# Largest precision whose power of ten is exactly representable as float64
MAX_PRECISION: Final[int] = 15

# 52 mantissa bits in float64
EXACT_INTEGER_LIMIT: Final[int] = 1 << 52

# Exact powers of ten for precision 0..MAX_PRECISION
POW10_FLOAT: Final[tuple[float, ...]] = tuple(float(10**p) for p in range(MAX_PRECISION + 1))
POW10_INT: Final[tuple[int, ...]] = tuple(10**p for p in range(MAX_PRECISION + 1))


# =============================================================================
# SIGNIFICANT DIGITS
# =============================================================================


def scale_significant(x: float, precision: int) -> int:
    """
    Scaled integer of a non-negative magnitude at a precision.

    Round half up is done by adding one half unit and truncating.

    Args:
        x: Non-negative magnitude
        precision: Digits after the decimal point, 0..MAX_PRECISION

    Returns:
        int(x * 10**precision + 0.5)

    Raises:
        LossOfPrecisionError: if the scaled value exceeds 2**52 (or is NaN)
        ValueError: if precision is out of range

    Examples:
        >>> scale_significant(1.5, 0)
        2
        >>> scale_significant(0.089876, 6)
        89876
        >>> scale_significant(135 * 3600.0, 10)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        LossOfPrecisionError: Loss of precision
    """
    if not 0 <= precision <= MAX_PRECISION:
        raise ValueError(f"precision must be in 0..{MAX_PRECISION}, got {precision}")

    xs = x * POW10_FLOAT[precision] + 0.5
    # written as a negated <= so that NaN also fails
    if not xs <= EXACT_INTEGER_LIMIT:
        raise LossOfPrecisionError(f"{x!r} at precision {precision}")
    return int(xs)


def is_significant(x: float, precision: int) -> bool:
    """
    True when all digits of x at precision are significant.

    Examples:
        >>> is_significant(135 * 3600.0, 9)
        True
        >>> is_significant(135 * 3600.0, 10)
        False
    """
    try:
        scale_significant(x, precision)
    except LossOfPrecisionError:
        return False
    return True


# =============================================================================
# NaN/Inf CLASSIFICATION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    True if value is finite (not NaN, not Inf).
    """
    return math.isfinite(value)


def classify_float(value: float) -> Optional[ErrorKind]:
    """
    Classify a non-finite value.

    Returns:
        ErrorKind.NAN, ErrorKind.POS_INF or ErrorKind.NEG_INF,
        None for finite values

    Examples:
        >>> classify_float(float("nan"))
        <ErrorKind.NAN: 'NaN'>
        >>> classify_float(1.0) is None
        True
    """
    if math.isnan(value):
        return ErrorKind.NAN
    if math.isinf(value):
        return ErrorKind.POS_INF if value > 0 else ErrorKind.NEG_INF
    return None


# =============================================================================
# MODULO
# =============================================================================


def pmod(x: float, y: float) -> float:
    """
    Positive modulo: result in [0, y) for positive y.

    Examples:
        >>> pmod(-1.0, 24.0)
        23.0
        >>> pmod(36.5, 24.0)
        12.5
    """
    r = math.fmod(x, y)
    if r < 0:
        r += y
    return r
