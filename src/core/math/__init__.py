"""
Core math modules

Significant-digit primitives with float64 exactness guarantees.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    EXACT_INTEGER_LIMIT,
    MAX_PRECISION,
    POW10_FLOAT,
    POW10_INT,
    # Significant digits
    is_significant,
    scale_significant,
    # NaN/Inf classification
    classify_float,
    is_valid_float,
    # Utilities
    pmod,
)

__all__ = [
    "EXACT_INTEGER_LIMIT",
    "MAX_PRECISION",
    "POW10_FLOAT",
    "POW10_INT",
    "is_significant",
    "scale_significant",
    "classify_float",
    "is_valid_float",
    "pmod",
]
