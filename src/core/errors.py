"""
Formatting Errors — Value-level and directive-level failures

Two families of failure exist:
- Value errors: the value cannot be expressed in the requested format
  (NaN, ±Inf, loss of precision, width overflow). They are reported as an
  all-asterisk sentinel AND as a persisted ErrorKind on the formatted entity.
- Directive errors: the format directive itself is malformed (unknown verb,
  precision above the limit). They are reported only as inline diagnostic
  text and are never persisted.

The exceptions below are raised by the segment pipeline and always caught
by the interpreter; they never escape the public formatting API.
"""

from enum import Enum


# =============================================================================
# ERROR KINDS
# =============================================================================


class ErrorKind(str, Enum):
    """Persisted value error. The value is the human readable message."""

    LOSS_OF_PRECISION = "Loss of precision"
    DEGREE_OVERFLOW = "Degrees overflow width"
    HOUR_OVERFLOW = "Hours overflow width"
    POS_INF = "+Inf"
    NEG_INF = "-Inf"
    NAN = "NaN"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SexagesimalValueError(Exception):
    """
    The value cannot be rendered with the requested directive.

    Attributes:
        kind: ErrorKind to persist on the formatted entity
    """

    def __init__(self, kind: ErrorKind, detail: str = ""):
        self.kind = kind
        message = kind.value if not detail else f"{kind.value}: {detail}"
        super().__init__(message)


class LossOfPrecisionError(SexagesimalValueError):
    """Scaled magnitude exceeds the exact-integer range of a float64 mantissa."""

    def __init__(self, detail: str = ""):
        super().__init__(ErrorKind.LOSS_OF_PRECISION, detail)


class WidthOverflowError(SexagesimalValueError):
    """
    Integer digits of the first segment do not fit the fixed width.

    kind is DEGREE_OVERFLOW for angles, HOUR_OVERFLOW for hour-based values.
    """


class DirectiveError(Exception):
    """
    Malformed format directive (unknown verb, precision out of range).

    Attributes:
        diagnostic: inline text emitted in place of the formatted value
    """

    def __init__(self, diagnostic: str):
        self.diagnostic = diagnostic
        super().__init__(diagnostic)
