"""
Domain models and value objects.

Contains value types (Angle, HourAngle, RA, Time), format directives,
symbol tables and formatting error kinds.
"""

from src.core.domain.directive import (
    VERB_TABLE,
    FormatDirective,
    SegmentConvention,
    UnitPlacement,
    ValueKind,
    parse_format_spec,
)
from src.core.errors import (
    DirectiveError,
    ErrorKind,
    LossOfPrecisionError,
    SexagesimalValueError,
    WidthOverflowError,
)
from src.core.domain.symbols import (
    DEFAULT_SYMBOLS,
    Symbols,
    UnitSymbols,
    combine_unit,
    insert_unit,
    strip_unit,
)
from src.core.domain.units import (
    RA,
    Angle,
    HourAngle,
    Time,
    dms_to_deg,
    from_sexa,
    hms_to_hour,
)

__all__ = [
    # Directive
    "VERB_TABLE",
    "FormatDirective",
    "SegmentConvention",
    "UnitPlacement",
    "ValueKind",
    "parse_format_spec",
    # Errors
    "DirectiveError",
    "ErrorKind",
    "LossOfPrecisionError",
    "SexagesimalValueError",
    "WidthOverflowError",
    # Symbols
    "DEFAULT_SYMBOLS",
    "Symbols",
    "UnitSymbols",
    "combine_unit",
    "insert_unit",
    "strip_unit",
    # Units
    "Angle",
    "HourAngle",
    "RA",
    "Time",
    "dms_to_deg",
    "from_sexa",
    "hms_to_hour",
]
