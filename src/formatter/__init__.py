"""Sexagesimal formatter — decomposition, rendering and directive interpretation.

- decomposer: scaled magnitude → segments
- renderer: segments → text
- state_machine: directive validation, value classification, sentinel output
- api: per-kind functions and formattable wrappers
"""

from .api import (
    FmtAngle,
    FmtHourAngle,
    FmtRA,
    FmtTime,
    format_angle,
    format_hour_angle,
    format_ra,
    format_time,
    format_value,
)
from .decomposer import Segments, decompose, split_scaled
from .renderer import SegmentRenderer
from .state_machine import (
    DEFAULT_INTERPRETER,
    FormatInterpreter,
    FormatOutcome,
    FormatState,
    InterpreterConfig,
)

__all__ = [
    "FmtAngle",
    "FmtHourAngle",
    "FmtRA",
    "FmtTime",
    "format_angle",
    "format_hour_angle",
    "format_ra",
    "format_time",
    "format_value",
    "Segments",
    "decompose",
    "split_scaled",
    "SegmentRenderer",
    "DEFAULT_INTERPRETER",
    "FormatInterpreter",
    "FormatOutcome",
    "FormatState",
    "InterpreterConfig",
]
