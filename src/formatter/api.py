"""
Formatter API — sexagesimal formatting of angles, hour angles, RA and time

Two entry points per value kind:

- format_angle / format_hour_angle / format_ra / format_time return a
  FormatOutcome (text + error) for one call.
- FmtAngle / FmtHourAngle / FmtRA / FmtTime wrap a value for use with
  format() and f-strings. The last value error is kept in `err` until the
  next formatting call.

    >>> a = FmtAngle(Angle.from_dms(" ", 1, 23, 45.6))
    >>> f"{a:.1s}"
    '1°23′45.6″'
    >>> f"{a:2s}", a.err
    ('  1°23′46″', None)
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from src.core.domain.directive import FormatDirective, ValueKind
from src.core.errors import ErrorKind
from src.core.domain.symbols import Symbols
from src.core.domain.units import RA, Angle, HourAngle, Time
from src.core.math.numerical_safeguards import is_valid_float, pmod
from src.formatter.state_machine import DEFAULT_INTERPRETER, FormatOutcome

Directive = Union[FormatDirective, str]


# =============================================================================
# FUNCTIONS
# =============================================================================


def format_value(
    hr_deg: float,
    directive: Directive = "",
    kind: ValueKind = ValueKind.ANGLE,
    symbols: Optional[Symbols] = None,
) -> FormatOutcome:
    """
    Format a plain value in the engine's working unit.

    Args:
        hr_deg: degrees for ANGLE, hours for the other kinds
        directive: format spec string or FormatDirective
        kind: value kind
        symbols: symbol table override

    Returns:
        FormatOutcome
    """
    if kind is ValueKind.RA and is_valid_float(hr_deg):
        hr_deg = pmod(hr_deg, 24)
    return DEFAULT_INTERPRETER.run(hr_deg, directive, kind, symbols)


def format_angle(
    angle: Angle, directive: Directive = "", symbols: Optional[Symbols] = None
) -> FormatOutcome:
    """Format an Angle in degrees, minutes and seconds."""
    return format_value(angle.deg(), directive, ValueKind.ANGLE, symbols)


def format_hour_angle(
    hour_angle: HourAngle, directive: Directive = "", symbols: Optional[Symbols] = None
) -> FormatOutcome:
    """Format an HourAngle in hours, minutes and seconds."""
    return format_value(hour_angle.hour(), directive, ValueKind.HOUR_ANGLE, symbols)


def format_ra(ra: RA, directive: Directive = "", symbols: Optional[Symbols] = None) -> FormatOutcome:
    """Format a right ascension, wrapped to [0, 24) hours."""
    return format_value(ra.hour(), directive, ValueKind.RA, symbols)


def format_time(time: Time, directive: Directive = "", symbols: Optional[Symbols] = None) -> FormatOutcome:
    """Format a duration in hours, minutes and seconds."""
    return format_value(time.hour(), directive, ValueKind.TIME, symbols)


# =============================================================================
# FORMATTABLE WRAPPERS
# =============================================================================


class _Formattable(ABC):
    """
    Base for values usable with format().

    Not thread safe: `err` is written on every formatting call.
    """

    kind: ValueKind = ValueKind.ANGLE

    def __init__(self, value, symbols: Optional[Symbols] = None):
        self.value = value
        self.symbols = symbols
        self.err: Optional[ErrorKind] = None

    @abstractmethod
    def hr_deg(self) -> float:
        """Value in degrees (ANGLE) or hours (other kinds)."""

    def format(self, directive: Directive = "") -> FormatOutcome:
        outcome = format_value(self.hr_deg(), directive, self.kind, self.symbols)
        self.err = outcome.error
        return outcome

    def __format__(self, spec: str) -> str:
        return self.format(spec).text

    def __str__(self) -> str:
        return self.format("").text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, err={self.err!r})"


class FmtAngle(_Formattable):
    """Formattable Angle (degree symbols)"""

    kind = ValueKind.ANGLE

    def __init__(self, value: Angle, symbols: Optional[Symbols] = None):
        super().__init__(value, symbols)

    def hr_deg(self) -> float:
        return self.value.deg()


class FmtHourAngle(_Formattable):
    """Formattable HourAngle (hour symbols)"""

    kind = ValueKind.HOUR_ANGLE

    def __init__(self, value: HourAngle, symbols: Optional[Symbols] = None):
        super().__init__(value, symbols)

    def hr_deg(self) -> float:
        return self.value.hour()


class FmtRA(_Formattable):
    """Formattable right ascension, always in [0, 24) hours"""

    kind = ValueKind.RA

    def __init__(self, value: RA, symbols: Optional[Symbols] = None):
        super().__init__(value, symbols)

    def hr_deg(self) -> float:
        return self.value.hour()


class FmtTime(_Formattable):
    """Formattable Time (hour symbols)"""

    kind = ValueKind.TIME

    def __init__(self, value: Time, symbols: Optional[Symbols] = None):
        super().__init__(value, symbols)

    def hr_deg(self) -> float:
        return self.value.hour()
