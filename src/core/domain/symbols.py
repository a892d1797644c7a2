"""
Symbols — Unit indicators and decimal separators

Holds the unit strings for the first (degree/hour), minute and second
segments plus the decimal separator and the non-spacing combining mark used
by the "combined" unit placement.

Also provides the Decimal Combiner: three pure string operations that move a
unit symbol onto the decimal separator (combine), in front of it (insert),
or reverse either operation (strip).

DEFAULT_SYMBOLS is an immutable process-wide default; pass another Symbols
instance per call to override it.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.directive import ValueKind


# =============================================================================
# DEFAULT GLYPHS
# =============================================================================

DMS_DEGREE: Final[str] = "°"
DMS_MINUTE: Final[str] = "′"
DMS_SECOND: Final[str] = "″"

HMS_HOUR: Final[str] = "ʰ"
HMS_MINUTE: Final[str] = "ᵐ"
HMS_SECOND: Final[str] = "ˢ"

DEFAULT_DEC_SEP: Final[str] = "."

# U+0323 COMBINING DOT BELOW (Unicode category Mn)
DEFAULT_DEC_COMBINE: Final[str] = "\u0323"


# =============================================================================
# MODELS
# =============================================================================


class UnitSymbols(BaseModel):
    """Unit strings for the three sexagesimal segments. Any may be empty."""

    hr_deg: str = Field("", description="First segment unit (degrees or hours)")
    min: str = Field("", description="Minute unit")
    sec: str = Field("", description="Second unit")

    model_config = {"frozen": True}


class Symbols(BaseModel):
    """
    Immutable symbol table.

    dec_combine should be a character of Unicode category Mn (mark,
    nonspacing) for the combined placement to render legibly; this is not
    enforced. An empty dec_combine disables combining (combine_unit appends).
    An empty dec_sep is valid, e.g. for packed fixed-column output.
    """

    dms_units: UnitSymbols = Field(default_factory=UnitSymbols)
    hms_units: UnitSymbols = Field(default_factory=UnitSymbols)
    dec_sep: str = Field("", description="Decimal separator")
    dec_combine: str = Field("", description="Combining mark, one code point or empty")

    model_config = {"frozen": True}

    @field_validator("dec_combine")
    @classmethod
    def validate_dec_combine(cls, v: str) -> str:
        """The combining mark is a single code point (or absent)"""
        if len(v) > 1:
            raise ValueError(f"dec_combine must be a single character, got {v!r}")
        return v

    def units_for(self, kind: ValueKind) -> UnitSymbols:
        """Degree-style units for angles, hour-style units for everything else."""
        if kind is ValueKind.ANGLE:
            return self.dms_units
        return self.hms_units

    # -------------------------------------------------------------------------
    # Decimal Combiner
    # -------------------------------------------------------------------------

    def combine_unit(self, d: str, unit: str) -> str:
        """
        Insert a unit indicator into a formatted decimal number, combining it
        with the decimal separator.

        If dec_sep is non-empty and occurs in d, the first occurrence is
        replaced with unit followed by dec_combine. Otherwise unit is appended.

        Examples:
            >>> DEFAULT_SYMBOLS.combine_unit("1.25", "°")
            '1°̣25'
            >>> DEFAULT_SYMBOLS.combine_unit("0125", "°")
            '0125°'
        """
        if not self.dec_sep or not self.dec_combine:
            return d + unit
        i = d.find(self.dec_sep)
        if i < 0:
            return d + unit
        return d[:i] + unit + self.dec_combine + d[i + len(self.dec_sep):]

    def insert_unit(self, d: str, unit: str) -> str:
        """
        Insert a unit indicator just before the decimal separator, or at the
        end of the number when there is no separator.

        Examples:
            >>> DEFAULT_SYMBOLS.insert_unit("1.25", "°")
            '1°.25'
        """
        if not self.dec_sep:
            return d + unit
        i = d.find(self.dec_sep)
        if i < 0:
            return d + unit
        return d[:i] + unit + d[i:]

    def strip_unit(self, d: str, unit: str) -> tuple[str, bool]:
        """
        Reverse combine_unit or insert_unit.

        The first occurrence of unit is removed when it ends d or is followed
        by dec_sep. When it is followed by dec_combine, unit and mark are
        replaced with dec_sep. Anything else leaves d unchanged.

        Returns:
            (stripped, True) if the unit was found and removed,
            (d, False) otherwise

        Examples:
            >>> DEFAULT_SYMBOLS.strip_unit("1°̣25", "°")
            ('1.25', True)
            >>> DEFAULT_SYMBOLS.strip_unit("1.25ʰ", "°")
            ('1.25ʰ', False)
        """
        xu = d.find(unit)
        if xu < 0:
            return d, False
        xd = xu + len(unit)
        if xd == len(d):
            return d[:xu], True
        rest = d[xd:]
        if self.dec_sep and rest.startswith(self.dec_sep):
            return d[:xu] + rest, True
        if self.dec_combine and rest.startswith(self.dec_combine):
            return d[:xu] + self.dec_sep + rest[len(self.dec_combine):], True
        return d, False


DEFAULT_SYMBOLS: Final[Symbols] = Symbols(
    dms_units=UnitSymbols(hr_deg=DMS_DEGREE, min=DMS_MINUTE, sec=DMS_SECOND),
    hms_units=UnitSymbols(hr_deg=HMS_HOUR, min=HMS_MINUTE, sec=HMS_SECOND),
    dec_sep=DEFAULT_DEC_SEP,
    dec_combine=DEFAULT_DEC_COMBINE,
)


# =============================================================================
# MODULE-LEVEL HELPERS (DEFAULT_SYMBOLS)
# =============================================================================


def combine_unit(d: str, unit: str) -> str:
    """combine_unit using DEFAULT_SYMBOLS"""
    return DEFAULT_SYMBOLS.combine_unit(d, unit)


def insert_unit(d: str, unit: str) -> str:
    """insert_unit using DEFAULT_SYMBOLS"""
    return DEFAULT_SYMBOLS.insert_unit(d, unit)


def strip_unit(d: str, unit: str) -> tuple[str, bool]:
    """strip_unit using DEFAULT_SYMBOLS"""
    return DEFAULT_SYMBOLS.strip_unit(d, unit)
