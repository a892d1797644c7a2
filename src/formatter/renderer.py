"""
Segment Renderer — integer segments → text

Rules:
- First segment: with a fixed width, padded (spaces, or zeros with '0') to
  exactly that many digits, wider values overflow. Without width it is
  elided when zero unless '#' is given.
- Sign goes in front of the first segment (even an elided one): '-' for
  negative values, else '+' with '+', else a space with ' ' or a width.
- Middle (minute) segment: two digits with '0' after a shown first segment,
  space padded to two with a width, elided when the first segment was
  elided and it is zero, plain otherwise.
- Last segment: p+1 digits (p+2 when zero padding applies) with the decimal
  separator p digits from the right; the unit is appended, combined or
  inserted according to the placement.
"""

from src.core.domain.directive import FormatDirective, SegmentConvention, UnitPlacement, ValueKind
from src.core.domain.symbols import Symbols
from src.core.errors import ErrorKind, WidthOverflowError
from src.formatter.decomposer import Segments


class SegmentRenderer:
    """
    Renders the segments of one value for one directive.

    The directive must already be validated (known verb, precision <= 15).
    """

    def __init__(
        self,
        directive: FormatDirective,
        symbols: Symbols,
        kind: ValueKind,
        negative: bool,
    ):
        self.directive = directive
        self.symbols = symbols
        self.kind = kind
        self.negative = negative
        self.units = symbols.units_for(kind)
        self.precision = directive.effective_precision
        self.placement = directive.placement

    def render(self, segments: Segments) -> str:
        """Render all segments of a decomposed value."""
        if segments.convention is SegmentConvention.HOUR_DEG:
            return self.hr_deg_segment(segments.first)

        text, elided = self.first_segment(segments.first)
        if segments.convention is SegmentConvention.SECONDS:
            text, elided = self.middle_segment(text, segments.minute, elided)
            return text + self.last_segment(segments.last, self.units.sec, elided)
        return text + self.last_segment(segments.last, self.units.min, elided)

    # -------------------------------------------------------------------------
    # Segments
    # -------------------------------------------------------------------------

    def first_segment(self, x: int) -> tuple[str, bool]:
        """
        Render the degree/hour segment of a multi-segment format.

        Returns:
            (text including sign and unit, elided)

        Raises:
            WidthOverflowError: if x does not fit the fixed width
        """
        d = self.directive
        elided = False
        if d.has_width:
            r = format(x, f"0{d.width}d" if d.zero_pad else f"{d.width}d")
            if len(r) > d.width:
                raise self._overflow(x)
            r += self.units.hr_deg
        elif x > 0 or d.force_all:
            r = f"{x}{self.units.hr_deg}"
        else:
            r = ""
            elided = True
        return self._sign() + r, elided

    def middle_segment(self, prefix: str, minute: int, first_elided: bool) -> tuple[str, bool]:
        """
        Append the minute segment of the SECONDS convention to prefix.

        Returns:
            (text, elided)
        """
        d = self.directive
        if d.zero_pad and not first_elided:
            return f"{prefix}{minute:02d}{self.units.min}", False
        if d.has_width:
            return f"{prefix}{minute:2d}{self.units.min}", False
        if first_elided and minute == 0:
            return prefix, True
        return f"{prefix}{minute}{self.units.min}", False

    def last_segment(self, x: int, unit: str, preceding_elided: bool) -> str:
        """
        Render the segment carrying the decimal fraction.

        Args:
            x: segment value times 10**precision
            unit: unit symbol of this segment
            preceding_elided: whether everything before this segment was elided
        """
        d = self.directive
        p = self.precision
        wid = p + 1
        if d.zero_pad and (d.has_width or not preceding_elided):
            wid += 1
        r = format(x, f"0{wid}d")
        if d.has_width and len(r) < p + 2:
            r = " " + r
        return self._place_unit(self._insert_separator(r), unit)

    def hr_deg_segment(self, i: int) -> str:
        """
        Render the single segment of the HOUR_DEG convention.

        The sign is formatted with the number: without width it leads the
        digits, with a space padded width it sits immediately in front of the
        number inside the field. There is always at least one digit left of
        the decimal separator.
        """
        d = self.directive
        p = self.precision
        digits = format(i, f"0{p + 1}d")
        sign = self._sign()
        if not d.has_width:
            r = sign + digits
        else:
            if len(digits) > p + d.width:
                raise self._overflow(i)
            if d.zero_pad:
                r = sign + digits.rjust(p + d.width, "0")
            else:
                # one extra column is the sign
                r = (sign + digits).rjust(p + d.width + 1)
        return self._place_unit(self._insert_separator(r), self.units.hr_deg)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _sign(self) -> str:
        # a fixed width always reserves the sign column
        d = self.directive
        if self.negative:
            return "-"
        if d.sign_plus:
            return "+"
        if d.sign_space or d.has_width:
            return " "
        return ""

    def _insert_separator(self, r: str) -> str:
        p = self.precision
        if p == 0:
            return r
        split = len(r) - p
        return r[:split] + self.symbols.dec_sep + r[split:]

    def _place_unit(self, r: str, unit: str) -> str:
        if self.placement is UnitPlacement.COMBINE:
            return self.symbols.combine_unit(r, unit)
        if self.placement is UnitPlacement.INSERT:
            return self.symbols.insert_unit(r, unit)
        return r + unit

    def _overflow(self, x: int) -> WidthOverflowError:
        kind = ErrorKind.DEGREE_OVERFLOW if self.kind.is_degree_based else ErrorKind.HOUR_OVERFLOW
        return WidthOverflowError(kind, f"{x} does not fit width {self.directive.width}")
