"""
Tests for the Segment Renderer

Checks:
1. Sign and elision rules of the first and middle segments
2. Width padding (spaces / zeros) and width overflow
3. Decimal separator and unit placement of the last segment
4. The single segment (decimal hours/degrees) format
"""

import pytest

from src.core.domain.directive import SegmentConvention, ValueKind, parse_format_spec
from src.core.domain.symbols import DEFAULT_SYMBOLS, Symbols
from src.core.errors import ErrorKind, WidthOverflowError
from src.formatter.decomposer import Segments
from src.formatter.renderer import SegmentRenderer

MARK = "\u0323"


def render(spec: str, segments: Segments, negative: bool = False, kind: ValueKind = ValueKind.ANGLE,
           symbols: Symbols = DEFAULT_SYMBOLS) -> str:
    renderer = SegmentRenderer(parse_format_spec(spec), symbols, kind, negative)
    return renderer.render(segments)


def sec(first: int, minute: int, last: int) -> Segments:
    return Segments(SegmentConvention.SECONDS, first=first, minute=minute, last=last)


def leading_sign(text: str) -> str:
    c = text.lstrip(" ")[:1]
    return c if c in ("+", "-") else ""


# =============================================================================
# FLAGS
# =============================================================================


class TestFlags:
    """Sign, '#' and '0' flags without width"""

    @pytest.mark.parametrize(
        "spec,expected",
        [
            ("s", "1′2″"),
            ("+s", "+1′2″"),
            (" s", " 1′2″"),
            ("0s", "1′02″"),
            ("#s", "0°1′2″"),
            ("+#0s", "+0°01′02″"),
        ],
    )
    def test_flags(self, spec: str, expected: str) -> None:
        """0°1′2″ with each flag combination"""
        assert render(spec, sec(0, 1, 2)) == expected

    def test_everything_elided_but_last(self) -> None:
        """Zero renders as the last segment alone"""
        assert render("s", sec(0, 0, 0)) == "0″"

    def test_negative_sign_before_elided_segments(self) -> None:
        """'-' is kept even when the first segments are elided"""
        assert render("s", sec(0, 0, 5), negative=True) == "-5″"

    def test_minus_overrides_plus(self) -> None:
        assert render("+ s", sec(0, 1, 2), negative=True) == "-1′2″"

    def test_zero_minute_shown_after_first(self) -> None:
        """A zero minute is elided only when the first segment is"""
        assert render("s", sec(5, 0, 3)) == "5°0′3″"


# =============================================================================
# WIDTH
# =============================================================================


class TestWidth:
    """Fixed width of the first segment"""

    @pytest.mark.parametrize(
        "spec,negative,expected",
        [
            ("2.3s", False, "  0° 1′ 2.340″"),
            ("2.3s", True, "- 0° 1′ 2.340″"),
            ("02.3s", False, " 00°01′02.340″"),
            ("02.3s", True, "-00°01′02.340″"),
        ],
    )
    def test_width(self, spec: str, negative: bool, expected: str) -> None:
        """0°1′2.34″ at width 2"""
        assert render(spec, sec(0, 1, 2340), negative=negative) == expected

    def test_width_implies_force_all(self) -> None:
        assert render("1s", sec(0, 0, 0)) == " 0° 0′ 0″"

    def test_zero_padded_three_digits(self) -> None:
        """Width 3 with zero padding"""
        assert render("03s", sec(23, 26, 44)) == " 023°26′44″"

    def test_width_with_plus(self) -> None:
        assert render("+2s", sec(1, 2, 3)) == "+ 1° 2′ 3″"

    def test_overflow_degrees(self) -> None:
        """Degree value wider than width"""
        with pytest.raises(WidthOverflowError) as exc_info:
            render("2s", sec(135, 0, 0))
        assert exc_info.value.kind == ErrorKind.DEGREE_OVERFLOW

    @pytest.mark.parametrize("kind", [ValueKind.HOUR_ANGLE, ValueKind.RA, ValueKind.TIME])
    def test_overflow_hours(self, kind: ValueKind) -> None:
        """Hour based kinds overflow with HOUR_OVERFLOW"""
        segments = Segments(SegmentConvention.MINUTES, first=125, last=0)
        with pytest.raises(WidthOverflowError) as exc_info:
            render("2m", segments, kind=kind)
        assert exc_info.value.kind == ErrorKind.HOUR_OVERFLOW

    def test_exact_fit(self) -> None:
        segments = Segments(SegmentConvention.MINUTES, first=12, last=0)
        assert render("2m", segments, kind=ValueKind.HOUR_ANGLE) == " 12ʰ 0ᵐ"


# =============================================================================
# UNIT PLACEMENT
# =============================================================================


class TestUnitPlacement:
    """Verbs for 12°34′45.6″"""

    def test_seconds_verbs(self) -> None:
        segments = sec(12, 34, 456)
        assert render(".1s", segments) == "12°34′45.6″"
        assert render(".1c", segments) == "12°34′45″" + MARK + "6"
        assert render(".1d", segments) == "12°34′45″.6"

    def test_minutes_verbs(self) -> None:
        segments = Segments(SegmentConvention.MINUTES, first=12, last=3476)
        assert render(".2m", segments) == "12°34.76′"
        assert render(".2n", segments) == "12°34′" + MARK + "76"
        assert render(".2o", segments) == "12°34′.76"

    def test_hour_deg_verbs(self) -> None:
        segments = Segments(SegmentConvention.HOUR_DEG, first=12579)
        assert render(".3h", segments) == "12.579°"
        assert render(".3i", segments) == "12°" + MARK + "579"
        assert render(".3j", segments) == "12°.579"

    def test_zero_precision_combine_appends(self) -> None:
        """No separator, so the unit is appended"""
        assert render("c", sec(1, 2, 3)) == "1°2′3″"

    def test_hour_symbols(self) -> None:
        assert render("", sec(12, 34, 46), kind=ValueKind.TIME) == "12ʰ34ᵐ46ˢ"


# =============================================================================
# CUSTOM SYMBOLS
# =============================================================================


class TestCustomSymbols:
    """Empty symbol table packs the digits"""

    @pytest.mark.parametrize(
        "segments,negative,expected",
        [
            (sec(0, 0, 0), False, "+000000000"),
            (sec(0, 1, 2340), True, "-000102340"),
            (sec(23, 45, 16700), False, "+234516700"),
        ],
    )
    def test_no_symbols(self, segments: Segments, negative: bool, expected: str) -> None:
        assert render("+02.3s", segments, negative=negative, symbols=Symbols()) == expected

    def test_custom_separator(self) -> None:
        symbols = DEFAULT_SYMBOLS.model_copy(update={"dec_sep": ","})
        assert render(".1s", sec(1, 2, 35), symbols=symbols) == "1°2′3,5″"


# =============================================================================
# SINGLE SEGMENT
# =============================================================================


class TestHourDegSegment:
    """Decimal hours/degrees"""

    def test_leading_zero(self) -> None:
        """There is always a digit before the separator"""
        segments = Segments(SegmentConvention.HOUR_DEG, first=89876)
        assert render(".6h", segments) == "0.089876°"

    def test_negative_fraction(self) -> None:
        segments = Segments(SegmentConvention.HOUR_DEG, first=50)
        assert render(".2h", segments, negative=True) == "-0.50°"

    def test_sign_flags(self) -> None:
        segments = Segments(SegmentConvention.HOUR_DEG, first=15)
        assert render("+.1h", segments) == "+1.5°"
        assert render(" .1h", segments) == " 1.5°"

    def test_width_space_padded(self) -> None:
        """Sign sits right in front of the digits"""
        segments = Segments(SegmentConvention.HOUR_DEG, first=5)
        assert render("3.1h", segments) == "   0.5°"
        assert render("3.1h", segments, negative=True) == "  -0.5°"

    def test_width_zero_padded(self) -> None:
        segments = Segments(SegmentConvention.HOUR_DEG, first=5)
        assert render("03.1h", segments) == " 000.5°"
        assert render("03.1h", segments, negative=True) == "-000.5°"

    def test_width_overflow(self) -> None:
        segments = Segments(SegmentConvention.HOUR_DEG, first=12345)
        with pytest.raises(WidthOverflowError):
            render("3.1h", segments)

    def test_width_plus_sign(self) -> None:
        """'+' takes the reserved sign column in front of the digits"""
        segments = Segments(SegmentConvention.HOUR_DEG, first=5)
        assert render("+3.1h", segments) == "  +0.5°"

    def test_sign_matches_multi_segment_formats(self) -> None:
        """Single and multi segment formats choose the same sign"""
        for spec in ("", "+", " ", "2", "+2", "02"):
            for negative in (False, True):
                one = render(spec + "h", Segments(SegmentConvention.HOUR_DEG, first=1), negative=negative)
                three = render(spec + "s", sec(1, 0, 0), negative=negative)
                assert leading_sign(one) == leading_sign(three), (spec, negative)

    def test_overflow_error_message(self) -> None:
        """The overflow error carries its kind and message"""
        segments = Segments(SegmentConvention.HOUR_DEG, first=12345)
        with pytest.raises(WidthOverflowError, match="^Degrees overflow width: 12345") as exc_info:
            render("3.1h", segments)
        assert exc_info.value.kind is ErrorKind.DEGREE_OVERFLOW
