"""
Tests for FormatDirective and the format spec parser

Checks:
1. Flags, width, precision and verb parsing
2. Verb table (convention x placement)
3. Unknown verbs are kept for the interpreter to report
"""

import pytest
from pydantic import ValidationError

from src.core.domain.directive import (
    VERB_TABLE,
    FormatDirective,
    SegmentConvention,
    UnitPlacement,
    parse_format_spec,
)


class TestParseFormatSpec:
    """Tests for parse_format_spec"""

    def test_empty_spec_is_default(self) -> None:
        """Empty spec: seconds convention, append, precision unspecified"""
        d = parse_format_spec("")
        assert d.verb == "s"
        assert d.precision is None
        assert d.effective_precision == 0
        assert d.width is None
        assert not (d.sign_plus or d.sign_space or d.force_all or d.zero_pad)

    def test_all_flags(self) -> None:
        """'+ #0' sets all four flags"""
        d = parse_format_spec("+ #0s")
        assert d.sign_plus and d.sign_space and d.force_all and d.zero_pad
        assert d.width is None

    def test_zero_flag_then_width(self) -> None:
        """Leading zeros are flags, the rest is width"""
        d = parse_format_spec("+02.3s")
        assert d.sign_plus and d.zero_pad
        assert d.width == 2
        assert d.precision == 3

    def test_multi_digit_width(self) -> None:
        d = parse_format_spec("010m")
        assert d.zero_pad
        assert d.width == 10
        assert d.verb == "m"

    def test_precision_without_digits(self) -> None:
        """A bare '.' means precision 0"""
        assert parse_format_spec(".s").precision == 0

    def test_large_precision_kept(self) -> None:
        """Precision above the limit is parsed, not rejected"""
        assert parse_format_spec(".16s").precision == 16

    def test_unknown_verb_kept(self) -> None:
        d = parse_format_spec("q")
        assert d.verb == "q"
        assert not d.is_known_verb
        assert d.convention is None
        assert d.placement is None

    def test_garbage_becomes_verb(self) -> None:
        """Anything unparseable ends up in the verb"""
        d = parse_format_spec("2.3xyz")
        assert d.verb == "xyz"
        assert not d.is_known_verb

    def test_v_is_alias_of_s(self) -> None:
        d = parse_format_spec("v")
        assert d.is_known_verb
        assert d.convention is SegmentConvention.SECONDS
        assert d.placement is UnitPlacement.APPEND


class TestVerbTable:
    """Tests for the verb table"""

    @pytest.mark.parametrize(
        "verb,convention,placement",
        [
            ("s", SegmentConvention.SECONDS, UnitPlacement.APPEND),
            ("c", SegmentConvention.SECONDS, UnitPlacement.COMBINE),
            ("d", SegmentConvention.SECONDS, UnitPlacement.INSERT),
            ("m", SegmentConvention.MINUTES, UnitPlacement.APPEND),
            ("n", SegmentConvention.MINUTES, UnitPlacement.COMBINE),
            ("o", SegmentConvention.MINUTES, UnitPlacement.INSERT),
            ("h", SegmentConvention.HOUR_DEG, UnitPlacement.APPEND),
            ("i", SegmentConvention.HOUR_DEG, UnitPlacement.COMBINE),
            ("j", SegmentConvention.HOUR_DEG, UnitPlacement.INSERT),
        ],
    )
    def test_verb_mapping(self, verb, convention, placement) -> None:
        d = parse_format_spec(verb)
        assert d.convention is convention
        assert d.placement is placement

    def test_table_is_complete(self) -> None:
        """3 conventions x 3 placements"""
        assert len(VERB_TABLE) == 9
        assert len(set(VERB_TABLE.values())) == 9

    def test_for_convention(self) -> None:
        d = FormatDirective.for_convention(
            SegmentConvention.MINUTES, UnitPlacement.INSERT, precision=2
        )
        assert d.verb == "o"
        assert d.precision == 2


class TestFormatDirectiveModel:
    """Tests for FormatDirective validation"""

    def test_frozen(self) -> None:
        d = FormatDirective()
        with pytest.raises(ValidationError):
            d.width = 3

    def test_width_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            FormatDirective(width=0)

    def test_precision_non_negative(self) -> None:
        with pytest.raises(ValidationError):
            FormatDirective(precision=-1)
