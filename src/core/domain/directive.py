"""
FormatDirective — Parsed format specifier

Mini-language (the same slot Python's format() passes to __format__):

    [flags][width][.precision][verb]

Verbs select a segment convention and a unit placement:

    convention \\ placement       append   combine   insert
    3 segments, decimal in sec      s         c         d
    2 segments, decimal in min      m         n         o
    1 segment, decimal in hr/deg    h         i         j

'v' and the empty verb are equivalent to 's'.

Flags:
    +   always print leading sign
    ' ' leave space for an elided + sign
    #   display all segments, even if 0
    0   zero pad segments after the first (and the first too, with width)

Width is the integer-digit width of the first segment, not the total width.
It implies '#' and, unless '+' is given, a reserved sign column.
"""

import re
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SegmentConvention(str, Enum):
    """Which segment carries the decimal fraction"""

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOUR_DEG = "hour_deg"


class UnitPlacement(str, Enum):
    """Where the last unit symbol goes relative to the decimal separator"""

    APPEND = "append"
    COMBINE = "combine"
    INSERT = "insert"


class ValueKind(str, Enum):
    """Closed set of formattable value kinds"""

    ANGLE = "angle"
    HOUR_ANGLE = "hour_angle"
    RA = "ra"
    TIME = "time"

    @property
    def is_degree_based(self) -> bool:
        return self is ValueKind.ANGLE


# =============================================================================
# VERB TABLE
# =============================================================================

VERB_TABLE: Final[dict[str, tuple[SegmentConvention, UnitPlacement]]] = {
    "s": (SegmentConvention.SECONDS, UnitPlacement.APPEND),
    "c": (SegmentConvention.SECONDS, UnitPlacement.COMBINE),
    "d": (SegmentConvention.SECONDS, UnitPlacement.INSERT),
    "m": (SegmentConvention.MINUTES, UnitPlacement.APPEND),
    "n": (SegmentConvention.MINUTES, UnitPlacement.COMBINE),
    "o": (SegmentConvention.MINUTES, UnitPlacement.INSERT),
    "h": (SegmentConvention.HOUR_DEG, UnitPlacement.APPEND),
    "i": (SegmentConvention.HOUR_DEG, UnitPlacement.COMBINE),
    "j": (SegmentConvention.HOUR_DEG, UnitPlacement.INSERT),
}

# Aliases of the full sexagesimal append format
DEFAULT_VERB: Final[str] = "s"
VERB_ALIASES: Final[dict[str, str]] = {"v": DEFAULT_VERB, "": DEFAULT_VERB}

_SPEC_RE = re.compile(
    r"""^
    (?P<flags>[+ #0]*)
    (?P<width>[1-9][0-9]*)?
    (?:\.(?P<precision>[0-9]*))?
    (?P<verb>.*)
    $""",
    re.VERBOSE | re.DOTALL,
)


# =============================================================================
# DIRECTIVE MODEL
# =============================================================================


class FormatDirective(BaseModel):
    """
    Immutable format directive.

    The verb is kept as given; convention and placement are derived from it
    and are None for an unrecognized verb. Precision is kept as requested
    (None when unspecified) so the interpreter can report an out-of-range
    precision as a directive error rather than rejecting it here.
    """

    verb: str = Field(DEFAULT_VERB, description="Verb character")
    precision: Optional[int] = Field(None, ge=0, description="Digits after the decimal separator")
    width: Optional[int] = Field(None, gt=0, description="Integer digits of the first segment")
    sign_plus: bool = Field(False, description="'+' flag")
    sign_space: bool = Field(False, description="' ' flag")
    force_all: bool = Field(False, description="'#' flag")
    zero_pad: bool = Field(False, description="'0' flag")

    model_config = {"frozen": True}

    @classmethod
    def for_convention(
        cls,
        convention: SegmentConvention,
        placement: UnitPlacement = UnitPlacement.APPEND,
        **kwargs,
    ) -> "FormatDirective":
        """Build a directive from a convention/placement pair instead of a verb."""
        for verb, pair in VERB_TABLE.items():
            if pair == (convention, placement):
                return cls(verb=verb, **kwargs)
        raise ValueError(f"no verb for {convention}/{placement}")

    @property
    def canonical_verb(self) -> str:
        return VERB_ALIASES.get(self.verb, self.verb)

    @property
    def is_known_verb(self) -> bool:
        return self.canonical_verb in VERB_TABLE

    @property
    def convention(self) -> Optional[SegmentConvention]:
        pair = VERB_TABLE.get(self.canonical_verb)
        return pair[0] if pair else None

    @property
    def placement(self) -> Optional[UnitPlacement]:
        pair = VERB_TABLE.get(self.canonical_verb)
        return pair[1] if pair else None

    @property
    def effective_precision(self) -> int:
        return 0 if self.precision is None else self.precision

    @property
    def has_width(self) -> bool:
        return self.width is not None


def parse_format_spec(spec: str) -> FormatDirective:
    """
    Parse a format specifier into a FormatDirective.

    Anything that is not flags, width or precision is taken as the verb;
    an unparseable tail therefore surfaces later as a bad verb.

    Examples:
        >>> parse_format_spec("+02.3s").width
        2
        >>> parse_format_spec("").verb
        's'
    """
    # the pattern accepts any string, the verb group absorbs the remainder
    m = _SPEC_RE.match(spec)

    flags = m.group("flags")
    width = m.group("width")
    precision = m.group("precision")
    verb = m.group("verb")

    return FormatDirective(
        verb=verb if verb else DEFAULT_VERB,
        precision=None if precision is None else int(precision or 0),
        width=None if width is None else int(width),
        sign_plus="+" in flags,
        sign_space=" " in flags,
        force_all="#" in flags,
        zero_pad="0" in flags,
    )
