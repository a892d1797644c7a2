"""Format Directive Interpreter — state machine driving one formatting call.

States:
    START → VERB_VALIDATED → PRECISION_VALIDATED → VALUE_CLASSIFIED
          → RENDERED | VALUE_ERROR
    START / VERB_VALIDATED → DIRECTIVE_ERROR

- Unknown verb and precision > 15 are directive errors: inline diagnostic
  text, no persisted error.
- NaN, ±Inf, loss of precision and width overflow are value errors: the
  output is a run of '*' as wide as a valid rendering of zero with the same
  directive, and the ErrorKind is reported.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.core.domain.directive import FormatDirective, ValueKind, parse_format_spec
from src.core.errors import DirectiveError, ErrorKind, SexagesimalValueError
from src.core.domain.symbols import DEFAULT_SYMBOLS, Symbols
from src.core.math.numerical_safeguards import MAX_PRECISION, classify_float
from src.formatter.decomposer import decompose
from src.formatter.renderer import SegmentRenderer

logger = logging.getLogger(__name__)


class FormatState(str, Enum):
    """Interpreter states."""

    START = "START"
    VERB_VALIDATED = "VERB_VALIDATED"
    PRECISION_VALIDATED = "PRECISION_VALIDATED"
    VALUE_CLASSIFIED = "VALUE_CLASSIFIED"
    RENDERED = "RENDERED"
    VALUE_ERROR = "VALUE_ERROR"
    DIRECTIVE_ERROR = "DIRECTIVE_ERROR"


@dataclass(frozen=True)
class InterpreterConfig:
    """Engine knobs.

    fallback_sentinel_width is used when even the zero-valued mock render
    fails and the sentinel width cannot be measured.
    """
    fallback_sentinel_width: int = 10
    sentinel_char: str = "*"


@dataclass(frozen=True)
class FormatOutcome:
    """Result of one formatting call."""

    text: str
    error: Optional[ErrorKind]
    state: FormatState

    # diagnostics
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return self.text


class FormatInterpreter:
    """Validates a directive, classifies the value and drives the render.

    The interpreter holds no per-call state; one instance may be shared.
    """

    def __init__(self, config: Optional[InterpreterConfig] = None):
        self.config = config or InterpreterConfig()

    def run(
        self,
        hr_deg: float,
        directive: Union[FormatDirective, str],
        kind: ValueKind,
        symbols: Optional[Symbols] = None,
    ) -> FormatOutcome:
        """Format a value already expressed in degrees or hours.

        Args:
            hr_deg: signed value in degrees (ANGLE) or hours (other kinds)
            directive: parsed directive or format spec string
            kind: value kind, selects unit symbols and overflow error
            symbols: symbol table, DEFAULT_SYMBOLS when None

        Returns:
            FormatOutcome; never raises for directive or value problems
        """
        if isinstance(directive, str):
            directive = parse_format_spec(directive)
        if symbols is None:
            symbols = DEFAULT_SYMBOLS

        # START → VERB_VALIDATED → PRECISION_VALIDATED
        try:
            self._validate_verb(directive)
            self._validate_precision(directive)
        except DirectiveError as e:
            logger.debug("directive error for verb %r: %s", directive.verb, e.diagnostic)
            return FormatOutcome(
                text=e.diagnostic,
                error=None,
                state=FormatState.DIRECTIVE_ERROR,
                details=e.diagnostic,
            )

        # PRECISION_VALIDATED → VALUE_CLASSIFIED
        special = classify_float(hr_deg)
        if special is not None:
            return self._value_error(special, directive, kind, symbols, "non-finite value")

        # VALUE_CLASSIFIED → RENDERED
        try:
            text = self.render(hr_deg, directive, kind, symbols)
        except SexagesimalValueError as e:
            return self._value_error(e.kind, directive, kind, symbols, str(e))

        return FormatOutcome(
            text=text,
            error=None,
            state=FormatState.RENDERED,
            details=f"rendered_{directive.convention.name}",
        )

    def render(
        self,
        hr_deg: float,
        directive: FormatDirective,
        kind: ValueKind,
        symbols: Symbols,
    ) -> str:
        """Decompose and render a finite value with a validated directive.

        Raises:
            SexagesimalValueError: loss of precision or width overflow
        """
        precision = directive.effective_precision
        segments = decompose(abs(hr_deg), directive.convention, precision)
        renderer = SegmentRenderer(directive, symbols, kind, negative=hr_deg < 0)
        return renderer.render(segments)

    def sentinel_width(
        self,
        directive: FormatDirective,
        kind: ValueKind,
        symbols: Symbols,
    ) -> int:
        """Display width of a valid rendering of zero with the same directive.

        The combining mark, if present, occupies no column.
        """
        try:
            mock = self.render(0.0, directive, kind, symbols)
        except SexagesimalValueError:
            return self.config.fallback_sentinel_width
        width = len(mock)
        if symbols.dec_combine and symbols.dec_combine in mock:
            width -= 1
        return width

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _validate_verb(self, directive: FormatDirective) -> None:
        if not directive.is_known_verb:
            raise DirectiveError(f"%!{directive.verb}(BADVERB)")

    def _validate_precision(self, directive: FormatDirective) -> None:
        # limit set by the largest power of 10 exactly representable as float64
        if directive.effective_precision > MAX_PRECISION:
            raise DirectiveError(f"%!(BADPREC {directive.precision})")

    def _value_error(
        self,
        error: ErrorKind,
        directive: FormatDirective,
        kind: ValueKind,
        symbols: Symbols,
        details: str,
    ) -> FormatOutcome:
        width = self.sentinel_width(directive, kind, symbols)
        logger.debug("value error %s (%s), sentinel width %d", error.name, details, width)
        return FormatOutcome(
            text=self.config.sentinel_char * width,
            error=error,
            state=FormatState.VALUE_ERROR,
            details=details,
        )


# Default interpreter used by the module-level API
DEFAULT_INTERPRETER = FormatInterpreter()
