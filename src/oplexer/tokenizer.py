"""Split a console input line into segments terminated by control operators."""

import logging
from dataclasses import dataclass

from oplexer.operators import (
    CONTROL_MATCHER,
    DOUBLE_QUOTE,
    SINGLE_QUOTE,
    ControlOperator,
    OperatorMatch,
)

logger = logging.getLogger(__name__)

ESCAPE = "\\"
EQUALS = "="

# Bare operators that need a check on their surrounding characters
# before they split the line.
_COMPARISON_GUARDED = {ControlOperator.OVERWRITE_OUT, ControlOperator.OVERWRITE_IN}
_ESCAPE_GUARDED = {ControlOperator.PIPE, ControlOperator.AMP}


@dataclass(frozen=True)
class Segment:
    """Text preceding ``operator``; NONE marks an unterminated remainder."""

    operator: ControlOperator
    text: str


@dataclass
class QuoteState:
    """Open single/double quote flags. At most one is set at a time."""

    single: bool = False
    double: bool = False

    @property
    def active(self) -> bool:
        return self.single or self.double

    def toggle(self, quote: str) -> None:
        """Flip the flag for ``quote`` unless the other kind is open."""
        if quote == DOUBLE_QUOTE and not self.single:
            self.double = not self.double
        elif quote == SINGLE_QUOTE and not self.double:
            self.single = not self.single


def tokenize(line: str) -> list[Segment]:
    """Split ``line`` on unquoted control operators.

    Each operator occurrence yields a Segment holding the text between the
    previous split point and the operator. Operators inside single or double
    quotes, and quote characters preceded by a backslash, have no effect.
    Escape characters are kept in the segment text.

    The unsplit remainder is appended as a NONE segment when nothing was
    split, and appended (again) when it holds non-whitespace text. A line
    without operators therefore yields two identical NONE segments.

    Example: 'ls | grep foo' -> [(PIPE, 'ls '), (NONE, ' grep foo')]

    Never raises; an unterminated quote leaves the rest of the line unsplit.
    """
    segments: list[Segment] = []
    quotes = QuoteState()
    start = 0
    pos = 0

    while (match := CONTROL_MATCHER.search(line, pos)) is not None:
        pos = match.end
        operator = match.operator

        if operator is None:
            if not _preceded_by(line, start, match, ESCAPE):
                quotes.toggle(match.token)
            continue

        if quotes.active:
            continue

        if not _accepts(operator, line, start, match):
            logger.debug("Ignoring %r at offset %d", match.token, match.start)
            continue

        segments.append(Segment(operator, line[start : match.start]))
        logger.debug("Split on %s at offset %d", operator.name, match.start)
        start = match.end

    remainder = line[start:]
    if not segments:
        segments.append(Segment(ControlOperator.NONE, remainder))
    if remainder.strip():
        segments.append(Segment(ControlOperator.NONE, remainder))

    return segments


def _preceded_by(line: str, start: int, match: OperatorMatch, *chars: str) -> bool:
    """Whether the character before ``match`` is one of ``chars``.

    Only text after the last split point counts; a match at the start of the
    unsplit remainder has no preceding character.
    """
    return match.start > start and line[match.start - 1] in chars


def _accepts(operator: ControlOperator, line: str, start: int, match: OperatorMatch) -> bool:
    """Apply the per-operator guard to an unquoted operator match."""
    if operator in _COMPARISON_GUARDED:
        # Keeps x=>y, a>=b and a<=b together.
        if match.start == start or _preceded_by(line, start, match, ESCAPE, EQUALS):
            return False
        return match.end == len(line) or line[match.end] != EQUALS
    if operator in _ESCAPE_GUARDED:
        return match.start > start and not _preceded_by(line, start, match, ESCAPE)
    return True
