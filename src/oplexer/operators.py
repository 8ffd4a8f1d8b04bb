"""Control operator catalog and the ordered matcher built from it."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class ControlOperator(Enum):
    """Operator that terminates a segment. The value is the literal token."""

    NONE = ""
    OVERWRITE_OUT = ">"
    APPEND_OUT = ">>"
    OVERWRITE_ERR = "2>"
    APPEND_ERR = "2>>"
    OVERWRITE_OUT_AND_ERR = "2>&1"
    OVERWRITE_IN = "<"
    PIPE = "|"
    PIPE_OUT_AND_ERR = "|&"
    OR = "||"
    AND = "&&"
    AMP = "&"
    END = ";"

    @property
    def token(self) -> str:
        return self.value

    @property
    def is_redirection(self) -> bool:
        return self in REDIRECTIONS

    @property
    def is_redirection_out(self) -> bool:
        return self.is_redirection and self is not ControlOperator.OVERWRITE_IN

    @property
    def is_redirection_err(self) -> bool:
        return self in (
            ControlOperator.OVERWRITE_ERR,
            ControlOperator.APPEND_ERR,
            ControlOperator.OVERWRITE_OUT_AND_ERR,
        )

    @property
    def is_pipe(self) -> bool:
        return self in (ControlOperator.PIPE, ControlOperator.PIPE_OUT_AND_ERR)

    @property
    def is_list_separator(self) -> bool:
        """True for operators that separate commands in a list (;, &, &&, ||)."""
        return self in (
            ControlOperator.END,
            ControlOperator.AMP,
            ControlOperator.AND,
            ControlOperator.OR,
        )


DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"
QUOTES = (DOUBLE_QUOTE, SINGLE_QUOTE)

# Longest/most-specific first: several tokens are prefixes of others.
CONTROL_OPERATORS: tuple[ControlOperator, ...] = (
    ControlOperator.OVERWRITE_OUT_AND_ERR,
    ControlOperator.APPEND_ERR,
    ControlOperator.OVERWRITE_ERR,
    ControlOperator.APPEND_OUT,
    ControlOperator.OVERWRITE_OUT,
    ControlOperator.OVERWRITE_IN,
    ControlOperator.PIPE_OUT_AND_ERR,
    ControlOperator.OR,
    ControlOperator.PIPE,
    ControlOperator.END,
    ControlOperator.AND,
    ControlOperator.AMP,
)

REDIRECTIONS: tuple[ControlOperator, ...] = CONTROL_OPERATORS[:6]

PIPELINE_AND_END: tuple[ControlOperator, ...] = (
    ControlOperator.PIPE_OUT_AND_ERR,
    ControlOperator.PIPE,
    ControlOperator.END,
)


@dataclass(frozen=True)
class OperatorMatch:
    """A catalog token found at ``start`` in the scanned text."""

    token: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.token)

    @property
    def operator(self) -> ControlOperator | None:
        """The matched operator, or None when the token is a quote character."""
        if self.token in QUOTES:
            return None
        return ControlOperator(self.token)


class OperatorMatcher:
    """Find literal tokens, trying them in a fixed priority order.

    At every position the tokens are tried in the order given, so the
    leftmost match wins and, among matches at the same position, the
    earliest token in the list wins.
    """

    def __init__(self, tokens: Iterable[str]) -> None:
        self.tokens: tuple[str, ...] = tuple(tokens)
        if not self.tokens or "" in self.tokens:
            raise ValueError("matcher needs at least one non-empty token")
        self._leading = frozenset(token[0] for token in self.tokens)

    def __repr__(self) -> str:
        return f"OperatorMatcher({list(self.tokens)!r})"

    def search(self, text: str, pos: int = 0) -> OperatorMatch | None:
        """Return the leftmost match at or after ``pos``, or None."""
        for i in range(max(pos, 0), len(text)):
            if text[i] not in self._leading:
                continue
            for token in self.tokens:
                if text.startswith(token, i):
                    return OperatorMatch(token, i)
        return None

    def finditer(self, text: str) -> Iterator[OperatorMatch]:
        """Yield non-overlapping matches from left to right."""
        pos = 0
        while (match := self.search(text, pos)) is not None:
            yield match
            pos = match.end


CONTROL_MATCHER = OperatorMatcher([op.token for op in CONTROL_OPERATORS] + list(QUOTES))
REDIRECTION_MATCHER = OperatorMatcher(op.token for op in REDIRECTIONS)
PIPELINE_AND_END_MATCHER = OperatorMatcher(op.token for op in PIPELINE_AND_END)
