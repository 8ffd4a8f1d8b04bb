"""Cursor-relative operator lookups used to pick the word to complete.

These scan the raw line and do not track quoting, unlike tokenize().
"""

from oplexer.operators import (
    PIPELINE_AND_END_MATCHER,
    REDIRECTION_MATCHER,
    OperatorMatch,
    OperatorMatcher,
)


def contains_redirection(line: str) -> bool:
    """True if the line holds a redirection operator anywhere."""
    return REDIRECTION_MATCHER.search(line) is not None


def contains_pipeline_or_end(line: str) -> bool:
    """True if the line holds a |, |& or ; anywhere."""
    return PIPELINE_AND_END_MATCHER.search(line) is not None


def first_redirection_end(line: str) -> int:
    """Offset just past the first redirection operator, or 0 if there is none."""
    match = REDIRECTION_MATCHER.search(line)
    return match.end if match is not None else 0


def last_match_before_cursor(
    matcher: OperatorMatcher, line: str, cursor: int
) -> OperatorMatch | None:
    """The last match starting at or before ``cursor`` (clamped to the line)."""
    cursor = min(max(cursor, 0), len(line))
    last = None
    for match in matcher.finditer(line):
        if match.start > cursor:
            break
        last = match
    return last


def last_match_end_before_cursor(matcher: OperatorMatcher, line: str, cursor: int) -> int:
    """End offset of the last match starting at or before ``cursor``.

    The cursor is clamped to the line. Returns 0 when no match qualifies.
    """
    match = last_match_before_cursor(matcher, line, cursor)
    return match.end if match is not None else 0


def last_pipeline_or_end_before_cursor(line: str, cursor: int) -> int:
    return last_match_end_before_cursor(PIPELINE_AND_END_MATCHER, line, cursor)


def last_redirection_before_cursor(line: str, cursor: int) -> int:
    return last_match_end_before_cursor(REDIRECTION_MATCHER, line, cursor)
