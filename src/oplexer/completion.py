"""Locate the part of a console line that tab completion should work on."""

from dataclasses import dataclass

from oplexer.operators import REDIRECTION_MATCHER, ControlOperator
from oplexer.position import last_match_before_cursor, last_pipeline_or_end_before_cursor


@dataclass(frozen=True)
class CompletionTarget:
    """Text between the last relevant operator and the cursor."""

    offset: int
    text: str
    after_redirection: bool = False

    @property
    def word(self) -> str:
        """The word being typed at the cursor (empty after whitespace)."""
        if not self.text or self.text[-1].isspace():
            return ""
        return self.text.split()[-1]

    @property
    def is_command(self) -> bool:
        """True while the first word of a command is still being typed."""
        if self.after_redirection:
            return False
        return not any(ch.isspace() for ch in self.text.lstrip())


def completion_target(line: str, cursor: int) -> CompletionTarget:
    """Work out what the cursor is completing.

    The text starts after the last pipe or ';' before the cursor, or after
    the last redirection when that comes later, in which case the cursor is
    on a file operand. 2>&1 takes no operand and does not move the start.

    Only |, |& and ; start a new command here. '||' counts as two pipes, so
    'a || gi' completes 'gi' as a command, while 'a && gi' does not.
    """
    cursor = min(max(cursor, 0), len(line))
    pipeline_end = last_pipeline_or_end_before_cursor(line, cursor)
    redirection = last_match_before_cursor(REDIRECTION_MATCHER, line, cursor)

    after_redirection = (
        redirection is not None
        and redirection.end > pipeline_end
        and redirection.operator is not ControlOperator.OVERWRITE_OUT_AND_ERR
    )
    offset = redirection.end if after_redirection else pipeline_end
    offset = min(offset, cursor)

    return CompletionTarget(
        offset=offset,
        text=line[offset:cursor],
        after_redirection=after_redirection,
    )


def current_word(line: str, cursor: int) -> str:
    """The word under the cursor, as completion_target() sees it."""
    return completion_target(line, cursor).word
