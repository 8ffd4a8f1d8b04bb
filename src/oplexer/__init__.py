"""opLexer - quoting-aware control operator scanner for console input."""

from oplexer.completion import CompletionTarget, completion_target, current_word
from oplexer.operators import (
    CONTROL_MATCHER,
    PIPELINE_AND_END_MATCHER,
    REDIRECTION_MATCHER,
    ControlOperator,
    OperatorMatch,
    OperatorMatcher,
)
from oplexer.position import (
    contains_pipeline_or_end,
    contains_redirection,
    first_redirection_end,
    last_match_before_cursor,
    last_match_end_before_cursor,
    last_pipeline_or_end_before_cursor,
    last_redirection_before_cursor,
)
from oplexer.tokenizer import QuoteState, Segment, tokenize

__all__ = [
    "CONTROL_MATCHER",
    "PIPELINE_AND_END_MATCHER",
    "REDIRECTION_MATCHER",
    "CompletionTarget",
    "ControlOperator",
    "OperatorMatch",
    "OperatorMatcher",
    "QuoteState",
    "Segment",
    "completion_target",
    "contains_pipeline_or_end",
    "contains_redirection",
    "current_word",
    "first_redirection_end",
    "last_match_before_cursor",
    "last_match_end_before_cursor",
    "last_pipeline_or_end_before_cursor",
    "last_redirection_before_cursor",
    "tokenize",
]
