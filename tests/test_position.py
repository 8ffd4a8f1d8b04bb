"""Tests for the position query module."""

from oplexer.operators import PIPELINE_AND_END_MATCHER, REDIRECTION_MATCHER, OperatorMatch
from oplexer.position import (
    contains_pipeline_or_end,
    contains_redirection,
    first_redirection_end,
    last_match_before_cursor,
    last_match_end_before_cursor,
    last_pipeline_or_end_before_cursor,
    last_redirection_before_cursor,
)


class TestContains:
    def test_redirection(self):
        assert contains_redirection("ls > out")
        assert contains_redirection("cmd 2>&1")
        assert not contains_redirection("ls | cat")

    def test_redirection_ignores_quotes(self):
        assert contains_redirection('echo ">"')

    def test_pipeline_or_end(self):
        assert contains_pipeline_or_end("a; b")
        assert contains_pipeline_or_end("a |& b")
        assert contains_pipeline_or_end("a || b")

    def test_logical_and_is_not_pipeline(self):
        assert not contains_pipeline_or_end("a && b")
        assert not contains_pipeline_or_end("ls -la")


class TestFirstRedirectionEnd:
    def test_first_match(self):
        assert first_redirection_end("cmd 2>&1 > out") == 8

    def test_append(self):
        assert first_redirection_end("ls >> f") == 5

    def test_none(self):
        assert first_redirection_end("ls") == 0


class TestLastMatchEndBeforeCursor:
    def test_cursor_past_end_is_clamped(self):
        assert last_match_end_before_cursor(REDIRECTION_MATCHER, "cmd > out.txt", 1000) == 5

    def test_no_match(self):
        assert last_match_end_before_cursor(PIPELINE_AND_END_MATCHER, "ls -la", 3) == 0

    def test_negative_cursor_is_clamped(self):
        assert last_pipeline_or_end_before_cursor("|x", -5) == 1

    def test_stops_at_cursor(self):
        line = "ls | grep a | wc"
        assert last_pipeline_or_end_before_cursor(line, 2) == 0
        assert last_pipeline_or_end_before_cursor(line, 8) == 4
        assert last_pipeline_or_end_before_cursor(line, len(line)) == 13

    def test_match_starting_at_cursor_counts(self):
        assert last_pipeline_or_end_before_cursor("ls | grep a | wc", 12) == 13

    def test_last_redirection(self):
        line = "a > b >> c"
        assert last_redirection_before_cursor(line, 100) == 8
        assert last_redirection_before_cursor(line, 5) == 3

    def test_ignores_quotes(self):
        assert last_pipeline_or_end_before_cursor("echo 'a|b' c", 12) == 8


class TestLastMatchBeforeCursor:
    def test_returns_match(self):
        match = last_match_before_cursor(REDIRECTION_MATCHER, "cmd 2>&1 > out", 100)
        assert match == OperatorMatch(">", 9)

    def test_none_before_cursor(self):
        assert last_match_before_cursor(REDIRECTION_MATCHER, "ls > out", 2) is None
