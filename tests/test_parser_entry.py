"""Tests for the parse() and parse_strict() entry points.

Covers value extraction, conversion of failures into ParseFailedError,
source size limits, recursion depth conversion and logging.
"""

from __future__ import annotations

import logging

import pytest

from parsecengine import (
    Aggregate,
    Literal,
    ParseDepthError,
    ParseFailedError,
    Parser,
    SourceTooLargeError,
    char,
    end_of_input,
    joint,
    lazy,
    match_literal,
    match_pattern,
    ordered_choice,
    parse,
    parse_strict,
)
from parsecengine.constants import MAX_SOURCE_SIZE
from parsecengine.diagnostics import DiagnosticCode

# ============================================================================
# PARSE
# ============================================================================


class TestParse:
    """Test parse()."""

    def test_returns_value(self) -> None:
        """Value of the successful attempt from position 0."""
        assert parse(match_pattern(r"\d+").map(int), "42 apples") == 42

    def test_ignores_trailing_input(self) -> None:
        """A matched prefix is enough."""
        assert parse(match_literal("xm"), "xm and xh") == "xm"

    def test_fluent_form(self) -> None:
        """Parser.parse delegates to parse()."""
        assert match_literal("xm").parse("xmxm") == "xm"

    def test_failure_raises_with_fields(self) -> None:
        """Failure becomes ParseFailedError carrying position and excerpt."""
        with pytest.raises(ParseFailedError) as exc_info:
            parse(match_literal("xm"), "xh and more")

        err = exc_info.value
        assert err.position == 1
        assert err.expected == Literal("xm")
        assert err.excerpt == "h and"
        assert err.source == "xh and more"

    def test_failure_diagnostic(self) -> None:
        """The attached diagnostic names the expectation and location."""
        with pytest.raises(ParseFailedError) as exc_info:
            parse(match_literal("xm"), "xh")

        diag = exc_info.value.diagnostic
        assert diag is not None
        assert diag.code == DiagnosticCode.PARSE_FAILED
        assert diag.expected == "xm"
        assert diag.found == "h"
        assert diag.span is not None
        assert (diag.span.line, diag.span.column) == (1, 2)
        assert "Expected 'xm' at position 1, found 'h'" in str(exc_info.value)

    def test_aggregate_expectation_rendered(self) -> None:
        """Aggregates are listed as alternatives with quoted members."""
        p = ordered_choice(match_literal("xm"), match_literal("abc"))

        with pytest.raises(ParseFailedError) as exc_info:
            parse(p, "hhhh")

        assert exc_info.value.expected == Aggregate((Literal("xm"), Literal("abc")))
        assert "Expected one of ['xm', 'abc'] at position 0" in str(exc_info.value)

    def test_failure_at_end_of_input(self) -> None:
        """An empty excerpt reads as end of input."""
        with pytest.raises(ParseFailedError) as exc_info:
            parse(match_literal("xm"), "x")

        assert exc_info.value.excerpt == ""
        assert "found end of input" in str(exc_info.value)

    def test_failure_on_second_line(self) -> None:
        """Line and column reflect newlines before the failure."""
        p = joint(match_literal("a\n"), match_literal("b"))

        with pytest.raises(ParseFailedError) as exc_info:
            parse(p, "a\nc")

        diag = exc_info.value.diagnostic
        assert diag is not None
        assert diag.span is not None
        assert (diag.span.line, diag.span.column) == (2, 1)
        assert diag.context == "c\n^"

    def test_logs_failure_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Top-level failures are logged before raising."""
        with (
            caplog.at_level(logging.DEBUG, logger="parsecengine.parser"),
            pytest.raises(ParseFailedError),
        ):
            parse(match_literal("xm"), "xh")

        assert "Parse failed at position 1: expected xm" in caplog.text


# ============================================================================
# PARSE STRICT
# ============================================================================


class TestParseStrict:
    """Test parse_strict()."""

    def test_whole_input(self) -> None:
        """Succeeds when all input is consumed."""
        assert parse_strict(match_literal("xm"), "xm") == "xm"
        assert match_pattern(r"\d+").map(int).parse_strict("123") == 123

    def test_trailing_input_rejected(self) -> None:
        """Leftover input reports an EOF expectation."""
        with pytest.raises(ParseFailedError) as exc_info:
            parse_strict(match_literal("xm"), "xm and xh")

        err = exc_info.value
        assert err.position == 2
        assert err.expected == Literal("EOF")
        assert err.excerpt == " and "
        assert err.diagnostic is not None
        assert err.diagnostic.code == DiagnosticCode.UNCONSUMED_INPUT

    def test_inner_failure_is_parse_failed(self) -> None:
        """A grammar failure keeps its own expectation."""
        with pytest.raises(ParseFailedError) as exc_info:
            parse_strict(match_literal("xm"), "xxm")

        assert exc_info.value.expected == Literal("xm")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PARSE_FAILED

    def test_grammar_end_of_input_is_parse_failed(self) -> None:
        """An end_of_input inside the grammar fails like any other parser."""
        p = char("a").then(end_of_input())

        with pytest.raises(ParseFailedError) as exc_info:
            parse_strict(p, "ab")

        err = exc_info.value
        assert err.position == 1
        assert err.expected == Literal("EOF")
        assert err.diagnostic is not None
        assert err.diagnostic.code == DiagnosticCode.PARSE_FAILED
        assert "parse_strict" not in (err.diagnostic.hint or "")


# ============================================================================
# LIMITS
# ============================================================================


def _nested_parens() -> Parser[object]:
    """Grammar for arbitrarily nested parentheses."""
    inner = lazy(lambda: group)
    group: Parser[object] = ordered_choice(
        joint(char("("), inner, char(")")), match_literal("")
    )
    return group


class TestLimits:
    """Test source size and recursion limits."""

    def test_source_too_large(self) -> None:
        """Inputs over max_source_size are rejected before parsing."""
        with pytest.raises(SourceTooLargeError) as exc_info:
            parse(match_literal("a"), "aaaa", max_source_size=3)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SOURCE_TOO_LARGE

    def test_source_at_limit_accepted(self) -> None:
        """The limit itself is allowed."""
        assert parse(match_literal("a"), "aaa", max_source_size=3) == "a"

    def test_zero_disables_limit(self) -> None:
        """max_source_size=0 turns the check off."""
        source = "a" * (MAX_SOURCE_SIZE + 1)

        assert parse(match_literal("a"), source, max_source_size=0) == "a"

    def test_default_limit(self) -> None:
        """The default limit applies when none is given."""
        with pytest.raises(SourceTooLargeError):
            parse_strict(match_literal("a"), "a" * (MAX_SOURCE_SIZE + 1))

    def test_size_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejections are logged at warning level."""
        with (
            caplog.at_level(logging.WARNING, logger="parsecengine.parser"),
            pytest.raises(SourceTooLargeError),
        ):
            parse(match_literal("a"), "aaaa", max_source_size=3)

        assert "Rejected source of 4 characters (limit 3)" in caplog.text

    def test_nested_grammar_within_stack(self) -> None:
        """Moderate nesting parses normally."""
        assert parse_strict(_nested_parens(), "((()))") == ("(", ("(", ("(", "", ")"), ")"), ")")

    def test_recursion_converted(self, caplog: pytest.LogCaptureFixture) -> None:
        """Stack exhaustion surfaces as ParseDepthError."""
        with (
            caplog.at_level(logging.WARNING, logger="parsecengine.parser"),
            pytest.raises(ParseDepthError) as exc_info,
        ):
            parse(_nested_parens(), "(" * 50_000)

        assert isinstance(exc_info.value.__cause__, RecursionError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NESTING_DEPTH_EXCEEDED
        assert "recursion exceeded" in caplog.text
