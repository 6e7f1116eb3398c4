"""Tests for ordered_choice and backtracking_choice.

The two combinators differ only when an alternative consumes input before
failing: ordered_choice commits to that failure, backtracking_choice
retries the next alternative from the start position.
"""

from __future__ import annotations

import pytest

from parsecengine import (
    Aggregate,
    Char,
    CombinatorArgumentError,
    Failure,
    Literal,
    Parser,
    Success,
    backtracking_choice,
    char,
    match_literal,
    match_pattern,
    ordered_choice,
)
from parsecengine.diagnostics import DiagnosticCode
from parsecengine.result import Result


def _recording(parser: Parser[str], calls: list[int]) -> Parser[str]:
    """Wrap parser to record every start position it is attempted at."""

    def attempt(source: str, pos: int) -> Result[str]:
        calls.append(pos)
        return parser.attempt(source, pos)

    return Parser(attempt)


# ============================================================================
# ORDERED CHOICE
# ============================================================================


class TestOrderedChoice:
    """Test commit-on-consumption alternation."""

    def test_first_alternative(self) -> None:
        """First alternative matches."""
        p = ordered_choice(match_literal("xm"), match_literal("abc"))

        assert p.attempt("xm", 0) == Success(2, "xm")

    def test_second_alternative(self) -> None:
        """First fails without consuming, second matches."""
        p = ordered_choice(match_literal("xm"), match_literal("abc"))

        assert p.attempt("abc", 0) == Success(3, "abc")

    def test_consuming_failure_commits(self) -> None:
        """First alternative consumed 'x' then failed: its failure wins."""
        p = ordered_choice(match_literal("xm"), match_literal("abc"))

        assert p.attempt("xabc", 0) == Failure(1, Literal("xm"))

    def test_later_consuming_failure_is_reported(self) -> None:
        """Non-consuming 'xm' is skipped, 'abc' consumed 'ab' and is the cause."""
        p = ordered_choice(match_literal("xm"), match_literal("abc"))

        assert p.attempt("abx", 0) == Failure(2, Literal("abc"))

    def test_all_fail_without_consuming_aggregates(self) -> None:
        """All expectations are aggregated in order at the start position."""
        p = ordered_choice(match_literal("xm"), match_literal("abc"))

        assert p.attempt("hhhh", 0) == Failure(0, Aggregate((Literal("xm"), Literal("abc"))))

    def test_success_before_committing_branch(self) -> None:
        """An earlier alternative may succeed where a later one would commit."""
        p = ordered_choice(match_literal("xm"), match_pattern("ab."), match_literal("abc"))

        assert p.attempt("abx", 0) == Success(3, "abx")

    def test_committed_branch_stops_later_alternatives(self) -> None:
        """Alternatives after a consuming failure are never attempted."""
        calls: list[int] = []
        p = ordered_choice(match_literal("abc"), _recording(match_pattern("ab."), calls))

        assert p.attempt("abx", 0) == Failure(2, Literal("abc"))
        assert calls == []

    def test_nonzero_start_position(self) -> None:
        """Consumption is judged relative to the start position."""
        p = ordered_choice(char("a"), char("b"))

        assert p.attempt("xxc", 2) == Failure(2, Aggregate((Char("a"), Char("b"))))

    def test_nested_aggregate(self) -> None:
        """A nested choice contributes its own Aggregate."""
        inner = ordered_choice(char("a"), char("b"))
        p = ordered_choice(inner, char("c"))

        assert p.attempt("z", 0) == Failure(
            0, Aggregate((Aggregate((Char("a"), Char("b"))), Char("c")))
        )


# ============================================================================
# BACKTRACKING CHOICE
# ============================================================================


class TestBacktrackingChoice:
    """Test fully backtracking alternation."""

    def test_first_alternative(self) -> None:
        """First alternative matches."""
        p = backtracking_choice(match_literal("xm"), match_literal("abc"))

        assert p.attempt("xm", 0) == Success(2, "xm")
        assert p.attempt("abc", 0) == Success(3, "abc")

    def test_consuming_failure_is_discarded(self) -> None:
        """Partial matches are discarded; aggregate at start position."""
        p = backtracking_choice(match_literal("xm"), match_literal("abc"))

        expected = Failure(0, Aggregate((Literal("xm"), Literal("abc"))))
        assert p.attempt("xabc", 0) == expected
        assert p.attempt("hhhh", 0) == expected
        assert p.attempt("abx", 0) == expected

    def test_retries_after_partial_match(self) -> None:
        """Later alternative succeeds after an earlier one partially matched."""
        p = backtracking_choice(match_literal("xm"), match_literal("abc"), match_pattern("ab."))

        assert p.attempt("abx", 0) == Success(3, "abx")

    def test_retry_starts_from_original_position(self) -> None:
        """Each alternative is attempted at the same start position."""
        calls: list[int] = []
        p = backtracking_choice(match_literal("abc"), _recording(match_pattern("ab."), calls))

        p.attempt("zzabx", 2)
        assert calls == [2]


# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestChoiceArguments:
    """Test argument validation."""

    @pytest.mark.parametrize("combinator", [ordered_choice, backtracking_choice])
    def test_requires_two_alternatives(self, combinator: object) -> None:
        """Fewer than two alternatives is rejected at construction."""
        with pytest.raises(CombinatorArgumentError) as exc_info:
            combinator(match_literal("a"))  # type: ignore[operator]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TOO_FEW_ALTERNATIVES

    def test_argument_error_is_value_error(self) -> None:
        """CombinatorArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError, match="at least 2 parsers, got 0"):
            ordered_choice()
