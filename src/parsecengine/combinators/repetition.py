"""Repetition combinators.

times() is the single implementation; many(), many1() and count() fix its
bounds. Values are collected into a list in match order.

Zero-width progress:
    An inner parser that succeeds without consuming input would repeat
    forever in an unbounded loop. times() detects this: the loop ends at
    the first zero-width success. Because parsers are referentially
    transparent, every further attempt would produce the same value at the
    same position, so that value is repeated until min_count is met and
    the repetition succeeds. Bounded repetitions need no guard and keep
    their exact semantics.
"""

import logging

from parsecengine.constants import UNBOUNDED_LABEL
from parsecengine.diagnostics import CombinatorArgumentError, ErrorTemplate
from parsecengine.expectation import Literal, describe
from parsecengine.parser import Parser
from parsecengine.result import Failure, Result, failure, success

__all__ = ["check_bounds", "count", "many", "many1", "times"]

logger = logging.getLogger(__name__)


def check_bounds(combinator: str, min_count: int, max_count: int | None) -> None:
    """Validate 0 <= min_count <= max_count (None meaning unbounded).

    Raises:
        CombinatorArgumentError: If the bounds are inconsistent
    """
    if min_count < 0 or (max_count is not None and max_count < min_count):
        raise CombinatorArgumentError(
            ErrorTemplate.invalid_repetition_bounds(combinator, min_count, max_count)
        )


def times[T](parser: Parser[T], min_count: int, max_count: int | None) -> Parser[list[T]]:
    """Apply parser repeatedly, between min_count and max_count times.

    Args:
        parser: Parser to repeat
        min_count: Minimum number of matches required
        max_count: Maximum number of matches, or None for unbounded

    Returns:
        Parser producing the list of matched values

    Raises:
        CombinatorArgumentError: If not 0 <= min_count <= max_count

    Behavior:
        - Stops with success once max_count values are collected
        - On an inner failure with at least min_count values, succeeds at
          the position reached before the failing attempt
        - On an inner failure with fewer values, fails at the inner
          failure position, expecting
          "match <inner> between [min,max] times"

    Example:
        >>> p = times(match_literal("xm"), 1, 3)
        >>> p.attempt("xmxmxmxm", 0)
        Success(position=6, value=['xm', 'xm', 'xm'])
        >>> p.attempt("x", 0)
        Failure(position=1, expected=Literal(text='match xm between [1,3] times'))
    """
    check_bounds("times", min_count, max_count)
    shown_max = UNBOUNDED_LABEL if max_count is None else str(max_count)

    def attempt(source: str, pos: int) -> Result[list[T]]:
        values: list[T] = []
        current = pos
        while max_count is None or len(values) < max_count:
            result = parser.attempt(source, current)
            if isinstance(result, Failure):
                if len(values) >= min_count:
                    break
                inner = describe(result.expected)
                return failure(
                    result.position,
                    Literal(f"match {inner} between [{min_count},{shown_max}] times"),
                )

            values.append(result.value)
            if max_count is None and result.position == current:
                logger.debug("Zero-width repetition stopped at position %d", current)
                if len(values) < min_count:
                    values.extend([result.value] * (min_count - len(values)))
                break
            current = result.position

        return success(current, values)

    return Parser(attempt)


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more matches: times(parser, 0, None)."""
    return times(parser, 0, None)


def many1[T](parser: Parser[T]) -> Parser[list[T]]:
    """One or more matches: times(parser, 1, None)."""
    return times(parser, 1, None)


def count[T](parser: Parser[T], n: int) -> Parser[list[T]]:
    """Exactly n matches: times(parser, n, n).

    Raises:
        CombinatorArgumentError: If n < 1
    """
    if n < 1:
        raise CombinatorArgumentError(ErrorTemplate.invalid_count("count", n))
    return times(parser, n, n)
