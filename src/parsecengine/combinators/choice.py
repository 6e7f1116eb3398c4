"""Choice combinators.

Both combinators try an ordered list of alternatives, each from the same
start position, and return the first success. They differ in what happens
when an alternative consumes input and then fails:

    ordered_choice      commits: that failure is the result, later
                        alternatives are never tried (PEG-style)
    backtracking_choice discards the attempt and tries the next
                        alternative from the start position

When every alternative fails without a result being chosen, the failure
is reported at the start position with an Aggregate of all expectations.
"""

from typing import Any

from parsecengine.diagnostics import CombinatorArgumentError, ErrorTemplate
from parsecengine.expectation import Aggregate, Expectation
from parsecengine.parser import Parser
from parsecengine.result import Failure, Result, failure

__all__ = ["backtracking_choice", "ordered_choice"]


def _check_alternatives(name: str, parsers: tuple[Parser[Any], ...]) -> None:
    if len(parsers) < 2:
        raise CombinatorArgumentError(ErrorTemplate.too_few_alternatives(name, len(parsers)))


def ordered_choice(*parsers: Parser[Any]) -> Parser[Any]:
    """Try alternatives in order, committing once one consumes input.

    Args:
        *parsers: Two or more alternatives

    Returns:
        Parser producing the value of the first successful alternative

    Raises:
        CombinatorArgumentError: Fewer than two alternatives given

    Example:
        >>> p = ordered_choice(match_literal("xm"), match_literal("abc"))
        >>> p.attempt("abx", 0)
        Failure(position=2, expected=Literal(text='abc'))
        >>> p.attempt("xabc", 0)
        Failure(position=1, expected=Literal(text='xm'))
    """
    _check_alternatives("ordered_choice", parsers)

    def attempt(source: str, pos: int) -> Result[Any]:
        expectations: list[Expectation] = []
        for parser in parsers:
            result = parser.attempt(source, pos)
            if not isinstance(result, Failure):
                return result
            if result.position != pos:
                return result
            expectations.append(result.expected)
        return failure(pos, Aggregate(tuple(expectations)))

    return Parser(attempt)


def backtracking_choice(*parsers: Parser[Any]) -> Parser[Any]:
    """Try alternatives in order, always restarting from the start position.

    Costs repeated work on partially matching alternatives; use it only
    where the grammar needs full re-exploration.

    Raises:
        CombinatorArgumentError: Fewer than two alternatives given

    Example:
        >>> p = backtracking_choice(match_literal("abc"), match_pattern("ab."))
        >>> p.attempt("abx", 0)
        Success(position=3, value='abx')
    """
    _check_alternatives("backtracking_choice", parsers)

    def attempt(source: str, pos: int) -> Result[Any]:
        expectations: list[Expectation] = []
        for parser in parsers:
            result = parser.attempt(source, pos)
            if not isinstance(result, Failure):
                return result
            expectations.append(result.expected)
        return failure(pos, Aggregate(tuple(expectations)))

    return Parser(attempt)
