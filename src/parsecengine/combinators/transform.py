"""Transformation combinators.

Each combinator wraps one parser (or chains a second one) and alters the
value or the end position of a success. Failures of the wrapped parsers
are returned unchanged: nothing here recovers from a failure except
optional(), whose purpose is exactly that.
"""

from collections.abc import Callable
from typing import Any

from parsecengine.parser import Parser
from parsecengine.result import Failure, Result, success

__all__ = [
    "constant_result",
    "lazy",
    "map_result",
    "optional",
    "sequence_discard_first",
    "skip_trailing",
]


def map_result[T, R](parser: Parser[T], transform: Callable[[T], R]) -> Parser[R]:
    """Apply transform to the value of a successful parse.

    The end position is kept. transform is never called on failure.

    Example:
        >>> map_result(match_pattern(r"\\d+"), int).attempt("12345", 0)
        Success(position=5, value=12345)
    """

    def attempt(source: str, pos: int) -> Result[R]:
        result = parser.attempt(source, pos)
        if isinstance(result, Failure):
            return result
        return success(result.position, transform(result.value))

    return Parser(attempt)


def constant_result[T, R](parser: Parser[T], value: R) -> Parser[R]:
    """Replace the value of a successful parse with value.

    Example:
        >>> constant_result(match_literal("#t"), True).attempt("#t", 0)
        Success(position=2, value=True)
    """

    def attempt(source: str, pos: int) -> Result[R]:
        result = parser.attempt(source, pos)
        if isinstance(result, Failure):
            return result
        return success(result.position, value)

    return Parser(attempt)


def skip_trailing[T](parser: Parser[T], trailing: Parser[Any]) -> Parser[T]:
    """Run trailing after parser and keep parser's value.

    The end position is trailing's end position; trailing's value is
    discarded. A failure of either stage is returned as-is.

    Example:
        >>> skip_trailing(match_literal("xm"), end_of_input()).attempt("xm and xh", 0)
        Failure(position=2, expected=Literal(text='EOF'))
    """

    def attempt(source: str, pos: int) -> Result[T]:
        result = parser.attempt(source, pos)
        if isinstance(result, Failure):
            return result
        end = trailing.attempt(source, result.position)
        if isinstance(end, Failure):
            return end
        return success(end.position, result.value)

    return Parser(attempt)


def sequence_discard_first[R](first: Parser[Any], second: Parser[R]) -> Parser[R]:
    """Run second after first and return second's Result unchanged.

    Example:
        >>> sequence_discard_first(char("a"), match_literal("bc")).attempt("abc", 0)
        Success(position=3, value='bc')
    """

    def attempt(source: str, pos: int) -> Result[R]:
        result = first.attempt(source, pos)
        if isinstance(result, Failure):
            return result
        return second.attempt(source, result.position)

    return Parser(attempt)


def optional[T, D](parser: Parser[T], default: D = None) -> Parser[T | D]:  # type: ignore[assignment]
    """Try parser; on failure succeed with default without consuming input.

    The failed attempt is discarded entirely, even if it consumed input
    before failing.

    Example:
        >>> optional(match_pattern("[+-]")).attempt("100", 0)
        Success(position=0, value=None)
    """

    def attempt(source: str, pos: int) -> Result[T | D]:
        result = parser.attempt(source, pos)
        if isinstance(result, Failure):
            return success(pos, default)
        return result

    return Parser(attempt)


def lazy[T](factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer parser lookup to attempt time.

    Recursive grammars need to refer to a parser before it is defined:

        >>> value = lazy(lambda: value_def)
        >>> array = joint(char("["), sep_by(value, char(",")), char("]"))
        >>> value_def = ordered_choice(match_pattern(r"\\d+"), array)

    factory is called on every attempt and should return an already built
    parser (typically a module-level name), not construct a new one.
    """

    def attempt(source: str, pos: int) -> Result[T]:
        return factory().attempt(source, pos)

    return Parser(attempt)
