"""Parser abstraction and top-level entry points.

A Parser is a single capability: given the complete input and a start
position, produce a Result. Combinators are plain functions that take
parsers and return new parsers closing over them; nothing is subclassed.

Architecture:
    - Parser wraps one callable ``(source, pos) -> Result[T]``
    - Parsers are frozen and hold no mutable state, so one parser value
      can be shared freely between threads and inputs
    - Failures are returned as values; only parse() and parse_strict()
      turn a Failure into an exception

Example:
    >>> from parsecengine import match_literal, match_pattern
    >>> number = match_pattern(r"\\d+").map(int)
    >>> number.parse("42 apples")
    42
    >>> match_literal("xm").attempt("xmxm", 2)
    Success(position=4, value='xm')

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from parsecengine.constants import EOF_LABEL, MAX_SOURCE_SIZE
from parsecengine.diagnostics import (
    ErrorTemplate,
    ParseDepthError,
    ParseFailedError,
    SourceTooLargeError,
)
from parsecengine.expectation import Literal, describe
from parsecengine.position import error_context, excerpt, source_span
from parsecengine.result import Failure, Result

__all__ = ["Parser", "parse", "parse_strict"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Parser[T]:
    """Immutable parser value.

    Type Parameters:
        T: The type of the value produced on success

    Attributes:
        fn: The attempt function ``(source, pos) -> Result[T]``

    Referential transparency:
        attempt(source, pos) always returns an equal Result for equal
        arguments. Combinators rely on this when they retry or discard an
        attempt.
    """

    fn: Callable[[str, int], Result[T]]

    def attempt(self, source: str, pos: int) -> Result[T]:
        """Run the parser on source starting at pos.

        Args:
            source: Complete input
            pos: Start offset, 0 <= pos <= len(source)

        Returns:
            Success with the end position and value, or Failure
        """
        return self.fn(source, pos)

    def __call__(self, source: str, pos: int) -> Result[T]:
        return self.fn(source, pos)

    # ------------------------------------------------------------------
    # Fluent forms of the transformation combinators
    # ------------------------------------------------------------------

    def map[R](self, transform: Callable[[T], R]) -> "Parser[R]":
        """See parsecengine.combinators.transform.map_result."""
        from parsecengine.combinators.transform import map_result  # noqa: PLC0415 - circular

        return map_result(self, transform)

    def result[R](self, value: R) -> "Parser[R]":
        """See parsecengine.combinators.transform.constant_result."""
        from parsecengine.combinators.transform import constant_result  # noqa: PLC0415

        return constant_result(self, value)

    def skip(self, trailing: "Parser[Any]") -> "Parser[T]":
        """See parsecengine.combinators.transform.skip_trailing."""
        from parsecengine.combinators.transform import skip_trailing  # noqa: PLC0415

        return skip_trailing(self, trailing)

    def then[R](self, second: "Parser[R]") -> "Parser[R]":
        """See parsecengine.combinators.transform.sequence_discard_first."""
        from parsecengine.combinators.transform import sequence_discard_first  # noqa: PLC0415

        return sequence_discard_first(self, second)

    def optional[D](self, default: D = None) -> "Parser[T | D]":  # type: ignore[assignment]
        """See parsecengine.combinators.transform.optional."""
        from parsecengine.combinators.transform import optional  # noqa: PLC0415

        return optional(self, default)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse(self, source: str, *, max_source_size: int | None = None) -> T:
        """See parsecengine.parser.parse."""
        return parse(self, source, max_source_size=max_source_size)

    def parse_strict(self, source: str, *, max_source_size: int | None = None) -> T:
        """See parsecengine.parser.parse_strict."""
        return parse_strict(self, source, max_source_size=max_source_size)


def parse[T](parser: Parser[T], source: str, *, max_source_size: int | None = None) -> T:
    """Run parser on source from position 0 and return its value.

    Input after the matched prefix is ignored; use parse_strict() to
    require that the whole input is consumed.

    Args:
        parser: Parser to run
        source: Complete input
        max_source_size: Maximum accepted input length in characters
            (default: MAX_SOURCE_SIZE). 0 disables the check.

    Returns:
        The parsed value

    Raises:
        ParseFailedError: The parser failed; carries position, expected
            and an excerpt of the input at the failure position
        ParseDepthError: The grammar recursed beyond the interpreter stack
        SourceTooLargeError: source is longer than max_source_size

    Example:
        >>> parse(match_literal("xm"), "xm and xh")
        'xm'
    """
    return _run(parser, source, max_source_size=max_source_size, strict=False)


def parse_strict[T](
    parser: Parser[T], source: str, *, max_source_size: int | None = None
) -> T:
    """Run parser on source and require that it consumes all input.

    Input left over after a successful parse is reported as
    UNCONSUMED_INPUT, with "EOF" as the expectation. Failures inside the
    grammar are reported exactly as parse() reports them.

    Raises:
        ParseFailedError: The parser failed, or input remained after it
        ParseDepthError: The grammar recursed beyond the interpreter stack
        SourceTooLargeError: source is longer than max_source_size
    """
    return _run(parser, source, max_source_size=max_source_size, strict=True)


def _run[T](
    parser: Parser[T], source: str, *, max_source_size: int | None, strict: bool
) -> T:
    limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
    if limit > 0 and len(source) > limit:
        logger.warning("Rejected source of %d characters (limit %d)", len(source), limit)
        raise SourceTooLargeError(ErrorTemplate.source_too_large(len(source), limit))

    try:
        result = parser.attempt(source, 0)
    except RecursionError as e:
        logger.warning(
            "Parser recursion exceeded interpreter stack on %d characters", len(source)
        )
        raise ParseDepthError(ErrorTemplate.nesting_depth_exceeded(0)) from e

    if isinstance(result, Failure):
        logger.debug(
            "Parse failed at position %d: expected %s", result.position, describe(result.expected)
        )
        raise _failure_error(source, result, unconsumed=False)
    if strict and result.position < len(source):
        logger.debug(
            "Parse stopped at position %d of %d characters", result.position, len(source)
        )
        leftover = Failure(result.position, Literal(EOF_LABEL))
        raise _failure_error(source, leftover, unconsumed=True)
    return result.value


def _failure_error(source: str, result: Failure, *, unconsumed: bool) -> ParseFailedError:
    """Convert a top-level Failure into a ParseFailedError with diagnostics."""
    pos = result.position
    found = excerpt(source, pos)
    span = source_span(source, pos, len(found))
    context = error_context(source, pos)

    if unconsumed:
        diagnostic = ErrorTemplate.unconsumed_input(found, span, context)
    else:
        diagnostic = ErrorTemplate.parse_failed(result.expected, found, span, context)

    return ParseFailedError(
        diagnostic,
        position=pos,
        expected=result.expected,
        excerpt=found,
        source=source,
    )
