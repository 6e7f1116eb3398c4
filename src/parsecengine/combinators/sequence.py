"""Sequencing and separated-list combinators."""

import logging
from typing import Any

from parsecengine.diagnostics import CombinatorArgumentError, ErrorTemplate
from parsecengine.parser import Parser
from parsecengine.result import Failure, Result, success

from .repetition import check_bounds

__all__ = ["joint", "sep_by", "sep_by1", "separated"]

logger = logging.getLogger(__name__)


def joint(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers in order, each starting where the previous one ended.

    Returns:
        Parser producing a tuple with one value per parser

    Note:
        The first failure aborts the sequence and is returned unchanged;
        later parsers are not attempted.

    Example:
        >>> p = joint(match_literal(">>"), match_pattern(r"\\d+"), match_literal("<<"))
        >>> p.attempt(">>12345<<", 0)
        Success(position=9, value=('>>', '12345', '<<'))
        >>> p.attempt(">>>1234<<", 0)
        Failure(position=2, expected=Literal(text='\\\\d+'))
    """

    def attempt(source: str, pos: int) -> Result[tuple[Any, ...]]:
        values: list[Any] = []
        current = pos
        for parser in parsers:
            result = parser.attempt(source, current)
            if isinstance(result, Failure):
                return result
            values.append(result.value)
            current = result.position
        return success(current, tuple(values))

    return Parser(attempt)


def separated[T](
    element: Parser[T],
    separator: Parser[Any],
    min_count: int,
    max_count: int | None,
) -> Parser[list[T]]:
    """Match element (separator element)* with bounds on the element count.

    Contract:
        The first element is always required, even when min_count is 0:
        this combinator never produces an empty list. Wrap it as
        ``optional(separated(...), default=[])`` to accept empty input.
        For the same reason max_count must be at least 1.

    Behavior:
        - After the first element, loop: attempt separator; if it fails,
          stop (success with at least min_count elements, otherwise the
          separator's failure)
        - If separator succeeds, element is required: its failure is
          returned and the consumed separator is not backtracked
        - Stop with success once max_count elements are collected

    Args:
        element: Parser for list items
        separator: Parser for the delimiter; its values are discarded
        min_count: Minimum number of elements
        max_count: Maximum number of elements, or None for unbounded

    Raises:
        CombinatorArgumentError: If not 0 <= min_count <= max_count,
            or max_count < 1

    Example:
        >>> number = match_pattern(r"\\d+").map(int)
        >>> separated(number, char(","), 2, 2).attempt("1,2,3", 0)
        Success(position=3, value=[1, 2])
    """
    check_bounds("separated", min_count, max_count)
    if max_count is not None and max_count < 1:
        raise CombinatorArgumentError(ErrorTemplate.invalid_count("separated max_count", max_count))

    def attempt(source: str, pos: int) -> Result[list[T]]:
        first = element.attempt(source, pos)
        if isinstance(first, Failure):
            return first

        values: list[T] = [first.value]
        current = first.position
        while max_count is None or len(values) < max_count:
            sep = separator.attempt(source, current)
            if isinstance(sep, Failure):
                if len(values) >= min_count:
                    break
                return sep

            item = element.attempt(source, sep.position)
            if isinstance(item, Failure):
                return item

            values.append(item.value)
            if max_count is None and item.position == current:
                logger.debug("Zero-width separated list stopped at position %d", current)
                if len(values) < min_count:
                    values.extend([item.value] * (min_count - len(values)))
                break
            current = item.position

        return success(current, values)

    return Parser(attempt)


def sep_by[T](element: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """separated(element, separator, 0, None); still needs one element."""
    return separated(element, separator, 0, None)


def sep_by1[T](element: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """separated(element, separator, 1, None)."""
    return separated(element, separator, 1, None)
