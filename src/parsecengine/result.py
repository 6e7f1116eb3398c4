"""Result model returned by every parse attempt.

A Result is either Success (end position and value) or Failure (failure
position and expectation). Both are frozen dataclasses so equality is
structural across status, position, value and expectation.

Pattern:
    Every parser attempt has the shape:
        def attempt(source: str, pos: int) -> Result[T]:
            ...
            return success(new_pos, value)       # consumed source[pos:new_pos]
            return failure(pos, Literal("x"))    # nothing raised

Truthiness:
    Success is truthy and Failure is falsy, so call sites can write
    ``if result:`` instead of an isinstance check.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Literal as TypingLiteral

from parsecengine.expectation import Expectation

__all__ = ["Failure", "Result", "Success", "failure", "success"]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful parse attempt.

    Type Parameters:
        T: The type of the parsed value

    Attributes:
        position: End position (first character not consumed)
        value: The parsed value

    Example:
        >>> Success(5, "hello") == Success(5, "hello")
        True
    """

    position: int
    value: T

    def __bool__(self) -> TypingLiteral[True]:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed parse attempt.

    Attributes:
        position: Where the failure was detected. Equal to the start
            position unless the parser consumed input before failing.
        expected: What the parser expected at that position
    """

    position: int
    expected: Expectation

    def __bool__(self) -> TypingLiteral[False]:
        return False


type Result[T] = Success[T] | Failure


def success[T](position: int, value: T) -> Success[T]:
    """Construct a successful Result."""
    return Success(position, value)


def failure(position: int, expected: Expectation) -> Failure:
    """Construct a failed Result."""
    return Failure(position, expected)
