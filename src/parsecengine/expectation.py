"""Expectation descriptors attached to parse failures.

A closed sum of three immutable variants. Descriptors are diagnostic
payload only: combinators build and pass them along but never branch on
them. Equality is structural, so tests can compare failures directly.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

__all__ = [
    "Aggregate",
    "Char",
    "Expectation",
    "Literal",
    "describe",
]


@dataclass(frozen=True, slots=True)
class Literal:
    """Expected a piece of text, or a label describing a class of input.

    Used for literal strings, pattern sources, predicate labels
    ("a digit") and derived descriptions ("match xm between [1,3] times").

    Attributes:
        text: The expected text or label
    """

    text: str

    @staticmethod
    def guard(value: object) -> TypeIs["Literal"]:
        """Type guard for Literal expectations."""
        return isinstance(value, Literal)


@dataclass(frozen=True, slots=True)
class Char:
    """Expected one specific character.

    Attributes:
        char: The expected character (length 1)
    """

    char: str

    def __post_init__(self) -> None:
        """Validate the single-character invariant."""
        if len(self.char) != 1:
            msg = f"Char expectation must be a single character, got {self.char!r}"
            raise ValueError(msg)

    @staticmethod
    def guard(value: object) -> TypeIs["Char"]:
        """Type guard for Char expectations."""
        return isinstance(value, Char)


@dataclass(frozen=True, slots=True)
class Aggregate:
    """Expected any one of several alternatives.

    Produced by the choice combinators when every alternative failed at the
    start position. Order follows the order the alternatives were tried.

    Attributes:
        options: Expectations of the failed alternatives, in order
    """

    options: tuple["Expectation", ...]

    @staticmethod
    def guard(value: object) -> TypeIs["Aggregate"]:
        """Type guard for Aggregate expectations."""
        return isinstance(value, Aggregate)


type Expectation = Literal | Char | Aggregate


def describe(expected: Expectation) -> str:
    """Render an expectation for humans.

    Literal text and characters are shown verbatim; aggregates are shown
    as a bracketed, comma-separated list with quoted members.

    Example:
        >>> describe(Literal("xm"))
        'xm'
        >>> print(describe(Aggregate((Literal("xm"), Char(",")))))
        ['xm', ',']
    """
    match expected:
        case Literal(text=text):
            return text
        case Char(char=char):
            return char
        case Aggregate(options=options):
            return "[" + ", ".join(_describe_member(option) for option in options) + "]"


def _describe_member(option: Expectation) -> str:
    if Aggregate.guard(option):
        return describe(option)
    return f"'{describe(option)}'"
