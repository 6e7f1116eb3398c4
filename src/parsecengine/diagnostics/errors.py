"""ParsecEngine exception hierarchy with structured diagnostics.

Failures inside the engine are plain values (see parsecengine.result).
These exceptions are raised only at the edges: by the parse entry points
and by combinator constructors given invalid arguments.

Python 3.13+. Zero external dependencies.
"""

from parsecengine.expectation import Expectation

from .codes import Diagnostic

__all__ = [
    "CombinatorArgumentError",
    "ParseDepthError",
    "ParseFailedError",
    "ParsecError",
    "SourceTooLargeError",
]


class ParsecError(Exception):
    """Base exception for all ParsecEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ParsecError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailedError(ParsecError):
    """Input rejected by a parser at the top level.

    Raised by parse() and parse_strict(). Carries the failure position,
    the expectation reported there and a short excerpt of the input found
    at that position.

    Attributes:
        position: Character offset of the failure
        expected: Expectation descriptor of the failure
        excerpt: Next few characters of input at the failure position
        source: The complete input that was parsed

    Example:
        >>> try:
        ...     match_literal("xm").parse("xh")
        ... except ParseFailedError as e:
        ...     print(e.position, e.excerpt)
        1 h
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        position: int,
        expected: Expectation,
        excerpt: str = "",
        source: str = "",
    ) -> None:
        """Initialize ParseFailedError.

        Args:
            message: Error message string OR Diagnostic object
            position: Character offset of the failure
            expected: Expectation descriptor of the failure
            excerpt: Input found at the failure position
            source: The complete input
        """
        super().__init__(message)
        self.position = position
        self.expected = expected
        self.excerpt = excerpt
        self.source = source


class ParseDepthError(ParsecError):
    """Grammar recursion exceeded the interpreter stack.

    Converted from RecursionError at the parse entry points so callers
    handle one exception family.
    """


class SourceTooLargeError(ParsecError, ValueError):
    """Input exceeds the configured max_source_size."""


class CombinatorArgumentError(ParsecError, ValueError):
    """Combinator constructed with invalid arguments.

    Examples:
    - times(p, 3, 1) (min greater than max)
    - count(p, 0)
    - ordered_choice(p) (fewer than two alternatives)
    """
