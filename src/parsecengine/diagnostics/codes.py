"""Diagnostic codes, source locations and the Diagnostic record.

Every error the engine reports is described by a Diagnostic: a code from
DiagnosticCode, a message built by ErrorTemplate and, for parse errors, the
location and input found at the failure point.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every reported error.

    Ranges:
        1000-1999: Input rejected by a grammar
        2000-2999: Input or recursion over a limit
        3000-3999: Combinator built with invalid arguments
    """

    # Input rejected (1000-1999)
    PARSE_FAILED = 1001
    UNCONSUMED_INPUT = 1002

    # Limits (2000-2999)
    SOURCE_TOO_LARGE = 2001
    NESTING_DEPTH_EXCEEDED = 2002

    # Construction (3000-3999)
    INVALID_REPETITION_BOUNDS = 3001
    INVALID_COUNT = 3002
    TOO_FEW_ALTERNATIVES = 3003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Region of parser input a diagnostic points at.

    Offsets count str characters (code points). line and column are
    1-based, as shown to users; start and end are 0-based offsets with end
    exclusive.

    Attributes:
        start: First offset of the region
        end: Offset just past the region
        line: Line of start, counting from 1
        column: Column of start, counting from 1
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Reject spans that cannot describe a region of text.

        Raises:
            ValueError: On a negative start, an end before start, or a
                line or column below 1
        """
        problems = [
            (self.start < 0, f"start must be >= 0, got {self.start}"),
            (self.end < self.start, f"end ({self.end}) must be >= start ({self.start})"),
            (self.line < 1, f"line must be >= 1, got {self.line}"),
            (self.column < 1, f"column must be >= 1, got {self.column}"),
        ]
        for violated, detail in problems:
            if violated:
                msg = f"Invalid SourceSpan: {detail}"
                raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported error, ready for rendering.

    Attributes:
        code: Identifier of the error kind
        message: One-line description
        span: Where in the input (None when the error is not about input)
        hint: What the caller can do about it
        expected: Rendered expectation, for parse errors
        found: Input excerpt at the failure point, for parse errors
        context: Failing source line with a caret under the position
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: str | None = None
    found: str | None = None
    context: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Render with the default (Rust-style) DiagnosticFormatter.

        Example output:
            error[PARSE_FAILED]: Expected 'hello' at position 4, found 'lo'
              --> line 1, column 5
              = expected: hello
              = found: lo
              = help: Check the input near the reported position
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
