"""Rendering of Diagnostic records for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
    "escape_control_chars",
]

_CONTROL_ESCAPES: dict[str, str] = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_SEVERITY_COLORS: dict[str, str] = {
    "error": "\033[1;31m",  # Bold red
    "warning": "\033[1;33m",  # Bold yellow
}
_RESET = "\033[0m"


def escape_control_chars(text: str) -> str:
    """Escape control characters so input excerpts stay on one line.

    Args:
        text: Raw text, typically a slice of parser input

    Returns:
        Text with newlines, tabs and other C0 controls made visible

    Example:
        >>> escape_control_chars("a\\nb")
        'a\\\\nb'
    """
    parts: list[str] = []
    for ch in text:
        if ch in _CONTROL_ESCAPES:
            parts.append(_CONTROL_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\x{ord(ch):02x}")
        else:
            parts.append(ch)
    return "".join(parts)


class OutputFormat(StrEnum):
    """Rendering styles supported by DiagnosticFormatter."""

    RUST = "rust"  # Multi-line, rustc-like (default)
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # One JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic records into text.

    Attributes:
        output_format: Rendering style
        sanitize: Truncate free-text fields to max_content_length
        color: Wrap the severity in ANSI colors (RUST style only)
        max_content_length: Truncation limit used when sanitize is set

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> diagnostic = ErrorTemplate.too_few_alternatives("ordered_choice", 1)
        >>> print(formatter.format(diagnostic))
        TOO_FEW_ALTERNATIVES: ordered_choice needs at least 2 parsers, got 1
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return "\n".join(self._rust_lines(diagnostic))
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return json.dumps(self._json_fields(diagnostic), ensure_ascii=False)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def _rust_lines(self, diagnostic: Diagnostic) -> Iterator[str]:
        """Yield the lines of a rustc-style report.

        Example output:
            error[PARSE_FAILED]: Expected one of ['xm', 'abc'] at position 0, found 'hhhh'
              --> line 1, column 1
              = expected: ['xm', 'abc']
              = found: hhhh
              = help: Check the input near the reported position
        """
        severity = diagnostic.severity
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}{_RESET}"
        yield f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"

        span = diagnostic.span
        if span is not None:
            yield f"  --> line {span.line}, column {span.column}"
        if diagnostic.context:
            for line in diagnostic.context.split("\n"):
                yield f"   | {line}"
        if diagnostic.expected is not None:
            yield f"  = expected: {self._clip(diagnostic.expected)}"
        if diagnostic.found is not None:
            yield f"  = found: {escape_control_chars(diagnostic.found) or 'end of input'}"
        if diagnostic.hint:
            yield f"  = help: {self._clip(diagnostic.hint)}"

    def _json_fields(self, diagnostic: Diagnostic) -> dict[str, Any]:
        """Collect the JSON object for one diagnostic, omitting absent fields."""
        fields: dict[str, Any] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        span = diagnostic.span
        if span is not None:
            fields |= {
                "line": span.line,
                "column": span.column,
                "start": span.start,
                "end": span.end,
            }
        if diagnostic.expected is not None:
            fields["expected"] = self._clip(diagnostic.expected)
        if diagnostic.found is not None:
            fields["found"] = diagnostic.found
        if diagnostic.hint:
            fields["hint"] = self._clip(diagnostic.hint)
        return fields

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return f"{text[: self.max_content_length]}..."
