"""Diagnostic system for ParsecEngine errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CombinatorArgumentError,
    ParseDepthError,
    ParseFailedError,
    ParsecError,
    SourceTooLargeError,
)
from .formatter import DiagnosticFormatter, OutputFormat, escape_control_chars
from .templates import ErrorTemplate

__all__ = [
    "CombinatorArgumentError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "ParseDepthError",
    "ParseFailedError",
    "ParsecError",
    "SourceSpan",
    "SourceTooLargeError",
    "escape_control_chars",
]
