"""Shared constants for ParsecEngine.

This module provides centralized configuration constants used by the
combinators, the parse entry points and the diagnostics layer. Placing
constants here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Diagnostic limits: How much unmatched input an error message shows
- Input limits: DoS prevention via size constraints
- Labels: Expectation text shared between primitives and tests

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Diagnostic limits
    "ERROR_EXCERPT_LENGTH",
    "ERROR_CONTEXT_WIDTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Labels
    "EOF_LABEL",
    "UNBOUNDED_LABEL",
]

# ============================================================================
# DIAGNOSTIC LIMITS
# ============================================================================

# Number of characters of unmatched input quoted in a parse failure message.
ERROR_EXCERPT_LENGTH: int = 5

# Characters shown on either side of the caret in a context rendering.
ERROR_CONTEXT_WIDTH: int = 20

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 Mi).
# Prevents unbounded work on accidental or adversarial input.
# Set max_source_size=0 on an entry point to disable the check.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# LABELS
# ============================================================================

# Expectation text reported by end_of_input() on failure.
EOF_LABEL: str = "EOF"

# How an unbounded repetition maximum is rendered in expectation text.
UNBOUNDED_LABEL: str = "inf"
