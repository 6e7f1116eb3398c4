"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from parsecengine.expectation import Aggregate, Expectation, describe

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message:
        - Testable in isolation
        - Consistently formatted
        - Documented in one place
    """

    # =========================================================================
    # PARSE ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def parse_failed(
        expected: Expectation,
        found: str,
        span: SourceSpan,
        context: str | None = None,
    ) -> Diagnostic:
        """Grammar rejected the input.

        Args:
            expected: Expectation at the failure point
            found: Excerpt of the input at the failure point
            span: Location of the failure
            context: Source line with caret (optional)

        Returns:
            Diagnostic for PARSE_FAILED
        """
        rendered = describe(expected)
        wanted = f"one of {rendered}" if Aggregate.guard(expected) else f"'{rendered}'"
        shown = repr(found) if found else "end of input"
        msg = f"Expected {wanted} at position {span.start}, found {shown}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=msg,
            span=span,
            hint="Check the input near the reported position",
            expected=rendered,
            found=found,
            context=context,
        )

    @staticmethod
    def unconsumed_input(
        found: str,
        span: SourceSpan,
        context: str | None = None,
    ) -> Diagnostic:
        """Strict parse matched a prefix but left input behind.

        Args:
            found: Excerpt of the leftover input
            span: Location where the grammar stopped
            context: Source line with caret (optional)

        Returns:
            Diagnostic for UNCONSUMED_INPUT
        """
        msg = f"Unexpected trailing input at position {span.start}: {found!r}"
        return Diagnostic(
            code=DiagnosticCode.UNCONSUMED_INPUT,
            message=msg,
            span=span,
            hint="Use parse() instead of parse_strict() to accept a prefix",
            expected="EOF",
            found=found,
            context=context,
        )

    # =========================================================================
    # LIMIT ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Input exceeds the configured size limit.

        Args:
            size: Length of the rejected input in characters
            max_size: Configured limit

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({max_size:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Pass max_source_size to parse() to raise the limit, or 0 to disable it",
        )

    @staticmethod
    def nesting_depth_exceeded(position: int | None = None) -> Diagnostic:
        """Grammar recursion exhausted the interpreter stack.

        Args:
            position: Start position of the parse, if known

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        where = "" if position is None else f" (parse started at position {position})"
        msg = f"Maximum nesting depth exceeded{where}"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="Reduce input nesting or increase sys.setrecursionlimit()",
        )

    # =========================================================================
    # CONSTRUCTION ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def invalid_repetition_bounds(
        combinator: str, min_count: int, max_count: int | None
    ) -> Diagnostic:
        """Repetition bounds violate 0 <= min <= max.

        Args:
            combinator: Name of the combinator being built
            min_count: Requested minimum
            max_count: Requested maximum (None for unbounded)

        Returns:
            Diagnostic for INVALID_REPETITION_BOUNDS
        """
        shown_max = "unbounded" if max_count is None else str(max_count)
        msg = f"{combinator} requires 0 <= min <= max, got min={min_count}, max={shown_max}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_REPETITION_BOUNDS,
            message=msg,
            span=None,
            hint="Use max_count=None for an unbounded repetition",
        )

    @staticmethod
    def invalid_count(combinator: str, n: int, minimum: int = 1) -> Diagnostic:
        """Exact or maximum count below the allowed minimum.

        Args:
            combinator: Name of the combinator being built
            n: Requested count
            minimum: Smallest accepted count

        Returns:
            Diagnostic for INVALID_COUNT
        """
        msg = f"{combinator} count must be at least {minimum}, got {n}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_COUNT,
            message=msg,
            span=None,
        )

    @staticmethod
    def too_few_alternatives(combinator: str, given: int) -> Diagnostic:
        """Choice built with fewer than two alternatives.

        Args:
            combinator: Name of the combinator being built
            given: Number of parsers supplied

        Returns:
            Diagnostic for TOO_FEW_ALTERNATIVES
        """
        msg = f"{combinator} needs at least 2 parsers, got {given}"
        return Diagnostic(
            code=DiagnosticCode.TOO_FEW_ALTERNATIVES,
            message=msg,
            span=None,
            hint="Use the parser directly instead of a single-branch choice",
        )
