"""Position utilities for parser input.

Converts character offsets into line/column locations and source excerpts
for error reporting. Parsers themselves only ever deal in offsets; these
helpers run once, when a top-level parse fails.

Line Ending Support:
    - LF (\\n) and CRLF (\\r\\n): Supported (\\n is the line delimiter)
    - CR-only (\\r): NOT supported, counted as part of the line
"""

from bisect import bisect_right

from parsecengine.constants import ERROR_CONTEXT_WIDTH, ERROR_EXCERPT_LENGTH
from parsecengine.diagnostics import SourceSpan

__all__ = [
    "LineOffsetCache",
    "column_offset",
    "error_context",
    "excerpt",
    "line_offset",
    "source_span",
]


def _check_pos(pos: int) -> None:
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)


class LineOffsetCache:
    """Precomputed line starts for repeated offset lookups.

    line_offset() and column_offset() scan the source on every call. When
    many positions in the same source need locating (for example when
    reporting several failures of one input), build the index once and
    look positions up by binary search.

    Example:
        >>> cache = LineOffsetCache("abc\\ndef\\nghi")
        >>> cache.line_col(4)
        (2, 1)
        >>> cache.span(5, 2)
        SourceSpan(start=5, end=7, line=2, column=2)

    Thread Safety:
        Immutable after __init__; safe to share.
    """

    __slots__ = ("_line_starts", "_source_len")

    def __init__(self, source: str) -> None:
        starts = [0]
        starts.extend(i + 1 for i, ch in enumerate(source) if ch == "\n")
        self._line_starts: tuple[int, ...] = tuple(starts)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing newline starts an empty last line)."""
        return len(self._line_starts)

    def line_col(self, pos: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of pos.

        Positions past the end of the source are clamped to its end.

        Raises:
            ValueError: If pos is negative
        """
        _check_pos(pos)
        pos = min(pos, self._source_len)
        index = bisect_right(self._line_starts, pos) - 1
        return index + 1, pos - self._line_starts[index] + 1

    def span(self, pos: int, length: int = 0) -> SourceSpan:
        """Build a SourceSpan starting at pos, clamped to the source."""
        line, column = self.line_col(pos)
        start = min(pos, self._source_len)
        end = min(start + max(length, 0), self._source_len)
        return SourceSpan(start=start, end=end, line=line, column=column)


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete parser input
        pos: Character offset in source

    Returns:
        0-based line number

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_offset(source, 0)
        0
        >>> line_offset(source, 6)
        1
    """
    _check_pos(pos)
    pos = min(pos, len(source))
    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Args:
        source: Complete parser input
        pos: Character offset in source

    Returns:
        0-based column number (characters since the last newline)

    Example:
        >>> column_offset("hello\\nworld", 8)
        2
    """
    _check_pos(pos)
    pos = min(pos, len(source))
    line_start = source.rfind("\n", 0, pos)
    if line_start == -1:
        return pos
    return pos - line_start - 1


def source_span(
    source: str, pos: int, length: int = 0, cache: LineOffsetCache | None = None
) -> SourceSpan:
    """Build a 1-based SourceSpan starting at pos.

    Args:
        source: Complete parser input
        pos: Start offset
        length: Span length, clamped to the end of the source
        cache: Prebuilt LineOffsetCache for source (optional)

    Returns:
        SourceSpan with line and column for pos
    """
    if cache is not None:
        return cache.span(pos, length)
    pos = min(pos, len(source))
    end = min(pos + max(length, 0), len(source))
    return SourceSpan(
        start=pos,
        end=end,
        line=line_offset(source, pos) + 1,
        column=column_offset(source, pos) + 1,
    )


def excerpt(source: str, pos: int, length: int = ERROR_EXCERPT_LENGTH) -> str:
    """Return up to length characters of source starting at pos.

    Example:
        >>> excerpt("xm and xh", 2)
        ' and '
        >>> excerpt("ab", 2)
        ''
    """
    _check_pos(pos)
    return source[pos : pos + length]


def error_context(
    source: str, pos: int, width: int = ERROR_CONTEXT_WIDTH, marker: str = "^"
) -> str:
    """Render the line containing pos with a marker under the position.

    Long lines are windowed to width characters either side of pos.

    Example:
        >>> print(error_context("a = [1, 2,, 3]", 10))
        a = [1, 2,, 3]
                  ^
    """
    line_num = line_offset(source, pos)
    col_num = column_offset(source, pos)
    lines = source.split("\n")
    line = lines[line_num].rstrip("\r") if line_num < len(lines) else ""

    start = max(0, col_num - width)
    window = line[start : col_num + width]
    return f"{window}\n{' ' * (col_num - start)}{marker}"
