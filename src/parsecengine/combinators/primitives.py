"""Primitive leaf parsers.

Every parser here inspects the input directly; none wraps another parser.
A failing primitive never reports a position before its start position,
and only match_literal reports one after it (the end of the matched
prefix).

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Callable

from parsecengine.constants import EOF_LABEL
from parsecengine.expectation import Char, Literal
from parsecengine.parser import Parser
from parsecengine.result import Result, failure, success

__all__ = [
    "char",
    "char_in_set",
    "char_not_in_set",
    "digit",
    "end_of_input",
    "letter",
    "match_char",
    "match_literal",
    "match_pattern",
    "space",
    "whitespace_run",
]


def match_char(predicate: Callable[[str], bool], label: str) -> Parser[str]:
    """Match one character satisfying predicate.

    Args:
        predicate: Test applied to the character at the current position
        label: Expectation text reported on failure

    Returns:
        Parser producing the matched character

    Note:
        The bound check is against the current position, not the input
        length alone: at pos == len(source) the parser fails with label
        even when the input is non-empty.

    Example:
        >>> vowel = match_char(lambda c: c in "aeiou", "a vowel")
        >>> vowel.attempt("ab", 0)
        Success(position=1, value='a')
        >>> vowel.attempt("ab", 2)
        Failure(position=2, expected=Literal(text='a vowel'))
    """
    expected = Literal(label)

    def attempt(source: str, pos: int) -> Result[str]:
        if pos < len(source) and predicate(source[pos]):
            return success(pos + 1, source[pos])
        return failure(pos, expected)

    return Parser(attempt)


def char(c: str) -> Parser[str]:
    """Match exactly the character c.

    Failure carries a Char expectation rather than a Literal.
    """
    expected = Char(c)

    def attempt(source: str, pos: int) -> Result[str]:
        if pos < len(source) and source[pos] == c:
            return success(pos + 1, c)
        return failure(pos, expected)

    return Parser(attempt)


def digit() -> Parser[str]:
    """Match one character for which str.isdigit() holds."""
    return match_char(str.isdigit, "a digit")


def letter() -> Parser[str]:
    """Match one character for which str.isalpha() holds."""
    return match_char(str.isalpha, "a letter")


def space() -> Parser[str]:
    """Match one character for which str.isspace() holds."""
    return match_char(str.isspace, "a space")


def match_literal(text: str) -> Parser[str]:
    """Match text verbatim.

    On mismatch the failure position is start + the length of the longest
    prefix of text that did match, so diagnostics point at the divergence.

    Example:
        >>> match_literal("hello").attempt("hello world", 0)
        Success(position=5, value='hello')
        >>> match_literal("hello").attempt("helllo", 0)
        Failure(position=4, expected=Literal(text='hello'))
    """
    expected = Literal(text)
    length = len(text)

    def attempt(source: str, pos: int) -> Result[str]:
        if source.startswith(text, pos):
            return success(pos + length, text)

        matched = 0
        while (
            matched < length
            and pos + matched < len(source)
            and source[pos + matched] == text[matched]
        ):
            matched += 1
        return failure(pos + matched, expected)

    return Parser(attempt)


def _anchored(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile pattern anchored at the start of the text it is matched on.

    A pattern that already begins with "^" is used as is; anything else is
    wrapped as ^(?:pattern). Flags of a compiled pattern are kept.
    """
    if isinstance(pattern, re.Pattern):
        text, flags = pattern.pattern, pattern.flags
    else:
        text, flags = pattern, 0
    if not text.startswith("^"):
        text = f"^(?:{text})"
    return re.compile(text, flags)


def match_pattern(pattern: str | re.Pattern[str]) -> Parser[str]:
    """Match a regular expression anchored at the current position.

    Args:
        pattern: Pattern source or compiled pattern. A leading "^" is
            accepted and treated as the anchor.

    Returns:
        Parser producing the matched text (group 0)

    Note:
        The pattern sees only the remaining input, so "^", "\\b" and
        lookbehinds treat the current position as the start of the text.
        On failure the position is unchanged and the expectation is the
        pattern text exactly as supplied.

    Example:
        >>> match_pattern(r"\\d+").attempt("123abc", 0)
        Success(position=3, value='123')
        >>> match_pattern(r"\\d+").attempt("abc213", 0)
        Failure(position=0, expected=Literal(text='\\\\d+'))
    """
    source_text = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
    expected = Literal(source_text)
    compiled = _anchored(pattern)

    def attempt(source: str, pos: int) -> Result[str]:
        m = compiled.match(source[pos:])
        if m is None:
            return failure(pos, expected)
        return success(pos + m.end(), m.group(0))

    return Parser(attempt)


def whitespace_run() -> Parser[str]:
    """Consume the maximal run of whitespace characters.

    Always succeeds, possibly consuming nothing; the value is the consumed
    text.

    Example:
        >>> whitespace_run().attempt("   1  ", 0)
        Success(position=3, value='   ')
        >>> whitespace_run().attempt("1  ", 0)
        Success(position=0, value='')
    """

    def attempt(source: str, pos: int) -> Result[str]:
        end = pos
        while end < len(source) and source[end].isspace():
            end += 1
        return success(end, source[pos:end])

    return Parser(attempt)


def end_of_input() -> Parser[None]:
    """Succeed with None only at the end of the input.

    Fails at the unchanged position with Literal("EOF") otherwise.
    """
    expected = Literal(EOF_LABEL)

    def attempt(source: str, pos: int) -> Result[None]:
        if pos >= len(source):
            return success(pos, None)
        return failure(pos, expected)

    return Parser(attempt)


def char_in_set(chars: str) -> Parser[str]:
    """Match one character contained in chars.

    Example:
        >>> char_in_set("1a$").attempt("%", 0)
        Failure(position=0, expected=Literal(text='one of 1a$'))
    """
    members = frozenset(chars)
    return match_char(members.__contains__, f"one of {chars}")


def char_not_in_set(chars: str) -> Parser[str]:
    """Match one character not contained in chars."""
    members = frozenset(chars)
    return match_char(lambda c: c not in members, f"none of {chars}")
