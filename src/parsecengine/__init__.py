"""ParsecEngine - parser combinators with position-tracked results.

Composable parsing primitives and higher-order combinators for building
recursive-descent parsers over in-memory strings. Every parse attempt
returns a Success (end position, value) or a Failure (position,
expectation); only the entry points raise.

Public API:
    Parser - Immutable parser value (attempt, map, result, skip, then, parse)
    parse - Run a parser from position 0 and return its value
    parse_strict - Like parse, but the whole input must be consumed
    Success, Failure, Result - Result model
    Literal, Char, Aggregate - Expectation descriptors

Combinators:
    Primitives: match_char, char, digit, letter, space, match_literal,
        match_pattern, whitespace_run, end_of_input, char_in_set,
        char_not_in_set
    Transformation: map_result, constant_result, skip_trailing,
        sequence_discard_first, optional, lazy
    Choice: ordered_choice, backtracking_choice
    Repetition: times, many, many1, count
    Sequencing: joint, separated, sep_by, sep_by1

Exceptions:
    ParsecError - Base exception class
    ParseFailedError - Top-level parse failure
    ParseDepthError - Grammar recursion too deep
    SourceTooLargeError - Input over the size limit
    CombinatorArgumentError - Invalid combinator arguments

Submodules:
    parsecengine.combinators - All combinators, grouped by family
    parsecengine.diagnostics - Error types, codes and formatting
    parsecengine.position - Line/column helpers for error reporting
"""

from .combinators import (
    backtracking_choice,
    char,
    char_in_set,
    char_not_in_set,
    constant_result,
    count,
    digit,
    end_of_input,
    joint,
    lazy,
    letter,
    many,
    many1,
    map_result,
    match_char,
    match_literal,
    match_pattern,
    optional,
    ordered_choice,
    sep_by,
    sep_by1,
    separated,
    sequence_discard_first,
    skip_trailing,
    space,
    times,
    whitespace_run,
)
from .diagnostics import (
    CombinatorArgumentError,
    ParseDepthError,
    ParseFailedError,
    ParsecError,
    SourceTooLargeError,
)
from .expectation import Aggregate, Char, Expectation, Literal, describe
from .parser import Parser, parse, parse_strict
from .result import Failure, Result, Success, failure, success

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsecengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Aggregate",
    "Char",
    "CombinatorArgumentError",
    "Expectation",
    "Failure",
    "Literal",
    "ParseDepthError",
    "ParseFailedError",
    "ParsecError",
    "Parser",
    "Result",
    "SourceTooLargeError",
    "Success",
    "__version__",
    "backtracking_choice",
    "char",
    "char_in_set",
    "char_not_in_set",
    "constant_result",
    "count",
    "describe",
    "digit",
    "end_of_input",
    "failure",
    "joint",
    "lazy",
    "letter",
    "many",
    "many1",
    "map_result",
    "match_char",
    "match_literal",
    "match_pattern",
    "optional",
    "ordered_choice",
    "parse",
    "parse_strict",
    "sep_by",
    "sep_by1",
    "separated",
    "sequence_discard_first",
    "skip_trailing",
    "space",
    "success",
    "times",
    "whitespace_run",
]
