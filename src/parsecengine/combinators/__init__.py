"""Combinator library: primitive parsers and higher-order combinators.

Submodules:
    primitives - Leaf parsers (characters, literals, patterns, EOF)
    transform - Value mapping and two-stage chaining
    choice - Ordered and backtracking alternation
    repetition - Bounded and unbounded repetition
    sequence - Joint sequencing and separated lists
"""

from .choice import backtracking_choice, ordered_choice
from .primitives import (
    char,
    char_in_set,
    char_not_in_set,
    digit,
    end_of_input,
    letter,
    match_char,
    match_literal,
    match_pattern,
    space,
    whitespace_run,
)
from .repetition import count, many, many1, times
from .sequence import joint, sep_by, sep_by1, separated
from .transform import (
    constant_result,
    lazy,
    map_result,
    optional,
    sequence_discard_first,
    skip_trailing,
)

__all__ = [
    "backtracking_choice",
    "char",
    "char_in_set",
    "char_not_in_set",
    "constant_result",
    "count",
    "digit",
    "end_of_input",
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
    "sep_by",
    "sep_by1",
    "separated",
    "sequence_discard_first",
    "skip_trailing",
    "space",
    "times",
    "whitespace_run",
]
