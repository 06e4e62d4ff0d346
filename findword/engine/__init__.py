from .errors import (
    FindWordError,
    InvalidShelfError,
    MissingRequiredOptionError,
    PatternCompileError,
    InvalidCharacterError,
    DictionaryError,
    DictionaryNotFoundError,
    DictionaryReadError,
)
from .shelf import ShelfInventory, parse_shelf, restricted_alphabet, ALPHABET, WILDCARD
from .pattern import CompiledMatcher, Literal, AnyChar, NotInSet, compile_pattern
from .matcher import MatchCandidate, match_words
from .feasibility import excess_needed, is_feasible, filter_feasible
from .scoring import LETTER_VALUES, score_word

__all__ = [
    "FindWordError", "InvalidShelfError", "MissingRequiredOptionError",
    "PatternCompileError", "InvalidCharacterError", "DictionaryError",
    "DictionaryNotFoundError", "DictionaryReadError",
    "ShelfInventory", "parse_shelf", "restricted_alphabet", "ALPHABET", "WILDCARD",
    "CompiledMatcher", "Literal", "AnyChar", "NotInSet", "compile_pattern",
    "MatchCandidate", "match_words",
    "excess_needed", "is_feasible", "filter_feasible",
    "LETTER_VALUES", "score_word",
]
