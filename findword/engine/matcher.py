"""
Dictionary scanning against a compiled board pattern.

match_words() is a lazy generator: it walks whatever iterable it is given
(a list, an open file, ...) exactly once and yields a MatchCandidate for every
accepted word. Re-scanning for another pattern means handing it the word
source again.
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

from .pattern import CompiledMatcher
from .shelf import ALPHABET


class MatchCandidate(NamedTuple):
    word: str
    mask: str      # letter mask of the pattern that accepted the word
    pattern: str   # raw pattern, for diagnostics


def is_word(line: str) -> bool:
    """True for a non-empty, all-lowercase a-z token."""
    return bool(line) and all(ch in ALPHABET for ch in line)


def match_words(words: Iterable[str], matcher: CompiledMatcher) -> Iterator[MatchCandidate]:
    """
    Yield (word, mask, pattern) for every dictionary word the matcher accepts.

    Lines are stripped first; anything that is not a clean a-z word is
    skipped silently (treated as "no match").
    """
    for line in words:
        w = line.strip()
        if not is_word(w):
            continue
        if matcher.matches(w):
            yield MatchCandidate(w, matcher.mask, matcher.pattern)
