"""
Board pattern compilation.

A board pattern is a linear template over {a-z, '.', '_'}:
  - 'a'..'z' : a tile already on the board (must match exactly)
  - '.'      : slot the player fills; the letter must NOT be in the
               restricted alphabet (i.e. one the player holds)
  - '_'      : unconstrained slot, any single character

A word matches when its first len(pattern) characters satisfy the per-position
rules and every character after that is also outside the restricted alphabet.
That models extending a board fragment with more tiles from the rack.

Examples (shelf "as", so 'a' and 's' are allowed in '.' slots and the suffix):
  compile_pattern("c.t", R).matches("cat")   -> True
  compile_pattern("c.t", R).matches("cut")   -> False   ('u' not held)
  compile_pattern("cat", R).matches("cats")  -> True    (held 's' appended)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple, Union

from .errors import PatternCompileError
from .shelf import ALPHABET

DOT = "."
ANY = "_"


@dataclass(frozen=True)
class Literal:
    char: str

    def accepts(self, ch: str) -> bool:
        return ch == self.char


@dataclass(frozen=True)
class AnyChar:
    def accepts(self, ch: str) -> bool:
        return True


@dataclass(frozen=True)
class NotInSet:
    excluded: FrozenSet[str]

    def accepts(self, ch: str) -> bool:
        return ch not in self.excluded


Rule = Union[Literal, AnyChar, NotInSet]


@dataclass(frozen=True)
class CompiledMatcher:
    """
    Per-position rules anchored at the start of the word, plus an open suffix
    rule anchored at the end.

    Fields:
      pattern : the raw board pattern this was built from
      rules   : one rule per pattern position
      suffix  : NotInSet applied to every character past the pattern
      mask    : the pattern with '.' and '_' both rendered as '.'; only its
                literal letters are meaningful (see engine.feasibility)
    """
    pattern: str
    rules: Tuple[Rule, ...]
    suffix: NotInSet
    mask: str

    def matches(self, word: str) -> bool:
        n = len(self.rules)
        if len(word) < n:
            return False
        for rule, ch in zip(self.rules, word):
            if not rule.accepts(ch):
                return False
        return all(self.suffix.accepts(ch) for ch in word[n:])


def _rule_for(ch: str, restricted: FrozenSet[str]) -> Rule:
    if ch == DOT:
        return NotInSet(restricted)
    if ch == ANY:
        return AnyChar()
    return Literal(ch)


def compile_pattern(raw: str, restricted: FrozenSet[str]) -> CompiledMatcher:
    """
    Translate a raw board pattern into a CompiledMatcher.

    Args:
      raw        : board pattern over a-z, '.', '_' (may be empty)
      restricted : letters the player does NOT hold (ShelfInventory.restricted)

    Raises:
      PatternCompileError if the pattern has any other character. This is
      raised once, up front, never per dictionary word.
    """
    bad = sorted({ch for ch in raw if ch not in ALPHABET and ch not in (DOT, ANY)})
    if bad:
        raise PatternCompileError(
            f"cannot compile pattern {raw!r}: unexpected character(s) {bad}; "
            f"use a-z, '{DOT}' and '{ANY}'")

    restricted = frozenset(restricted)
    rules = tuple(_rule_for(ch, restricted) for ch in raw)
    mask = raw.replace(ANY, DOT)
    return CompiledMatcher(pattern=raw, rules=rules, suffix=NotInSet(restricted), mask=mask)
