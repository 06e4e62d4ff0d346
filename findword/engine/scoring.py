"""
Word scoring with the fixed letter value table.

Every character counts at face value, whether it came from the board, the
shelf or a wildcard slot:
  score_word("cat")  -> 4 + 1 + 1 = 6
  score_word("quiz") -> 10 + 2 + 1 + 10 = 23
"""

from __future__ import annotations

from typing import Dict

from .errors import InvalidCharacterError

LETTER_VALUES: Dict[str, int] = {
    "a": 1, "b": 4, "c": 4, "d": 2, "e": 1, "f": 4, "g": 3,
    "h": 3, "i": 1, "j": 10, "k": 5, "l": 2, "m": 4, "n": 2,
    "o": 1, "p": 4, "q": 10, "r": 1, "s": 1, "t": 1, "u": 2,
    "v": 5, "w": 4, "x": 8, "y": 3, "z": 10,
}


def score_word(word: str) -> int:
    """
    Sum of letter values over `word`.

    Raises InvalidCharacterError on anything outside a-z; upstream matching
    should never let that through.
    """
    total = 0
    for ch in word:
        try:
            total += LETTER_VALUES[ch]
        except KeyError as e:
            raise InvalidCharacterError(f"cannot score {word!r}: invalid character {ch!r}") from e
    return total
