"""
Tile feasibility: can the player actually form a matched word?

Pattern matching only checks shape. A word like "caat" can satisfy "c__t"
while the shelf holds a single 'a'. This step re-checks every candidate
against the shelf's letter counts.

For every distinct letter L held on the shelf:
    excess = count(L in word) - count(L in candidate mask)
    reject if excess > letter_counts[L]

Literal letters in the mask are tiles already on the board, so they do not
consume shelf tiles. Letters the player does not hold are never checked: they
can only appear at literal or '_' slots.

Wildcards are NOT credited here. A word that needs one more 'z' than the shelf
has is rejected even if a '_' tile is unused.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .matcher import MatchCandidate
from .shelf import ShelfInventory

log = logging.getLogger("findword")


def excess_needed(candidate: MatchCandidate, letter: str) -> int:
    """Occurrences of `letter` in the word not explained by the mask."""
    return candidate.word.count(letter) - candidate.mask.count(letter)


def is_feasible(candidate: MatchCandidate, shelf: ShelfInventory) -> bool:
    for letter, have in shelf.letter_counts.items():
        need = excess_needed(candidate, letter)
        if need > have:
            log.debug("reject %s (pattern %r): needs %d x %r, shelf has %d",
                      candidate.word, candidate.pattern, need, letter, have)
            return False
    return True


def filter_feasible(candidates: Iterable[MatchCandidate], shelf: ShelfInventory) -> List[MatchCandidate]:
    """
    Keep only candidates the shelf can supply (order preserved).
    Returns a new list; the input is not modified.
    """
    return [c for c in candidates if is_feasible(c, shelf)]
