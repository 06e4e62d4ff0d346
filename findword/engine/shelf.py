"""
Shelf (rack) parsing.

A shelf is the player's tiles as a string, e.g. "tkbdwn_":
  - lowercase letters are physical tiles (duplicates allowed)
  - '_' is a wildcard tile

From it we derive:
  - letter_counts   : multiset of held letters (wildcards excluded)
  - wildcard_count  : number of '_' tiles
  - restricted      : the 26 letters minus every DISTINCT held letter

The restricted alphabet is what the player does NOT hold. A '.' board slot and
any letters appended after the pattern must come from outside this set.
"""

from __future__ import annotations

import string
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping

from .errors import InvalidShelfError

ALPHABET = string.ascii_lowercase
WILDCARD = "_"


@dataclass(frozen=True)
class ShelfInventory:
    raw: str
    letter_counts: Mapping[str, int]   # read-only view, held letters only
    wildcard_count: int
    restricted: FrozenSet[str]


def restricted_alphabet(shelf: str) -> FrozenSet[str]:
    """
    Letters NOT present on the shelf. Set semantics: "xx" removes 'x' once,
    exactly like "x". Wildcards remove nothing.
    """
    held = {ch for ch in shelf if ch != WILDCARD}
    return frozenset(ch for ch in ALPHABET if ch not in held)


def parse_shelf(raw: str) -> ShelfInventory:
    """
    Validate a raw shelf string and build its inventory.

    Raises InvalidShelfError for an empty shelf or any character outside
    a-z and '_'.
    """
    if not raw:
        raise InvalidShelfError("shelf is empty")

    bad = sorted({ch for ch in raw if ch != WILDCARD and ch not in ALPHABET})
    if bad:
        raise InvalidShelfError(
            f"shelf {raw!r} contains invalid tile(s) {bad}; use a-z and '{WILDCARD}'")

    counts = Counter(ch for ch in raw if ch != WILDCARD)
    return ShelfInventory(
        raw=raw,
        letter_counts=MappingProxyType(dict(counts)),
        wildcard_count=raw.count(WILDCARD),
        restricted=restricted_alphabet(raw),
    )
