"""
Search pipeline driver.

- collect_candidates: compile every pattern, then scan the dictionary once per
                      pattern and pool the (word, mask) candidates.
- find_words:         shelf + patterns + dictionary -> scored, feasible words.
- sort_results:       optional best-first ordering.

Stages hand their results to the next as plain return values:
  parse_shelf -> compile_pattern -> match_words -> filter_feasible -> score_word

These functions are UI-agnostic so the CLI, a notebook or tests can all drive
them the same way.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Sequence

from tqdm import tqdm

from findword.engine import (
    MatchCandidate,
    ShelfInventory,
    compile_pattern,
    filter_feasible,
    match_words,
    parse_shelf,
    score_word,
)

log = logging.getLogger("findword")


class ScoredWord(NamedTuple):
    score: int
    word: str

    def __str__(self) -> str:
        return f"{self.score}\t{self.word}"


def collect_candidates(
        patterns: Iterable[str],
        words: Sequence[str],
        shelf: ShelfInventory,
        *,
        progress: bool = False,
) -> List[MatchCandidate]:
    """
    Run every pattern over the full dictionary and pool the matches.

    All patterns are compiled before the first scan, so a bad pattern aborts
    the run without any partial output. A word accepted by two patterns shows
    up twice, once with each pattern's mask.
    """
    matchers = [compile_pattern(p, shelf.restricted) for p in patterns]

    pool: List[MatchCandidate] = []
    for m in matchers:
        scan = tqdm(words, ncols=80, desc=m.pattern or "<empty>", unit="word",
                    disable=not progress, leave=False)
        found = list(match_words(scan, m))
        log.info("pattern %r matched %d word(s)", m.pattern, len(found))
        pool.extend(found)
    return pool


def sort_results(results: Iterable[ScoredWord]) -> List[ScoredWord]:
    """Highest score first; ties broken alphabetically by word."""
    return sorted(results, key=lambda r: (-r.score, r.word))


def find_words(
        shelf: str,
        patterns: Iterable[str],
        words: Sequence[str],
        *,
        sort: bool = False,
        progress: bool = False,
) -> List[ScoredWord]:
    """
    Full search for one shelf.

    Args:
      shelf    : raw shelf string, e.g. "tkbdwn_"
      patterns : raw board patterns, scanned in the given order
      words    : dictionary words (re-iterated once per pattern)
      sort     : order best-first instead of scan order
      progress : show a tqdm bar per dictionary scan

    Returns:
      List[ScoredWord], one per feasible (pattern, word) acceptance.
    """
    inventory = parse_shelf(shelf)
    log.debug("shelf %r: counts=%s wildcards=%d restricted=%s", shelf,
              dict(inventory.letter_counts), inventory.wildcard_count,
              "".join(sorted(inventory.restricted)))

    candidates = collect_candidates(patterns, words, inventory, progress=progress)
    feasible = filter_feasible(candidates, inventory)
    log.info("%d of %d candidate(s) feasible with shelf %r",
             len(feasible), len(candidates), shelf)

    results = [ScoredWord(score_word(c.word), c.word) for c in feasible]
    return sort_results(results) if sort else results
