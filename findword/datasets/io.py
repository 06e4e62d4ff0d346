from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from findword.engine.errors import DictionaryNotFoundError, DictionaryReadError

log = logging.getLogger("findword")

DEFAULT_DICTIONARY = "words.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Undecodable bytes become U+FFFD, so such lines never pass as words.
    Raises DictionaryNotFoundError if the path isn't an existing file and
    DictionaryReadError if it can't be opened.
    """
    p = Path(p)
    if not p.is_file():
        raise DictionaryNotFoundError(f"could not find word dictionary <{p}>")
    try:
        text = p.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DictionaryReadError(f"could not open <{p}>: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def load_dictionary(p: Path | str = DEFAULT_DICTIONARY) -> List[str]:
    """
    Load a word list (one word per line) into memory, stripped, blanks dropped.
    Malformed lines are kept here; the matcher skips them.
    """
    words = [w.strip() for w in read_lines(p) if w.strip()]
    log.info("Loaded %s words from %s", f"{len(words):,}", p)
    return words
