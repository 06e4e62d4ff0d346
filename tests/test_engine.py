import pytest
from findword.engine import (
    ALPHABET, AnyChar, Literal, MatchCandidate, NotInSet,
    InvalidCharacterError, InvalidShelfError, PatternCompileError,
    compile_pattern, excess_needed, filter_feasible, is_feasible,
    match_words, parse_shelf, score_word,
)


def _matcher(pattern, shelf):
    return compile_pattern(pattern, parse_shelf(shelf).restricted)


def _candidate(word, pattern):
    return MatchCandidate(word, pattern.replace("_", "."), pattern)


# --- shelf ---

def test_shelf_restricted_alphabet():
    inv = parse_shelf("xyz")
    assert inv.restricted == frozenset(ALPHABET) - {"x", "y", "z"}
    assert len(inv.restricted) == 23

def test_shelf_duplicates_reduce_once_but_count_twice():
    assert parse_shelf("xx").restricted == parse_shelf("x").restricted
    assert parse_shelf("xx").letter_counts["x"] == 2

def test_shelf_wildcard():
    inv = parse_shelf("ab__")
    assert inv.wildcard_count == 2
    assert "_" not in inv.letter_counts
    assert len(inv.restricted) == 24
    assert dict(inv.letter_counts) == {"a": 1, "b": 1}
    assert parse_shelf("_").restricted == frozenset(ALPHABET)

def test_shelf_counts_are_read_only():
    inv = parse_shelf("aab")
    with pytest.raises(TypeError):
        inv.letter_counts["a"] = 5
    assert inv.letter_counts["a"] == 2

@pytest.mark.parametrize("raw", ["", "AB", "a1", "ab c", "a.b"])
def test_shelf_invalid(raw):
    with pytest.raises(InvalidShelfError):
        parse_shelf(raw)


# --- pattern compilation + matching ---

@pytest.mark.parametrize("pattern,shelf,word,expected", [
    ("cat", "xyz", "cat", True),
    ("cat", "xyz", "cats", False),   # 's' not held
    ("cat", "xyz", "ca", False),     # shorter than the pattern
    ("c.t", "a", "cat", True),
    ("c.t", "a", "cbt", False),      # 'b' not held
    ("c_t", "a", "cbt", True),
    ("art", "s", "arts", True),
    ("art", "s", "artz", False),
    ("art", "s", "art", True),
    ("", "at", "tat", True),         # spelled from held letters only
    ("", "at", "cat", False),
    ("ca", "_", "cat", False),       # wildcard removes nothing from the alphabet
])
def test_pattern_matches(pattern, shelf, word, expected):
    assert _matcher(pattern, shelf).matches(word) is expected

def test_pattern_rules_and_mask():
    r = parse_shelf("q").restricted
    m = compile_pattern("a._", r)
    assert m.rules == (Literal("a"), NotInSet(r), AnyChar())
    assert m.suffix == NotInSet(r)
    assert compile_pattern("c._t", r).mask == "c..t"

@pytest.mark.parametrize("pattern", ["c*t", "CAT", "c t", ".*art$"])
def test_pattern_compile_error(pattern):
    with pytest.raises(PatternCompileError):
        _matcher(pattern, "abc")

def test_match_words_skips_malformed_lines():
    words = ["cat\n", "Cat", "c-t", "", "cot", "cart"]
    out = list(match_words(words, _matcher("c_t", "xyz")))
    assert [c.word for c in out] == ["cat", "cot"]
    assert out[0] == MatchCandidate("cat", "c.t", "c_t")


# --- feasibility ---

def test_feasibility_rejects_excess_letters():
    shelf = parse_shelf("a")
    assert _matcher("c__t", "a").matches("caat")
    c = _candidate("caat", "c__t")
    assert excess_needed(c, "a") == 2
    assert is_feasible(c, shelf) is False
    assert is_feasible(c, parse_shelf("aa")) is True

def test_feasibility_credits_pattern_literals():
    assert is_feasible(_candidate("caa", "ca_"), parse_shelf("a")) is True

def test_feasibility_wildcard_not_credited():
    # one 'a' plus a blank still can't supply two 'a's
    assert is_feasible(_candidate("caa", "c__"), parse_shelf("a_")) is False

def test_feasibility_ignores_letters_not_held():
    assert is_feasible(_candidate("cat", "c_t"), parse_shelf("_")) is True

def test_filter_feasible_returns_new_list_in_order():
    shelf = parse_shelf("a")
    cands = [_candidate("cat", "c_t"), _candidate("caat", "c__t"), _candidate("cab", "ca_")]
    out = filter_feasible(cands, shelf)
    assert [c.word for c in out] == ["cat", "cab"]
    assert len(cands) == 3


# --- scoring ---

@pytest.mark.parametrize("word,expected", [
    ("cat", 6),
    ("quiz", 23),
    ("jazz", 31),
    ("arts", 4),
    ("", 0),
])
def test_score_word(word, expected):
    assert score_word(word) == expected

@pytest.mark.parametrize("word", ["Cat", "c_t", "don't"])
def test_score_word_invalid(word):
    with pytest.raises(InvalidCharacterError):
        score_word(word)
