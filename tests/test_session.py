import random
from pathlib import Path

import pytest
from wordscramble.dictionary import WordListDictionary
from wordscramble.engine import Rejection
from wordscramble.session import (
    FALLBACK_ROOT, SessionState, WordScramble, load_root_words, pick_root,
)

VOCAB = ["silk", "worm", "milk", "silks", "silkworm", "ox", "owl"]


def _game(**kw) -> WordScramble:
    g = WordScramble(WordListDictionary(VOCAB), root_words=["silkworm"], seed=1, **kw)
    g.start_game()
    return g


# --- root selection ---
def test_pick_root_skips_blanks_and_normalizes():
    assert pick_root(["", "  ", " Baseball\n"]) == "baseball"


@pytest.mark.parametrize("words", [[], ["", "   "], None])
def test_pick_root_falls_back(words):
    assert pick_root(words) == FALLBACK_ROOT == "silkworm"


def test_pick_root_is_seeded():
    pool = ["absolute", "academic", "airplane", "alphabet"]
    a = [pick_root(pool, random.Random(5)) for _ in range(3)]
    b = [pick_root(pool, random.Random(5)) for _ in range(3)]
    assert a == b and set(a) <= set(pool)


def test_pick_root_rejects_bare_str():
    # a str is iterable, so it would otherwise be a pool of single letters
    with pytest.raises(TypeError):
        pick_root("silkworm")
    with pytest.raises(TypeError):
        SessionState().start_game("silkworm")


def test_load_root_words_missing_file_is_not_fatal(tmp_path: Path):
    assert load_root_words(tmp_path / "nope.txt") == []


def test_load_root_words_bad_encoding_is_not_fatal(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_bytes(b"\xff\xfe\xfa not utf-8")
    assert load_root_words(p) == []


def test_load_root_words_default_pool():
    words = [w for w in load_root_words() if w.strip()]
    assert "silkworm" in words


# --- session state ---
def test_session_state_lifecycle():
    s = SessionState()
    s.pending = "typing"
    assert s.start_game(["cat"]) == "cat" and s.root_source == "list"
    s.accept_word("silk")
    s.accept_word("worm")
    assert s.used_words == ["worm", "silk"]
    assert s.score() == 8
    assert s.pending == ""

    s.start_game([])
    assert s.root == "silkworm" and s.root_source == "fallback"
    assert s.used_words == [] and s.score() == 0


# --- engine ---
def test_submit_accepts_most_recent_first():
    g = _game()
    assert g.submit("silk").accepted
    assert g.submit("Worm").accepted
    assert g.used_words() == ["worm", "silk"]
    assert g.score() == 8


def test_submit_same_word_twice():
    g = _game()
    first = g.submit("silk")
    second = g.submit(" SILK ")
    assert first.accepted
    assert second.reason is Rejection.ALREADY_USED
    assert g.used_words() == ["silk"]


def test_submit_blank_is_noop():
    g = _game()
    assert g.submit("   ") is None
    assert g.used_words() == [] and g.score() == 0


def test_pending_input_kept_on_reject_cleared_on_accept():
    g = _game()
    g.submit("silks")
    assert g.state.pending == "silks"
    g.submit("silk")
    assert g.state.pending == ""


def test_used_words_is_a_copy():
    g = _game()
    g.submit("silk")
    g.used_words().append("zzz")
    assert g.used_words() == ["silk"]


def test_start_game_resets():
    g = _game()
    g.submit("silk")
    g.start_game()
    assert g.used_words() == [] and g.score() == 0


@pytest.mark.parametrize("content", [None, "", "\n\n  \n"])
def test_start_game_empty_or_unreadable_list(tmp_path: Path, content):
    p = tmp_path / "start.txt"
    if content is not None:
        p.write_text(content, encoding="utf-8")
    g = WordScramble(WordListDictionary(VOCAB), root_words=p)
    assert g.start_game() == "silkworm"
    assert g.used_fallback is True
    assert g.used_words() == [] and g.score() == 0


def test_start_game_from_file(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\nAlphabet\n\n", encoding="utf-8")
    g = WordScramble(WordListDictionary(VOCAB), root_words=str(p))
    assert g.start_game() == "alphabet"
    assert g.used_fallback is False


def test_solutions_max_score_and_hint():
    g = _game()
    assert g.solutions() == ["silk", "worm", "milk", "owl"]
    assert g.max_score() == 15
    for _ in range(4):
        h = g.hint()
        assert h in {"silk", "worm", "milk", "owl"}
        assert g.submit(h).accepted
    assert g.hint() is None
    assert g.score() == g.max_score()


def test_solutions_with_explicit_vocabulary():
    g = _game()
    # 'work' is derivable but the dictionary doesn't know it
    assert g.solutions(["work", "silk"]) == ["silk"]


def test_independent_sessions():
    a, b = _game(), _game()
    a.submit("silk")
    assert b.used_words() == []
