from pathlib import Path

import pytest
import requests
from wordscramble.dictionary import (
    RemoteDictionary, WordListDictionary, create_dictionary, get_dictionary_ids,
)
from wordscramble.errors import DictionaryUnavailable, WordScrambleError


class _Resp:
    def __init__(self, status_code):
        self.status_code = status_code


class _FakeSession:
    """Stands in for requests.Session; answers from a {word: status} table."""

    def __init__(self, table, exc=None):
        self.table = table
        self.exc = exc
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        word = url.rsplit("/", 1)[-1]
        return _Resp(self.table.get(word, 404))


# --- word list ---
def test_wordlist_lookup_is_normalized():
    d = WordListDictionary(["Silk", " worm", "", "silk"])
    assert len(d) == 2
    assert d.is_real_word("silk") and d.is_real_word("WORM ")
    assert not d.is_real_word("milk")
    assert d.vocabulary() == ["silk", "worm"]
    assert "Silk" in d


def test_wordlist_other_language_is_false():
    d = WordListDictionary(["silk"], language="en")
    assert d.is_real_word("silk", "en")
    assert not d.is_real_word("silk", "fr")


def test_wordlist_from_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("silk\nworm\n\n", encoding="utf-8")
    d = WordListDictionary.from_path(p)
    assert d.vocabulary() == ["silk", "worm"]


def test_wordlist_from_missing_path(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordListDictionary.from_path(tmp_path / "missing.txt")


# --- remote ---
def test_remote_status_codes_and_cache():
    s = _FakeSession({"silk": 200})
    d = RemoteDictionary(session=s)
    assert d.is_real_word("silk") is True
    assert d.is_real_word("slik") is False
    assert d.is_real_word("silk") is True
    assert len(s.urls) == 2  # third lookup served from cache
    assert s.urls[0] == "https://api.dictionaryapi.dev/api/v2/entries/en/silk"


def test_remote_server_error_raises():
    d = RemoteDictionary(session=_FakeSession({"silk": 500}))
    with pytest.raises(DictionaryUnavailable):
        d.is_real_word("silk")


def test_remote_transport_error_raises():
    d = RemoteDictionary(session=_FakeSession({}, exc=requests.ConnectionError("down")))
    with pytest.raises(WordScrambleError):
        d.is_real_word("silk")


def test_remote_has_no_vocabulary():
    with pytest.raises(NotImplementedError):
        RemoteDictionary(session=_FakeSession({})).vocabulary()


# --- registry ---
def test_registry():
    assert get_dictionary_ids() == ["remote", "wordlist"]
    d = create_dictionary("wordlist", words=["silk"])
    assert isinstance(d, WordListDictionary) and d.is_real_word("silk")
    with pytest.raises(ValueError):
        create_dictionary("nope")
