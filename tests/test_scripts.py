import pytest

from script import fetch_wordlist
from script.build_start_words import select_roots


def test_select_roots_filters_and_dedupes():
    lines = ["Absolute", "absolute", "cat", "", "ab1cdefg", " academic ", "airplanes"]
    assert select_roots(lines, 8, 8) == ["absolute", "academic"]
    assert select_roots(lines, 3, 9) == ["absolute", "cat", "academic", "airplanes"]


class _Resp:
    def __init__(self, text, content_type):
        self.text = text
        self.headers = {"Content-Type": content_type}

    def raise_for_status(self):
        pass


@pytest.mark.parametrize("content_type,text,expected", [
    ("text/html; charset=utf-8",
     "<html><head><title>Lists</title></head><body><h1>Words</h1>"
     "<ul><li>Silk</li><li>worm</li><li>silk</li><li>ox</li><li>x2y</li></ul></body></html>",
     ["lists", "words", "silk", "worm"]),
    ("text/plain", "Silk\nworm\nsilk\nox\n", ["silk", "worm"]),
])
def test_fetch_words_cleans_and_dedupes(monkeypatch, content_type, text, expected):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return _Resp(text, content_type)

    monkeypatch.setattr(fetch_wordlist.requests, "get", fake_get)
    assert fetch_wordlist.fetch_words("https://example.org/words", min_len=3) == expected
    assert calls == ["https://example.org/words"]
