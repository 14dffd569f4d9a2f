import sys
from pathlib import Path

from apps.cli import play
from wordscramble.errors import DictionaryUnavailable


class _FlakyDictionary:
    """Fails the first lookup, then accepts everything."""

    def __init__(self):
        self.calls = 0

    def is_real_word(self, word, language="en"):
        self.calls += 1
        if self.calls == 1:
            raise DictionaryUnavailable("HTTP 503")
        return True


def _play(monkeypatch, tmp_path: Path, lines, dictionary):
    start = tmp_path / "start.txt"
    start.write_text("silkworm\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["play", "--start-words", str(start), "--seed", "1"])
    monkeypatch.setattr(play, "_build_dictionary", lambda args: dictionary)
    feed = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(feed))
    play.main()


def test_play_survives_dictionary_outage(monkeypatch, tmp_path: Path, capsys):
    d = _FlakyDictionary()
    _play(monkeypatch, tmp_path, ["silk", "silk", ":words", ":quit"], d)
    out = capsys.readouterr().out

    assert "Root word: SILKWORM" in out
    assert "Dictionary unavailable, try again: HTTP 503" in out
    # the failed attempt was not recorded, so the retry is accepted
    assert "+4  silk" in out
    assert "(4) silk" in out
    assert out.rstrip().endswith("Final score: 4")
    assert d.calls == 2


def test_play_ends_on_eof(monkeypatch, tmp_path: Path, capsys):
    def eof(prompt=""):
        raise EOFError

    start = tmp_path / "start.txt"
    start.write_text("silkworm\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["play", "--start-words", str(start)])
    monkeypatch.setattr(play, "_build_dictionary", lambda args: _FlakyDictionary())
    monkeypatch.setattr("builtins.input", eof)
    play.main()

    assert capsys.readouterr().out.rstrip().endswith("Final score: 0")
