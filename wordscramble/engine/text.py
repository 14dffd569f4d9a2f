"""
Text normalization shared by every check.

Words are compared in one canonical form: NFC-composed, lowercased and
trimmed. NFC matters for accented input: 'e' + COMBINING ACUTE ACCENT and
the precomposed 'é' must compare (and count) the same.

Length means *visible* characters, i.e. extended grapheme clusters: a ZWJ
emoji family, a flag (two regional indicators) and a Devanagari consonant +
vowel sign each count as one.

  letter_count("silk")    -> 4
  letter_count("किताब")   -> 3    (कि + ता + ब)
"""

from __future__ import annotations

import unicodedata
from typing import List

import regex

_GRAPHEME = regex.compile(r"\X")


def normalize(raw: str) -> str:
    return unicodedata.normalize("NFC", raw).lower().strip()


def graphemes(word: str) -> List[str]:
    """Split into user-perceived characters (extended grapheme clusters)."""
    return _GRAPHEME.findall(word)


def letter_count(word: str) -> int:
    return len(graphemes(word))
