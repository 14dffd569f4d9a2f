"""
Word-list dictionary.

The simplest oracle: an in-memory set of words in one language, usually loaded
from a newline-delimited text file (one word per line). Lookups are exact
matches on the normalized form.

A list knows exactly one language; asking it about any other language answers
False rather than guessing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ..datasets.io import read_lines
from ..engine.text import normalize
from ..engine.validation import DEFAULT_LANGUAGE
from .base import BaseDictionary, register

logger = logging.getLogger(__name__)


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word list"

    def __init__(self, words: Optional[Iterable[str]] = None, language: str = DEFAULT_LANGUAGE,
                 path: Path | str | None = None):
        super().__init__(language=language)
        if words is None:
            words = read_lines(path) if path is not None else []
        # Keep first-seen order for vocabulary(); the set is for O(1) lookups
        self._ordered: List[str] = []
        self._words = set()
        for w in words:
            w = normalize(w)
            if w and w not in self._words:
                self._words.add(w)
                self._ordered.append(w)

    @classmethod
    def from_path(cls, path: Path | str, language: str = DEFAULT_LANGUAGE) -> "WordListDictionary":
        """Load a newline-delimited word file. Raises FileNotFoundError if missing."""
        d = cls(path=path, language=language)
        logger.info("Loaded %d %s words from %s", len(d), language, path)
        return d

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return normalize(word) in self._words

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language:
            return False
        return normalize(word) in self._words

    def vocabulary(self) -> List[str]:
        return list(self._ordered)
