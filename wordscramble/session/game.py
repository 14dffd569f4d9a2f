"""
Game engine: the API a presentation layer talks to.

A WordScramble instance owns exactly one SessionState, a dictionary oracle and
a root-word source. Every call is synchronous and finishes immediately:

    game = WordScramble(WordListDictionary.from_path(WORDS_EN), seed=7)
    game.start_game()           -> "silkworm"
    game.submit("Silk ")        -> Verdict(word="silk", accepted)
    game.submit("silk")         -> Verdict(reason=Rejection.ALREADY_USED)
    game.score()                -> 4
    game.used_words()           -> ["silk"]

Independent sessions need independent engines; nothing here is shared.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..engine.constraints import derivable_words
from ..engine.scoring import score as score_fn
from ..engine.text import letter_count
from ..engine.validation import DEFAULT_LANGUAGE, Verdict, is_long_enough, validate
from .roots import SOURCE_FALLBACK, load_root_words
from .state import SessionState

logger = logging.getLogger(__name__)

# A path (str or Path) to a newline-delimited file, or the words themselves
RootWords = Union[str, Path, Sequence[str], None]


class WordScramble:
    def __init__(self, dictionary, *, root_words: RootWords = None,
                 language: str = DEFAULT_LANGUAGE, seed: int | None = None):
        """
        Args:
          dictionary : oracle with is_real_word(word, language) (see wordscramble.dictionary)
          root_words : path to the start-word pool, an in-memory list/tuple of
                       words, or None for the packaged start.txt
          language   : tag passed to the dictionary on every lookup
          seed       : RNG seed for reproducible root picks and hints
        """
        self.dictionary = dictionary
        self.root_words = root_words
        self.language = language
        self.rng = random.Random(seed)
        self.state = SessionState()

    # ---- session lifecycle ----

    def _read_root_words(self) -> List[str]:
        src = self.root_words
        if src is None or isinstance(src, (str, Path)):
            return load_root_words(src)
        return list(src)

    def start_game(self) -> str:
        """Pick a fresh root (re-reading the source every time) and reset the session."""
        root = self.state.start_game(self._read_root_words(), self.rng)
        logger.info("New game: root=%r (%s)", root, self.state.root_source)
        return root

    @property
    def root_word(self) -> str:
        return self.state.root

    @property
    def used_fallback(self) -> bool:
        """True when the word list was empty/unreadable and the fallback root is in play."""
        return self.state.root_source == SOURCE_FALLBACK

    # ---- play ----

    def submit(self, raw: str) -> Optional[Verdict]:
        """
        Validate `raw` against the current session and record it if accepted.

        Returns None for blank input (nothing happens), else the Verdict.
        Rejected input stays in `state.pending`; accepted input clears it.
        DictionaryUnavailable from the oracle propagates and changes nothing
        beyond `pending`.
        """
        self.state.pending = raw
        verdict = validate(raw, self.state.root, self.state.used_words,
                           self.dictionary, self.language)
        if verdict is None:
            return None

        if verdict.accepted:
            self.state.accept_word(verdict.word)
            logger.debug("Accepted %r (score=%d)", verdict.word, self.score())
        else:
            logger.debug("Rejected %r: %s", verdict.word, verdict.reason.name)
        return verdict

    def score(self) -> int:
        return self.state.score()

    def used_words(self) -> List[str]:
        """Accepted words, most recent first (a copy)."""
        return list(self.state.used_words)

    # ---- helpers built on the same rules ----

    def solutions(self, vocabulary: Optional[Sequence[str]] = None) -> List[str]:
        """
        Every vocabulary word that is a legal answer for the current root,
        ignoring what has already been played. Longest first, then vocabulary
        order.

        `vocabulary` defaults to the dictionary's own word list; oracles that
        can't enumerate words raise NotImplementedError.
        """
        if vocabulary is None:
            vocabulary = self.dictionary.vocabulary()

        root = self.state.root
        out = [
            w for w in derivable_words(vocabulary, root)
            if is_long_enough(w) and w != root
            and self.dictionary.is_real_word(w, self.language)
        ]
        return sorted(out, key=lambda w: -letter_count(w))

    def max_score(self, vocabulary: Optional[Sequence[str]] = None) -> int:
        return score_fn(self.solutions(vocabulary))

    def hint(self, vocabulary: Optional[Sequence[str]] = None) -> Optional[str]:
        """A random legal answer not played yet, or None when none are left."""
        used = set(self.state.used_words)
        remaining = [w for w in self.solutions(vocabulary) if w not in used]
        if not remaining:
            return None
        return remaining[self.rng.randrange(len(remaining))]
