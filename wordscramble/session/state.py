"""
Per-session game state.

One SessionState is one play-through: the root word, the accepted words
(most recent first) and whatever the player is currently typing. The score is
derived from the accepted words on every read and never stored.

accept_word() trusts its caller: run engine.validate() first.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..engine.scoring import score as score_fn
from .roots import FALLBACK_ROOT, SOURCE_FALLBACK, pick_root_with_source


@dataclass
class SessionState:
    root: str = FALLBACK_ROOT
    used_words: List[str] = field(default_factory=list)
    pending: str = ""                   # current (unsubmitted) input
    root_source: str = SOURCE_FALLBACK  # "list" | "fallback"

    def start_game(self, word_list: Optional[Sequence[str]],
                   rng: Optional[random.Random] = None) -> str:
        """
        Begin a new session: pick a root from `word_list` (falling back to
        FALLBACK_ROOT when it is empty or None), forget accepted words and
        clear pending input. Returns the new root.
        """
        self.root, self.root_source = pick_root_with_source(word_list, rng)
        self.used_words = []
        self.pending = ""
        return self.root

    def accept_word(self, word: str) -> None:
        """Record an already-validated word (newest first) and clear the input."""
        self.used_words.insert(0, word)
        self.pending = ""

    def score(self) -> int:
        return score_fn(self.used_words)
