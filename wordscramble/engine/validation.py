"""
Candidate validation for a word-scramble round.

This module answers the question: "May this word be added right now?"
A candidate is accepted iff, after normalization, it passes every check
below. Checks run in a fixed order and the FIRST failure decides the
rejection, because the UI only ever shows one message:

  1) is_long_enough : at least MIN_WORD_LENGTH visible characters
  2) is_not_root    : not the root word itself
  3) is_original    : not already accepted this session
  4) is_possible    : spellable from the root's letters (see constraints.py)
  5) is_real        : recognized by the dictionary oracle

An empty candidate (after trimming) is not an error: validate() returns None
and the caller should simply do nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .constraints import is_possible
from .text import letter_count, normalize

MIN_WORD_LENGTH = 3
DEFAULT_LANGUAGE = "en"


class Rejection(Enum):
    TOO_SHORT = "too_short"
    EQUALS_ROOT = "equals_root"
    ALREADY_USED = "already_used"
    NOT_DERIVABLE = "not_derivable"
    NOT_A_REAL_WORD = "not_a_real_word"

    @property
    def title(self) -> str:
        return _TEXT[self][0]

    def message(self, root: str = "") -> str:
        return _TEXT[self][1].format(root=root)


# (title, message); message may reference {root}
_TEXT = {
    Rejection.TOO_SHORT: ("Word too short", "You can do better than that"),
    Rejection.EQUALS_ROOT: ("Word is the one given",
                            "You didn't think it would be that easy did you?"),
    Rejection.ALREADY_USED: ("Word used already", "Be more original"),
    Rejection.NOT_DERIVABLE: ("Word not possible",
                              "You can't spell that word from '{root}'!"),
    Rejection.NOT_A_REAL_WORD: ("Word not recognized",
                                "You can't just make them up, you know!"),
}


@dataclass(frozen=True)
class Verdict:
    """Outcome of validating one candidate against one session snapshot."""
    word: str                       # normalized candidate
    root: str                       # root it was judged against
    reason: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def title(self) -> str:
        return "" if self.reason is None else self.reason.title

    @property
    def message(self) -> str:
        return "" if self.reason is None else self.reason.message(self.root)


# -----------------------------
# Individual checks (all take an already-normalized word)
# -----------------------------

def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return letter_count(word) >= min_length


def is_not_root(word: str, root: str) -> bool:
    return word != normalize(root)


def is_original(word: str, used: Sequence[str]) -> bool:
    return word not in used


def is_real(word: str, dictionary, language: str = DEFAULT_LANGUAGE) -> bool:
    """Delegate to the dictionary oracle (anything with is_real_word(word, language))."""
    return bool(dictionary.is_real_word(word, language))


# -----------------------------
# Pipeline
# -----------------------------

def validate(
        raw: str,
        root: str,
        used: Sequence[str],
        dictionary,
        language: str = DEFAULT_LANGUAGE,
) -> Optional[Verdict]:
    """
    Run the full check pipeline on a raw candidate.

    Args:
      raw        : the text exactly as the player typed it
      root       : the session's root word
      used       : words accepted so far (any order)
      dictionary : oracle exposing is_real_word(word, language) -> bool
      language   : language tag passed through to the oracle

    Returns:
      None if the candidate is empty after normalization, otherwise a Verdict
      whose `reason` is the first failing check (or None when accepted).

    Raises:
      Whatever the oracle raises (e.g. DictionaryUnavailable); only reached
      after every local check has passed.
    """
    word = normalize(raw)
    if not word:
        return None

    root = normalize(root)

    if not is_long_enough(word):
        return Verdict(word, root, Rejection.TOO_SHORT)
    if not is_not_root(word, root):
        return Verdict(word, root, Rejection.EQUALS_ROOT)
    if not is_original(word, used):
        return Verdict(word, root, Rejection.ALREADY_USED)
    if not is_possible(word, root):
        return Verdict(word, root, Rejection.NOT_DERIVABLE)
    if not is_real(word, dictionary, language):
        return Verdict(word, root, Rejection.NOT_A_REAL_WORD)

    return Verdict(word, root)
