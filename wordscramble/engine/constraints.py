"""
Letter-availability constraints.

A word is *derivable* from a root when its letters form a multiset subset of
the root's letters: every letter may be used at most as many times as it
appears in the root.

  is_possible("silk",  "silkworm") -> True
  is_possible("silks", "silkworm") -> False   (only one 's')
  is_possible("work",  "silkworm") -> True

Two entry points:
  - is_possible     : single word, consume-from-pool loop (what the game uses)
  - derivable_words : whole vocabulary at once via a numpy letter-count matrix
                      (used for solutions, hints and the autoplay harness)
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List

import numpy as np

from .text import graphemes, normalize


def is_possible(word: str, root: str) -> bool:
    """
    True if `word` can be spelled from the letters of `root`.

    Both arguments are expected in normalized form; a letter is one grapheme
    cluster. Walk the candidate left to right and remove one matching letter
    from a copy of the root each time; the first letter with nothing left to
    remove fails the word.
    """
    pool = graphemes(root)

    for letter in graphemes(word):
        try:
            pool.remove(letter)  # consume one occurrence
        except ValueError:
            return False

    return True


def derivable_words(words: Iterable[str], root: str) -> List[str]:
    """
    Keep only the words (normalized, de-duplicated, order preserved) that are
    derivable from `root`.

    Each word becomes a row of letter counts over the root's distinct letters;
    a word survives iff its row is <= the root's counts everywhere. Words with
    any letter outside the root are rejected while building the matrix.
    """
    root = normalize(root)

    # Normalize + stable dedupe; blanks are never words
    seen = set()
    pool: List[str] = []
    for w in words:
        w = normalize(w)
        if w and w not in seen:
            seen.add(w)
            pool.append(w)

    if not pool:
        return []

    root_counts = Counter(graphemes(root))
    letters = sorted(root_counts)
    index = {ch: i for i, ch in enumerate(letters)}
    limit = np.array([root_counts[ch] for ch in letters], dtype=np.int32)

    counts = np.zeros((len(pool), len(letters)), dtype=np.int32)
    keep = np.ones(len(pool), dtype=bool)

    for r, w in enumerate(pool):
        for ch in graphemes(w):
            i = index.get(ch)
            if i is None:
                keep[r] = False
                break
            counts[r, i] += 1

    # Multiset-subset test, one comparison per (word, letter) cell
    keep &= (counts <= limit).all(axis=1)

    return [w for w, ok in zip(pool, keep) if ok]
