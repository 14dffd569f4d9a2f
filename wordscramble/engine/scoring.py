"""
Session scoring.

The score is never stored: it is recomputed from the accepted words on every
read, so it can't drift from the list it summarizes.

  score(["worm", "silk"]) -> 8
"""

from __future__ import annotations

from typing import Iterable

from .text import letter_count


def score(used: Iterable[str]) -> int:
    """Sum of visible character counts of all accepted words."""
    return sum(letter_count(w) for w in used)
