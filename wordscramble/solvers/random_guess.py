"""
Random Guess solver.

Strategy:
  - Submit a uniformly random vocabulary word each turn, whether or not it
    fits the root. Repeats are allowed.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - A baseline that exercises every rejection path; it never stops on its
    own, the harness's submission budget ends the game.
"""

from __future__ import annotations

from typing import Optional
from .base import BaseSolver, register


@register
class RandomGuessSolver(BaseSolver):
    id = "random_guess"
    name = "Random Guess"
    version = "1.0.0"

    def next_word(self, state: dict) -> Optional[str]:
        if not self.vocabulary:
            return None
        return self.vocabulary[self.rng.randrange(len(self.vocabulary))]
