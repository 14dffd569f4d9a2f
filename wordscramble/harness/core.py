"""
Autoplay harness core primitives.

- run_game:  play one root word to completion with a given solver.
- run_batch: play many roots in sequence (optionally a sample prefix).
- Enforces a submission budget at the harness layer so solvers that never
  stop on their own (e.g. random_guess) still terminate.

Games go through the real WordScramble engine, so every submission is judged
by the same pipeline a human player gets.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from typing import Dict, Iterable, List, Optional

from wordscramble.engine import DEFAULT_LANGUAGE, Rejection, normalize, score
from wordscramble.session import WordScramble

logger = logging.getLogger(__name__)

DEFAULT_MAX_SUBMISSIONS = 200


def _assert_budget(max_submissions: int) -> None:
    """Guardrail: a game needs room for at least one submission."""
    if max_submissions < 1:
        raise ValueError(f"max_submissions must be >= 1; got {max_submissions}")


def run_game(
        solver,
        root: str,
        *,
        dictionary,
        vocabulary: Iterable[str],
        max_submissions: int = DEFAULT_MAX_SUBMISSIONS,
        language: str = DEFAULT_LANGUAGE,
        seed: int | None = None,
) -> Dict:
    """
    Run one game on a fixed root until the solver stops or the budget is spent.

    Args:
        solver:          an object implementing BaseSolver with next_word(state)
        root:            the root word for this game
        dictionary:      oracle used by the engine's real-word check
        vocabulary:      words the solver may draw from
        max_submissions: submission budget (>= 1)
        language:        tag passed to the dictionary
        seed:            RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            root, success (reached max score), score, max_score, accepted,
            submitted, rejections ({reason: count}), time_ms,
            history (list[(word, "ok" | reason value)])
    """
    _assert_budget(max_submissions)
    vocabulary = list(vocabulary)

    game = WordScramble(dictionary, root_words=[root], language=language, seed=seed)
    root = game.start_game()
    solver.reset(vocabulary=vocabulary, root=root, seed=seed)

    # Legal answers still unplayed; the exhaustive solver reads these directly
    candidates: List[str] = game.solutions(vocabulary)
    best = score(candidates)

    history: List[tuple] = []
    rejections: Counter = Counter()

    t0 = time.time()
    for turn in range(1, max_submissions + 1):
        state = {
            "turn": turn,
            "root": root,
            "used": game.used_words(),
            "candidates": candidates,
            "vocabulary": vocabulary,
            "rng": solver.rng,
        }

        word = solver.next_word(state)
        if word is None:
            break

        verdict = game.submit(word)
        if verdict is None:
            continue  # blank submission: nothing happens, budget still spent

        if verdict.accepted:
            history.append((verdict.word, "ok"))
            candidates = [c for c in candidates if c != verdict.word]
        else:
            history.append((verdict.word, verdict.reason.value))
            rejections[verdict.reason.value] += 1

    dt = (time.time() - t0) * 1000.0
    final = game.score()
    logger.debug("Game %r: score %d/%d in %d submissions", root, final, best, len(history))

    return {
        "root": root,
        "success": final == best,
        "score": final,
        "max_score": best,
        "accepted": len(game.used_words()),
        "submitted": len(history),
        "rejections": {r.value: rejections.get(r.value, 0) for r in Rejection},
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        solver,
        roots: List[str],
        *,
        dictionary,
        vocabulary: Iterable[str],
        max_submissions: int = DEFAULT_MAX_SUBMISSIONS,
        language: str = DEFAULT_LANGUAGE,
        seed: int | None = None,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many games back-to-back. If 'sample' is provided, only the first K
    non-blank roots are used to speed up quick experiments.

    Each game's seed is derived from the base seed to make runs reproducible
    but not identical across games (seed + index).
    """
    _assert_budget(max_submissions)

    pool = [r for r in (normalize(r) for r in roots) if r]
    if sample is not None:
        pool = pool[:sample]
    vocabulary = list(vocabulary)

    out: List[Dict] = []
    for idx, root in enumerate(pool, start=1):
        game_seed = None if seed is None else (seed + idx)
        r = run_game(
            solver, root, dictionary=dictionary, vocabulary=vocabulary,
            max_submissions=max_submissions, language=language, seed=game_seed,
        )
        out.append(r)
    return out
