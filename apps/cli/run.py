# apps/cli/run.py
"""
CLI entry point for wordscramble autoplay runs.

This script:
  1) Validates the word lists (prints counts + SHA, start words in dictionary).
  2) Loads the lists and instantiates the requested solver.
  3) Plays one game per root with a progress bar and writes:
       - CSV:  per-game score, max score, rejection counts, accepted words
       - JSON: manifest with config, wordlist report, git commit, totals
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordscramble.datasets import START_WORDS, WORDS_EN, pretty_summary, validate_wordlists
from wordscramble.dictionary import WordListDictionary
from wordscramble.engine import normalize
from wordscramble.harness import DEFAULT_MAX_SUBMISSIONS, run_game
from wordscramble.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from wordscramble.session import load_root_words
from wordscramble.solvers import create_solver, get_solver_ids

logger = logging.getLogger("wordscramble.run")


def main():
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordscramble: run autoplay solvers")
    ap.add_argument("--solver", default="exhaustive",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--start-words", default=str(START_WORDS),
                    help="pool of root words (one per line)")
    ap.add_argument("--words", default=str(WORDS_EN),
                    help="dictionary word list (also the solvers' vocabulary)")
    ap.add_argument("--games", type=int,
                    help="play only this many roots (deterministic by seed)")
    ap.add_argument("--max-submissions", type=int, default=DEFAULT_MAX_SUBMISSIONS,
                    help="submission budget per game")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="show a progress bar (auto = only when stderr is a terminal)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.start_words, args.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning("%s", issue)

    # 2) Load lists (the root pool read is fail-safe; the dictionary is not)
    roots = [w for w in (normalize(w) for w in load_root_words(args.start_words)) if w]
    dictionary = WordListDictionary.from_path(args.words)
    vocabulary = dictionary.vocabulary()

    # 3) Instantiate solver by id (registry populated on package import)
    solver = create_solver(args.solver)

    # 4) Choose roots (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.games and args.games < len(roots):
        pool = list(roots)
        rng.shuffle(pool)
        cases = pool[: args.games]
    else:
        cases = list(roots)

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())

    # 5) Play
    results = []
    for idx, root in enumerate(tqdm(cases, ncols=80, desc="Playing", unit="game",
                                    disable=not show_bar), 1):
        r = run_game(
            solver, root,
            dictionary=dictionary,
            vocabulary=vocabulary,
            max_submissions=args.max_submissions,
            seed=args.seed + idx,
        )
        r["solver_id"] = solver.id
        results.append(r)

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    total = sum(r["score"] for r in results)
    best = sum(r["max_score"] for r in results)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_games": len(results),
        "solver_id": solver.id,
        "total_score": total,
        "total_max_score": best,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Score: {total} / {best} over {len(results)} games")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
