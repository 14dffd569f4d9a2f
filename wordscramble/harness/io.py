"""
I/O utilities for autoplay runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from wordscramble.engine import Rejection


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, root, success, score, max_score, accepted, submitted,
      <one column per rejection reason>, time_ms, words

    `words` lists the accepted words in play order, space-separated.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    reasons = [r.value for r in Rejection]
    fields = (["solver", "root", "success", "score", "max_score", "accepted", "submitted"]
              + reasons + ["time_ms", "words"])

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "root": r["root"],
                "success": r["success"],
                "score": r["score"],
                "max_score": r["max_score"],
                "accepted": r["accepted"],
                "submitted": r["submitted"],
                "time_ms": round(float(r["time_ms"]), 3),
                "words": " ".join(word for word, outcome in r.get("history", []) if outcome == "ok"),
            }
            counts = r.get("rejections", {})
            for reason in reasons:
                row[reason] = counts.get(reason, 0)

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, paths, seed, games, budget, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - num_games, total_score, total_max_score
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
