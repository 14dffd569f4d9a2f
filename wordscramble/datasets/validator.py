"""
Dataset validator for wordscramble.

What this module does:
- Validate a pair of word lists: start.txt (root-word pool) and a dictionary
  word list (e.g. words_en.txt, what the wordlist oracle loads).
- Enforce formatting rules (lowercase, alphabetic, one per line; start words
  must also be long enough to be worth scrambling).
- Count blank lines separately: the game skips them, so they're tolerated.
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Report how many start words the dictionary itself recognizes.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("wordscramble/datasets/data/start.txt",
                             "wordscramble/datasets/data/words_en.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from ..engine.validation import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # lines that are not a clean lowercase word
    blank_lines: int     # empty/whitespace-only lines (skipped by the game)


@dataclass
class ValidationReport:
    """Top-level validation result for the (start, words) pair."""
    min_length: int
    start: FileReport
    words: FileReport
    start_in_dictionary: int   # start words the dictionary list contains
    passed: bool
    issues: List[str]          # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must already be lowercase and alphabetic
      - must have at least `min_length` characters

    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if w == w.lower() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, blank


def _report(path: Path, words: List[str], invalid: int, blank: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        blank_lines=blank,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(start_path: str, words_path: str,
                       min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate the start-word pool and the dictionary word list.

    Parameters
    ----------
    start_path : str
        Path to the root-word pool (one word per line).
    words_path : str
        Path to the dictionary word list (one word per line).
    min_length : int
        Shortest acceptable start word (the dictionary list may hold shorter
        words; it's checked with a minimum of 1).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid/blank counts
          - how many start words the dictionary recognizes
          - `passed` boolean (strict: start list non-empty, no invalid start
            lines, dictionary list present and non-empty)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    start_p = Path(start_path)
    words_p = Path(words_path)

    start_exists = start_p.exists()
    words_exists = words_p.exists()

    # Early return if either file is missing
    if not start_exists or not words_exists:
        if not start_exists:
            issues.append(f"start file not found: {start_path}")
        if not words_exists:
            issues.append(f"words file not found: {words_path}")
        rep = ValidationReport(
            min_length=min_length,
            start=FileReport(start_path, start_exists, 0, "", 0, 0, 0),
            words=FileReport(words_path, words_exists, 0, "", 0, 0, 0),
            start_in_dictionary=0,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    start, start_invalid, start_blank = _load_and_check(start_p, min_length)
    words, words_invalid, words_blank = _load_and_check(words_p, 1)

    start_report = _report(start_p, start, start_invalid, start_blank)
    words_report = _report(words_p, words, words_invalid, words_blank)

    words_set = set(words)
    known = sum(1 for w in set(start) if w in words_set)
    if known < start_report.unique_count:
        # A few examples are enough to debug quickly
        missing = sorted(set(start) - words_set)[:5]
        issues.append(f"start words missing from dictionary (e.g., {missing})")

    if start_report.count == 0:
        issues.append("start file contains 0 valid words")
    if words_report.count == 0:
        issues.append("words file contains 0 valid words")

    if start_invalid:
        issues.append(f"start has {start_invalid} invalid line(s)")
    if words_invalid:
        issues.append(f"words has {words_invalid} invalid line(s)")

    if start_report.count != start_report.unique_count:
        issues.append("start contains duplicate lines")
    if words_report.count != words_report.unique_count:
        issues.append("words contains duplicate lines")

    # Missing/duplicate dictionary entries are warnings; a bad root pool is not
    passed = (
            start_invalid == 0
            and start_report.count > 0
            and words_report.count > 0
    )

    rep = ValidationReport(
        min_length=min_length,
        start=start_report,
        words=words_report,
        start_in_dictionary=known,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=60 (uniq=60, sha=abc123...) | words=900 (uniq=900, sha=def456...) | start∈words=60 | OK
    """
    a = report["start"]
    b = report["words"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"start={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| words={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| start∈words={report['start_in_dictionary']} | {status}"
    )
