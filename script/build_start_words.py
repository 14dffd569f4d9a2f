"""
Build a root-word pool (start.txt) from any word list.

Features:
- Lowercases and trims every line; drops blanks.
- Keeps only alphabetic words within a length window (default: exactly 8,
  the classic scramble length).
- Removes duplicates while preserving input order (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Optional random sample of K words (seeded) for a smaller pool.

Usage:
    python -m script.build_start_words --in wordscramble/datasets/data/words_en.txt \
        --out wordscramble/datasets/data/start.txt --min-len 8 --max-len 8 --sort
"""

import argparse
import random
from pathlib import Path

from wordscramble.datasets import read_lines, write_lines


def unique_preserve_order(words: list[str]) -> list[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def select_roots(lines: list[str], min_len: int, max_len: int) -> list[str]:
    words = [ln.strip().lower() for ln in lines]
    words = [w for w in words if w.isalpha() and min_len <= len(w) <= max_len]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Build a start-word pool from a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input word list (.txt)")
    ap.add_argument("--out", required=True, help="output start-word file")
    ap.add_argument("--min-len", type=int, default=8, help="shortest root to keep")
    ap.add_argument("--max-len", type=int, default=8, help="longest root to keep")
    ap.add_argument("--sample", type=int, help="keep only K random roots")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep input order)")
    args = ap.parse_args()

    if args.min_len > args.max_len:
        ap.error("--min-len must be <= --max-len")

    inp = Path(args.inp)
    lines = read_lines(inp)
    roots = select_roots(lines, args.min_len, args.max_len)

    if args.sample and args.sample < len(roots):
        roots = random.Random(args.seed).sample(roots, args.sample)
    if args.sort:
        roots = sorted(roots)

    write_lines(roots, args.out)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {args.out} ({len(roots)} roots)")


if __name__ == "__main__":
    main()
