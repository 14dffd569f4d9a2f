"""
Download a word list over HTTP and write a clean one-word-per-line file.

What it does:
- Downloads the URL (plain-text lists are used as-is; HTML pages are reduced
  to their visible text first).
- Keeps tokens made only of letters, lowercased.
- De-duplicates while preserving source order, and writes to file.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --out wordscramble/datasets/data/words_en.txt
    # or alphabetically sorted, dropping words shorter than 3 letters:
    python -m script.fetch_wordlist --url ... --min-len 3 --sort --out ...
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

WORD_RE = re.compile(r"[^\W\d_]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str, min_len: int = 1) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    text = r.text
    if "html" in r.headers.get("Content-Type", ""):
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    words = [m.group(0).lower() for m in WORD_RE.finditer(text)]
    return unique_preserve_order(w for w in words if len(w) >= min_len)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for wordscramble")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="wordscramble/datasets/data/words_en.txt")
    ap.add_argument("--min-len", type=int, default=1, help="drop shorter words")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of "
                                                        "keeping source order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.min_len)
    if args.sort:
        words = sorted(words)

    Path(args.out).write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
