# apps/cli/play.py
"""
Interactive terminal front-end for wordscramble.

Type words made from the letters of the root. Commands:
  :new    start over with a new root word
  :hint   show one word you haven't found yet (word-list dictionary only)
  :score  show the score and the best possible score
  :words  list the words found so far
  :quit   exit (Ctrl-D works too)

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --dictionary remote
    python -m apps.cli.play --start-words my_roots.txt --words my_dict.txt --seed 3
"""

from __future__ import annotations

import argparse
import logging

from wordscramble.datasets import START_WORDS, WORDS_EN
from wordscramble.dictionary import WordListDictionary, create_dictionary, get_dictionary_ids
from wordscramble.engine import DEFAULT_LANGUAGE, letter_count
from wordscramble.errors import DictionaryUnavailable
from wordscramble.session import WordScramble

PROMPT = "> "


def _build_dictionary(args):
    if args.dictionary == "wordlist":
        return WordListDictionary.from_path(args.words, language=args.language)
    return create_dictionary(args.dictionary, language=args.language)


def _announce(game: WordScramble) -> None:
    print()
    print(f"Root word: {game.root_word.upper()}")
    if game.used_fallback:
        print("(start word list unavailable; playing the default word)")
    print("Enter all the words you can think of that can be made from its letters.")


def _show_words(game: WordScramble) -> None:
    words = game.used_words()
    if not words:
        print("No words yet.")
        return
    for w in words:
        print(f"  ({letter_count(w)}) {w}")


def _show_score(game: WordScramble) -> None:
    try:
        print(f"Score: {game.score()} / {game.max_score()}")
    except NotImplementedError:
        print(f"Score: {game.score()}")


def _show_hint(game: WordScramble) -> None:
    try:
        h = game.hint()
    except NotImplementedError:
        print("Hints need a word-list dictionary.")
        return
    print(f"Try: {h}" if h else "You found them all!")


def main():
    """
    Parse CLI args, start a game, and read words until :quit or EOF.
    """
    ap = argparse.ArgumentParser(description="wordscramble: make words from a root word")
    ap.add_argument("--start-words", default=str(START_WORDS),
                    help="newline-delimited pool of root words")
    ap.add_argument("--dictionary", default="wordlist", choices=get_dictionary_ids(),
                    help="dictionary oracle for the real-word check")
    ap.add_argument("--words", default=str(WORDS_EN),
                    help="word list for the 'wordlist' dictionary")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--seed", type=int, help="RNG seed (reproducible roots and hints)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    game = WordScramble(_build_dictionary(args), root_words=args.start_words,
                        language=args.language, seed=args.seed)
    game.start_game()
    _announce(game)

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = line.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":new":
            game.start_game()
            _announce(game)
            continue
        if cmd == ":hint":
            _show_hint(game)
            continue
        if cmd == ":score":
            _show_score(game)
            continue
        if cmd == ":words":
            _show_words(game)
            continue

        try:
            verdict = game.submit(line)
        except DictionaryUnavailable as e:
            print(f"Dictionary unavailable, try again: {e}")
            continue

        if verdict is None:
            continue
        if verdict.accepted:
            print(f"+{letter_count(verdict.word)}  {verdict.word}   (score {game.score()})")
        else:
            print(f"{verdict.title}: {verdict.message}")

    print(f"Final score: {game.score()}")


if __name__ == "__main__":
    main()
