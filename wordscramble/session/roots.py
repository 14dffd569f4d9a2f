"""
Root-word selection.

A session starts by picking one word uniformly at random from a
newline-delimited pool (start.txt). Both steps are fail-safe:

  - load_root_words() never raises; an unreadable resource is logged and
    reads as an empty pool.
  - pick_root() never raises; an empty pool (or one with only blank lines)
    yields FALLBACK_ROOT.

Callers that want to tell the player about the degraded mode compare the
result against FALLBACK_ROOT, or use pick_root_with_source().
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..datasets.io import START_WORDS, read_lines
from ..engine.text import normalize

logger = logging.getLogger(__name__)

FALLBACK_ROOT = "silkworm"

# Where a root came from
SOURCE_LIST = "list"
SOURCE_FALLBACK = "fallback"


def default_root_words_path() -> Path:
    """The start-word pool shipped with the package."""
    return START_WORDS


def load_root_words(path: Path | str | None = None) -> List[str]:
    """
    Read the whole pool and split it on newlines. Blank lines are kept here;
    pick_root() skips them.

    Any failure to read (missing file, permissions, bad encoding) is logged as
    a warning and returns [] so the session can still start.
    """
    path = default_root_words_path() if path is None else Path(path)
    try:
        words = read_lines(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read root words from %s (%s); using fallback", path, e)
        return []
    logger.debug("Loaded %d root-word lines from %s", len(words), path)
    return words


def pick_root_with_source(words: Optional[Sequence[str]],
                          rng: Optional[random.Random] = None) -> Tuple[str, str]:
    """
    Uniform choice over the normalized, non-empty entries of `words`.

    Returns:
      (root, source) where source is SOURCE_LIST or SOURCE_FALLBACK.

    Raises:
      TypeError if `words` is a bare str (it would be read letter by letter).
    """
    if isinstance(words, str):
        raise TypeError("words must be a sequence of words, not a single str; "
                        "use load_root_words() for a path")
    rng = rng or random.Random()
    pool = [w for w in (normalize(w) for w in (words or [])) if w]

    if not pool:
        logger.warning("Root-word pool is empty; falling back to %r", FALLBACK_ROOT)
        return FALLBACK_ROOT, SOURCE_FALLBACK

    return pool[rng.randrange(len(pool))], SOURCE_LIST


def pick_root(words: Optional[Sequence[str]], rng: Optional[random.Random] = None) -> str:
    return pick_root_with_source(words, rng)[0]
