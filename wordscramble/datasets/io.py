from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

DATA_DIR = Path(__file__).resolve().parent / "data"
START_WORDS = DATA_DIR / "start.txt"
WORDS_EN = DATA_DIR / "words_en.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word file into a list of lines (CR/LF stripped, blanks kept).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8").splitlines()


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line (UTF-8, trailing newline). Returns the path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
