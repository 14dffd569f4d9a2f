from .scoring import score
from .constraints import is_possible, derivable_words
from .text import normalize, letter_count
from .validation import (
    MIN_WORD_LENGTH,
    DEFAULT_LANGUAGE,
    Rejection,
    Verdict,
    validate,
    is_long_enough,
    is_not_root,
    is_original,
    is_real,
)

__all__ = [
    "score", "is_possible", "derivable_words", "normalize", "letter_count",
    "MIN_WORD_LENGTH", "DEFAULT_LANGUAGE", "Rejection", "Verdict", "validate",
    "is_long_enough", "is_not_root", "is_original", "is_real",
]
