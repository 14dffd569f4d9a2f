from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, START_WORDS, WORDS_EN

__all__ = ["validate_wordlists", "pretty_summary", "read_lines", "write_lines",
           "START_WORDS", "WORDS_EN"]
