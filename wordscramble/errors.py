"""
Exceptions raised by wordscramble.

Rejected words are NOT exceptions (see engine.validation.Rejection); these are
for collaborators that cannot give an answer at all.
"""


class WordScrambleError(Exception):
    """Base class for all wordscramble errors."""


class DictionaryUnavailable(WordScrambleError):
    """The dictionary oracle could not decide whether a word is real."""
