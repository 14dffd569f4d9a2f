from .roots import FALLBACK_ROOT, pick_root, load_root_words, default_root_words_path
from .state import SessionState
from .game import WordScramble

__all__ = ["FALLBACK_ROOT", "pick_root", "load_root_words", "default_root_words_path",
           "SessionState", "WordScramble"]
