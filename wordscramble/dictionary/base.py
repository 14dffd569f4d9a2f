from __future__ import annotations
from typing import Dict, List, Type

from ..engine.validation import DEFAULT_LANGUAGE

# ---- Global dictionary registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that dictionary oracles inherit ----
class BaseDictionary:
    """
    Oracle contract: is_real_word(word, language) -> bool.

    `word` arrives normalized (lowercase, trimmed). Implementations that can
    list their words also override vocabulary(); the engine uses it for
    solutions and hints.
    """
    id = "base"
    name = "Base"

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self.language = language

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")

    def vocabulary(self) -> List[str]:
        raise NotImplementedError(f"{self.id} dictionary cannot enumerate its words")
