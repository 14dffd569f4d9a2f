from __future__ import annotations
import random
from typing import Dict, List, Optional, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    An automated player. The harness calls reset() once per game, then
    next_word(state) until it returns None or the submission budget runs out.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.root: str = ""
        self.vocabulary: List[str] = []
        self.rng = random.Random()

    def reset(self, *, vocabulary: List[str], root: str, seed: int | None = None) -> None:
        self.vocabulary = list(vocabulary)
        self.root = root
        if seed is not None:
            self.rng.seed(seed)

    def next_word(self, state: dict) -> Optional[str]:
        raise NotImplementedError("Override in subclass")
