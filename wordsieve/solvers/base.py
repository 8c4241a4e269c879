from __future__ import annotations
import random
from typing import Dict, Type

from wordsieve.engine.ranking import RankedWord

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}

DEFAULT_SEED = 42


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


# ---- Base class that guess-selection strategies inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    # True when next_guess depends only on the pool (no RNG), so the
    # opening guess over a fixed dictionary can be computed once per batch.
    deterministic = False

    def __init__(self):
        self.N: int = 5
        self.rng = random.Random(DEFAULT_SEED)

    def reset(self, *, N: int, seed: int | None = None) -> None:
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> RankedWord:
        """
        Choose the next guess from state["candidates"] (never empty).
        """
        raise NotImplementedError("Override in subclass")
