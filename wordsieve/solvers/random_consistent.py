"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).

Notes:
  - Reproducible across runs with the same seed (via BaseSolver.rng).
  - The baseline strategy; it does not try to maximize information gain.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register
from wordsieve.engine.ranking import RankedWord


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.1.0"

    def next_guess(self, state: dict) -> RankedWord:
        """
        Pick any candidate uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "candidates": current consistent pool (List[str], non-empty)
                - "N":          word length

        Returns:
            RankedWord with score None; random guesses are not ranked.
        """
        candidates: List[str] = state["candidates"]
        i = self.rng.randrange(len(candidates))
        return RankedWord(candidates[i], None)
