"""
Entropy Solver (expected information gain).

For each word still in the candidate pool, partition the pool by the
feedback pattern that word would produce and compute the Shannon entropy of
that partition; guess the word with the maximum.

Tie-break: first word in pool order reaching the maximum. The RNG is not
used, so runs are deterministic regardless of seed.
"""

from __future__ import annotations
from typing import List

from .base import BaseSolver, register
from wordsieve.engine.ranking import RankedWord, best_guess


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.0.0"
    deterministic = True

    def next_guess(self, state: dict) -> RankedWord:
        """Pick the candidate with maximum expected information gain."""
        candidates: List[str] = state["candidates"]
        return best_guess(candidates)
