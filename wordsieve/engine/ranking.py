"""
Entropy ranking (expected information gain).

For a candidate guess g, treat every word in the pool as the possible
answer, bucket the pool by the pattern code g would produce, and take the
Shannon entropy of the bucket sizes:

    H(g) = sum_k p_k * log2(1 / p_k),   p_k = |bucket k| / |pool|

Higher H means g splits the pool into more, more even buckets.

Cost is O(N) pattern computations per guess and O(N^2) per ranking round,
which is fine for pools of a few thousand words. Each guess is scored
independently over the read-only pool, so callers needing more speed can
fan rank_words out over chunks of the pool.

Scores are recomputed every round; nothing is cached between rounds since
the pool they are measured against changes.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

import numpy as np

from .patterns import encode_pattern
from .scoring import score


class RankedWord(NamedTuple):
    word: str
    score: Optional[float]  # None when the guess was not ranked (random mode)


def pattern_codes(guess: str, pool: Sequence[str]) -> np.ndarray:
    """Pattern code of `guess` against every word of `pool`, as an int64 array."""
    return np.fromiter(
        (encode_pattern(score(guess, ans)) for ans in pool),
        dtype=np.int64,
        count=len(pool),
    )


def guess_entropy(guess: str, pool: Sequence[str]) -> float:
    """Entropy in bits of the partition of `pool` induced by `guess`."""
    n = len(pool)
    if n <= 1:
        return 0.0

    _, counts = np.unique(pattern_codes(guess, pool), return_counts=True)
    # Sum in bucket-size order so equal partitions score bit-identically.
    p = np.sort(counts) / n
    return float(np.sum(p * np.log2(1.0 / p)))


def rank_words(pool: Sequence[str]) -> List[RankedWord]:
    """Score every pool word as a guess against the pool (pool order kept)."""
    return [RankedWord(w, guess_entropy(w, pool)) for w in pool]


def best_guess(pool: Sequence[str]) -> RankedWord:
    """
    Highest-entropy word of the pool.

    Ties go to the earliest word in pool order: a single scan that only
    replaces the leader on a strictly greater score.
    """
    if not pool:
        raise ValueError("cannot rank an empty pool")

    best: RankedWord | None = None
    for ranked in rank_words(pool):
        if best is None or ranked.score > best.score:
            best = ranked
    return best
