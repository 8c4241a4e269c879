"""
Candidate filtering.

Given:
  - a pool of words (the current candidates)
  - restrictions derived from feedback (see restrictions.py)

Return:
  - the words satisfying every restriction, in their original order.

This is the step that turns feedback into a shrinking candidate set. It
never adds words and never mutates the pool it was given.
"""

from typing import Iterable, List, Sequence

from .restrictions import Restriction


def apply_restrictions(words: Iterable[str], restrictions: Sequence[Restriction]) -> List[str]:
    """Keep the words that satisfy all `restrictions` (order preserved)."""
    return [w for w in words if all(r.allows(w) for r in restrictions)]

