"""
Lightweight guess validation.

A guess is valid iff:
  - it is a string
  - it is ASCII a-z only
  - it has exact length N
  - it exists in the provided `allowed` list/set

The offline oracle uses this to play the "not a valid word" answer that a
human gives the interactive channel.
"""

from typing import Iterable, Set


def is_clean_word(word: str, N: int) -> bool:
    """True for an N-letter lowercase ASCII word."""
    return (
        isinstance(word, str)
        and len(word) == N
        and word.isascii()
        and word.isalpha()
        and word.islower()
    )


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - `allowed` may be a large list; pass a set when calling this in a
        loop to avoid rebuilding it each time.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if not is_clean_word(w, N):
        return False

    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) \
        else {a.strip().lower() for a in allowed}
    return w in allowed_set
