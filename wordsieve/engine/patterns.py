"""
Pattern codes: a feedback string packed into one integer.

Position i contributes digit 0 (absent), 1 (exact) or 2 (present) times 3**i,
so position 0 is the least significant digit and every code of an N-letter
pattern lies in [0, 3**N). Codes are only used as grouping keys (the
entropy ranker buckets a pool by them), but the weighting is fixed so codes
are comparable across runs.
"""

from typing import Iterable, List

from .errors import FeedbackError
from .scoring import ABSENT, EXACT, PRESENT

_DIGIT = {ABSENT: 0, EXACT: 1, PRESENT: 2}


def encode_pattern(pattern: str) -> int:
    """
    Base-3 code of a feedback pattern.

      encode_pattern("-----") -> 0
      encode_pattern("G----") -> 1
      encode_pattern("Y----") -> 2
      encode_pattern("GGGGG") -> 121
    """
    code = 0
    weight = 1
    for ch in pattern:
        try:
            code += _DIGIT[ch] * weight
        except KeyError:
            raise FeedbackError(f"unknown tag {ch!r} in pattern {pattern!r}") from None
        weight *= 3
    return code


def _check_positions(positions: Iterable[int], N: int, kind: str) -> List[int]:
    checked = []
    for p in positions:
        if not isinstance(p, int) or not 0 <= p < N:
            raise FeedbackError(f"{kind} position {p!r} outside [0, {N})")
        checked.append(p)
    return checked


def pattern_from_positions(N: int, exact: Iterable[int], present: Iterable[int]) -> str:
    """
    Build a pattern from 0-indexed exact and present positions.

    Positions listed in neither are absent. A position listed in both is
    malformed feedback and raises FeedbackError.
    """
    exact = set(_check_positions(exact, N, "exact"))
    present = set(_check_positions(present, N, "present"))

    both = exact & present
    if both:
        raise FeedbackError(
            f"position(s) {sorted(both)} marked both exact and present")

    return "".join(
        EXACT if i in exact else PRESENT if i in present else ABSENT
        for i in range(N)
    )
