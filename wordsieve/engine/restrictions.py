"""
Turn one round of feedback into a set of restrictions on the answer.

Three kinds of restriction:
  - AtPosition(letter, position)    : the answer has `letter` at `position`
  - NotAtPosition(letter, position) : the answer does not have `letter` there
  - Count(letter, low, high)        : `letter` occurs low..high times (inclusive)

For a guess and its pattern we emit one Count per distinct letter of the
guess, one AtPosition per 'G' and one NotAtPosition per 'Y'.

The Count bounds carry the duplicate-letter logic. With g greens and y
yellows of a letter, the answer has at least g + y of it. If the same letter
was also tagged absent somewhere in the guess, the puzzle ran out of that
letter, so the count is exactly g + y. Otherwise nothing caps it below N.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Union

from .errors import FeedbackError
from .scoring import ABSENT, EXACT, PRESENT, TAGS


@dataclass(frozen=True)
class AtPosition:
    letter: str
    position: int

    def allows(self, word: str) -> bool:
        return word[self.position] == self.letter


@dataclass(frozen=True)
class NotAtPosition:
    letter: str
    position: int

    def allows(self, word: str) -> bool:
        return word[self.position] != self.letter


@dataclass(frozen=True)
class Count:
    letter: str
    low: int
    high: int

    def allows(self, word: str) -> bool:
        return self.low <= word.count(self.letter) <= self.high


Restriction = Union[AtPosition, NotAtPosition, Count]


def _check_feedback(guess: str, pattern: str) -> None:
    if len(pattern) != len(guess):
        raise FeedbackError(
            f"pattern {pattern!r} has length {len(pattern)}, guess {guess!r} has {len(guess)}")
    bad = set(pattern) - set(TAGS)
    if bad:
        raise FeedbackError(f"pattern {pattern!r} has unknown tag(s) {sorted(bad)}")


def build_restrictions(guess: str, pattern: str) -> List[Restriction]:
    """
    Restrictions implied by `pattern` (from score() or from a user) for `guess`.

    Order of the result: Count entries (one per distinct letter, in order of
    first appearance), then AtPosition entries, then NotAtPosition entries.
    """
    _check_feedback(guess, pattern)
    N = len(guess)

    exact = [i for i, t in enumerate(pattern) if t == EXACT]
    present = [i for i, t in enumerate(pattern) if t == PRESENT]
    absent_letters = {guess[i] for i, t in enumerate(pattern) if t == ABSENT}

    greens = Counter(guess[i] for i in exact)
    yellows = Counter(guess[i] for i in present)

    out: List[Restriction] = []
    for c in dict.fromkeys(guess):
        low = greens[c] + yellows[c]
        high = low if c in absent_letters else N
        out.append(Count(c, low, high))

    out.extend(AtPosition(guess[p], p) for p in exact)
    out.extend(NotAtPosition(guess[p], p) for p in present)
    return out
