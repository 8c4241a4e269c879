"""
Feedback classification for a single (guess, answer) pair.

Conventions:
  - 'G'  : exact   = correct letter in the correct position (green)
  - 'Y'  : present = letter occurs elsewhere in the answer (yellow)
  - '-'  : absent  = letter not present, or already used up by other tags (gray)

The classification of a guess is a string of length N over these three
characters. Every other engine module consumes this string.

Algorithm (two passes; order matters for repeated letters):
  1) Mark all exact matches and count the answer letters they did not claim.
  2) Left to right, mark a non-exact position present only while its letter
     still has unclaimed occurrences in the answer.

So for any letter, the number of 'G' + 'Y' tags never exceeds its count in
the answer.
"""

from collections import Counter
from typing import Literal

from .errors import FeedbackError

PatternChar = Literal["G", "Y", "-"]

EXACT: PatternChar = "G"
PRESENT: PatternChar = "Y"
ABSENT: PatternChar = "-"

TAGS = (EXACT, PRESENT, ABSENT)


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Raises FeedbackError if the two words differ in length.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("eerie", "crane") -> "--Y-G"
    """
    if len(guess) != len(answer):
        raise FeedbackError(
            f"guess {guess!r} and answer {answer!r} differ in length")

    n = len(guess)
    pattern = [ABSENT] * n

    # Pass 1: exact matches; whatever the answer has left over is claimable.
    remaining = Counter()
    for i in range(n):
        if guess[i] == answer[i]:
            pattern[i] = EXACT
        else:
            remaining[answer[i]] += 1

    # Pass 2: presents, capped by leftover multiplicity.
    for i in range(n):
        if pattern[i] == EXACT:
            continue
        g = guess[i]
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)

