"""
Interactive feedback: a human plays the puzzle elsewhere and reports back.

Per round the channel asks whether the suggested word was accepted
("yes"/"no"). If it was, it reads the 1-indexed positions of green letters
and then of yellow letters, one number per line, each list ended by "n".
Every unlisted position is gray.

Input and output go through `input_fn` / `output_fn` so tests can script a
session.
"""

from __future__ import annotations
from typing import Callable, List, Optional

from wordsieve.engine import FeedbackError, pattern_from_positions
from wordsieve.engine.ranking import RankedWord

# Remaining pools at most this big are listed word by word.
LIST_POOL_LIMIT = 10


class InteractiveFeedback:

    def __init__(self, N: int, *, input_fn: Callable[[], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.N = N
        self._input = input_fn
        self._print = output_fn

    def _read(self) -> str:
        try:
            return self._input().strip().lower()
        except EOFError:
            raise FeedbackError("input ended before feedback was complete") from None

    def announce(self, turn: int, pool: List[str], ranked: RankedWord) -> None:
        """Print the remaining pool and the suggested guess."""
        if len(pool) > LIST_POOL_LIMIT:
            self._print(f"Remaining words: {len(pool)}")
        else:
            self._print(f"Remaining words: {len(pool)} ({', '.join(pool)})")
        if ranked.score is None:
            self._print(f"Guess: {ranked.word}")
        else:
            self._print(f"Guess: {ranked.word} (entropy {ranked.score:.3f} bits)")

    def _ask_valid(self) -> bool:
        self._print("Is word in list? (enter yes or no)")
        while True:
            ans = self._read()
            if ans in ("yes", "y"):
                return True
            if ans in ("no", "n"):
                return False
            self._print("Please enter yes or no")

    def _ask_positions(self, colour: str) -> List[int]:
        self._print(f"Enter the position of any {colour} characters (enter 'n' when done):")
        positions: List[int] = []
        while True:
            raw = self._read()
            if raw == "n":
                return positions
            try:
                p = int(raw)
            except ValueError:
                self._print("Please enter a number")
                continue
            if not 1 <= p <= self.N:
                self._print(f"Please make sure the number is between 1 and {self.N} (inclusive)")
                continue
            positions.append(p - 1)

    def __call__(self, guess: str) -> Optional[str]:
        if not self._ask_valid():
            return None
        while True:
            green = self._ask_positions("green")
            yellow = self._ask_positions("yellow")
            try:
                return pattern_from_positions(len(guess), green, yellow)
            except FeedbackError as e:
                self._print(f"Invalid feedback: {e}. Please enter it again.")
