"""
Solver loop and experiment harness primitives.

- SolverLoop:     narrow a dictionary to the answer, one guess per round.
- OracleFeedback: feedback source that knows the hidden answer.
- run_case:       play one hidden answer with a given solver.
- run_batch:      play many hidden answers in sequence.

The loop is a small state machine over the candidate pool:

    active (|pool| > 1)  -> guess, get feedback, filter, repeat
    solved (|pool| == 1) -> the one remaining word is the answer
    exhausted (|pool| == 0)

A feedback source is any callable taking the guess and returning its
pattern (see engine/scoring.py), or None when the guess is not an acceptable
word. A rejected guess is dropped from the pool without using up a feedback
round.

These functions are UI-agnostic so they can be reused by the CLI apps, a
notebook, or tests without changes.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from wordsieve.engine import (
    DegenerateDictionaryError,
    apply_restrictions,
    build_restrictions,
    score,
    validate_guess,
)
from wordsieve.engine.ranking import RankedWord
from wordsieve.engine.validation import is_clean_word
from wordsieve.solvers.base import DEFAULT_SEED

log = logging.getLogger(__name__)

ACTIVE = "active"
SOLVED = "solved"
EXHAUSTED = "exhausted"

Feedback = Callable[[str], Optional[str]]
OnGuess = Callable[[int, List[str], RankedWord], None]


@dataclass
class Round:
    """One guess: what was played, against how many candidates, and the outcome."""
    turn: int
    guess: str
    score: Optional[float]
    pool_size: int
    pattern: Optional[str]  # None: rejected as not a valid word
    remaining: int


@dataclass
class SolveResult:
    status: str
    answer: Optional[str]
    rounds: List[Round] = field(default_factory=list)

    @property
    def history(self) -> List[Tuple[str, str]]:
        """(guess, pattern) pairs of the rounds that received feedback."""
        return [(r.guess, r.pattern) for r in self.rounds if r.pattern is not None]

    @property
    def feedback_rounds(self) -> int:
        return len(self.history)


class OracleFeedback:
    """
    Scores guesses against a known answer.

    If `allowed` is given, guesses outside it are answered with None, the
    same signal a human gives for "not a valid word".
    """

    def __init__(self, answer: str, allowed: Iterable[str] | None = None):
        self.answer = answer
        self.allowed = None if allowed is None else frozenset(allowed)

    def __call__(self, guess: str) -> Optional[str]:
        if self.allowed is not None and not validate_guess(guess, self.allowed, len(self.answer)):
            return None
        return score(guess, self.answer)


class SolverLoop:
    """
    Runs one puzzle over a fixed dictionary.

    Args:
        words:  the dictionary; all words must be clean lowercase words of
                the same length. Duplicates are dropped (first kept).
        solver: a BaseSolver picking each guess from the current pool
        N:      word length; inferred from the first word when omitted
        seed:   seed handed to the solver (random-guess mode)
        opening: first guess to play instead of asking the solver, e.g. one
                 computed once by opening_guess() for a whole batch

    Raises DegenerateDictionaryError for an empty dictionary and ValueError
    for words that are not N lowercase letters.
    """

    def __init__(self, words: Iterable[str], solver, *, N: int | None = None,
                 seed: int | None = DEFAULT_SEED, opening: RankedWord | None = None):
        pool = list(dict.fromkeys(words))
        if not pool:
            raise DegenerateDictionaryError("dictionary contains no words of the target length")

        self.N = int(N) if N is not None else len(pool[0])
        bad = [w for w in pool if not is_clean_word(w, self.N)]
        if bad:
            raise ValueError(f"dictionary has words that are not {self.N} lowercase letters, "
                             f"e.g. {bad[:5]}")
        if opening is not None and opening.word not in pool:
            raise ValueError(f"opening guess {opening.word!r} is not in the dictionary")

        self.pool: List[str] = pool
        self.rounds: List[Round] = []
        self._opening = opening
        self.solver = solver
        self.solver.reset(N=self.N, seed=seed)

    @property
    def status(self) -> str:
        if not self.pool:
            return EXHAUSTED
        if len(self.pool) == 1:
            return SOLVED
        return ACTIVE

    def step(self, feedback: Feedback, on_guess: OnGuess | None = None) -> Round:
        """Play one round. Only valid while the loop is active."""
        if self.status != ACTIVE:
            raise RuntimeError(f"cannot step a finished loop ({self.status})")

        turn = len(self.rounds) + 1
        before = len(self.pool)
        if turn == 1 and self._opening is not None:
            ranked = self._opening
        else:
            ranked = self.solver.next_guess({"N": self.N, "candidates": self.pool})
        if on_guess is not None:
            on_guess(turn, self.pool, ranked)

        patt = feedback(ranked.word)
        if patt is None:
            self.pool = [w for w in self.pool if w != ranked.word]
            log.debug("turn %d: %s rejected, %d -> %d candidates",
                      turn, ranked.word, before, len(self.pool))
        else:
            self.pool = apply_restrictions(self.pool, build_restrictions(ranked.word, patt))
            log.debug("turn %d: %s (score=%s) -> %s, %d -> %d candidates",
                      turn, ranked.word, ranked.score, patt, before, len(self.pool))

        rnd = Round(turn, ranked.word, ranked.score, before, patt, len(self.pool))
        self.rounds.append(rnd)
        return rnd

    def run(self, feedback: Feedback, on_guess: OnGuess | None = None) -> SolveResult:
        """Step until solved or exhausted."""
        while self.status == ACTIVE:
            self.step(feedback, on_guess)

        answer = self.pool[0] if self.pool else None
        log.info("%s after %d round(s): %s", self.status, len(self.rounds), answer)
        return SolveResult(self.status, answer, list(self.rounds))


def opening_guess(solver, words: Iterable[str], N: int) -> Optional[RankedWord]:
    """
    First guess of a deterministic solver over the full dictionary, or None.

    The opening pool is the same for every game of a batch, so a
    deterministic solver only needs to rank it once.
    """
    if not solver.deterministic:
        return None
    pool = list(dict.fromkeys(words))
    if len(pool) <= 1:
        return None
    return solver.next_guess({"N": N, "candidates": pool})


def run_case(
        solver,
        answer: str,
        *,
        words: Iterable[str],
        N: int,
        seed: int | None = None,
        allowed: Iterable[str] | None = None,
        opening: RankedWord | None = None,
) -> Dict:
    """
    Solve one puzzle whose hidden word is `answer`.

    Args:
        solver:  an object implementing BaseSolver
        answer:  the hidden word for this case
        words:   the dictionary (candidate universe)
        N:       word length
        seed:    RNG seed to make random guesses reproducible
        allowed: optional list of acceptable guesses; others are rejected
        opening: precomputed first guess (see opening_guess)

    Returns:
        dict with keys:
            success (bool), status (str), found (str | None),
            guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str)
    """
    t0 = time.perf_counter()
    loop = SolverLoop(words, solver, N=N, seed=seed, opening=opening)
    res = loop.run(OracleFeedback(answer, allowed))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": res.status == SOLVED and res.answer == answer,
        "status": res.status,
        "found": res.answer,
        "guesses": res.feedback_rounds,
        "time_ms": dt,
        "history": res.history,
        "answer": answer,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        words: List[str],
        N: int,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    (after filtering to length N) are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index). A deterministic solver's
    opening guess is ranked once and reused by every case.
    """
    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    opening = opening_guess(solver, words, N)

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, ans, words=words, N=N, seed=case_seed, opening=opening)
        out.append(r)
    return out
