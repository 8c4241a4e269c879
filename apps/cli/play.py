# apps/cli/play.py
"""
Interactive solver: play the puzzle elsewhere and type the feedback here.

Each round the solver suggests a word. Answer whether the puzzle accepted
it, then enter the 1-indexed positions of green letters and of yellow
letters ('n' ends each list). Repeats until one word is left.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordsieve.datasets import load_words, validate_wordlist, pretty_summary
from wordsieve.engine import FeedbackError
from wordsieve.harness import SOLVED, InteractiveFeedback, SolverLoop
from wordsieve.solvers import DEFAULT_SEED, create_solver, get_solver_ids

DEFAULT_N = 5


def main():
    ap = argparse.ArgumentParser(description="wordsieve: interactive solver")
    ap.add_argument("--words", default="words.txt",
                    help="dictionary file, one word per line")
    ap.add_argument("--N", type=int, default=DEFAULT_N, help="word length")
    ap.add_argument("--solver", default="entropy",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED,
                    help="RNG seed for random guesses")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        sys.exit(1)

    words = load_words(args.words, args.N)
    loop = SolverLoop(words, create_solver(args.solver), N=args.N, seed=args.seed)
    channel = InteractiveFeedback(args.N)

    try:
        res = loop.run(channel, on_guess=channel.announce)
    except FeedbackError as e:
        print(f"Aborted: {e}", file=sys.stderr)
        sys.exit(1)

    if res.status == SOLVED:
        print(f"The answer is {res.answer}")
    else:
        print("The word is not in our list")


if __name__ == "__main__":
    main()
