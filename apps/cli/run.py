# apps/cli/run.py
"""
CLI entry point for batch evaluation of wordsieve strategies.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads the N-letter words and instantiates the requested solver.
  3) Plays every word (or a seeded sample) as the hidden answer with a live
     progress indicator and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dictionary hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordsieve.datasets import load_words, validate_wordlist, pretty_summary
from wordsieve.harness import opening_guess, run_case
from wordsieve.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordsieve.solvers import DEFAULT_SEED, create_solver, get_solver_ids

DEFAULT_N = 5


def main():
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordsieve: evaluate guess strategies")
    ap.add_argument("--solver", default="entropy",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--N", type=int, default=DEFAULT_N, help="word length")
    ap.add_argument("--words", default="words.txt",
                    help="dictionary file, one word per line")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed); "
                         "entropy ranking is quadratic in dictionary size, so big "
                         "dictionaries are slow per game")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED,
                    help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        sys.exit(1)

    # 2) Load words and instantiate the solver
    words = load_words(args.words, args.N)
    solver = create_solver(args.solver)

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(words):
        pool = list(words)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(words)

    total = len(cases)

    # Same dictionary every game: rank the opening pool once
    opening = opening_guess(solver, words, args.N)
    if opening is not None:
        print(f"Opening guess: {opening.word} (entropy {opening.score:.3f} bits)")

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 4) Run batch with live progress
    for idx, ans in enumerate(iterator, 1):
        r = run_case(solver, ans, words=words, N=args.N, seed=args.seed + idx,
                     opening=opening)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    solved = sum(1 for r in results if r["success"])
    mean_guesses = sum(r["guesses"] for r in results) / max(1, len(results))
    print(f"Solved {solved}/{total} | mean feedback rounds {mean_guesses:.3f}")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=args.N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solved": solved,
        "mean_guesses": mean_guesses,
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
