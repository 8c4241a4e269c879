"""
Result files for batch evaluation.

A batch writes two files side by side: a CSV with one row per game
(status, found word, feedback rounds, and each guess with its pattern) and
a JSON manifest describing how the run was configured.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional
import csv
import json
import subprocess
import datetime as dt

BASE_FIELDS = ["solver", "N", "answer", "status", "found", "success", "guesses", "time_ms"]


def _as_text_cell(patt: str) -> str:
    # leading apostrophe stops spreadsheets parsing "-GYY-" as a formula
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, N: int, max_turns: Optional[int] = None) -> str:
    """
    Write run_case() results to `path`, one row per game.

    Guess/pattern pairs fill guess_1, patt_1, ... up to `max_turns` column
    pairs; by default as many as the longest game needed. Shorter games
    leave the trailing cells empty.
    """
    if max_turns is None:
        max_turns = max((len(r.get("history", [])) for r in results), default=0)

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = list(BASE_FIELDS)
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields, restval="")
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "N": N,
                "answer": r["answer"],
                "status": r["status"],
                "found": r["found"] or "",
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            for i, (g, patt) in enumerate(r.get("history", [])[:max_turns], start=1):
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _as_text_cell(patt)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump the run manifest (config, dictionary report, totals) as indented JSON."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short hash of HEAD, or 'unknown' outside a git checkout."""
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                      stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
