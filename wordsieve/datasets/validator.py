"""
Dictionary validator for wordsieve.

What this module does:
- Inspect a dictionary file (one word per line) for a target length N.
- Count usable N-letter words, words of other lengths, invalid lines and
  duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty
  one-line summary.

Words of other lengths are not an error: general dictionaries hold every
length and the loader keeps only length N. The report fails only when the
file is missing or has no usable N-letter word.

Typical use:
    from wordsieve.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordsieve.engine.validation import is_clean_word


@dataclass
class ValidationReport:
    """Diagnostics and metadata for one dictionary file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # usable N-letter words (duplicates included)
    unique_count: int    # usable N-letter words after dedupe
    other_lengths: int   # clean words of some other length (ignored)
    invalid_lines: int   # blank lines or non a-z tokens
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _classify_lines(path: Path, N: int) -> Tuple[List[str], int, int]:
    """
    Sort the file's lines into usable words, other-length words and invalid lines.

    Tokens are stripped and lowercased before checking (the loader does the same).

    Returns:
      (valid_words, other_length_count, invalid_count)
    """
    valid: List[str] = []
    other = 0
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().lower()
            if is_clean_word(w, N):
                valid.append(w)
            elif w and is_clean_word(w, len(w)):
                other += 1
            else:
                invalid += 1

    return valid, other, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport) with counts,
        SHA-256, `passed` and a list of human-friendly `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = ValidationReport(N, path, False, 0, 0, 0, 0, "", False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    words, other, invalid = _classify_lines(p, N)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append(f"dictionary contains 0 valid {N}-letter words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"dictionary contains {len(words) - unique} duplicate word(s)")

    rep = ValidationReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        other_lengths=other,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, sha=abc123def456) | other lengths=0 | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| other lengths={report['other_lengths']} | invalid={report['invalid_lines']} "
        f"| {status}"
    )
