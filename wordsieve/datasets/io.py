from __future__ import annotations
import logging
from pathlib import Path
from typing import List

from wordsieve.engine import DegenerateDictionaryError
from wordsieve.engine.validation import is_clean_word

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str, N: int) -> List[str]:
    """
    Load a one-word-per-line dictionary, keeping lowercase a-z words of length N.

    Words are stripped and lowercased first; duplicates are dropped keeping
    the first occurrence. Raises DegenerateDictionaryError when nothing of
    length N survives.
    """
    lines = read_lines(p)
    words = [w for w in dict.fromkeys(ln.strip().lower() for ln in lines)
             if is_clean_word(w, N)]
    log.debug("%s: %d lines, %d usable %d-letter words", p, len(lines), len(words), N)
    if not words:
        raise DegenerateDictionaryError(f"{p} contains no {N}-letter words")
    return words
