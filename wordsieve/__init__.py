"""wordsieve: entropy-ranked, constraint-based solver for word-guessing puzzles."""

__version__ = "0.1.0"
