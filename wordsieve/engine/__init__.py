from .errors import FeedbackError, DegenerateDictionaryError
from .scoring import score
from .patterns import encode_pattern, pattern_from_positions
from .restrictions import AtPosition, NotAtPosition, Count, build_restrictions
from .constraints import apply_restrictions
from .ranking import RankedWord, guess_entropy, rank_words, best_guess
from .validation import validate_guess

__all__ = [
    "FeedbackError", "DegenerateDictionaryError",
    "score",
    "encode_pattern", "pattern_from_positions",
    "AtPosition", "NotAtPosition", "Count", "build_restrictions",
    "apply_restrictions",
    "RankedWord", "guess_entropy", "rank_words", "best_guess",
    "validate_guess",
]
