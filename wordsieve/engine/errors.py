"""
Exceptions raised by the engine for caller errors.

Both derive from ValueError so callers that only care about "bad input"
can catch one type.
"""


class FeedbackError(ValueError):
    """Feedback for a guess is malformed (wrong length, bad tags, bad positions)."""


class DegenerateDictionaryError(ValueError):
    """The dictionary holds no usable words of the target length."""
