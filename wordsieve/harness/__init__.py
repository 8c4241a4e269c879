from .core import (
    ACTIVE, SOLVED, EXHAUSTED,
    Round, SolveResult, OracleFeedback, SolverLoop, opening_guess, run_case, run_batch,
)
from .interactive import InteractiveFeedback
from .io import write_csv, write_manifest

__all__ = [
    "ACTIVE", "SOLVED", "EXHAUSTED",
    "Round", "SolveResult", "OracleFeedback", "SolverLoop", "opening_guess", "run_case", "run_batch",
    "InteractiveFeedback", "write_csv", "write_manifest",
]
