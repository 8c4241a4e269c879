import pytest
from wordsieve.engine import DegenerateDictionaryError, RankedWord, score
from wordsieve.harness import (
    ACTIVE, EXHAUSTED, SOLVED, OracleFeedback, SolverLoop, opening_guess, run_batch, run_case,
    write_csv,
)
from wordsieve.solvers import create_solver, get_solver_ids
from wordsieve.solvers import entropy as entropy_module
from wordsieve.solvers.base import BaseSolver

ANSWERS = ["crane","raise","stare","trace","cared","adieu","alone"]
WORDS = ANSWERS + ["slate","salet","roate"]


def test_solver_registry():
    assert get_solver_ids() == ["entropy", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("nope")

def test_run_case_smoke():
    solver = create_solver("random_consistent")
    r = run_case(solver, "crane", words=WORDS, N=5, seed=42)
    assert "success" in r and "history" in r
    assert r["success"] is True
    assert r["status"] == SOLVED and r["found"] == "crane"

def test_entropy_smoke():
    solver = create_solver("entropy")
    r = run_case(solver, "crane", words=WORDS, N=5, seed=7)
    assert r["success"] is True
    assert 1 <= r["guesses"] < len(WORDS)

def test_random_runs_are_reproducible():
    a = run_case(create_solver("random_consistent"), "stare", words=WORDS, N=5, seed=3)
    b = run_case(create_solver("random_consistent"), "stare", words=WORDS, N=5, seed=3)
    assert a["history"] == b["history"]

@pytest.mark.parametrize("solver_id", ["entropy", "random_consistent"])
def test_every_answer_is_found(solver_id):
    results = run_batch(create_solver(solver_id), ANSWERS, words=WORDS, N=5, seed=1)
    assert len(results) == len(ANSWERS)
    assert all(r["success"] for r in results)

def test_solved_in_one_round():
    loop = SolverLoop(["abcdf", "abcde", "zzzzz"], create_solver("entropy"))
    assert loop.status == ACTIVE
    res = loop.run(OracleFeedback("abcde"))
    assert res.status == SOLVED and res.answer == "abcde"
    assert res.history == [("abcdf", "GGGG-")]
    assert res.rounds[0].score is not None

def test_inconsistent_feedback_exhausts_pool():
    loop = SolverLoop(["aaaaa", "aaaab"], create_solver("entropy"))
    res = loop.run(lambda guess: "-----")
    assert res.status == EXHAUSTED
    assert res.answer is None
    assert res.feedback_rounds == 1

def test_invalid_word_is_dropped_without_feedback_round():
    def feedback(guess):
        return None if guess == "aaaaa" else score(guess, "aaaab")

    loop = SolverLoop(["aaaaa", "aaaab"], create_solver("entropy"))
    res = loop.run(feedback)
    assert res.status == SOLVED and res.answer == "aaaab"
    assert res.feedback_rounds == 0
    assert len(res.rounds) == 1 and res.rounds[0].pattern is None

def test_oracle_rejects_words_outside_allowed():
    oracle = OracleFeedback("crane", allowed=["crane", "raise"])
    assert oracle("stare") is None
    assert oracle("raise") == "YY--G"
    r = run_case(create_solver("entropy"), "crane", words=WORDS, N=5, allowed=ANSWERS)
    assert r["success"] is True

def test_single_word_dictionary_is_solved_immediately():
    res = SolverLoop(["crane"], create_solver("entropy")).run(OracleFeedback("crane"))
    assert res.status == SOLVED and res.rounds == []

def test_duplicate_words_are_collapsed():
    loop = SolverLoop(["crane", "crane", "stare"], create_solver("entropy"))
    assert loop.pool == ["crane", "stare"]
    assert loop.run(OracleFeedback("crane")).answer == "crane"

def test_degenerate_dictionary():
    with pytest.raises(DegenerateDictionaryError):
        SolverLoop([], create_solver("entropy"), N=5)

def test_mixed_lengths_rejected():
    with pytest.raises(ValueError):
        SolverLoop(["crane", "cranes"], create_solver("entropy"))

def test_step_after_finish():
    loop = SolverLoop(["crane"], create_solver("random_consistent"))
    with pytest.raises(RuntimeError):
        loop.step(OracleFeedback("crane"))

def test_write_csv(tmp_path):
    solver = create_solver("entropy")
    results = run_batch(solver, ANSWERS, words=WORDS, N=5, sample=2)
    for r in results:
        r["solver_id"] = solver.id
    out = write_csv(results, str(tmp_path / "run.csv"), N=5)
    lines = (tmp_path / "run.csv").read_text(encoding="utf-8").splitlines()
    assert out.endswith("run.csv")
    assert lines[0].startswith("solver,N,answer,status,found,success,guesses,time_ms")
    assert len(lines) == 3

class RecordingSolver(BaseSolver):
    id = "recording"

    def __init__(self):
        super().__init__()
        self.states = []

    def next_guess(self, state):
        self.states.append(dict(state))
        return RankedWord(state["candidates"][0], None)

def test_solver_sees_only_pool_and_length():
    solver = RecordingSolver()
    SolverLoop(["abcde", "abcdf", "zzzzz"], solver).run(OracleFeedback("zzzzz"))
    assert solver.states
    assert all(set(s) == {"N", "candidates"} for s in solver.states)

def test_opening_is_played_first():
    opening = RankedWord("zzzzz", 0.5)
    res = SolverLoop(["abcde", "abcdf", "zzzzz"], create_solver("entropy"),
                     opening=opening).run(OracleFeedback("abcde"))
    assert res.rounds[0].guess == "zzzzz" and res.rounds[0].score == 0.5
    assert res.answer == "abcde"

def test_opening_must_be_in_dictionary():
    with pytest.raises(ValueError):
        SolverLoop(["abcde", "abcdf"], create_solver("entropy"), opening=RankedWord("zzzzz", 0.0))

def test_opening_guess_only_for_deterministic_solvers():
    assert opening_guess(create_solver("random_consistent"), WORDS, 5) is None
    assert opening_guess(create_solver("entropy"), ["crane"], 5) is None
    assert opening_guess(create_solver("entropy"), WORDS, 5) == entropy_module.best_guess(WORDS)

def test_batch_ranks_full_dictionary_once(monkeypatch):
    full_pool_calls = []
    real = entropy_module.best_guess

    def counting(pool):
        if len(pool) == len(WORDS):
            full_pool_calls.append(pool)
        return real(pool)

    monkeypatch.setattr(entropy_module, "best_guess", counting)
    results = run_batch(create_solver("entropy"), ANSWERS, words=WORDS, N=5)
    assert len(full_pool_calls) == 1
    assert all(r["success"] for r in results)

    monkeypatch.setattr(entropy_module, "best_guess", real)
    for r in results:
        alone = run_case(create_solver("entropy"), r["answer"], words=WORDS, N=5)
        assert alone["history"] == r["history"]

def test_write_csv_pads_short_games(tmp_path):
    results = [
        {"answer": "crane", "status": SOLVED, "found": "crane", "success": True,
         "guesses": 2, "time_ms": 1.0, "history": [("raise", "YY--G"), ("crane", "GGGGG")]},
        {"answer": "zzzzz", "status": EXHAUSTED, "found": None, "success": False,
         "guesses": 1, "time_ms": 0.5, "history": [("raise", "-----")]},
    ]
    write_csv(results, str(tmp_path / "run.csv"), N=5)
    lines = (tmp_path / "run.csv").read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("guess_1,patt_1,guess_2,patt_2")
    assert lines[1] == "?,5,crane,solved,crane,True,2,1.0,raise,'YY--G,crane,'GGGGG"
    assert lines[2] == "?,5,zzzzz,exhausted,,False,1,0.5,raise,'-----,,"
