import random

import pytest
from wordsieve.engine import (
    AtPosition, NotAtPosition, Count, FeedbackError,
    apply_restrictions, build_restrictions, score,
)

WORDS = ["crane","raise","stare","trace","cared","racer","scoop","speed","eerie",
         "level","belle","lemon","abbey","erase","geese","sheep","creep","zzzzz"]


def test_build_restrictions_green_and_gray():
    assert build_restrictions("abcdf", "GGGG-") == [
        Count("a", 1, 5), Count("b", 1, 5), Count("c", 1, 5), Count("d", 1, 5),
        Count("f", 0, 0),
        AtPosition("a", 0), AtPosition("b", 1), AtPosition("c", 2), AtPosition("d", 3),
    ]

def test_build_restrictions_yellow_gives_not_at_position():
    rs = build_restrictions("raise", "YY--G")
    assert NotAtPosition("r", 0) in rs
    assert NotAtPosition("a", 1) in rs
    assert AtPosition("e", 4) in rs
    assert Count("s", 0, 0) in rs and Count("i", 0, 0) in rs

def test_repeated_letter_partially_matched_gives_exact_count():
    # two e's in the answer, three in the guess: third one is gray
    patt = score("eerie", "speed")
    assert patt == "YY---"
    rs = build_restrictions("eerie", patt)
    assert Count("e", 2, 2) in rs

    # one e in the answer
    rs = build_restrictions("eerie", score("eerie", "crane"))
    assert Count("e", 1, 1) in rs
    assert AtPosition("e", 4) in rs

def test_unbounded_count_when_letter_never_gray():
    rs = build_restrictions("crane", "G----")
    assert Count("c", 1, 5) in rs

@pytest.mark.parametrize("guess,pattern", [
    ("crane", "GGGG"),
    ("crane", "GGGGGG"),
    ("crane", "GGxGG"),
])
def test_build_restrictions_rejects_malformed(guess, pattern):
    with pytest.raises(FeedbackError):
        build_restrictions(guess, pattern)

def test_guess_differing_in_last_letter_leaves_answer():
    pool = ["abcde", "abcdf", "zzzzz"]
    rs = build_restrictions("abcdf", score("abcdf", "abcde"))
    assert apply_restrictions(pool, rs) == ["abcde"]

def test_filter_keeps_order_and_never_grows():
    rs = build_restrictions("crane", score("crane", "trace"))
    out = apply_restrictions(WORDS, rs)
    assert len(out) <= len(WORDS)
    assert out == [w for w in WORDS if w in out]

def test_true_answer_always_survives_and_filter_is_idempotent():
    rng = random.Random(1)
    for _ in range(300):
        answer = rng.choice(WORDS)
        guess = rng.choice(WORDS)
        rs = build_restrictions(guess, score(guess, answer))
        once = apply_restrictions(WORDS, rs)
        assert answer in once
        assert apply_restrictions(once, rs) == once

def test_wrong_guess_eliminates_itself():
    for guess in WORDS:
        for answer in WORDS:
            if guess == answer:
                continue
            rs = build_restrictions(guess, score(guess, answer))
            assert guess not in apply_restrictions([guess], rs)
