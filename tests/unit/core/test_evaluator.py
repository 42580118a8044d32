from __future__ import annotations

from itertools import permutations

import pytest

from numerus.core.evaluator import evaluate
from numerus.core.models.round import EvaluationResult


@pytest.mark.parametrize(
    ("guess", "strikes", "balls"),
    [
        ("1234", 4, 0),
        ("4321", 0, 4),
        ("1243", 2, 2),
        ("5678", 0, 0),
        ("1567", 1, 0),
        ("5123", 0, 3),
    ],
)
def test_evaluate_scores_against_1234(guess, strikes, balls):
    assert evaluate("1234", guess) == EvaluationResult(strikes=strikes, balls=balls)


def test_evaluate_win_flag():
    assert evaluate("1234", "1234").is_win is True
    assert evaluate("1234", "1243").is_win is False


def test_evaluate_is_repeatable():
    results = {evaluate("0918", "8190") for _ in range(5)}
    assert len(results) == 1


def test_evaluate_bounds_for_all_guesses_against_one_secret():
    secret = "0592"
    for digits in permutations("0123456789", 4):
        guess = "".join(digits)
        result = evaluate(secret, guess)
        assert 0 <= result.strikes <= 4
        assert 0 <= result.balls <= 4
        assert result.strikes + result.balls <= 4
        assert (result.strikes == 4) == (guess == secret)
