from __future__ import annotations

from numerus.core.models.round import EvaluationResult


def evaluate(secret: str, guess: str) -> EvaluationResult:
    """Score ``guess`` against ``secret``.

    A digit in the right position is a strike; a digit present elsewhere in the
    secret is a ball. Membership is checked against the whole secret, which is
    only correct because secrets and guesses never repeat a digit. Callers are
    expected to validate the guess first.
    """
    strikes = 0
    balls = 0
    for expected, digit in zip(secret, guess, strict=False):
        if digit == expected:
            strikes += 1
        elif digit in secret:
            balls += 1
    return EvaluationResult(strikes=strikes, balls=balls)
