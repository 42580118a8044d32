from __future__ import annotations

import random

from numerus.core.constants import DIGITS, SECRET_LENGTH

_system_random = random.SystemRandom()


class SecretLengthError(ValueError):
    """Requested secret is longer than the digit alphabet."""


def generate_secret(length: int = SECRET_LENGTH, rng: random.Random | None = None) -> str:
    """Draw ``length`` distinct digits in random order.

    Each step picks a uniformly random digit from the remaining pool and removes
    it, so the result is a random permutation of a random subset of ``DIGITS``.
    Pass a seeded ``random.Random`` to make the draw reproducible.
    """
    if not 0 <= length <= len(DIGITS):
        raise SecretLengthError(
            f"Secret length must be between 0 and {len(DIGITS)}, got {length}."
        )
    source = rng if rng is not None else _system_random
    pool = list(DIGITS)
    picked: list[str] = []
    for _ in range(length):
        picked.append(pool.pop(source.randrange(len(pool))))
    return "".join(picked)
