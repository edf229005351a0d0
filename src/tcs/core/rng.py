"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def percentile(self) -> int:
        """Return a roll in the inclusive range [1, 100]."""
        return self.randint(1, 100)

    def one_in(self, n: int) -> bool:
        """Return True with probability 1/n."""
        if n < 1:
            raise ValueError("Chance denominator must be at least 1.")
        return self.randint(0, n - 1) == 0
