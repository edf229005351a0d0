from __future__ import annotations

from typing import Iterable, List

import pytest

from tcs.core.rng import RNG


class ScriptedRNG(RNG):
    """RNG that replays a fixed list of integers and fails when it runs dry."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(0)
        self._values: List[int] = list(values)

    def randint(self, a: int, b: int) -> int:
        if not self._values:
            raise AssertionError(f"ScriptedRNG exhausted (asked for {a}..{b}).")
        value = self._values.pop(0)
        assert a <= value <= b, f"Scripted value {value} outside {a}..{b}"
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture
def scripted_rng():
    return ScriptedRNG
