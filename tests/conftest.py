"""Shared fixtures for the round tests."""

from __future__ import annotations

import random

import pytest

from whack.round import RoundState


class ScriptedRandom(random.Random):
    """
    Random source that always draws the shortest timer and picks holes by
    position from a script (falling back to a seeded choice when it runs out).
    """

    def __init__(self, positions=(), seed: int = 0) -> None:
        super().__init__(seed)
        self.positions = list(positions)

    def uniform(self, a, b):
        return a

    def choice(self, seq):
        if self.positions:
            wanted = self.positions.pop(0)
            for item in seq:
                if getattr(item, "pos", item) == wanted:
                    return item
        return super().choice(seq)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def round_state():
    """Default round: 5 holes, 4 enemies, 3 lives, 1 second timers."""
    return RoundState.new(rng=ScriptedRandom(seed=42))
