"""Pytest fixtures shared by platform and game tests."""
import os
import random

# Headless pygame for every test run
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from games.FruitFall.game_mode import FruitFallMode


class FakeClock:
    """Time source that only moves when told to."""

    def __init__(self, start: float = 0.1):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def clock():
    """Manually driven clock starting just after zero."""
    return FakeClock()


@pytest.fixture
def rng():
    """Seeded random source for reproducible drops."""
    return random.Random(1234)


@pytest.fixture
def game(clock, rng):
    """FruitFall in READY with a fake clock and seeded rng."""
    return FruitFallMode(clock=clock, rng=rng)


@pytest.fixture
def playing_game(game):
    """FruitFall already started."""
    assert game.start()
    return game
