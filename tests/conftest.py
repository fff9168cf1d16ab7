import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest


class FixedRandom:
    """Random source that always draws the same value."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.5)


@pytest.fixture
def make_rng():
    return FixedRandom
