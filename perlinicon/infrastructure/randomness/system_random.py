"""Random sources backed by the standard library ``random`` module."""

import random


class SystemRandomSource:
    """Uniform draws from the module-level generator."""

    def random(self) -> float:
        return random.random()


class SeededRandomSource:
    """Reproducible uniform draws from a private seeded generator."""

    def __init__(self, seed: int | str) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | str:
        return self._seed

    def random(self) -> float:
        return self._rng.random()
