"""Seeded random number generator for reproducible mazes and training runs."""

import random
from typing import Optional


class SeededRNG:
    """Seeded random number generator for reproducible results."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def random(self) -> float:
        """Generate a random float in [0.0, 1.0)."""
        return self._rng.random()

    def randrange(self, stop: int) -> int:
        """Generate a random integer N such that 0 <= N < stop."""
        return self._rng.randrange(stop)

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def shuffle(self, seq) -> None:
        """Shuffle the sequence in place."""
        self._rng.shuffle(seq)


def ensure_rng(rng: Optional[SeededRNG] = None, seed: Optional[int] = None) -> SeededRNG:
    """Return the given generator, or a fresh one seeded with `seed`."""
    return rng if rng is not None else SeededRNG(seed)
