"""Seedable pseudo-random number generation."""

from __future__ import annotations

import os
import random
import time

_RAND_MAX = 2**31 - 1


class RandomGenerator:
    """Pseudo-random numbers; the same non-negative seed gives the same sequence."""

    def __init__(self, seed: int = -1) -> None:
        self._rng = random.Random()
        self.seed_rand(seed)

    def seed_rand(self, seed: int = -1) -> None:
        """Reseed; a negative seed mixes the current time and the process id."""
        if seed < 0:
            seed = int(time.time()) + os.getpid() * 1000
        self._rng.seed(seed)
        self._next()  # the first value is discarded

    def _next(self) -> int:
        return self._rng.randint(0, _RAND_MAX)

    def rand_double(self, lower: float = 0.0, upper: float = 1.0) -> float:
        """Return a real number between lower and upper, both included."""
        return self._next() / _RAND_MAX * (upper - lower) + lower

    def rand_int(self, lower: int, upper: int) -> int:
        """Return an integer between lower and upper, both included."""
        return lower + int((upper + 1 - lower) * (self._next() / (_RAND_MAX + 1.0)))