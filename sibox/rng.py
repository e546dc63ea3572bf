"""Seedable random number source."""

from __future__ import annotations

import random

INT_MAX = 2**31 - 1


class Rng:
    """A Mersenne Twister random source with float and integer helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self._engine = random.Random()
        self.seed(seed)

    def seed(self, seed: int | None = None) -> None:
        """Reseed the engine; ``None`` seeds from the operating system."""
        self._engine.seed(seed)

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        """Return a float in ``[low, high)``."""
        return low + self._engine.random() * (high - low)

    def integer(self, low: int | None = None, high: int | None = None) -> int:
        """Return an int in ``[low, high)``, or in ``[0, INT_MAX]`` when no bounds are given."""
        raw = self._engine.randint(0, INT_MAX)
        if low is None and high is None:
            return raw
        if low is None or high is None:
            raise TypeError("both low and high must be given, or neither")
        if high <= low:
            raise ValueError(f"empty range [{low}, {high})")
        return low + raw % (high - low)