# rng.py
import random
import time
from typing import Optional


class RandomSource:
    """
    Seeded integer source used for food placement.
    Without an explicit seed it is seeded once from the clock.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.perf_counter_ns()
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return self._rng.randint(low, high)
