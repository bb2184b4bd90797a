"""Random integers in an inclusive range."""

import random
import time


class RandomRange:
    """Generates uniformly distributed integers in [low, high]."""

    def __init__(self, low: int, high: int) -> None:
        if low > high:
            raise ValueError("low must not exceed high")
        self.low = low
        self.high = high
        self._rng = random.Random(time.time_ns())

    def next(self) -> int:
        """Return the next random integer."""
        return self._rng.randint(self.low, self.high)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next()