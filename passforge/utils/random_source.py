"""
Uniform random sources used by the samplers.

Every source exposes a single capability, ``randint(min_value, max_value)``,
returning an integer drawn uniformly from the inclusive range.

- DefaultRandomSource: ``random.Random`` (Mersenne Twister). Not
  cryptographically secure; optionally seeded for reproducible output.
- SecureRandomSource: ``secrets.SystemRandom`` backed by the OS CSPRNG.
- ReplayRandomSource: replays a fixed sequence of offsets, for tests.
"""

import random
import secrets
from typing import Iterable, List, Optional, Protocol


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from an inclusive range."""

    def randint(self, min_value: int, max_value: int) -> int:
        ...


class DefaultRandomSource:
    """Non-cryptographic source built on ``random.Random``."""

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the source.

        Args:
            seed: Optional seed; identical seeds replay identical draws
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, min_value: int, max_value: int) -> int:
        return self._rng.randint(min_value, max_value)


class SecureRandomSource:
    """Source backed by the operating system CSPRNG."""

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def randint(self, min_value: int, max_value: int) -> int:
        return self._rng.randint(min_value, max_value)


class ReplayRandomSource:
    """
    Replay a fixed sequence of offsets.

    Each draw takes the next value from the sequence and returns
    ``min_value + value % (max_value - min_value + 1)``, so a sequence of
    zeros always picks the lowest candidate. The sequence wraps around
    when exhausted.
    """

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)
        if not self.values:
            raise ValueError("Replay sequence cannot be empty")
        self.position = 0

    def randint(self, min_value: int, max_value: int) -> int:
        value = self.values[self.position % len(self.values)]
        self.position += 1
        return min_value + value % (max_value - min_value + 1)

    def reset(self) -> None:
        """Rewind to the start of the sequence."""
        self.position = 0


_default_source: RandomSource = DefaultRandomSource()


def get_default_source() -> RandomSource:
    """Return the process-wide source used when none is passed."""
    return _default_source
