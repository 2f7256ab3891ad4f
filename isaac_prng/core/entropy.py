"""
Entropy sources for unseeded generator construction.

Any object with a ``words(count)`` method returning that many uniformly
distributed 32-bit words can be passed to ``ISAAC(entropy=...)``.
"""

import secrets
from typing import List, Protocol, Sequence

# Number of 32-bit words (256 bits) used to seed a new generator
SEED_WORDS = 8


class EntropySource(Protocol):
    """Supplier of uniformly distributed 32-bit words."""

    def words(self, count: int) -> Sequence[int]:
        ...


class SystemEntropySource:
    """Entropy drawn from the operating system's CSPRNG."""

    def words(self, count: int) -> List[int]:
        """
        Draw random words.

        Args:
            count: Number of words to return

        Returns:
            List of integers in [0, 2^32)
        """
        return [secrets.randbits(32) for _ in range(count)]
