"""
Shared random number generation utilities.

This module keeps one process-wide ISAAC generator so callers that need a
common reproducible stream do not have to pass an instance around.
"""

from ..core.isaac_prng import ISAAC

# Global PRNG instance
_prng = None


def set_random_seed(seed) -> None:
    """
    Replace the shared generator with one seeded from ``seed``.

    Args:
        seed: Seed number or sequence of numbers
    """
    global _prng

    _prng = ISAAC(seed=seed)


def get_prng() -> ISAAC:
    """
    Get the shared ISAAC generator.

    Returns:
        ISAAC instance, seeded from system entropy if no seed was set
    """
    global _prng
    if _prng is None:
        _prng = ISAAC()
    return _prng
