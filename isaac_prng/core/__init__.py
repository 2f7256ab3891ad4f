"""
Core ISAAC generator functionality.
"""

from .entropy import EntropySource, SystemEntropySource, SEED_WORDS
from .isaac_prng import ISAAC, BUFFER_LENGTH, GOLDEN_RATIO

__all__ = ['ISAAC', 'BUFFER_LENGTH', 'GOLDEN_RATIO',
           'EntropySource', 'SystemEntropySource', 'SEED_WORDS']
