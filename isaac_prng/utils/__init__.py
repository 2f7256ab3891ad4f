"""
Helpers around the core generator.
"""

from .log import configure_logging
from .random import get_prng, set_random_seed

__all__ = ['configure_logging', 'get_prng', 'set_random_seed']
