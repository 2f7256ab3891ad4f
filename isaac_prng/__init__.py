"""
ISAAC pseudo-random number generator.

Logging goes through structlog; applications call ``configure_logging`` to
route it through the standard library.
"""

from .config import settings
from .core import ISAAC, EntropySource, SystemEntropySource
from .utils import configure_logging, get_prng, set_random_seed

__version__ = "0.1.0"

__all__ = ['ISAAC', 'EntropySource', 'SystemEntropySource',
           'configure_logging', 'get_prng', 'set_random_seed', 'settings']
