"""
Python implementation of the ISAAC PRNG.

ISAAC (Indirection, Shift, Accumulate, Add, Count) was designed by Bob Jenkins.
This port reproduces the reference readable.c output bit for bit, so the same
seed yields the same word stream as any other conforming implementation.
"""

import math
import numbers
from collections.abc import Sequence

import numpy as np
import structlog

from .entropy import SEED_WORDS, SystemEntropySource

logger = structlog.get_logger()

BUFFER_LENGTH = 256
BYTE_MASK = 0xFF
GOLDEN_RATIO = 0x9E3779B9

# Marks a seed() call made with no arguments at all
_NO_SEED = object()


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


def _seed_word(value):
    """
    Convert a seed element to a 32-bit word, or None if it is not numeric.

    Conversion follows JavaScript's ToUint32: truncate toward zero, wrap
    modulo 2^32, and map non-finite values to zero.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    if isinstance(value, numbers.Integral):
        return _uint32(value)
    if not math.isfinite(value):
        return 0
    return _uint32(math.trunc(value))


def _seed_values(seed_input):
    """
    Split seed input into its elements.

    Lists, tuples, other sequences and arrays of at least one dimension are
    element lists. Anything else, strings and mappings included, is a single
    value.
    """
    if isinstance(seed_input, np.ndarray):
        if seed_input.ndim == 0:
            return [seed_input.item()]
        return list(seed_input)
    if isinstance(seed_input, Sequence) and not isinstance(seed_input, (str, bytes, bytearray)):
        return list(seed_input)
    return [seed_input]


def _iteration_count(iterations):
    """Coerce a block count to a positive int, falling back to 1."""
    if isinstance(iterations, bool) or not isinstance(iterations, numbers.Real):
        return 1
    if isinstance(iterations, numbers.Integral):
        count = int(iterations)
    elif not math.isfinite(iterations):
        return 1
    else:
        count = math.trunc(iterations)
    return count if count > 0 else 1


class ISAAC:
    """
    ISAAC PRNG producing unsigned 32-bit words.

    Construction without a seed draws 8 words from the entropy source.
    Words are served from a 256-word block in reverse index order and a
    new block is generated when the current one is used up.
    """

    def __init__(self, entropy=None, seed=_NO_SEED):
        """
        Initialize and seed, from the entropy source unless a seed is given.

        Args:
            entropy: Object with a ``words(count)`` method returning 32-bit
                words. Defaults to the operating system's CSPRNG.
            seed: Optional seed number or sequence of numbers. When given,
                the entropy source is not consulted.
        """
        self._entropy = entropy if entropy is not None else SystemEntropySource()

        # Internal state
        self._memory = np.zeros(BUFFER_LENGTH, dtype=np.uint32)
        self._accumulator = 0
        self._last_result = 0
        self._counter = 0

        # Support vector, refilled at the start of every seeding pass
        self._vector = [0] * 8

        # External results
        self._results = np.zeros(BUFFER_LENGTH, dtype=np.uint32)
        self._generation_index = 0

        if seed is not _NO_SEED:
            self.seed(seed)
            return

        words = [_uint32(w) for w in self._entropy.words(SEED_WORDS)]
        logger.debug("Seeding from entropy source", words=len(words))
        self.seed(words)

    def reset(self):
        """Zero the internal state, leaving the support vector untouched."""
        self._accumulator = self._last_result = self._counter = 0
        self._memory.fill(0)
        self._results.fill(0)
        self._generation_index = 0
        logger.debug("Generator state reset")

    def _seed_mix(self):
        """Scramble the support vector in place."""
        a, b, c, d, e, f, g, h = self._vector

        a = (a ^ (b << 11)) & 0xFFFFFFFF
        d = (d + a) & 0xFFFFFFFF
        b = (b + c) & 0xFFFFFFFF
        b = b ^ (c >> 2)
        e = (e + b) & 0xFFFFFFFF
        c = (c + d) & 0xFFFFFFFF
        c = (c ^ (d << 8)) & 0xFFFFFFFF
        f = (f + c) & 0xFFFFFFFF
        d = (d + e) & 0xFFFFFFFF
        d = d ^ (e >> 16)
        g = (g + d) & 0xFFFFFFFF
        e = (e + f) & 0xFFFFFFFF
        e = (e ^ (f << 10)) & 0xFFFFFFFF
        h = (h + e) & 0xFFFFFFFF
        f = (f + g) & 0xFFFFFFFF
        f = f ^ (g >> 4)
        a = (a + f) & 0xFFFFFFFF
        g = (g + h) & 0xFFFFFFFF
        g = (g ^ (h << 8)) & 0xFFFFFFFF
        b = (b + g) & 0xFFFFFFFF
        h = (h + a) & 0xFFFFFFFF
        h = h ^ (a >> 9)
        c = (c + h) & 0xFFFFFFFF
        a = (a + b) & 0xFFFFFFFF

        self._vector = [a, b, c, d, e, f, g, h]

    def _accumulate_seed(self, seed_input):
        """Add numeric seed values into the result array by position."""
        values = _seed_values(seed_input)

        positions = []
        words = []
        for index, value in enumerate(values):
            word = _seed_word(value)
            if word is not None:
                positions.append(index & BYTE_MASK)
                words.append(word)

        # np.add.at applies repeated positions one after another
        np.add.at(
            self._results,
            np.array(positions, dtype=np.intp),
            np.array(words, dtype=np.uint32),
        )
        return len(values)

    def seed(self, seed_input=_NO_SEED):
        """
        Seed the generator.

        With an argument (a number or a sequence of numbers) the state is
        reset and the values are mixed into every memory word. Without one,
        memory is rebuilt from the golden ratio alone.

        Args:
            seed_input: Seed number or sequence of numbers
        """
        is_seed_active = seed_input is not _NO_SEED
        if is_seed_active:
            self.reset()
            count = self._accumulate_seed(seed_input)
            logger.debug("Seeding generator", values=count)
        else:
            logger.debug("Seeding generator from golden ratio only")

        # Scramble internal values
        self._vector = [GOLDEN_RATIO] * 8
        for _ in range(4):
            self._seed_mix()

        results = self._results.tolist()
        memory = [0] * BUFFER_LENGTH

        # Fill in the memory array with messy stuff
        for i in range(0, BUFFER_LENGTH, 8):
            if is_seed_active:
                self._vector = [
                    (v + r) & 0xFFFFFFFF
                    for v, r in zip(self._vector, results[i:i + 8])
                ]
            self._seed_mix()
            memory[i:i + 8] = self._vector

        if is_seed_active:
            # Second pass so every seed word affects every memory word
            for i in range(0, BUFFER_LENGTH, 8):
                self._vector = [
                    (v + m) & 0xFFFFFFFF
                    for v, m in zip(self._vector, memory[i:i + 8])
                ]
                memory[i:i + 8] = self._vector
                self._seed_mix()
                memory[i:i + 8] = self._vector

        self._memory[:] = memory

        # Fill the first set of results
        self.generate()

    def generate(self, iterations=1):
        """
        Populate the result array with a fresh block of words.

        Args:
            iterations: Number of blocks to run; only the last is kept.
                Non-numeric or non-positive values mean a single block.
        """
        iterations = _iteration_count(iterations)
        if iterations > 1:
            logger.debug("Fast-forwarding generator", blocks=iterations)

        memory = self._memory.tolist()
        results = [0] * BUFFER_LENGTH
        a = self._accumulator
        b = self._last_result
        c = self._counter

        for _ in range(iterations):
            # Counter is incremented once per block
            c = (c + 1) & 0xFFFFFFFF
            b = (b + c) & 0xFFFFFFFF

            for i in range(BUFFER_LENGTH):
                x = memory[i]

                step = i & 3
                if step == 0:
                    a = (a ^ (a << 13)) & 0xFFFFFFFF
                elif step == 1:
                    a = a ^ (a >> 6)
                elif step == 2:
                    a = (a ^ (a << 2)) & 0xFFFFFFFF
                else:
                    a = a ^ (a >> 16)

                a = (memory[(i + 128) & BYTE_MASK] + a) & 0xFFFFFFFF

                memory[i] = y = (memory[(x >> 2) & BYTE_MASK] + a + b) & 0xFFFFFFFF
                results[i] = b = (memory[(y >> 10) & BYTE_MASK] + x) & 0xFFFFFFFF

        self._memory[:] = memory
        self._results[:] = results
        self._accumulator = a
        self._last_result = b
        self._counter = c
        self._generation_index = BUFFER_LENGTH

    def random(self, iterations=1):
        """
        Return the next unsigned 32-bit word.

        Args:
            iterations: Blocks to run if a new block is needed

        Returns:
            Integer in [0, 2^32)
        """
        if self._generation_index == 0:
            self.generate(iterations)

        self._generation_index -= 1
        return int(self._results[self._generation_index])
