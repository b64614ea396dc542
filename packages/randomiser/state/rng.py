"""
Seeded RNG for randomiser runs.

Every stochastic decision of a run (biome counts, region picks, spawn-rate
budgets, variant splits, start points) goes through a single Random
instance so that a fixed seed reproduces an identical distribution.

The generator is XorShift128 (the RandomXS128 algorithm), seeded through
the MurmurHash3 finaliser. Its whole state is two 64-bit integers.

Seeds may be plain integers or base-35 seed strings ("4YUHY81W7GRHT").
"""

import random as py_random
from typing import Sequence, TypeVar

T = TypeVar("T")

_MASK64 = 0xFFFFFFFFFFFFFFFF

# Base-35 seed alphabet: digits + A-Z without O
SEED_CHARACTERS = "0123456789ABCDEFGHIJKLMNPQRSTUVWXYZ"


class XorShift128:
    """
    XorShift128 PRNG.

    State is two 64-bit integers (seed0, seed1).
    """

    def __init__(self, seed: int):
        # A zero seed would leave the generator stuck at zero
        if seed == 0:
            seed = -0x8000000000000000
        self.seed0 = self._murmur_hash3(seed)
        self.seed1 = self._murmur_hash3(self.seed0)

    @staticmethod
    def _murmur_hash3(x: int) -> int:
        """MurmurHash3 finalizer - used for seed initialization."""
        x = x & _MASK64
        x ^= x >> 33
        x = (x * 0xff51afd7ed558ccd) & _MASK64
        x ^= x >> 33
        x = (x * 0xc4ceb9fe1a85ec53) & _MASK64
        x ^= x >> 33
        return x

    def _next_long(self) -> int:
        """Generate the next signed 64-bit value."""
        s1 = self.seed0
        s0 = self.seed1
        self.seed0 = s0

        s1 ^= (s1 << 23) & _MASK64
        self.seed1 = (s1 ^ s0 ^ (s1 >> 17) ^ (s0 >> 26)) & _MASK64

        result = (self.seed0 + self.seed1) & _MASK64
        if result >= 0x8000000000000000:
            result -= 0x10000000000000000
        return result

    def next_int(self, bound: int) -> int:
        """Random int in [0, bound), rejection-sampled to avoid modulo bias."""
        if bound <= 0:
            raise ValueError("bound must be positive")

        while True:
            bits = (self._next_long() & _MASK64) >> 1
            val = bits % bound
            if bits - val + (bound - 1) < (1 << 63):
                return int(val)

    def next_double(self) -> float:
        """Random double in [0, 1) with 53 bits of precision."""
        return ((self._next_long() & _MASK64) >> 11) / (1 << 53)


class Random:
    """
    The RandomHandler every run decision routes through.

    Tracks the number of calls made in `counter` so that a log line or a
    saved run can say exactly how far into the stream it got.
    """

    def __init__(self, seed: int, counter: int = 0):
        """
        Args:
            seed: 64-bit seed value
            counter: Number of calls to skip before handing out values
        """
        self.seed = seed
        self._rng = XorShift128(seed)
        self.counter = 0

        for _ in range(counter):
            self.random_int(999)

    def random_int(self, range_val: int) -> int:
        """Random int in [0, range_val] INCLUSIVE."""
        self.counter += 1
        return self._rng.next_int(range_val + 1)

    def random_int_range(self, start: int, end: int) -> int:
        """Random int in [start, end] INCLUSIVE."""
        if end < start:
            raise ValueError(f"empty range [{start}, {end}]")
        self.counter += 1
        return start + self._rng.next_int(end - start + 1)

    def random_double(self) -> float:
        """Random double in [0, 1)."""
        self.counter += 1
        return self._rng.next_double()

    def choice(self, items: Sequence[T]) -> T:
        """
        Uniformly choose one element of a sequence.

        Raises:
            IndexError: if the sequence is empty
        """
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        items = list(items)
        return items[self.random_int(len(items) - 1)]


def seed_to_long(seed_string: str) -> int:
    """
    Convert a seed string (e.g., "ABC123XYZ") to its integer value.

    Base-35 encoding over SEED_CHARACTERS; O is read as 0. A purely
    numeric string (including negative) is taken as the integer itself.
    """
    if seed_string.lstrip('-').isdigit():
        return int(seed_string)

    seed_string = seed_string.upper().replace("O", "0")

    result = 0
    for char in seed_string:
        remainder = SEED_CHARACTERS.find(char)
        if remainder == -1:
            continue
        result *= len(SEED_CHARACTERS)
        result += remainder

    return result


def long_to_seed(seed_long: int) -> str:
    """Convert an integer seed back to its base-35 seed string."""
    char_count = len(SEED_CHARACTERS)

    if seed_long == 0:
        return "0"

    # Handle as unsigned 64-bit
    leftover = seed_long & _MASK64

    result = []
    while leftover != 0:
        remainder = leftover % char_count
        leftover = leftover // char_count
        result.append(SEED_CHARACTERS[remainder])

    return ''.join(reversed(result))


def new_seed() -> int:
    """Draw a fresh non-negative 31-bit seed from an unseeded source."""
    return py_random.SystemRandom().randrange(0, 2 ** 31)
