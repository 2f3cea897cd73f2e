import os
import random
import sys

import pytest

# Make the top-level packages importable without installing the project
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class FixedBits:
    """Fake random source that replays a fixed list of getrandbits() results."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def getrandbits(self, k):
        self.calls.append(k)
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


def sieve(limit):
    """All primes below `limit`."""
    flags = bytearray([1]) * limit
    flags[0:2] = b"\x00\x00"
    for i in range(2, int(limit ** 0.5) + 1):
        if flags[i]:
            flags[i * i::i] = bytearray(len(range(i * i, limit, i)))
    return [i for i, is_p in enumerate(flags) if is_p]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(scope="session")
def primes_below_million():
    return sieve(10 ** 6)


@pytest.fixture(scope="session")
def small_primes():
    return sieve(200)
