# numTheory/randomness.py
from Crypto.Random import random as strong_random

from .errors import InvalidArgument


def default_source():
    """Shared generator used when a caller does not pass its own `rng`.

    Any object with a ``getrandbits(k)`` method can stand in for it,
    e.g. a seeded ``random.Random`` for reproducible runs.
    """
    return strong_random


def uniform_int(low: int, high: int, rng=None) -> int:
    """Draw an integer uniformly from the inclusive range [low, high].

    Uses rejection sampling: draw just enough bits to cover the span and
    throw away values past its end, so no residue is favoured the way
    `random_bytes % span` would favour the small ones.
    """
    if low > high:
        raise InvalidArgument(f"empty range [{low}, {high}]")
    if rng is None:
        rng = default_source()

    span = high - low + 1
    if span == 1:
        return low
    bits = (span - 1).bit_length()
    # each draw is accepted with probability > 1/2
    while True:
        candidate = rng.getrandbits(bits)
        if candidate < span:
            return low + candidate
