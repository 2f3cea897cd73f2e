# numTheory/modular.py
from typing import Tuple

from .errors import InvalidArgument, InvalidInverse


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y == g == gcd(a, b).

    Iterative, so it does not hit the recursion limit on big operands.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    if old_r < 0:
        old_r, old_x, old_y = -old_r, -old_x, -old_y
    return old_r, old_x, old_y


def inverse(a: int, m: int) -> int:
    """Find x in [0, m) such that (a * x) % m == 1.

    Raises InvalidInverse when gcd(a, m) != 1 instead of handing back a
    number that is not an inverse.
    """
    if m <= 0:
        raise InvalidArgument(f"modulus must be positive, got {m}")
    if m == 1:
        return 0
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise InvalidInverse(a, m)
    return x % m


def split_powers_of_two(n: int) -> Tuple[int, int]:
    """Write n = 2^t * s with s odd and return (t, s)."""
    if n < 1:
        raise InvalidArgument(f"expected a positive integer, got {n}")
    t, s = 0, n
    while s & 1 == 0:  # while s is even
        t += 1
        s >>= 1
    return t, s
