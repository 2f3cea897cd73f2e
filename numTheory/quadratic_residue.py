# numTheory/quadratic_residue.py
from typing import Optional, Tuple

from .arithmetic import legendre_symbol
from .errors import InvalidArgument
from .modular import split_powers_of_two


def _find_non_residue(p: int) -> int:
    """Smallest u >= 2 with Legendre symbol (u/p) == -1."""
    for u in range(2, p):
        if legendre_symbol(u, p) == -1:
            return u
    raise InvalidArgument(f"{p} has no quadratic non-residue, it is not an odd prime")


def sqrt_mod(a: int, p: int) -> Optional[int]:
    """Find x with x^2 = a (mod p) for a prime p; the other root is p - x.

    Returns None unless a is a nonzero quadratic residue modulo p.
    Tonelli-Shanks: x is the candidate root, b the residual that is 1
    exactly when x is a root, g a power of a non-residue used to fix x up.
    """
    if p < 2:
        raise InvalidArgument(f"modulus must be a prime, got {p}")
    a %= p
    if legendre_symbol(a, p) != 1:
        return None
    if p == 2:
        return a

    # p - 1 = 2^t * s with s odd
    t, s = split_powers_of_two(p - 1)
    u = _find_non_residue(p)

    x = pow(a, (s + 1) // 2, p)
    b = pow(a, s, p)
    g = pow(u, s, p)
    r = t
    while b != 1:
        # order of b is 2^m; it must stay below the current bound r
        m = 0
        z = b
        while z != 1:
            z = z * z % p
            m += 1
            if m >= r:
                return None
        y = pow(g, 1 << (r - m - 1), p)
        x = x * y % p
        g = y * y % p
        b = b * g % p
        r = m
    return x


def square_roots(a: int, p: int) -> Optional[Tuple[int, int]]:
    """Both square roots of a modulo p, smallest first, or None."""
    x = sqrt_mod(a, p)
    if x is None:
        return None
    return tuple(sorted((x, (p - x) % p)))
