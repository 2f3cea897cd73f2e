# numTheory/arithmetic.py
import math
from typing import Iterable, Tuple

from .errors import InvalidArgument
from .modular import inverse

# --- Euler, Mobius, gcd / lcm ---


def gcd(a: int, b: int) -> int:
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)


def euler_phi(n: int) -> int:
    """Count the integers in [1, n] coprime to n (trial division)."""
    if n < 1:
        raise InvalidArgument(f"phi is defined for positive integers, got {n}")
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def mobius(n: int) -> int:
    """Mobius function: 0 if n has a squared factor, else (-1)^(number of prime factors)."""
    if n < 1:
        raise InvalidArgument(f"mobius is defined for positive integers, got {n}")
    result = 1
    i = 2
    while i * i <= n:
        if n % i == 0:
            n //= i
            if n % i == 0:
                return 0
            result = -result
        i += 1
    if n > 1:
        result = -result
    return result


# --- Chinese Remainder Theorem ---


def crt(congruences: Iterable[Tuple[int, int]]) -> int:
    """Solve x = a_i (mod m_i) for pairwise coprime moduli.

    Returns the unique solution in [0, m_1 * m_2 * ...). Moduli that share
    a factor surface as InvalidInverse from the inverse step.
    """
    congruences = list(congruences)
    N = 1
    for _, m in congruences:
        if m <= 0:
            raise InvalidArgument(f"moduli must be positive, got {m}")
        N *= m

    result = 0
    for a, m in congruences:
        Ni = N // m
        result += a * Ni * inverse(Ni, m)
    return result % N


# --- Legendre and Jacobi symbols ---


def legendre_symbol(a: int, p: int) -> int:
    """Euler's criterion. p is assumed prime (not checked)."""
    if a % p == 0:
        return 0
    return 1 if pow(a, (p - 1) // 2, p) == 1 else -1


def jacobi_symbol(a: int, n: int) -> int:
    if n <= 0 or n % 2 == 0:
        raise InvalidArgument("Jacobi symbol is only defined for odd positive n")
    a %= n
    result = 1
    while a != 0:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a  # quadratic reciprocity
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0
