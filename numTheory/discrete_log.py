# numTheory/discrete_log.py
import logging
import math
from typing import Dict, Optional

from .errors import InvalidArgument
from .modular import inverse

log = logging.getLogger(__name__)


def _baby_steps(g: int, p: int, m: int) -> Dict[int, int]:
    """Map g^j mod p -> j for j in [0, m), keeping the smallest j per element."""
    table: Dict[int, int] = {}
    value = 1
    for j in range(m):
        # insert-if-absent: once g's order is reached the powers repeat,
        # and the earlier exponent is the one a minimal answer needs
        table.setdefault(value, j)
        value = value * g % p
    return table


def baby_step_giant_step(g: int, h: int, p: int) -> Optional[int]:
    """Solve g^x = h (mod p) for the smallest non-negative x.

    p is assumed prime. Returns None when h is not a power of g.
    O(sqrt(p)) time and memory.
    """
    if p < 2:
        raise InvalidArgument(f"modulus must be at least 2, got {p}")
    if g % p == 0:
        raise InvalidArgument(f"base {g} is not a unit modulo {p}")
    g %= p
    h %= p

    m = math.isqrt(p - 1)
    if m * m < p - 1:
        m += 1  # ceil(sqrt(p - 1))

    table = _baby_steps(g, p, m)
    giant = pow(inverse(g, p), m, p)  # g^-m

    gamma = h
    for i in range(m):
        j = table.get(gamma)
        if j is not None:
            return i * m + j
        gamma = gamma * giant % p

    log.debug("bsgs: %d is not a power of %d modulo %d", h, g, p)
    return None
