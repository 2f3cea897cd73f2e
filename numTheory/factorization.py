# numTheory/factorization.py
import logging
import math
from typing import Dict

from . import settings
from .errors import FactorizationFailed, InvalidArgument
from .primality import is_probable_prime

log = logging.getLogger(__name__)

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)


# --- Pollard's Rho ---
def pollard_rho(n: int, seed: int = None, max_iterations: int = None, max_restarts: int = None) -> int:
    """Return a nontrivial divisor d of the composite n (1 < d < n, not necessarily prime).

    Floyd cycle detection on f(v) = (v^2 + c) mod n, starting at `seed`
    with c = 1. A gcd equal to n means the walk closed a cycle modulo n
    itself, so the attempt is restarted with the next constant c. Every
    attempt is capped at `max_iterations` steps; after `max_restarts`
    attempts FactorizationFailed is raised. That is also what happens
    when n is prime.
    """
    if seed is None:
        seed = settings.RHO_SEED
    if max_iterations is None:
        max_iterations = settings.RHO_MAX_ITERATIONS
    if max_restarts is None:
        max_restarts = settings.RHO_MAX_RESTARTS

    if n < 4:
        raise InvalidArgument(f"{n} is not a composite number")
    if n % 2 == 0:
        return 2

    for attempt in range(max_restarts):
        c = attempt + 1
        x = y = seed % n
        d = 1
        for _ in range(max_iterations):
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = math.gcd(abs(x - y), n)
            if d != 1:
                break

        if 1 < d < n:
            return d
        if d == n:
            log.debug("rho: degenerate cycle for n=%d with c=%d, restarting", n, c)
        else:
            log.debug("rho: %d iterations exhausted for n=%d with c=%d", max_iterations, n, c)

    log.warning("rho: giving up on n=%d after %d attempts", n, max_restarts)
    raise FactorizationFailed(n, max_restarts)


def factorize(n: int) -> Dict[int, int]:
    """Full prime factorization of n as {prime: exponent}.

    Small primes are divided out first, the rest is split recursively
    with pollard_rho. Factors are only *probably* prime (Miller-Rabin).
    """
    if n < 1:
        raise InvalidArgument(f"can only factor positive integers, got {n}")

    factors: Dict[int, int] = {}
    for p in SMALL_PRIMES:
        while n % p == 0:
            factors[p] = factors.get(p, 0) + 1
            n //= p

    pending = [n] if n > 1 else []
    while pending:
        m = pending.pop()
        if is_probable_prime(m):
            factors[m] = factors.get(m, 0) + 1
            continue
        d = pollard_rho(m)
        pending.extend((d, m // d))
    return dict(sorted(factors.items()))
