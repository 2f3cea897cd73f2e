# numTheory/primality.py
import logging

from . import settings
from .errors import InvalidArgument, RetryLimitExceeded
from .modular import split_powers_of_two
from .randomness import uniform_int

log = logging.getLogger(__name__)


# --- START: MILLER-RABIN PRIMALITY TEST ---
def is_probable_prime(n: int, rounds: int = None, rng=None) -> bool:
    """
    Test if a number is prime using the Miller-Rabin primality test.

    `rounds` is the number of independent witnesses tried (k). A False
    answer is exact: n is definitely composite. A True answer only means
    "probably prime"; a composite slips through with probability at most
    4^-k. `rng` is any object with getrandbits(); it defaults to the
    shared generator.
    """
    if rounds is None:
        rounds = settings.DEFAULT_ROUNDS
    if rounds < 1:
        raise InvalidArgument(f"need at least one round, got {rounds}")

    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False

    # n - 1 = 2^r * s with s odd
    r, s = split_powers_of_two(n - 1)

    for _ in range(rounds):
        a = uniform_int(2, n - 2, rng)
        x = pow(a, s, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True
# --- END: MILLER-RABIN PRIMALITY TEST ---


def generate_prime(bits: int, rounds: int = None, rng=None, max_attempts: int = None) -> int:
    """Generate a probable prime of exactly `bits` bits.

    Candidates are drawn uniformly from [2^(bits-1), 2^bits - 1] and kept
    only if they pass `rounds` Miller-Rabin rounds, so the result carries
    the same "probably prime" caveat as is_probable_prime.
    """
    if bits < 2:
        raise InvalidArgument(f"a prime needs at least 2 bits, got {bits}")
    if rounds is None:
        rounds = settings.KEYGEN_ROUNDS
    if max_attempts is None:
        max_attempts = settings.PRIME_MAX_ATTEMPTS

    low, high = 1 << (bits - 1), (1 << bits) - 1
    for attempt in range(1, max_attempts + 1):
        candidate = uniform_int(low, high, rng)
        if is_probable_prime(candidate, rounds, rng):
            log.debug("found %d-bit prime after %d candidate(s)", bits, attempt)
            return candidate

    log.warning("no %d-bit prime among %d candidates", bits, max_attempts)
    raise RetryLimitExceeded(f"{bits}-bit prime", max_attempts)
