# rsaCore/keys.py
import logging
from dataclasses import dataclass
from typing import NamedTuple

from numTheory import settings
from numTheory.arithmetic import gcd
from numTheory.errors import InvalidArgument, RetryLimitExceeded
from numTheory.modular import inverse
from numTheory.primality import generate_prime
from numTheory.randomness import uniform_int

log = logging.getLogger(__name__)

MIN_PRIME_BITS = 3


class PublicKey(NamedTuple):
    n: int
    e: int


class PrivateKey(NamedTuple):
    n: int
    d: int


@dataclass(frozen=True)
class RSAKeyPair:
    """An RSA key pair together with the primes it was built from.

    The primes are kept because d can only be derived from phi(n), and
    phi(n) is out of reach once p and q are thrown away.
    """
    p: int
    q: int
    n: int
    e: int
    d: int

    def __post_init__(self):
        if self.p * self.q != self.n:
            raise InvalidArgument("n must equal p * q")
        if (self.e * self.d) % self.phi != 1:
            raise InvalidArgument("e * d is not 1 modulo phi(n)")

    @property
    def phi(self) -> int:
        return (self.p - 1) * (self.q - 1)

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(self.n, self.e)

    @property
    def private_key(self) -> PrivateKey:
        return PrivateKey(self.n, self.d)


def build_key_pair(p: int, q: int, e: int) -> RSAKeyPair:
    """Derive the full key pair from two distinct primes and a public exponent.

    p and q are trusted to be prime. Raises InvalidInverse when e is not
    coprime to phi(n).
    """
    if p == q:
        raise InvalidArgument("p and q must be distinct")
    phi = (p - 1) * (q - 1)
    if not 1 < e < phi:
        raise InvalidArgument(f"public exponent must lie in (1, {phi}), got {e}")
    d = inverse(e, phi)
    return RSAKeyPair(p=p, q=q, n=p * q, e=e, d=d)


def _choose_exponent(phi: int, rng=None, max_attempts: int = None) -> int:
    """Draw e uniformly from [2, phi - 1] until gcd(e, phi) == 1."""
    if max_attempts is None:
        max_attempts = settings.EXPONENT_MAX_ATTEMPTS
    for attempt in range(1, max_attempts + 1):
        e = uniform_int(2, phi - 1, rng)
        if gcd(e, phi) == 1:
            log.debug("public exponent found after %d draw(s)", attempt)
            return e
    log.warning("no exponent coprime to phi after %d draws", max_attempts)
    raise RetryLimitExceeded("public exponent", max_attempts)


def generate_key_pair(bits: int, rounds: int = None, rng=None) -> RSAKeyPair:
    """Generate an RSA key pair whose primes p and q are `bits` bits each.

    The primes are only probable primes (Miller-Rabin with `rounds`
    rounds, KEYGEN_ROUNDS by default); a composite p or q would make
    decryption fail, with probability at most 4^-rounds per prime.
    """
    if bits < MIN_PRIME_BITS:
        raise InvalidArgument(f"need at least {MIN_PRIME_BITS}-bit primes, got {bits}")
    if rounds is None:
        rounds = settings.KEYGEN_ROUNDS

    p = generate_prime(bits, rounds, rng)
    q = generate_prime(bits, rounds, rng)
    redraws = 0
    while q == p:
        redraws += 1
        if redraws > settings.PRIME_MAX_ATTEMPTS:
            raise RetryLimitExceeded(f"second distinct {bits}-bit prime", redraws)
        q = generate_prime(bits, rounds, rng)

    phi = (p - 1) * (q - 1)
    e = _choose_exponent(phi, rng)
    log.debug("generated %d-bit modulus", (p * q).bit_length())
    return build_key_pair(p, q, e)
