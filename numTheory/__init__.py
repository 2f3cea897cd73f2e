# numTheory/__init__.py
from .arithmetic import crt, euler_phi, gcd, jacobi_symbol, lcm, legendre_symbol, mobius
from .discrete_log import baby_step_giant_step
from .errors import (
    FactorizationFailed,
    InvalidArgument,
    InvalidInverse,
    NumberTheoryError,
    RetryLimitExceeded,
)
from .factorization import factorize, pollard_rho
from .modular import extended_gcd, inverse
from .primality import generate_prime, is_probable_prime
from .quadratic_residue import sqrt_mod, square_roots
from .randomness import uniform_int
