# numTheory/errors.py


class NumberTheoryError(Exception):
    """Base class for every error raised by the toolkit."""


class InvalidArgument(NumberTheoryError, ValueError):
    """Malformed input, e.g. an even or non-positive modulus where an odd positive one is required."""


class InvalidInverse(NumberTheoryError, ValueError):
    """The requested modular inverse does not exist (inputs are not coprime)."""

    def __init__(self, a, m):
        super().__init__(f"{a} has no inverse modulo {m}")
        self.a = a
        self.m = m


class FactorizationFailed(NumberTheoryError):
    """Pollard's Rho ran out of iterations/restarts without a nontrivial divisor."""

    def __init__(self, n, attempts):
        super().__init__(f"no nontrivial divisor of {n} found after {attempts} attempt(s)")
        self.n = n
        self.attempts = attempts


class RetryLimitExceeded(NumberTheoryError):
    """A randomized search (prime candidates, RSA exponent) hit its attempt cap."""

    def __init__(self, what: str, attempts: int):
        super().__init__(f"gave up on {what} after {attempts} attempts")
        self.what = what
        self.attempts = attempts
