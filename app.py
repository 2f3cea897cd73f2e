# app.py
import logging
from typing import Optional

from numTheory import (
    baby_step_giant_step,
    crt,
    euler_phi,
    is_probable_prime,
    jacobi_symbol,
    lcm,
    legendre_symbol,
    mobius,
    pollard_rho,
    sqrt_mod,
    settings,
)
from rsaCore import decrypt, encrypt, generate_key_pair


def run_demo(bits: Optional[int] = None, rng=None):
    """Run every stage on its example input and return (label, result) pairs."""
    if bits is None:
        bits = settings.DEMO_KEY_BITS

    results = [
        ("Stage 1: Euler Phi Function", euler_phi(30)),
        ("Stage 1: Mobius Function", mobius(10)),
        ("Stage 1: Least Common Multiple", lcm(12, 18)),
        ("Stage 2: Chinese Remainder Theorem", crt([(2, 3), (3, 4), (2, 5)])),
        ("Stage 3: Legendre Symbol", legendre_symbol(5, 11)),
        ("Stage 3: Jacobi Symbol", jacobi_symbol(7, 15)),
        ("Stage 4: Pollard's Rho Algorithm", pollard_rho(8051)),
        ("Stage 5: Baby Step Giant Step Algorithm", baby_step_giant_step(2, 11, 59)),
        ("Stage 6: Discrete Square Root", sqrt_mod(223, 17)),
        # probably prime, not proven prime
        ("Stage 7: Miller-Rabin Primality Test", is_probable_prime(13, 5, rng)),
    ]

    key_pair = generate_key_pair(bits, rng=rng)
    message = 42
    encrypted = encrypt(message, key_pair.public_key)
    decrypted = decrypt(encrypted, key_pair.private_key)
    results += [
        ("Stage 8: Original Message", message),
        ("Stage 8: Encrypted Message", encrypted),
        ("Stage 8: Decrypted Message", decrypted),
    ]
    return results


def main():
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.WARNING), format="%(message)s")
    for label, value in run_demo():
        # None is the "no solution" outcome of the discrete searches
        print(f"{label}: {'no solution' if value is None else value}")


if __name__ == "__main__":
    main()
