"""Tests for RSA key generation and the textbook cipher."""
from Crypto.Util.number import isPrime
import random

import pytest

from numTheory import settings
from numTheory.errors import InvalidArgument, InvalidInverse, RetryLimitExceeded
from rsaCore import (
    PrivateKey,
    PublicKey,
    RSAKeyPair,
    build_key_pair,
    decrypt,
    decrypt_text,
    encrypt,
    encrypt_text,
    generate_key_pair,
)
from rsaCore.keys import _choose_exponent

from conftest import FixedBits


@pytest.fixture
def textbook_pair():
    return build_key_pair(61, 53, 17)


def test_textbook_key_pair(textbook_pair):
    assert textbook_pair.n == 3233
    assert textbook_pair.phi == 3120
    assert textbook_pair.d == 2753
    assert textbook_pair.public_key == PublicKey(3233, 17)
    assert textbook_pair.private_key == PrivateKey(3233, 2753)


def test_textbook_encryption(textbook_pair):
    assert encrypt(65, textbook_pair.public_key) == 2790
    assert decrypt(2790, textbook_pair.private_key) == 65


def test_round_trip_for_every_message(textbook_pair):
    pub, priv = textbook_pair.public_key, textbook_pair.private_key
    for m in range(textbook_pair.n):
        assert decrypt(encrypt(m, pub), priv) == m


def test_plain_tuples_work_as_keys():
    assert encrypt(65, (3233, 17)) == 2790
    assert decrypt(2790, (3233, 2753)) == 65


def test_generated_512_bit_pair():
    pair = generate_key_pair(512, rng=random.Random(2024))
    assert pair.p != pair.q
    assert pair.p.bit_length() == 512
    assert pair.q.bit_length() == 512
    assert isPrime(pair.p) and isPrime(pair.q)
    assert pair.n == pair.p * pair.q
    assert (pair.e * pair.d) % ((pair.p - 1) * (pair.q - 1)) == 1
    assert 2 <= pair.e < pair.phi

    rnd = random.Random(5)
    for _ in range(10):
        m = rnd.randrange(pair.n)
        assert decrypt(encrypt(m, pair.public_key), pair.private_key) == m


def test_generation_with_default_source():
    pair = generate_key_pair(64)
    assert decrypt(encrypt(42, pair.public_key), pair.private_key) == 42


def test_smallest_key_size():
    pair = generate_key_pair(3, rng=random.Random(1))
    assert {pair.p, pair.q} == {5, 7}


def test_key_generation_rejects_tiny_sizes():
    with pytest.raises(InvalidArgument):
        generate_key_pair(2)


def test_build_key_pair_validation():
    with pytest.raises(InvalidArgument):
        build_key_pair(61, 61, 17)
    with pytest.raises(InvalidArgument):
        build_key_pair(61, 53, 1)
    with pytest.raises(InvalidArgument):
        build_key_pair(61, 53, 3120)
    with pytest.raises(InvalidInverse):
        build_key_pair(61, 53, 4)


def test_key_pair_checks_its_invariant():
    with pytest.raises(InvalidArgument):
        RSAKeyPair(p=61, q=53, n=3233, e=17, d=1)
    with pytest.raises(InvalidArgument):
        RSAKeyPair(p=61, q=53, n=3234, e=17, d=2753)


def test_exponent_search_is_bounded():
    # every draw yields e = 2, never coprime to an even phi
    with pytest.raises(RetryLimitExceeded):
        _choose_exponent(3120, rng=FixedBits([0]), max_attempts=3)


def test_operands_must_be_below_modulus(textbook_pair):
    with pytest.raises(InvalidArgument):
        encrypt(3233, textbook_pair.public_key)
    with pytest.raises(InvalidArgument):
        encrypt(-1, textbook_pair.public_key)
    with pytest.raises(InvalidArgument):
        decrypt(5000, textbook_pair.private_key)


def test_encryption_is_deterministic_and_malleable(textbook_pair):
    """Unpadded RSA: E(a) * E(b) = E(a * b) mod n."""
    pub, n = textbook_pair.public_key, textbook_pair.n
    assert encrypt(12, pub) == encrypt(12, pub)
    assert encrypt(12, pub) * encrypt(20, pub) % n == encrypt(240, pub)


def test_text_round_trip():
    pair = generate_key_pair(128, rng=random.Random(8))
    c = encrypt_text("hello, RSA", pair.public_key)
    assert decrypt_text(c, pair.private_key) == "hello, RSA"
    assert decrypt_text(encrypt_text("", pair.public_key), pair.private_key) == ""


def test_text_too_long_for_modulus(textbook_pair):
    with pytest.raises(InvalidArgument):
        encrypt_text("far too long", textbook_pair.public_key)


def test_text_with_leading_nul_bytes_round_trips():
    pair = generate_key_pair(128, rng=random.Random(8))
    for text in ("\x00hi", "\x00\x00", "\x00"):
        assert decrypt_text(encrypt_text(text, pair.public_key), pair.private_key) == text


def test_decrypting_non_text_values_raises():
    pair = generate_key_pair(128, rng=random.Random(8))
    pub, priv = pair.public_key, pair.private_key
    # marker present but the payload is not UTF-8
    with pytest.raises(InvalidArgument):
        decrypt_text(encrypt(0x01ff, pub), priv)
    # no marker at all
    for m in (0, 2, 0x4142):
        with pytest.raises(InvalidArgument):
            decrypt_text(encrypt(m, pub), priv)


def test_redrawing_an_equal_second_prime_is_bounded(monkeypatch):
    """A source that always yields 5 can never produce two distinct 3-bit primes."""
    monkeypatch.setattr(settings, "PRIME_MAX_ATTEMPTS", 3)
    with pytest.raises(RetryLimitExceeded) as excinfo:
        generate_key_pair(3, rounds=1, rng=FixedBits([1]))
    assert excinfo.value.attempts == 4
