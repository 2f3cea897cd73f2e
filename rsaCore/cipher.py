# rsaCore/cipher.py
"""Textbook RSA: raw modular exponentiation, no padding.

Encryption is deterministic and malleable (E(a) * E(b) = E(a * b) mod n).
That is a known limitation of unpadded RSA, not something this module
tries to fix.
"""
from Crypto.Util.number import bytes_to_long, long_to_bytes

from numTheory.errors import InvalidArgument

from .keys import PrivateKey, PublicKey


def _check_operand(value: int, n: int) -> None:
    if not 0 <= value < n:
        raise InvalidArgument(f"value must lie in [0, n), got {value}")


def encrypt(message: int, public_key: PublicKey) -> int:
    n, e = public_key
    _check_operand(message, n)
    return pow(message, e, n)


def decrypt(ciphertext: int, private_key: PrivateKey) -> int:
    n, d = private_key
    _check_operand(ciphertext, n)
    return pow(ciphertext, d, n)


# --- Text helpers ---
# A 0x01 marker byte is put in front of the text so leading NUL bytes
# survive the trip through an integer.
TEXT_MARKER = b'\x01'


def encrypt_text(plaintext: str, public_key: PublicKey) -> int:
    """Encrypt a UTF-8 string read as one big-endian integer."""
    n, _ = public_key
    m_int = bytes_to_long(TEXT_MARKER + plaintext.encode('utf-8'))
    if m_int >= n:
        raise InvalidArgument("message is too long for this modulus")
    return encrypt(m_int, public_key)


def decrypt_text(ciphertext: int, private_key: PrivateKey) -> str:
    data = long_to_bytes(decrypt(ciphertext, private_key))
    if not data.startswith(TEXT_MARKER):
        raise InvalidArgument("decrypted value is not an encrypted text (wrong key?)")
    try:
        return data[len(TEXT_MARKER):].decode('utf-8')
    except UnicodeDecodeError as e:
        # Re-raise inside the toolkit's error hierarchy
        raise InvalidArgument(f"decrypted bytes are not valid UTF-8: {e}")
