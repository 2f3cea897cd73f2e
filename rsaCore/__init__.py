# rsaCore/__init__.py
from .cipher import decrypt, decrypt_text, encrypt, encrypt_text
from .keys import PrivateKey, PublicKey, RSAKeyPair, build_key_pair, generate_key_pair
