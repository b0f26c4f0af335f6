"""Security — random spice, password hashing, symmetric encryption."""
from mp_crypto.security.encryption import (
    AesCbcEncryptionProvider,
    decrypt,
    decrypt_raw,
    decrypt_string,
    encrypt,
    encrypt_raw,
    encrypt_string,
    try_decrypt,
)
from mp_crypto.security.hashing import (
    PepperedPasswordHasher,
    derive_hash,
    hash_password,
    try_verify,
    verify,
)
from mp_crypto.security.spice import generate_base64_spice, generate_spice

__all__ = [
    "AesCbcEncryptionProvider",
    "PepperedPasswordHasher",
    "decrypt",
    "decrypt_raw",
    "decrypt_string",
    "derive_hash",
    "encrypt",
    "encrypt_raw",
    "encrypt_string",
    "generate_base64_spice",
    "generate_spice",
    "hash_password",
    "try_decrypt",
    "try_verify",
    "verify",
]
