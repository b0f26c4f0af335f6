"""Security – Encryption."""
from mp_crypto.security.encryption.aes_cbc import (
    BLOCK_SIZE,
    IV_SIZE,
    KEY_SIZES,
    AesCbcEncryptionProvider,
    decrypt,
    decrypt_raw,
    decrypt_string,
    encrypt,
    encrypt_raw,
    encrypt_string,
    try_decrypt,
)

__all__ = [
    "AesCbcEncryptionProvider",
    "BLOCK_SIZE",
    "IV_SIZE",
    "KEY_SIZES",
    "decrypt",
    "decrypt_raw",
    "decrypt_string",
    "encrypt",
    "encrypt_raw",
    "encrypt_string",
    "try_decrypt",
]
