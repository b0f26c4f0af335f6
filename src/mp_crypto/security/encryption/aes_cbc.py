"""Security – AES-CBC encryption of secrets with a random IV prepended.

Encrypted payload format::

    base64(IV || ciphertext)

The IV is 16 bytes; the ciphertext is PKCS7-padded to a multiple of the
16-byte AES block. There is no authentication tag: tampering is only
detected when it happens to break the padding.
"""
from __future__ import annotations

import base64
import logging
from typing import Final

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from mp_crypto.kernel.errors import CryptoError, DecryptionFailedError, InvalidInputError
from mp_crypto.kernel.security import CryptoProvider
from mp_crypto.kernel.types import Result, capture
from mp_crypto.security.spice import generate_spice

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

logger = logging.getLogger(__name__)

IV_SIZE: Final = 16
BLOCK_SIZE: Final = 16
KEY_SIZES: Final = (16, 24, 32)


def _check_key(key: bytes) -> bytes:
    if not isinstance(key, (bytes, bytearray)):
        raise InvalidInputError("AES key must be bytes", parameter="key")
    if len(key) not in KEY_SIZES:
        raise InvalidInputError("AES key must be 16, 24 or 32 bytes", parameter="key")
    return bytes(key)


def encrypt_raw(plaintext: bytes, key: bytes) -> bytes:
    """Encrypt *plaintext* under *key*; returns ``IV || ciphertext``."""
    key = _check_key(key)
    if not isinstance(plaintext, (bytes, bytearray)):
        raise InvalidInputError("Plaintext must be bytes", parameter="plaintext")

    iv = generate_spice(IV_SIZE)
    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(bytes(plaintext)) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    logger.debug("payload encrypted plaintext_len=%d key_bits=%d", len(plaintext), len(key) * 8)
    return iv + ciphertext


def encrypt(plaintext: bytes, key: bytes) -> str:
    """Encrypt *plaintext* and return the base64 payload."""
    return base64.b64encode(encrypt_raw(plaintext, key)).decode("ascii")


def encrypt_string(plaintext: str, key: bytes) -> str:
    """UTF-8 encode *plaintext*, then :func:`encrypt` it."""
    if not isinstance(plaintext, str):
        raise InvalidInputError("Plaintext must be text", parameter="plaintext")
    try:
        data = plaintext.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidInputError("Plaintext is not encodable as UTF-8", parameter="plaintext", cause=exc) from exc
    return encrypt(data, key)


def decrypt_raw(data: bytes, key: bytes) -> bytes:
    """Decrypt ``IV || ciphertext`` produced by :func:`encrypt_raw`.

    Raises:
        DecryptionFailedError: payload shorter than the IV, ciphertext not a
            whole number of blocks, or invalid padding (typically a wrong key).
        InvalidInputError: *key* has an unsupported length.
    """
    key = _check_key(key)
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidInputError("Payload must be bytes", parameter="data")
    if len(data) < IV_SIZE:
        logger.warning("decryption rejected reason=short_payload length=%d", len(data))
        raise DecryptionFailedError("Payload is shorter than the IV")
    iv, ciphertext = bytes(data[:IV_SIZE]), bytes(data[IV_SIZE:])

    try:
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        logger.warning("decryption rejected reason=%s", type(exc).__name__)
        raise DecryptionFailedError(cause=exc) from exc
    return plaintext


def decrypt(payload: str, key: bytes) -> bytes:
    """Decode the base64 *payload* and :func:`decrypt_raw` it."""
    try:
        data = base64.b64decode(payload, validate=True)
    except (TypeError, ValueError) as exc:
        logger.warning("decryption rejected reason=invalid_base64")
        raise DecryptionFailedError("Payload is not valid base64", cause=exc) from exc
    return decrypt_raw(data, key)


def decrypt_string(payload: str, key: bytes) -> str:
    """:func:`decrypt` *payload* and decode the plaintext as UTF-8."""
    try:
        return decrypt(payload, key).decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("decryption rejected reason=invalid_utf8")
        raise DecryptionFailedError("Decrypted payload is not valid UTF-8", cause=exc) from exc


def try_decrypt(payload: str, key: bytes) -> Result[bytes, CryptoError]:
    """Like :func:`decrypt`, but returns ``Err`` instead of raising a :class:`CryptoError`."""
    return capture(lambda: decrypt(payload, key), CryptoError)


class AesCbcEncryptionProvider(CryptoProvider):
    """AES-CBC :class:`CryptoProvider` bound to a single key. IV prepended to ciphertext."""

    def __init__(self, key: bytes) -> None:
        self._key = _check_key(key)

    @classmethod
    def generate_key(cls) -> bytes:
        return generate_spice(32)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key_bits={len(self._key) * 8})"

    def encrypt(self, plaintext: bytes) -> str:
        return encrypt(plaintext, self._key)

    def decrypt(self, payload: str) -> bytes:
        return decrypt(payload, self._key)

    def encrypt_string(self, plaintext: str) -> str:
        return encrypt_string(plaintext, self._key)

    def decrypt_string(self, payload: str) -> str:
        return decrypt_string(payload, self._key)
