"""Kernel security – PasswordHasher, CryptoProvider ports."""
from __future__ import annotations

import abc


class PasswordHasher(abc.ABC):
    """Port: one-way password hashing with a bound pepper."""

    @abc.abstractmethod
    def hash(self, password: str) -> str: ...

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool: ...


class CryptoProvider(abc.ABC):
    """Port: symmetric encryption / decryption with a bound key.

    ``encrypt`` returns the printable payload; ``decrypt`` accepts it back.
    The ``*_string`` variants are abstract as well: each adapter maps text
    encoding failures onto its own error types.
    """

    @abc.abstractmethod
    def encrypt(self, plaintext: bytes) -> str: ...

    @abc.abstractmethod
    def decrypt(self, payload: str) -> bytes: ...

    @abc.abstractmethod
    def encrypt_string(self, plaintext: str) -> str: ...

    @abc.abstractmethod
    def decrypt_string(self, payload: str) -> str: ...


__all__ = ["CryptoProvider", "PasswordHasher"]
