"""Crypto errors — malformed stored hashes, failed decryption, bad input."""

from __future__ import annotations

from typing import Any

from mp_crypto.kernel.errors.base import BaseError


class CryptoError(BaseError):
    """Raised by the hashing and encryption primitives."""

    default_code = "crypto_error"


class MalformedHashError(CryptoError):
    """A stored credential string cannot be decomposed into digest and salt.

    This signals corrupted storage, not a wrong password: a wrong password
    is reported as ``False`` by ``verify``.
    """

    default_code = "malformed_hash"

    def __init__(self, message: str = "Password hash does not contain salt", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class DecryptionFailedError(CryptoError):
    """The key / IV / ciphertext combination did not yield a valid plaintext."""

    default_code = "decryption_failed"

    def __init__(self, message: str = "Payload could not be decrypted", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class InvalidInputError(CryptoError):
    """A caller-supplied argument violates a hard precondition.

    ``parameter`` names the offending argument; its value is never recorded.
    """

    default_code = "invalid_input"

    def __init__(
        self,
        message: str,
        *,
        parameter: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.parameter = parameter
        if parameter is not None:
            self.detail.setdefault("parameter", parameter)


__all__ = [
    "CryptoError",
    "DecryptionFailedError",
    "InvalidInputError",
    "MalformedHashError",
]
