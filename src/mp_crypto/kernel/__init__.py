"""Kernel – framework-agnostic errors, result types and security ports."""

from mp_crypto.kernel.errors import (
    ApplicationError,
    BaseError,
    CryptoError,
    DecryptionFailedError,
    InvalidInputError,
    MalformedHashError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CryptoError",
    "DecryptionFailedError",
    "InvalidInputError",
    "MalformedHashError",
]
