"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── CryptoError              (crypto.py)
    │   ├── MalformedHashError
    │   ├── DecryptionFailedError
    │   └── InvalidInputError
    └── ApplicationError         (application.py)
"""

from mp_crypto.kernel.errors.application import ApplicationError
from mp_crypto.kernel.errors.base import BaseError
from mp_crypto.kernel.errors.crypto import (
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
