"""Kernel security – hashing and encryption ports."""
from mp_crypto.kernel.security.crypto import CryptoProvider, PasswordHasher

__all__ = ["CryptoProvider", "PasswordHasher"]
