"""Testing fixtures – pytest fixtures for secret material.

Register with ``pytest_plugins = ["mp_crypto.testing.fixtures"]``.
"""
from mp_crypto.testing.fixtures.security import (
    aes_key,
    encryption_provider,
    other_aes_key,
    other_pepper,
    password_hasher,
    pepper,
)

__all__ = [
    "aes_key",
    "encryption_provider",
    "other_aes_key",
    "other_pepper",
    "password_hasher",
    "pepper",
]
