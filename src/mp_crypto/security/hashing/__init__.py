"""Security – password hashing and verification."""
from mp_crypto.security.hashing.argon2id import (
    HASH_LENGTH,
    MEMORY_COST,
    PARALLELISM,
    SALT_DELIMITER,
    SALT_LENGTH,
    TIME_COST,
    decode_pepper,
    derive_hash,
    hash_password,
    try_verify,
    verify,
)
from mp_crypto.security.hashing.hasher import PepperedPasswordHasher

__all__ = [
    "HASH_LENGTH",
    "MEMORY_COST",
    "PARALLELISM",
    "PepperedPasswordHasher",
    "SALT_DELIMITER",
    "SALT_LENGTH",
    "TIME_COST",
    "decode_pepper",
    "derive_hash",
    "hash_password",
    "try_verify",
    "verify",
]
